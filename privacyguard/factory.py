"""
Factory for creating privacy scanning components based on configuration.
"""

from typing import Optional, Dict, Any

from .models.config import PrivacyGuardConfig
from .services.compliance import ComplianceChecker
from .services.observability import StructuredLogger
from .services.pattern_registry import PatternRegistry
from .services.pii_detection import PIIDetectionService
from .services.requirements import RequirementCatalog
from .exceptions import ConfigurationException


class PrivacyGuardFactory:
    """Factory for creating scanning services from a configuration."""

    @classmethod
    def create_logger(cls, config: PrivacyGuardConfig) -> StructuredLogger:
        """
        Create the structured logger described by the configuration.

        Args:
            config: Privacy scanning configuration

        Returns:
            Structured logger
        """
        return StructuredLogger.from_config(config.observability)

    @classmethod
    def create_detection_service(
        cls,
        config: PrivacyGuardConfig,
        registry: Optional[PatternRegistry] = None,
        logger: Optional[StructuredLogger] = None
    ) -> PIIDetectionService:
        """
        Create a PII detection service.

        Args:
            config: Privacy scanning configuration
            registry: Optional custom pattern registry
            logger: Optional structured logger

        Returns:
            PII detection service
        """
        return PIIDetectionService(
            registry=registry,
            config=config.scanner,
            logger=logger
        )

    @classmethod
    def create_compliance_checker(
        cls,
        config: PrivacyGuardConfig,
        catalog: Optional[RequirementCatalog] = None,
        logger: Optional[StructuredLogger] = None
    ) -> ComplianceChecker:
        """
        Create a compliance checker.

        Args:
            config: Privacy scanning configuration
            catalog: Optional custom requirement catalog
            logger: Optional structured logger

        Returns:
            Compliance checker
        """
        return ComplianceChecker(
            catalog=catalog,
            config=config.compliance,
            logger=logger
        )

    @classmethod
    def create_components(
        cls,
        config: Optional[PrivacyGuardConfig] = None,
        registry: Optional[PatternRegistry] = None,
        catalog: Optional[RequirementCatalog] = None
    ) -> Dict[str, Any]:
        """
        Create every component sharing one logger.

        Returns:
            Dictionary with "logger", "detection_service" and
            "compliance_checker" entries

        Raises:
            ConfigurationException: If the configuration is invalid
        """
        config = config or PrivacyGuardConfig()

        if not isinstance(config, PrivacyGuardConfig):
            raise ConfigurationException(
                f"Expected PrivacyGuardConfig, got {type(config).__name__}"
            )

        config.validate()
        logger = cls.create_logger(config)

        return {
            "logger": logger,
            "detection_service": cls.create_detection_service(config, registry, logger),
            "compliance_checker": cls.create_compliance_checker(config, catalog, logger),
        }
