"""
Configuration classes for the privacy scanning system.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List
from ..exceptions import ConfigurationException
from .compliance import Regulation


DEFAULT_REGULATIONS = ["GDPR", "HIPAA", "CCPA", "PCI-DSS"]


@dataclass
class ScannerConfig:
    """Configuration for the PII detection engine."""

    # Characters of surrounding text captured on each side of a match
    context_window: int = 50

    # Sort findings by offset, then category
    deterministic_order: bool = True

    # HMAC key for value fingerprints; a random per-service key when unset
    fingerprint_key: Optional[str] = None

    def validate(self) -> None:
        """Validate scanner configuration parameters."""
        if self.context_window < 0:
            raise ConfigurationException("context_window cannot be negative")

        if self.fingerprint_key is not None and len(self.fingerprint_key) < 16:
            raise ConfigurationException(
                "fingerprint_key must be at least 16 characters"
            )


@dataclass
class ComplianceConfig:
    """Configuration for the compliance scoring engine."""

    # Catalog-wide denominator used by the score formula
    total_requirements: int = 8

    # Regulations evaluated by a multi-regulation check
    regulations: List[str] = field(default_factory=lambda: list(DEFAULT_REGULATIONS))

    def validate(self) -> None:
        """Validate compliance configuration parameters."""
        if self.total_requirements <= 0:
            raise ConfigurationException(
                "total_requirements must be greater than 0"
            )

        if not self.regulations:
            raise ConfigurationException("regulations cannot be empty")

        unknown = [name for name in self.regulations if Regulation.parse(name) is None]
        if unknown:
            valid = [r.value for r in Regulation]
            raise ConfigurationException(
                f"Invalid regulations {unknown}. Must be among: {valid}"
            )

    def get_regulations(self) -> List[Regulation]:
        """Get configured regulations as enum members."""
        return [Regulation.parse(name) for name in self.regulations]


@dataclass
class ObservabilityConfig:
    """Observability configuration for logging."""

    logging_enabled: bool = True
    log_level: str = "INFO"
    log_format: str = "json"
    log_file: Optional[str] = None
    logger_name: str = "privacyguard"

    def validate(self) -> None:
        """Validate observability configuration parameters."""
        valid_log_levels = ["DEBUG", "INFO", "WARN", "WARNING", "ERROR", "FATAL", "CRITICAL"]
        if self.log_level.upper() not in valid_log_levels:
            raise ConfigurationException(
                f"Invalid log_level '{self.log_level}'. Must be one of: {valid_log_levels}"
            )

        valid_log_formats = ["json", "text"]
        if self.log_format not in valid_log_formats:
            raise ConfigurationException(
                f"Invalid log_format '{self.log_format}'. Must be one of: {valid_log_formats}"
            )

        if not self.logger_name:
            raise ConfigurationException("logger_name cannot be empty")


@dataclass
class PrivacyGuardConfig:
    """Main configuration class for the privacy scanning system."""

    scanner: Optional[ScannerConfig] = None
    compliance: Optional[ComplianceConfig] = None
    observability: Optional[ObservabilityConfig] = None

    def __post_init__(self):
        """Initialize default configurations and validate."""
        if self.scanner is None:
            self.scanner = ScannerConfig()

        if self.compliance is None:
            self.compliance = ComplianceConfig()

        if self.observability is None:
            self.observability = ObservabilityConfig()

        self.validate()

    def validate(self) -> None:
        """Validate the complete configuration."""
        self.scanner.validate()
        self.compliance.validate()
        self.observability.validate()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "scanner": {
                "context_window": self.scanner.context_window,
                "deterministic_order": self.scanner.deterministic_order,
                "fingerprint_key": "***REDACTED***" if self.scanner.fingerprint_key else None,
            },
            "compliance": {
                "total_requirements": self.compliance.total_requirements,
                "regulations": list(self.compliance.regulations),
            },
            "observability": {
                "logging_enabled": self.observability.logging_enabled,
                "log_level": self.observability.log_level,
                "log_format": self.observability.log_format,
                "log_file": self.observability.log_file,
                "logger_name": self.observability.logger_name,
            },
        }

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "PrivacyGuardConfig":
        """Create configuration from dictionary."""
        unknown = set(config_dict) - {"scanner", "compliance", "observability"}
        if unknown:
            raise ConfigurationException(
                f"Unknown configuration sections: {sorted(unknown)}"
            )

        try:
            scanner_config = None
            if "scanner" in config_dict:
                scanner_config = ScannerConfig(**config_dict["scanner"])

            compliance_config = None
            if "compliance" in config_dict:
                compliance_config = ComplianceConfig(**config_dict["compliance"])

            observability_config = None
            if "observability" in config_dict:
                observability_config = ObservabilityConfig(**config_dict["observability"])
        except TypeError as e:
            raise ConfigurationException(f"Invalid configuration field: {str(e)}")

        return cls(
            scanner=scanner_config,
            compliance=compliance_config,
            observability=observability_config,
        )
