"""
PrivacyGuard orchestrator that coordinates detection, compliance and logging.
"""

from typing import Dict, Any, Mapping, Optional, Tuple, Union

from .models.config import PrivacyGuardConfig
from .models.compliance import Regulation, ComplianceStatus
from .models.health import HealthStatus
from .models.observability import utcnow
from .models.pii import ScanResult
from .services.compliance import compliance_counts, get_overall_compliance
from .services.pattern_registry import PatternRegistry
from .services.requirements import RequirementCatalog
from .factory import PrivacyGuardFactory


class PrivacyGuard:
    """
    Main entry point that scans content for PII and derives the compliance
    posture of what was found.
    """

    def __init__(
        self,
        config: Optional[PrivacyGuardConfig] = None,
        registry: Optional[PatternRegistry] = None,
        catalog: Optional[RequirementCatalog] = None
    ):
        """
        Initialize PrivacyGuard.

        Args:
            config: Configuration (defaults are used when omitted)
            registry: Optional custom detection rules
            catalog: Optional custom requirement catalog
        """
        self.config = config or PrivacyGuardConfig()

        components = PrivacyGuardFactory.create_components(self.config, registry, catalog)
        self.logger = components["logger"]
        self.detection_service = components["detection_service"]
        self.compliance_checker = components["compliance_checker"]

    def scan(self, content: str, location: str = "") -> ScanResult:
        """
        Scan content for PII.

        Args:
            content: Text to scan
            location: Opaque label of where the content came from

        Returns:
            Scan result
        """
        with self.logger.operation("scan", component="detection", location=location):
            return self.detection_service.scan(content, location)

    def redact(self, content: str, location: str = "") -> Tuple[str, ScanResult]:
        """Replace detected PII in content with redaction labels."""
        with self.logger.operation("redact", component="detection", location=location):
            return self.detection_service.redact(content, location)

    def check_compliance(
        self,
        regulation: Union[Regulation, str],
        pii_counts: Mapping[str, int]
    ) -> ComplianceStatus:
        """Check one regulation against aggregate PII counts."""
        with self.logger.operation("check_compliance", component="compliance"):
            return self.compliance_checker.check_compliance(regulation, pii_counts)

    def check_all_regulations(
        self,
        pii_counts: Mapping[str, int]
    ) -> Dict[Regulation, ComplianceStatus]:
        """Check every configured regulation against aggregate PII counts."""
        with self.logger.operation("check_all_regulations", component="compliance"):
            return self.compliance_checker.check_all_regulations(pii_counts)

    def assess(self, content: str, location: str = "") -> Dict[str, Any]:
        """
        Scan content and evaluate the configured regulations on the result.

        Args:
            content: Text to scan
            location: Opaque label of where the content came from

        Returns:
            Dictionary with the scan result, per-regulation statuses and the
            overall score
        """
        with self.logger.operation("assess", component="manager", location=location):
            scan_result = self.detection_service.scan(content, location)
            statuses = self.compliance_checker.check_all_regulations(
                compliance_counts(scan_result)
            )
            overall_score = get_overall_compliance(statuses)

            self.logger.info(
                "Privacy posture assessed",
                total_found=scan_result.total_found,
                overall_score=overall_score
            )

        return {
            "scan_result": scan_result,
            "compliance": statuses,
            "overall_score": overall_score,
        }

    def health_check(self) -> HealthStatus:
        """Check the health of the detection and compliance components."""
        components = {}

        components["detection"] = (
            "healthy" if self.detection_service.health_check() else "unhealthy"
        )

        gdpr = self.compliance_checker.check_compliance(Regulation.GDPR, {})
        components["compliance"] = "healthy" if 0 <= gdpr.score <= 100 else "unhealthy"

        overall = "healthy" if all(s == "healthy" for s in components.values()) else "unhealthy"
        return HealthStatus(status=overall, components=components, timestamp=utcnow())

    def __repr__(self) -> str:
        return (
            f"PrivacyGuard(detection={self.detection_service!r}, "
            f"compliance={self.compliance_checker!r})"
        )
