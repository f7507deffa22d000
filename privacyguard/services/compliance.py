"""
Compliance scoring of aggregate PII counts against regulatory requirements.
"""

from typing import Dict, List, Mapping, Optional, Union

from ..models.compliance import (
    Regulation, ComplianceLevel, ComplianceStatus, NOT_APPLICABLE
)
from ..models.config import ComplianceConfig
from ..models.observability import utcnow
from ..models.pii import PIICategory, ScanResult
from .requirements import RequirementCatalog
from .observability import StructuredLogger


SUMMARY_REGULATIONS = ["GDPR", "HIPAA", "CCPA", "PCI-DSS"]

# Categories counted under the "sensitive" key
SENSITIVE_CATEGORIES = (
    PIICategory.SSN,
    PIICategory.CREDIT_CARD,
    PIICategory.MEDICAL_RECORD,
    PIICategory.BIOMETRIC,
)


def determine_status(score: float) -> ComplianceLevel:
    """Map a score to a compliance level."""
    if score >= 90:
        return ComplianceLevel.COMPLIANT
    elif score >= 70:
        return ComplianceLevel.AT_RISK
    elif score >= 50:
        return ComplianceLevel.REVIEW
    return ComplianceLevel.NON_COMPLIANT


def calculate_score(issue_count: int, total_requirements: int) -> float:
    """
    Calculate a compliance score from the number of raised issues.

    The denominator is catalog-wide rather than per regulation, so a
    regulation with two flagged requirements scores 75 even if it only has
    two requirements.
    """
    if total_requirements <= 0:
        return 100.0
    score = (total_requirements - issue_count) / total_requirements * 100.0
    return max(score, 0.0)


def summarize_compliance(summary: Mapping[str, int]) -> Dict[str, str]:
    """
    Derive quick per-regulation labels from per-category counts.

    This is the rule-of-thumb attached to every scan result. Identifiers,
    payment cards and medical records are checked in that order and later
    checks override earlier ones; regulations left unset need review.
    """
    if sum(summary.values()) == 0:
        return {name: ComplianceLevel.COMPLIANT.value for name in SUMMARY_REGULATIONS}

    compliance: Dict[str, str] = {}

    if summary.get(PIICategory.SSN.value, 0) > 0:
        compliance["GDPR"] = ComplianceLevel.NON_COMPLIANT.value
        compliance["HIPAA"] = ComplianceLevel.AT_RISK.value
        compliance["CCPA"] = ComplianceLevel.NON_COMPLIANT.value
        compliance["PCI-DSS"] = NOT_APPLICABLE

    if summary.get(PIICategory.CREDIT_CARD.value, 0) > 0:
        compliance["PCI-DSS"] = ComplianceLevel.NON_COMPLIANT.value
        compliance["GDPR"] = ComplianceLevel.AT_RISK.value
        compliance["HIPAA"] = NOT_APPLICABLE
        compliance["CCPA"] = ComplianceLevel.NON_COMPLIANT.value

    if summary.get(PIICategory.MEDICAL_RECORD.value, 0) > 0:
        compliance["HIPAA"] = ComplianceLevel.NON_COMPLIANT.value
        compliance["GDPR"] = ComplianceLevel.AT_RISK.value
        compliance["CCPA"] = ComplianceLevel.AT_RISK.value
        compliance["PCI-DSS"] = NOT_APPLICABLE

    for name in SUMMARY_REGULATIONS:
        compliance.setdefault(name, ComplianceLevel.REVIEW.value)

    return compliance


def compliance_counts(scan_result: ScanResult) -> Dict[str, int]:
    """
    Build the count mapping consumed by the requirement rules from a scan.

    Category counts are kept as-is and the aliases "medical" and "sensitive"
    are added. The aliases re-count category values, so sum_pii leaves them
    out of the volume total. "california" cannot be derived from content and
    is left to callers.
    """
    counts = dict(scan_result.summary)
    counts["medical"] = counts.get(PIICategory.MEDICAL_RECORD.value, 0)
    counts["sensitive"] = sum(
        counts.get(category.value, 0) for category in SENSITIVE_CATEGORIES
    )
    return counts


class ComplianceChecker:
    """Checks aggregate PII counts against a requirement catalog."""

    def __init__(
        self,
        catalog: Optional[RequirementCatalog] = None,
        config: Optional[ComplianceConfig] = None,
        logger: Optional[StructuredLogger] = None
    ):
        """
        Initialize compliance checker.

        Args:
            catalog: Requirement catalog (defaults to the built-in catalog)
            config: Scoring configuration
            logger: Optional structured logger
        """
        self.catalog = catalog if catalog is not None else RequirementCatalog.default()
        self.config = config or ComplianceConfig()
        self.logger = logger

    def check_compliance(
        self,
        regulation: Union[Regulation, str],
        pii_counts: Mapping[str, int]
    ) -> ComplianceStatus:
        """
        Check compliance for a regulation.

        Args:
            regulation: Regulation to check; unknown names yield no issues
            pii_counts: Aggregate counts keyed by category or rule keyword

        Returns:
            Freshly computed compliance status
        """
        parsed = Regulation.parse(regulation)
        status = ComplianceStatus(
            regulation=parsed if parsed is not None else str(regulation),
            last_checked=utcnow()
        )

        for req in self.catalog.for_regulation(regulation):
            issue = self.catalog.evaluate(req, pii_counts)
            if self.logger:
                self.logger.debug(
                    "Requirement evaluated",
                    requirement_id=req.id,
                    flagged=issue is not None
                )
            if issue is not None:
                status.issues.append(issue.issue)
                status.recommendations.append(issue.recommendation)

        status.score = calculate_score(len(status.issues), self.config.total_requirements)
        status.status = determine_status(status.score)

        if self.logger:
            self.logger.info(
                "Compliance checked",
                regulation=status.regulation_name,
                status=status.status.value,
                score=status.score,
                issues=len(status.issues)
            )

        return status

    def check_all_regulations(
        self,
        pii_counts: Mapping[str, int],
        regulations: Optional[List[Union[Regulation, str]]] = None
    ) -> Dict[Regulation, ComplianceStatus]:
        """
        Check several regulations independently.

        Args:
            pii_counts: Aggregate PII counts
            regulations: Regulations to check (defaults to the configured ones)
        """
        if regulations is None:
            regulations = self.config.get_regulations()

        results = {}
        for regulation in regulations:
            status = self.check_compliance(regulation, pii_counts)
            results[status.regulation] = status
        return results

    def check_scan_result(
        self,
        scan_result: ScanResult,
        regulations: Optional[List[Union[Regulation, str]]] = None
    ) -> Dict[Regulation, ComplianceStatus]:
        """Check regulations against the counts of a scan."""
        return self.check_all_regulations(compliance_counts(scan_result), regulations)

    def __repr__(self) -> str:
        return (
            f"ComplianceChecker(requirements={len(self.catalog)}, "
            f"total_requirements={self.config.total_requirements})"
        )


def get_overall_compliance(statuses: Mapping[object, ComplianceStatus]) -> float:
    """Average the scores of several compliance statuses."""
    if not statuses:
        return 0.0
    return sum(status.score for status in statuses.values()) / len(statuses)
