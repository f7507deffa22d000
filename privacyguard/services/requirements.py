"""
Catalog of regulatory requirements and the rules that evaluate them.

Each rule is a function of the aggregate PII counts of a scan. A rule returns
a ComplianceIssue when the requirement is flagged and None otherwise.
"""

from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

from ..models.compliance import Regulation, Requirement, ComplianceIssue


Evaluator = Callable[[Requirement, Mapping[str, int]], Optional[ComplianceIssue]]


# Derived keys that re-count or qualify category counts
ALIAS_KEYS = frozenset({"medical", "sensitive", "california"})


def sum_pii(pii_counts: Mapping[str, int]) -> int:
    """Sum the per-category PII counts, leaving out alias keys."""
    return sum(count for key, count in pii_counts.items() if key not in ALIAS_KEYS)


def _issue(req: Requirement, issue: str, recommendation: str) -> ComplianceIssue:
    return ComplianceIssue(issue=issue, recommendation=recommendation, requirement_id=req.id)


def evaluate_data_minimization(
    req: Requirement,
    pii_counts: Mapping[str, int]
) -> Optional[ComplianceIssue]:
    """Flag more than 100 detected values in total."""
    if sum_pii(pii_counts) > 100:
        return _issue(
            req,
            "Excessive data collection detected",
            "Review data collection practices and minimize data collection"
        )
    return None


def evaluate_purpose_limitation(
    req: Requirement,
    pii_counts: Mapping[str, int]
) -> Optional[ComplianceIssue]:
    """Flag more than 50 special-category values."""
    if pii_counts.get("sensitive", 0) > 50:
        return _issue(
            req,
            "Sensitive data processing detected",
            "Ensure legal basis for sensitive data processing"
        )
    return None


def evaluate_data_subject_rights(
    req: Requirement,
    pii_counts: Mapping[str, int]
) -> Optional[ComplianceIssue]:
    """Always flag the data subject rights obligation."""
    return _issue(
        req,
        "Data subject rights implementation required",
        "Implement data access, deletion, and correction mechanisms"
    )


def evaluate_phi_protection(
    req: Requirement,
    pii_counts: Mapping[str, int]
) -> Optional[ComplianceIssue]:
    """Flag any medical record."""
    if pii_counts.get("medical", 0) > 0:
        return _issue(
            req,
            "Protected Health Information detected",
            "Ensure PHI is encrypted and access controlled"
        )
    return None


def evaluate_audit_logging(
    req: Requirement,
    pii_counts: Mapping[str, int]
) -> Optional[ComplianceIssue]:
    """Always flag the PHI audit logging obligation."""
    return _issue(
        req,
        "Audit logging required for PHI access",
        "Implement comprehensive audit logging for PHI access"
    )


def evaluate_consumer_rights(
    req: Requirement,
    pii_counts: Mapping[str, int]
) -> Optional[ComplianceIssue]:
    """Flag more than 10 California consumer records."""
    if pii_counts.get("california", 0) > 10:
        return _issue(
            req,
            "California consumer data detected",
            "Implement CCPA opt-out mechanisms"
        )
    return None


def evaluate_cardholder_data(
    req: Requirement,
    pii_counts: Mapping[str, int]
) -> Optional[ComplianceIssue]:
    """Flag any payment card number."""
    if pii_counts.get("credit_card", 0) > 0:
        return _issue(
            req,
            "Cardholder data detected",
            "Ensure cardholder data is encrypted at rest and in transit"
        )
    return None


DEFAULT_REQUIREMENTS: Tuple[Requirement, ...] = (
    Requirement(
        regulation=Regulation.GDPR,
        id="GDPR-001",
        name="Data Minimization",
        description="Collect only necessary data",
        requirement="Data collection must be limited to what is necessary",
        scope="all",
    ),
    Requirement(
        regulation=Regulation.GDPR,
        id="GDPR-002",
        name="Purpose Limitation",
        description="Use data only for specified purposes",
        requirement="Data must not be used for incompatible purposes",
        scope="all",
    ),
    Requirement(
        regulation=Regulation.GDPR,
        id="GDPR-003",
        name="Data Subject Rights",
        description="Enable data subject access rights",
        requirement="Individuals must be able to access, correct, delete their data",
        scope="processing",
    ),
    Requirement(
        regulation=Regulation.HIPAA,
        id="HIPAA-001",
        name="Protected Health Information",
        description="Protect PHI data",
        requirement="PHI must be encrypted and access controlled",
        scope="healthcare",
    ),
    Requirement(
        regulation=Regulation.HIPAA,
        id="HIPAA-002",
        name="Audit Logging",
        description="Log access to PHI",
        requirement="All access to PHI must be logged and monitored",
        scope="healthcare",
    ),
    Requirement(
        regulation=Regulation.CCPA,
        id="CCPA-001",
        name="Consumer Rights",
        description="Enable consumer privacy rights",
        requirement="California residents can opt-out of data sale",
        scope="california",
    ),
    Requirement(
        regulation=Regulation.PCI_DSS,
        id="PCI-001",
        name="Cardholder Data Protection",
        description="Protect cardholder data",
        requirement="Cardholder data must be encrypted at rest and in transit",
        scope="payment",
    ),
)

DEFAULT_EVALUATORS: Dict[str, Evaluator] = {
    "GDPR-001": evaluate_data_minimization,
    "GDPR-002": evaluate_purpose_limitation,
    "GDPR-003": evaluate_data_subject_rights,
    "HIPAA-001": evaluate_phi_protection,
    "HIPAA-002": evaluate_audit_logging,
    "CCPA-001": evaluate_consumer_rights,
    "PCI-001": evaluate_cardholder_data,
}


class RequirementCatalog:
    """Read-only set of requirements with their evaluation rules."""

    def __init__(
        self,
        requirements: Optional[List[Requirement]] = None,
        evaluators: Optional[Mapping[str, Evaluator]] = None
    ):
        self._requirements: Tuple[Requirement, ...] = tuple(requirements or ())
        self._evaluators: Dict[str, Evaluator] = dict(evaluators or {})

    @classmethod
    def default(cls) -> "RequirementCatalog":
        """Get the shared default catalog."""
        return DEFAULT_CATALOG

    @property
    def requirements(self) -> Tuple[Requirement, ...]:
        return self._requirements

    def __len__(self) -> int:
        return len(self._requirements)

    def for_regulation(self, regulation: Union[Regulation, str]) -> List[Requirement]:
        """Get the requirements belonging to a regulation, in catalog order."""
        parsed = Regulation.parse(regulation)
        if parsed is None:
            return []
        return [req for req in self._requirements if req.regulation == parsed]

    def get(self, requirement_id: str) -> Optional[Requirement]:
        """Get a requirement by id."""
        for req in self._requirements:
            if req.id == requirement_id:
                return req
        return None

    def evaluate(
        self,
        requirement: Requirement,
        pii_counts: Mapping[str, int]
    ) -> Optional[ComplianceIssue]:
        """
        Evaluate one requirement against aggregate PII counts.

        Requirements without a registered rule never raise an issue.
        """
        evaluator = self._evaluators.get(requirement.id)
        if evaluator is None:
            return None
        return evaluator(requirement, pii_counts)

    def with_requirement(
        self,
        requirement: Requirement,
        evaluator: Optional[Evaluator] = None
    ) -> "RequirementCatalog":
        """Return a new catalog with the requirement, and its rule, added."""
        evaluators = dict(self._evaluators)
        if evaluator is not None:
            evaluators[requirement.id] = evaluator
        return RequirementCatalog(list(self._requirements) + [requirement], evaluators)

    def __repr__(self) -> str:
        return f"RequirementCatalog(requirements={len(self._requirements)})"


DEFAULT_CATALOG = RequirementCatalog(list(DEFAULT_REQUIREMENTS), DEFAULT_EVALUATORS)
