"""
Regulatory compliance data models.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Any, List, Optional, Union


class Regulation(str, Enum):
    """Privacy regulations the compliance checker knows about."""

    GDPR = "GDPR"
    HIPAA = "HIPAA"
    CCPA = "CCPA"
    PCI_DSS = "PCI-DSS"
    PIPEDA = "PIPEDA"
    LGPD = "LGPD"

    @classmethod
    def parse(cls, value: Union[str, "Regulation"]) -> Optional["Regulation"]:
        """
        Resolve a regulation from its name.

        Matching is case-insensitive and accepts "_" in place of "-".
        Returns None for names that are not known.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().upper().replace("_", "-")
        for regulation in cls:
            if regulation.value == normalized:
                return regulation
        return None


class ComplianceLevel(str, Enum):
    """Compliance verdicts, derived from a score."""

    COMPLIANT = "COMPLIANT"
    AT_RISK = "AT_RISK"
    REVIEW = "REVIEW"
    NON_COMPLIANT = "NON_COMPLIANT"

    @property
    def rank(self) -> int:
        """Ordering where a higher rank is more compliant."""
        return _LEVEL_RANKS[self]


_LEVEL_RANKS = {
    ComplianceLevel.NON_COMPLIANT: 0,
    ComplianceLevel.REVIEW: 1,
    ComplianceLevel.AT_RISK: 2,
    ComplianceLevel.COMPLIANT: 3,
}

# Inline scan label for regulations that do not apply to the detected data
NOT_APPLICABLE = "N/A"


@dataclass(frozen=True)
class Requirement:
    """A single obligation under a regulation."""

    regulation: Regulation
    id: str
    name: str
    description: str
    requirement: str  # Obligation text
    scope: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert requirement to dictionary."""
        return {
            "regulation": self.regulation.value,
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "requirement": self.requirement,
            "scope": self.scope,
        }


@dataclass(frozen=True)
class ComplianceIssue:
    """A flagged requirement with its remediation."""

    issue: str
    recommendation: str
    requirement_id: Optional[str] = None


@dataclass
class ComplianceStatus:
    """Result of checking one regulation against aggregate PII counts."""

    regulation: Union[Regulation, str]
    status: ComplianceLevel = ComplianceLevel.REVIEW
    score: float = 0.0
    issues: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)
    last_checked: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def regulation_name(self) -> str:
        """Get the regulation as a plain string."""
        if isinstance(self.regulation, Regulation):
            return self.regulation.value
        return str(self.regulation)

    def is_compliant(self) -> bool:
        """Check if the regulation is fully compliant."""
        return self.status == ComplianceLevel.COMPLIANT

    def to_dict(self) -> Dict[str, Any]:
        """Convert compliance status to dictionary."""
        return {
            "regulation": self.regulation_name,
            "status": self.status.value,
            "score": self.score,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
            "last_checked": self.last_checked.isoformat(),
        }
