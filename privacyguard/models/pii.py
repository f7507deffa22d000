"""
PII (Personally Identifiable Information) detection data models.
"""

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any, List, Optional


class PIICategory(str, Enum):
    """Categories of personally identifiable information."""

    EMAIL = "email"
    PHONE = "phone"
    SSN = "ssn"
    CREDIT_CARD = "credit_card"
    BANK_ACCOUNT = "bank_account"
    IP_ADDRESS = "ip_address"
    NAME = "name"
    DATE_OF_BIRTH = "date_of_birth"
    ADDRESS = "address"
    MEDICAL_RECORD = "medical_record"
    FINANCIAL_INFO = "financial_info"
    BIOMETRIC = "biometric"


class RiskTier(str, Enum):
    """Severity classification of a PII category."""

    CRITICAL = "CRITICAL"
    HIGH = "HIGH"
    MEDIUM = "MEDIUM"
    LOW = "LOW"


@dataclass(frozen=True)
class Finding:
    """Represents a single PII match found in scanned content."""

    category: PIICategory
    value: str  # The actual matched text
    location: str  # Opaque source label supplied by the caller
    context: str  # Raw text surrounding the match
    confidence: float
    redaction: str  # Placeholder such as "[EMAIL]"
    risk_level: RiskTier
    start_pos: int = 0
    end_pos: int = 0
    line: int = 0  # Line tracking is not implemented
    masked_context: str = ""  # Context with every overlapping finding redacted
    fingerprint: Optional[str] = None  # Keyed digest of the value, set by the scanner

    def to_dict(self, include_value: bool = False) -> Dict[str, Any]:
        """
        Convert finding to dictionary.

        Args:
            include_value: Whether to include the raw matched value. When
                False the value is replaced by its redaction label and the
                context has every detected value in it redacted.
        """
        data = {
            "category": self.category.value,
            "location": self.location,
            "line": self.line,
            "start_pos": self.start_pos,
            "end_pos": self.end_pos,
            "confidence": self.confidence,
            "redaction": self.redaction,
            "risk_level": self.risk_level.value,
            "fingerprint": self.fingerprint,
        }
        if include_value:
            data["value"] = self.value
            data["context"] = self.context
        else:
            data["value"] = self.redaction
            data["context"] = self.masked_context or self.context.replace(
                self.value, self.redaction
            )
        return data

    def get_masked_text(self, mask_char: str = "*") -> str:
        """Get the matched value masked character by character."""
        return mask_char * len(self.value)


@dataclass
class ScanResult:
    """Results of scanning one piece of content."""

    total_found: int = 0
    findings: List[Finding] = field(default_factory=list)
    summary: Dict[str, int] = field(default_factory=dict)  # category -> count
    compliance: Dict[str, str] = field(default_factory=dict)  # regulation -> label
    location: Optional[str] = None

    @classmethod
    def from_findings(
        cls,
        findings: List[Finding],
        location: Optional[str] = None
    ) -> "ScanResult":
        """Build a result whose totals are derived from the findings."""
        counts = Counter(f.category.value for f in findings)
        return cls(
            total_found=len(findings),
            findings=list(findings),
            summary=dict(counts),
            location=location,
        )

    def findings_by_category(self, category: PIICategory) -> List[Finding]:
        """Get findings of one category in scan order."""
        return [f for f in self.findings if f.category == category]

    def has_category(self, category: PIICategory) -> bool:
        """Check whether any finding has the given category."""
        return self.summary.get(category.value, 0) > 0

    def get_compliance_status(self, regulation: str) -> str:
        """Get the inline compliance label for a regulation."""
        return self.compliance.get(regulation, "UNKNOWN")

    def to_dict(self, include_values: bool = False) -> Dict[str, Any]:
        """Convert scan result to dictionary."""
        return {
            "total_found": self.total_found,
            "location": self.location,
            "summary": dict(self.summary),
            "compliance": dict(self.compliance),
            "findings": [f.to_dict(include_value=include_values) for f in self.findings],
        }
