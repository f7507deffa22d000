"""
Registry of regex detection rules, one or more per PII category.
"""

import re
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple, Any, Union

from ..models.pii import PIICategory
from ..exceptions import PatternException


DEFAULT_CONFIDENCE = 0.95


@dataclass(frozen=True)
class DetectionRule:
    """Pattern for detecting one category of PII."""
    category: PIICategory
    name: str
    pattern: re.Pattern
    redaction: str
    confidence: float = DEFAULT_CONFIDENCE

    @classmethod
    def compile(
        cls,
        category: Union[PIICategory, str],
        pattern: str,
        name: str = "",
        redaction: Optional[str] = None,
        confidence: float = DEFAULT_CONFIDENCE,
        flags: int = 0
    ) -> "DetectionRule":
        """
        Build a rule from a regex string.

        Raises:
            PatternException: If the category is unknown or the regex is invalid
        """
        try:
            category = PIICategory(category)
        except ValueError:
            raise PatternException(f"Unknown PII category: {category}")

        try:
            compiled = re.compile(pattern, flags)
        except re.error as e:
            raise PatternException(f"Invalid regex pattern: {str(e)}")

        if not 0 < confidence <= 1:
            raise PatternException("confidence must be greater than 0 and at most 1")

        return cls(
            category=category,
            name=name or f"Custom pattern: {category.value}",
            pattern=compiled,
            redaction=redaction or f"[{category.value.upper()}]",
            confidence=confidence
        )


class PatternRegistry:
    """Ordered, read-only collection of detection rules."""

    def __init__(self, rules: Optional[List[DetectionRule]] = None):
        self._rules: Tuple[DetectionRule, ...] = tuple(rules or ())

    @classmethod
    def default(cls) -> "PatternRegistry":
        """Get the shared default registry."""
        return DEFAULT_REGISTRY

    @property
    def rules(self) -> Tuple[DetectionRule, ...]:
        return self._rules

    def __iter__(self) -> Iterator[DetectionRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, category: object) -> bool:
        return any(rule.category == category for rule in self._rules)

    def get(self, category: PIICategory) -> List[DetectionRule]:
        """Get the rules registered for a category."""
        return [rule for rule in self._rules if rule.category == category]

    def with_rule(self, rule: DetectionRule) -> "PatternRegistry":
        """Return a new registry with the rule appended."""
        return PatternRegistry(list(self._rules) + [rule])

    def without(self, category: PIICategory) -> "PatternRegistry":
        """Return a new registry with every rule for the category removed."""
        return PatternRegistry([r for r in self._rules if r.category != category])

    def describe(self) -> List[Dict[str, Any]]:
        """Get information about the registered rules."""
        return [
            {
                "category": rule.category.value,
                "name": rule.name,
                "pattern": rule.pattern.pattern,
                "redaction": rule.redaction,
                "confidence": rule.confidence
            }
            for rule in self._rules
        ]

    def __repr__(self) -> str:
        return f"PatternRegistry(rules={len(self._rules)})"


def _build_default_rules() -> List[DetectionRule]:
    """Build the default rule set, one rule per detectable category."""
    return [
        DetectionRule(
            category=PIICategory.EMAIL,
            name="Email Address",
            pattern=re.compile(r'[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}'),
            redaction="[EMAIL]"
        ),

        # US format; digits directly before or after disqualify the match
        DetectionRule(
            category=PIICategory.PHONE,
            name="Phone Number",
            pattern=re.compile(
                r'(?<![\w+])(?:\+?1[-.\s]?)?\(?[0-9]{3}\)?[-.\s]?[0-9]{3}[-.\s]?[0-9]{4}(?!\d)'
            ),
            redaction="[PHONE]"
        ),

        DetectionRule(
            category=PIICategory.SSN,
            name="Social Security Number",
            pattern=re.compile(r'\b[0-9]{3}-[0-9]{2}-[0-9]{4}\b'),
            redaction="[SSN]"
        ),

        # Visa, Mastercard, American Express, Discover
        DetectionRule(
            category=PIICategory.CREDIT_CARD,
            name="Credit Card Number",
            pattern=re.compile(
                r'\b(?:4[0-9]{12}(?:[0-9]{3})?|5[1-5][0-9]{14}|3[47][0-9]{13}|6(?:011|5[0-9]{2})[0-9]{12})\b'
            ),
            redaction="[CC]"
        ),

        DetectionRule(
            category=PIICategory.IP_ADDRESS,
            name="IP Address",
            pattern=re.compile(
                r'\b(?:(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\.){3}(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)\b'
            ),
            redaction="[IP]"
        ),

        DetectionRule(
            category=PIICategory.BANK_ACCOUNT,
            name="Bank Account Number",
            pattern=re.compile(r'\b(?:ACC|Account|Bank)\s*[:\s]+[0-9]{8,15}\b'),
            redaction="[BANK]"
        ),

        DetectionRule(
            category=PIICategory.MEDICAL_RECORD,
            name="Medical Record Number",
            pattern=re.compile(r'\b(?:MRN|MedicalRecord|PatientID)\s*[:\s]+[A-Za-z0-9]{6,15}\b'),
            redaction="[MED]"
        ),

        DetectionRule(
            category=PIICategory.DATE_OF_BIRTH,
            name="Date of Birth",
            pattern=re.compile(
                r'\b(?:DOB|DateOfBirth|BirthDate)\s*[:\s]+(?:[0-9]{1,2}/[0-9]{1,2}/[0-9]{4}|[0-9]{4}-[0-9]{2}-[0-9]{2})\b'
            ),
            redaction="[DOB]"
        ),
    ]


DEFAULT_REGISTRY = PatternRegistry(_build_default_rules())
