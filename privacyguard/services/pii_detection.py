"""
PII (Personally Identifiable Information) detection service.
"""

import re
import secrets
from collections import Counter
from dataclasses import replace
from typing import List, Dict, Any, Optional, Tuple, Union

from ..models.config import ScannerConfig
from ..models.pii import PIICategory, Finding, ScanResult
from .compliance import summarize_compliance
from .fingerprint import fingerprint_value
from .observability import StructuredLogger
from .pattern_registry import PatternRegistry, DetectionRule, DEFAULT_CONFIDENCE
from .risk import classify_risk


class PIIDetectionService:
    """Service for detecting and redacting PII in text."""

    def __init__(
        self,
        registry: Optional[PatternRegistry] = None,
        config: Optional[ScannerConfig] = None,
        logger: Optional[StructuredLogger] = None
    ):
        """
        Initialize PII detection service.

        Args:
            registry: Detection rules to apply (defaults to the built-in set)
            config: Scanner configuration
            logger: Optional structured logger
        """
        self.registry = registry if registry is not None else PatternRegistry.default()
        self.config = config or ScannerConfig()
        self.logger = logger

        if self.config.fingerprint_key:
            self._fingerprint_key = self.config.fingerprint_key.encode('utf-8')
        else:
            self._fingerprint_key = secrets.token_bytes(32)

    def scan(self, content: str, location: str = "") -> ScanResult:
        """
        Scan content for PII.

        Args:
            content: Text to analyze
            location: Opaque label of where the content came from

        Returns:
            Scan result with findings, per-category counts and inline
            compliance labels
        """
        findings = self.detect(content, location)

        result = ScanResult.from_findings(findings, location=location)
        result.compliance = summarize_compliance(result.summary)

        if self.logger:
            self.logger.info(
                "Content scanned",
                location=location,
                content_length=len(content),
                total_found=result.total_found,
                categories=sorted(result.summary)
            )

        return result

    def detect(self, content: str, location: str = "") -> List[Finding]:
        """
        Detect PII in text.

        Every rule contributes all of its non-overlapping matches.

        Args:
            content: Text to analyze
            location: Opaque label copied onto each finding

        Returns:
            List of findings
        """
        findings = []

        for rule in self.registry:
            for match in rule.pattern.finditer(content):
                findings.append(self._create_finding(rule, match, content, location))

        if self.config.deterministic_order:
            findings.sort(key=lambda f: (f.start_pos, f.category.value))

        return [
            replace(
                f,
                masked_context=self._mask_spans(
                    content, findings, *self._context_bounds(content, f.start_pos, f.end_pos)
                )
            )
            for f in findings
        ]

    def _create_finding(
        self,
        rule: DetectionRule,
        match: "re.Match",
        content: str,
        location: str
    ) -> Finding:
        """Build a finding for one regex match."""
        return Finding(
            category=rule.category,
            value=match.group(),
            location=location,
            context=self._extract_context(content, match.start(), match.end()),
            confidence=rule.confidence,
            redaction=rule.redaction,
            risk_level=classify_risk(rule.category),
            start_pos=match.start(),
            end_pos=match.end(),
            fingerprint=fingerprint_value(match.group(), key=self._fingerprint_key)
        )

    def _context_bounds(self, content: str, start: int, end: int) -> Tuple[int, int]:
        """Get the context window around a match, clamped to the content bounds."""
        window = self.config.context_window
        return max(0, start - window), min(len(content), end + window)

    def _extract_context(self, content: str, start: int, end: int) -> str:
        """Extract text around a match."""
        low, high = self._context_bounds(content, start, end)
        return content[low:high]

    def _mask_spans(
        self,
        content: str,
        findings: List[Finding],
        low: int = 0,
        high: Optional[int] = None
    ) -> str:
        """
        Replace every finding within content[low:high] with its label.

        The earliest finding wins, then the longest at the same offset. A
        finding overlapping one already replaced is folded into that label,
        and findings cut by the bounds are replaced whole.
        """
        if high is None:
            high = len(content)

        ordered = sorted(
            (f for f in findings if f.start_pos < high and f.end_pos > low),
            key=lambda f: (f.start_pos, -(f.end_pos - f.start_pos))
        )

        parts = []
        cursor = low
        for finding in ordered:
            start = max(finding.start_pos, low)
            if start < cursor:
                cursor = max(cursor, finding.end_pos)
                continue
            parts.append(content[cursor:start])
            parts.append(finding.redaction)
            cursor = finding.end_pos
        parts.append(content[cursor:high])

        return "".join(parts)

    def redact(self, content: str, location: str = "") -> Tuple[str, ScanResult]:
        """
        Replace detected PII with redaction labels.

        Where matches overlap, the earliest one wins, and the longest among
        those starting at the same offset. The rest of an overlapping match
        is covered by that label.

        Args:
            content: Text to redact
            location: Opaque label of where the content came from

        Returns:
            Tuple of (redacted_text, scan_result)
        """
        result = self.scan(content, location)

        if not result.findings:
            return content, result

        return self._mask_spans(content, result.findings), result

    def get_pii_summary(self, findings: List[Finding]) -> Dict[str, Any]:
        """
        Get summary of detected PII.

        Args:
            findings: List of findings

        Returns:
            Summary dictionary
        """
        if not findings:
            return {
                "total_matches": 0,
                "pii_types": [],
                "type_counts": {},
                "risk_counts": {},
                "highest_risk": None
            }

        type_counts = Counter(f.category.value for f in findings)
        risk_counts = Counter(f.risk_level.value for f in findings)

        risk_order = ["CRITICAL", "HIGH", "MEDIUM", "LOW"]
        highest_risk = next(tier for tier in risk_order if tier in risk_counts)

        return {
            "total_matches": len(findings),
            "pii_types": sorted(type_counts),
            "type_counts": dict(type_counts),
            "risk_counts": dict(risk_counts),
            "highest_risk": highest_risk
        }

    def add_custom_pattern(
        self,
        category: Union[PIICategory, str],
        pattern: str,
        name: str = "",
        redaction: Optional[str] = None,
        confidence: float = DEFAULT_CONFIDENCE
    ) -> DetectionRule:
        """
        Add a custom PII detection pattern.

        Args:
            category: PII category the pattern detects
            pattern: Regex pattern string
            name: Human readable name of the pattern
            redaction: Redaction label (defaults to "[CATEGORY]")
            confidence: Confidence score (0.0 to 1.0)

        Returns:
            The registered rule

        Raises:
            PatternException: If the pattern or category is invalid
        """
        rule = DetectionRule.compile(
            category, pattern, name=name, redaction=redaction, confidence=confidence
        )
        self.registry = self.registry.with_rule(rule)
        return rule

    def remove_pattern(self, category: Union[PIICategory, str]) -> bool:
        """
        Remove every detection pattern of a category.

        Returns:
            True if a pattern was removed
        """
        original_count = len(self.registry)
        self.registry = self.registry.without(category)
        return len(self.registry) < original_count

    def get_available_patterns(self) -> List[Dict[str, Any]]:
        """Get information about available PII patterns."""
        return self.registry.describe()

    def health_check(self) -> bool:
        """
        Perform health check on PII detection service.

        Returns:
            True if a known email address is still detected
        """
        test_text = "Contact me at john.doe@example.com or call 555-123-4567"
        findings = self.detect(test_text)
        return any(f.category == PIICategory.EMAIL for f in findings)

    def __str__(self) -> str:
        """String representation of PII detection service."""
        return f"PIIDetectionService(patterns={len(self.registry)})"

    def __repr__(self) -> str:
        """Detailed string representation of PII detection service."""
        return (
            f"PIIDetectionService(patterns={len(self.registry)}, "
            f"context_window={self.config.context_window}, "
            f"deterministic_order={self.config.deterministic_order})"
        )
