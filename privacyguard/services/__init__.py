"""
Service layer components for PII detection, compliance scoring and reporting.
"""

from .pattern_registry import DetectionRule, PatternRegistry, DEFAULT_REGISTRY
from .risk import classify_risk
from .pii_detection import PIIDetectionService
from .requirements import RequirementCatalog, DEFAULT_CATALOG
from .compliance import (
    ComplianceChecker,
    determine_status,
    calculate_score,
    summarize_compliance,
    compliance_counts,
    get_overall_compliance,
)
from .observability import StructuredLogger, JsonFormatter
from .reporting import (
    generate_scan_report,
    generate_compliance_report,
    generate_posture_report,
)

__all__ = [
    "DetectionRule",
    "PatternRegistry",
    "DEFAULT_REGISTRY",
    "classify_risk",
    "PIIDetectionService",
    "RequirementCatalog",
    "DEFAULT_CATALOG",
    "ComplianceChecker",
    "determine_status",
    "calculate_score",
    "summarize_compliance",
    "compliance_counts",
    "get_overall_compliance",
    "StructuredLogger",
    "JsonFormatter",
    "generate_scan_report",
    "generate_compliance_report",
    "generate_posture_report",
]
