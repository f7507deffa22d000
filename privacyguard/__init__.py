"""
PrivacyGuard - Pattern-based PII detection and regulatory compliance scoring.

This package scans arbitrary text for personally identifiable information,
classifies what it finds by risk, and derives a compliance posture for
regulations such as GDPR, HIPAA, CCPA and PCI-DSS from the detected PII mix.
"""

from .manager import PrivacyGuard
from .models import (
    PrivacyGuardConfig, ScannerConfig, ComplianceConfig, ObservabilityConfig,
    PIICategory, RiskTier, Finding, ScanResult,
    Regulation, ComplianceLevel, Requirement, ComplianceIssue, ComplianceStatus,
    HealthStatus
)
from .services import (
    DetectionRule,
    PatternRegistry,
    PIIDetectionService,
    RequirementCatalog,
    ComplianceChecker,
    classify_risk,
    get_overall_compliance,
)
from .factory import PrivacyGuardFactory
from .exceptions import (
    PrivacyGuardException,
    ConfigurationException,
    PatternException,
    ObservabilityException
)

__version__ = "0.1.0"

__all__ = [
    "PrivacyGuard",
    "PrivacyGuardConfig",
    "ScannerConfig",
    "ComplianceConfig",
    "ObservabilityConfig",
    "PIICategory",
    "RiskTier",
    "Finding",
    "ScanResult",
    "Regulation",
    "ComplianceLevel",
    "Requirement",
    "ComplianceIssue",
    "ComplianceStatus",
    "HealthStatus",
    "DetectionRule",
    "PatternRegistry",
    "PIIDetectionService",
    "RequirementCatalog",
    "ComplianceChecker",
    "classify_risk",
    "get_overall_compliance",
    "PrivacyGuardFactory",
    "PrivacyGuardException",
    "ConfigurationException",
    "PatternException",
    "ObservabilityException",
]
