"""
Data models and configuration classes for the privacy scanning system.
"""

from .config import (
    PrivacyGuardConfig, ScannerConfig, ComplianceConfig, ObservabilityConfig
)
from .pii import PIICategory, RiskTier, Finding, ScanResult
from .compliance import (
    Regulation, ComplianceLevel, Requirement, ComplianceIssue, ComplianceStatus
)
from .health import HealthStatus

__all__ = [
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
]
