#!/usr/bin/env python3
"""
Basic usage example for PrivacyGuard.

This example demonstrates:
- Basic configuration
- Scanning and redacting text
- Compliance scoring across regulations
- Custom detection patterns
"""

from privacyguard import (
    PrivacyGuard,
    PrivacyGuardConfig,
    ScannerConfig,
    ObservabilityConfig,
    PIICategory,
    Regulation,
)
from privacyguard.services.reporting import (
    generate_scan_report,
    generate_compliance_report,
    generate_posture_report,
)


SAMPLE_TEXT = """Support ticket #4821
Customer: reach me at maria.silva@example.com or (555) 234-9876.
My card 4111111111111111 was charged twice, SSN on file 123-45-6789.
PatientID: ZX991827 was referenced in the attached letter.
"""


def main():
    """Demonstrate basic PII scanning and compliance scoring."""

    # Configure the scanner
    config = PrivacyGuardConfig(
        scanner=ScannerConfig(context_window=30),
        observability=ObservabilityConfig(log_level="WARN", log_format="text")
    )

    guard = PrivacyGuard(config)

    print("🔍 Scanning support ticket...")
    result = guard.scan(SAMPLE_TEXT, "tickets/4821.txt")
    print(generate_scan_report(result))

    # Redact before forwarding the ticket
    print("✂️  Redacted ticket:")
    redacted, _ = guard.redact(SAMPLE_TEXT, "tickets/4821.txt")
    print(redacted)

    # Score the detected PII mix
    print("📋 Compliance assessment:")
    assessment = guard.assess(SAMPLE_TEXT, "tickets/4821.txt")
    statuses = assessment["compliance"]
    print(generate_posture_report(statuses, assessment["overall_score"]))
    print(generate_compliance_report(statuses[Regulation.PCI_DSS]))

    # Register an organisation specific identifier
    print("➕ Adding custom pattern for employee badges...")
    guard.detection_service.add_custom_pattern(
        PIICategory.BIOMETRIC,
        r"\bBADGE-[0-9]{6}\b",
        name="Employee badge",
        redaction="[BADGE]"
    )
    redacted, result = guard.redact("Access granted to BADGE-004512 at 09:14")
    print(f"   {redacted} ({result.total_found} finding)")

    # Health check
    health = guard.health_check()
    print(f"\n🩺 Health: {health.status} {health.components}")


if __name__ == "__main__":
    main()
