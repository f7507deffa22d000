"""
Plain-text reports for scan results and compliance statuses.
"""

from typing import Mapping

from ..models.compliance import ComplianceStatus
from ..models.pii import ScanResult


MAX_REPORTED_FINDINGS = 10
MAX_VALUE_PREVIEW = 20


def generate_scan_report(result: ScanResult) -> str:
    """
    Render a scan result as text.

    Only the first ten findings are listed; the rest are summarised in a
    single line.
    """
    lines = ["=== Privacy Scanning Report ===", ""]
    lines.append(f"Total PII Found: {result.total_found}")
    lines.append("")

    if result.total_found == 0:
        lines.append("No PII detected")
        return "\n".join(lines) + "\n"

    lines.append("PII Summary:")
    for category, count in sorted(result.summary.items()):
        lines.append(f"  {category}: {count}")
    lines.append("")

    lines.append("Compliance Status:")
    for regulation, status in result.compliance.items():
        lines.append(f"  {regulation}: {status}")
    lines.append("")

    lines.append("Detailed Findings:")
    for i, finding in enumerate(result.findings):
        if i >= MAX_REPORTED_FINDINGS:
            lines.append(f"  ... and {result.total_found - MAX_REPORTED_FINDINGS} more")
            break
        lines.append(f"[{i + 1}] {finding.risk_level.value} - {finding.category.value}")
        lines.append(f"    Value: {finding.value[:MAX_VALUE_PREVIEW]}...")
        lines.append(f"    Location: {finding.location}")
        lines.append(f"    Redaction: {finding.redaction}")
        lines.append("")

    return "\n".join(lines) + "\n"


def generate_compliance_report(status: ComplianceStatus) -> str:
    """Render a compliance status as text."""
    lines = ["=== Compliance Report ===", ""]
    lines.append(f"Regulation: {status.regulation_name}")
    lines.append(f"Status: {status.status.value}")
    lines.append(f"Score: {status.score:.0f}%")
    lines.append(f"Last Checked: {status.last_checked.strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append("")

    if status.issues:
        lines.append("Issues Found:")
        for i, issue in enumerate(status.issues, start=1):
            lines.append(f"  [{i}] {issue}")
        lines.append("")

    if status.recommendations:
        lines.append("Recommendations:")
        for i, recommendation in enumerate(status.recommendations, start=1):
            lines.append(f"  [{i}] {recommendation}")

    return "\n".join(lines) + "\n"


def generate_posture_report(
    statuses: Mapping[object, ComplianceStatus],
    overall_score: float
) -> str:
    """Render a one-line-per-regulation posture overview."""
    lines = ["=== Privacy Posture ===", ""]
    for status in statuses.values():
        lines.append(
            f"  {status.regulation_name}: {status.status.value} ({status.score:.1f})"
        )
    lines.append("")
    lines.append(f"Overall Score: {overall_score:.1f}")
    return "\n".join(lines) + "\n"
