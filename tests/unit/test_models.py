"""
Unit tests for data models.
"""

import dataclasses

import pytest

from privacyguard.models.pii import PIICategory, RiskTier, Finding, ScanResult
from privacyguard.models.compliance import (
    Regulation, ComplianceLevel, ComplianceStatus, Requirement
)
from privacyguard.models.health import HealthStatus
from privacyguard.services.fingerprint import fingerprint_value


def make_finding(**overrides):
    values = dict(
        category=PIICategory.SSN,
        value="123-45-6789",
        location="form.txt",
        context="SSN: 123-45-6789 on file",
        confidence=0.95,
        redaction="[SSN]",
        risk_level=RiskTier.CRITICAL,
        start_pos=5,
        end_pos=16
    )
    values.update(overrides)
    return Finding(**values)


class TestFinding:
    """Test cases for Finding."""

    def test_is_immutable(self):
        """Test that findings cannot be modified."""
        finding = make_finding()

        with pytest.raises(dataclasses.FrozenInstanceError):
            finding.value = "other"

    def test_to_dict_hides_value(self):
        """Test that serialisation redacts the value by default."""
        result = make_finding().to_dict()

        assert result["value"] == "[SSN]"
        assert result["context"] == "SSN: [SSN] on file"
        assert result["category"] == "ssn"
        assert result["risk_level"] == "CRITICAL"
        assert result["start_pos"] == 5
        assert result["end_pos"] == 16
        assert result["fingerprint"] is None
        assert "123-45-6789" not in str(result)

    def test_to_dict_with_value(self):
        """Test serialisation including the raw value."""
        result = make_finding().to_dict(include_value=True)

        assert result["value"] == "123-45-6789"
        assert result["context"] == "SSN: 123-45-6789 on file"

    def test_fingerprint_passed_through(self):
        """Test that the scanner-supplied fingerprint is exported."""
        result = make_finding(fingerprint="ab" * 32).to_dict()

        assert result["fingerprint"] == "ab" * 32

    def test_masked_context_preferred(self):
        """Test that the fully redacted context is exported when present."""
        finding = make_finding(
            context="SSN: 123-45-6789 mail a@b.co",
            masked_context="SSN: [SSN] mail [EMAIL]"
        )

        assert finding.to_dict()["context"] == "SSN: [SSN] mail [EMAIL]"
        assert finding.to_dict(include_value=True)["context"] == "SSN: 123-45-6789 mail a@b.co"

    def test_masked_text(self):
        """Test character masking."""
        assert make_finding().get_masked_text() == "*" * 11
        assert make_finding(value="abc").get_masked_text("#") == "###"


class TestFingerprint:
    """Test cases for value fingerprints."""

    def test_sha256(self):
        """Test the plain digest against a known vector."""
        assert fingerprint_value("abc") == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_bytes_and_str_agree(self):
        """Test that text is hashed as UTF-8."""
        assert fingerprint_value("abc") == fingerprint_value(b"abc")

    def test_keyed(self):
        """Test that a key changes the fingerprint."""
        plain = fingerprint_value("abc")
        keyed = fingerprint_value("abc", key=b"secret")

        assert keyed != plain
        assert keyed == fingerprint_value("abc", key=b"secret")
        assert keyed != fingerprint_value("abc", key=b"other")


class TestScanResult:
    """Test cases for ScanResult."""

    def test_from_findings(self):
        """Test that totals are derived from the findings."""
        findings = [
            make_finding(),
            make_finding(category=PIICategory.EMAIL, value="a@b.co", redaction="[EMAIL]"),
            make_finding(value="987-65-4321"),
        ]

        result = ScanResult.from_findings(findings, location="form.txt")

        assert result.total_found == 3
        assert result.summary == {"ssn": 2, "email": 1}
        assert sum(result.summary.values()) == result.total_found
        assert result.location == "form.txt"
        assert result.has_category(PIICategory.SSN)
        assert not result.has_category(PIICategory.PHONE)
        assert len(result.findings_by_category(PIICategory.SSN)) == 2

    def test_compliance_status_lookup(self):
        """Test inline label lookup."""
        result = ScanResult(compliance={"GDPR": "REVIEW"})

        assert result.get_compliance_status("GDPR") == "REVIEW"
        assert result.get_compliance_status("LGPD") == "UNKNOWN"

    def test_to_dict(self):
        """Test scan result dictionary conversion."""
        result = ScanResult.from_findings([make_finding()])

        data = result.to_dict()

        assert data["total_found"] == 1
        assert data["summary"] == {"ssn": 1}
        assert data["findings"][0]["value"] == "[SSN]"
        assert result.to_dict(include_values=True)["findings"][0]["value"] == "123-45-6789"


class TestRegulation:
    """Test cases for Regulation."""

    @pytest.mark.parametrize("name,expected", [
        ("GDPR", Regulation.GDPR),
        ("gdpr", Regulation.GDPR),
        ("PCI-DSS", Regulation.PCI_DSS),
        ("pci_dss", Regulation.PCI_DSS),
        (" lgpd ", Regulation.LGPD),
        (Regulation.HIPAA, Regulation.HIPAA),
    ])
    def test_parse(self, name, expected):
        """Test resolving regulation names."""
        assert Regulation.parse(name) == expected

    def test_parse_unknown(self):
        """Test resolving an unknown name."""
        assert Regulation.parse("SOX") is None


class TestComplianceModels:
    """Test cases for compliance models."""

    def test_status_to_dict(self):
        """Test compliance status dictionary conversion."""
        status = ComplianceStatus(
            regulation=Regulation.CCPA,
            status=ComplianceLevel.COMPLIANT,
            score=100.0
        )

        data = status.to_dict()

        assert data["regulation"] == "CCPA"
        assert data["status"] == "COMPLIANT"
        assert data["issues"] == []
        assert data["last_checked"].endswith("+00:00")

    def test_requirement_to_dict(self):
        """Test requirement dictionary conversion."""
        requirement = Requirement(
            regulation=Regulation.LGPD,
            id="LGPD-001",
            name="Consent",
            description="Consent for processing",
            requirement="Obtain consent",
            scope="All personal data"
        )

        assert requirement.to_dict()["regulation"] == "LGPD"
        assert requirement.to_dict()["id"] == "LGPD-001"


class TestHealthStatus:
    """Test cases for HealthStatus."""

    def test_to_dict_without_timestamp(self):
        """Test health dictionary conversion."""
        health = HealthStatus(status="healthy", components={"detection": "healthy"})

        assert health.is_healthy()
        assert health.to_dict() == {
            "status": "healthy",
            "components": {"detection": "healthy"},
            "timestamp": None,
        }
