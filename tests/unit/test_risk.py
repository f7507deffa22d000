"""
Unit tests for risk classification.
"""

import pytest

from privacyguard.services.risk import classify_risk, RISK_TIERS
from privacyguard.models.pii import PIICategory, RiskTier


class TestClassifyRisk:
    """Test cases for classify_risk."""
    
    @pytest.mark.parametrize("category,tier", [
        (PIICategory.SSN, RiskTier.CRITICAL),
        (PIICategory.CREDIT_CARD, RiskTier.CRITICAL),
        (PIICategory.BIOMETRIC, RiskTier.CRITICAL),
        (PIICategory.MEDICAL_RECORD, RiskTier.HIGH),
        (PIICategory.BANK_ACCOUNT, RiskTier.HIGH),
        (PIICategory.FINANCIAL_INFO, RiskTier.HIGH),
        (PIICategory.NAME, RiskTier.MEDIUM),
        (PIICategory.PHONE, RiskTier.MEDIUM),
        (PIICategory.EMAIL, RiskTier.MEDIUM),
        (PIICategory.DATE_OF_BIRTH, RiskTier.MEDIUM),
        (PIICategory.ADDRESS, RiskTier.MEDIUM),
        (PIICategory.IP_ADDRESS, RiskTier.LOW),
    ])
    def test_risk_table(self, category, tier):
        """Test the tier of every known category."""
        assert classify_risk(category) == tier
    
    def test_every_category_mapped(self):
        """Test that the table covers the whole taxonomy."""
        assert set(RISK_TIERS) == set(PIICategory)
    
    def test_string_category(self):
        """Test classification by category name."""
        assert classify_risk("credit_card") == RiskTier.CRITICAL
        assert classify_risk("ip_address") == RiskTier.LOW
    
    def test_unknown_category_defaults_to_medium(self):
        """Test that unknown categories never fail."""
        assert classify_risk("passport") == RiskTier.MEDIUM
        assert classify_risk("") == RiskTier.MEDIUM
