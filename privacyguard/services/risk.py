"""
Risk classification of PII categories.
"""

from typing import Dict, Union

from ..models.pii import PIICategory, RiskTier


RISK_TIERS: Dict[PIICategory, RiskTier] = {
    PIICategory.SSN: RiskTier.CRITICAL,
    PIICategory.CREDIT_CARD: RiskTier.CRITICAL,
    PIICategory.BIOMETRIC: RiskTier.CRITICAL,
    PIICategory.MEDICAL_RECORD: RiskTier.HIGH,
    PIICategory.BANK_ACCOUNT: RiskTier.HIGH,
    PIICategory.FINANCIAL_INFO: RiskTier.HIGH,
    PIICategory.NAME: RiskTier.MEDIUM,
    PIICategory.PHONE: RiskTier.MEDIUM,
    PIICategory.EMAIL: RiskTier.MEDIUM,
    PIICategory.DATE_OF_BIRTH: RiskTier.MEDIUM,
    PIICategory.ADDRESS: RiskTier.MEDIUM,
    PIICategory.IP_ADDRESS: RiskTier.LOW,
}

DEFAULT_RISK_TIER = RiskTier.MEDIUM


def classify_risk(category: Union[PIICategory, str]) -> RiskTier:
    """
    Get the risk tier for a PII category.
    
    Unknown categories, including arbitrary strings, are MEDIUM.
    """
    if not isinstance(category, PIICategory):
        try:
            category = PIICategory(category)
        except ValueError:
            return DEFAULT_RISK_TIER
    return RISK_TIERS.get(category, DEFAULT_RISK_TIER)
