"""
Exception hierarchy for the privacy scanning system.
"""

from typing import Optional


class PrivacyGuardException(Exception):
    """Base exception for privacy scanning operations."""
    
    def __init__(self, message: str, correlation_id: Optional[str] = None):
        super().__init__(message)
        self.correlation_id = correlation_id


class ConfigurationException(PrivacyGuardException):
    """Raised when configuration is invalid."""
    pass


class PatternException(PrivacyGuardException):
    """Raised when a detection pattern cannot be compiled or registered."""
    pass


class ObservabilityException(PrivacyGuardException):
    """Raised when observability operations fail."""
    pass
