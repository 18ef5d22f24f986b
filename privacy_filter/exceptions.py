"""
Exception hierarchy for Privacy Filter
"""


class PrivacyFilterError(Exception):
    """Base exception for Privacy Filter errors"""
    pass


class ConfigurationError(PrivacyFilterError):
    """Raised when configuration is invalid"""
    pass


class DetectionError(PrivacyFilterError):
    """Raised when a detection layer fails"""
    pass


class RedactionError(PrivacyFilterError):
    """Raised when redaction cannot be applied"""
    pass


class OracleError(PrivacyFilterError):
    """Raised when the AI privacy oracle cannot be used"""
    pass
