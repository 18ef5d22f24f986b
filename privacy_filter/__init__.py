"""
Privacy Filter - Content Privacy Detection and Anonymization

Scans text before it is published to social platforms, flags spans that
expose personal, financial, organizational, location or technical
information, classifies the overall risk and produces a redacted copy.

Quick Start:
    >>> from privacy_filter import PrivacyEngine
    >>>
    >>> engine = PrivacyEngine()
    >>> result = engine.analyze("Email: john@example.com")
    >>> print(result.filtered_text)
    Email: [EMAIL_REDACTED]
    >>> print(result.is_safe)
    False

Features:
    - Pattern detection for contact, financial, location and technical data
    - Contextual detection of company names and location phrases
    - Optional AI oracle (OpenAI or any object with assess(text))
    - Fail-closed analysis: internal errors report HIGH risk
    - Configurable via constructor, config object, or environment variables

For more information, see README.md
"""

__version__ = "1.0.0"

# Main facade
from privacy_filter.engine import PrivacyEngine

# Configuration
from privacy_filter.config import PrivacyFilterConfig

# Components (for advanced use)
from privacy_filter.detector import PatternDetector
from privacy_filter.redactor import PrivacyRedactor, get_placeholder
from privacy_filter.risk import calculate_risk_level
from privacy_filter.suggestions import generate_suggestions
from privacy_filter.oracle import (
    PrivacyOracle,
    OpenAIPrivacyOracle,
    adapt_assessment,
    parse_assessment,
)

# Types
from privacy_filter.types import (
    AnalysisResult,
    Category,
    DetectionSource,
    FilterOptions,
    FilterResult,
    Finding,
    FindingSummary,
    RiskLevel,
    SuggestionReport,
)

# Exceptions
from privacy_filter.exceptions import (
    PrivacyFilterError,
    ConfigurationError,
    DetectionError,
    RedactionError,
    OracleError,
)

# Public API
__all__ = [
    # Main API
    "PrivacyEngine",
    # Configuration
    "PrivacyFilterConfig",
    # Components
    "PatternDetector",
    "PrivacyRedactor",
    "get_placeholder",
    "calculate_risk_level",
    "generate_suggestions",
    "PrivacyOracle",
    "OpenAIPrivacyOracle",
    "adapt_assessment",
    "parse_assessment",
    # Types
    "AnalysisResult",
    "Category",
    "DetectionSource",
    "FilterOptions",
    "FilterResult",
    "Finding",
    "FindingSummary",
    "RiskLevel",
    "SuggestionReport",
    # Exceptions
    "PrivacyFilterError",
    "ConfigurationError",
    "DetectionError",
    "RedactionError",
    "OracleError",
]
