"""
Regex patterns for privacy detection
Every quantifier is bounded or unambiguous so pathological input stays linear
"""
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from privacy_filter.types import Category, RiskLevel


@dataclass(frozen=True)
class PatternSpec:
    """A registered detector: regex, fixed severity, optional match validator"""
    pattern: re.Pattern
    severity: RiskLevel
    validator: Optional[Callable[[str], bool]] = None


def _is_alphanumeric_token(value: str) -> bool:
    # \w also matches "_", which does not belong in a bare token
    return "_" not in value


# Registry order is detection order
PATTERNS: Dict[Category, PatternSpec] = {
    # Personal information
    Category.EMAIL: PatternSpec(
        re.compile(r'\b[A-Za-z0-9._%+-]{1,256}@(?:[A-Za-z0-9-]{1,63}\.){1,8}[A-Za-z]{2,24}\b'),
        RiskLevel.HIGH,
    ),
    Category.PHONE: PatternSpec(
        re.compile(r'(?:\+?1[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}'),
        RiskLevel.HIGH,
    ),
    Category.SSN: PatternSpec(
        re.compile(r'\b\d{3}-\d{2}-\d{4}\b'),
        RiskLevel.HIGH,
    ),
    Category.CREDIT_CARD: PatternSpec(
        re.compile(r'\b\d{4}[-\s]?\d{4}[-\s]?\d{4}[-\s]?\d{4}\b'),
        RiskLevel.HIGH,
    ),

    # Financial data
    Category.BANK_ACCOUNT: PatternSpec(
        re.compile(r'\b\d{8,17}\b'),
        RiskLevel.HIGH,
    ),
    Category.ROUTING_NUMBER: PatternSpec(
        re.compile(r'\b\d{9}\b'),
        RiskLevel.HIGH,
    ),
    Category.CURRENCY: PatternSpec(
        re.compile(r'\$[\d,]+(?:\.\d{2})?'),
        RiskLevel.MEDIUM,
    ),

    # Location data
    Category.ADDRESS: PatternSpec(
        re.compile(
            r'\b\d{1,6}\s+(?:[A-Za-z0-9,]{1,40}\s+){0,6}'
            r'(?:street|st|avenue|ave|road|rd|drive|dr|lane|ln|boulevard|blvd|way|court|ct|place|pl)\b'
            r'(?:\s+[A-Za-z0-9,]{1,40}){0,8}\b',
            re.IGNORECASE,
        ),
        RiskLevel.MEDIUM,
    ),
    Category.ZIP_CODE: PatternSpec(
        re.compile(r'\b\d{5}(?:-\d{4})?\b'),
        RiskLevel.MEDIUM,
    ),
    Category.COORDINATES: PatternSpec(
        re.compile(r'\b-?\d{1,3}\.\d{1,15},\s*-?\d{1,3}\.\d{1,15}\b'),
        RiskLevel.HIGH,
    ),

    # Technical identifiers
    Category.IP_ADDRESS: PatternSpec(
        re.compile(r'\b(?:\d{1,3}\.){3}\d{1,3}\b'),
        RiskLevel.MEDIUM,
    ),
    Category.API_KEY: PatternSpec(
        re.compile(r'\b\w{20,}\b', re.ASCII),
        RiskLevel.HIGH,
        validator=_is_alphanumeric_token,
    ),
}

# Opt-in: too noisy for default scanning
OPTIONAL_PATTERNS: Dict[Category, PatternSpec] = {
    Category.POSSIBLE_NAME: PatternSpec(
        re.compile(r'\b[A-Z][a-z]{1,30} [A-Z][a-z]{1,30}\b'),
        RiskLevel.MEDIUM,
    ),
}


# Common company identifiers
COMPANY_INDICATORS: List[str] = [
    "Inc", "LLC", "Corp", "Corporation", "Company", "Co", "Ltd", "Limited",
    "Partners", "Associates", "Group", "Holdings", "Enterprises", "Solutions",
    "Technologies", "Tech", "Systems", "Services", "Consulting",
]

# Words that introduce a location phrase
LOCATION_TRIGGERS: List[str] = [
    "located", "based", "office", "headquarters", "building",
]

LOCATION_PREPOSITIONS: List[str] = ["at", "in", "near"]


def build_company_pattern(indicators: List[str] = COMPANY_INDICATORS) -> re.Pattern:
    """Capitalized word followed by a business-entity suffix"""
    suffixes = "|".join(re.escape(i) for i in indicators)
    return re.compile(rf'\b[A-Z][A-Za-z0-9&]{{0,40}}\s+(?:{suffixes})\b')


def build_location_pattern(
    triggers: List[str] = LOCATION_TRIGGERS,
    prepositions: List[str] = LOCATION_PREPOSITIONS,
) -> re.Pattern:
    """Trigger word, preposition, then one to six capitalized words (NY, San Francisco)"""
    trigger_group = "|".join(re.escape(t) for t in triggers)
    preposition_group = "|".join(re.escape(p) for p in prepositions)
    return re.compile(
        rf'\b(?i:{trigger_group})\s+(?i:{preposition_group})\s+'
        rf'[A-Z][A-Za-z]{{1,40}}(?:\s+[A-Z][A-Za-z]{{1,40}}){{0,5}}\b'
    )


COMPANY_PATTERN = build_company_pattern()
LOCATION_CONTEXT_PATTERN = build_location_pattern()
