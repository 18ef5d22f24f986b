"""
Remediation advice for detected findings
"""
from typing import Dict, List

from privacy_filter.types import Category, Finding, RiskLevel

SUGGESTIONS: Dict[Category, str] = {
    Category.EMAIL: "Consider using a generic contact form instead of exposing email addresses",
    Category.PHONE: "Use a business phone number or contact form instead of personal numbers",
    Category.SSN: "Never share Social Security Numbers publicly",
    Category.CREDIT_CARD: "Remove all payment card information from public posts",
    Category.BANK_ACCOUNT: "Banking details should never be shared publicly",
    Category.ROUTING_NUMBER: "Remove bank routing numbers from public posts",
    Category.CURRENCY: "Consider whether exact monetary amounts need to be shared",
    Category.ADDRESS: "Use general location references instead of specific addresses",
    Category.ZIP_CODE: "Remove postal codes that narrow down a location",
    Category.COORDINATES: "Remove GPS coordinates and location data",
    Category.IP_ADDRESS: "Remove IP addresses and technical identifiers",
    Category.API_KEY: "Never expose API keys or authentication tokens",
    Category.POSSIBLE_NAME: "Consider using first names only or role titles instead of full names",
    Category.PERSON_NAME: "Consider using first names only or role titles instead of full names",
    Category.COMPANY_NAME: "Evaluate if specific company names need to be mentioned publicly",
    Category.FINANCIAL_INFO: "Remove specific financial figures or use ranges instead",
    Category.LOCATION: "Consider using city/state instead of specific addresses",
    Category.LOCATION_CONTEXT: "Avoid revealing where offices or buildings are located",
    Category.CONFIDENTIAL_INFO: "Remove any internal or confidential project information",
}

HIGH_RISK_WARNINGS: List[str] = [
    "HIGH RISK: This content contains sensitive information that should not be posted publicly",
    "Consider rewriting the content to remove all personal identifiers",
]

MEDIUM_RISK_WARNINGS: List[str] = [
    "MEDIUM RISK: Review the content for potentially sensitive information",
    "Consider using more general terms instead of specific details",
]


def generate_suggestions(findings: List[Finding], risk_level: RiskLevel) -> List[str]:
    """
    Build advice for the categories present plus risk-level warnings

    Returns:
        Deduplicated suggestions in first-seen order
    """
    suggestions = []

    categories = dict.fromkeys(f.category for f in findings)
    for category in categories:
        advice = SUGGESTIONS.get(category)
        if advice:
            suggestions.append(advice)

    if risk_level == RiskLevel.HIGH:
        suggestions.extend(HIGH_RISK_WARNINGS)
    elif risk_level == RiskLevel.MEDIUM:
        suggestions.extend(MEDIUM_RISK_WARNINGS)

    return list(dict.fromkeys(suggestions))
