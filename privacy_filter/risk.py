"""
Aggregate risk classification
"""
from typing import List

from privacy_filter.types import Finding, RiskLevel


def calculate_risk_level(findings: List[Finding]) -> RiskLevel:
    """
    Fold finding severities into one risk level

    Any HIGH finding, or more than one MEDIUM finding, is HIGH. A single
    MEDIUM finding is MEDIUM. Everything else is LOW.
    """
    high_count = sum(1 for f in findings if f.severity == RiskLevel.HIGH)
    medium_count = sum(1 for f in findings if f.severity == RiskLevel.MEDIUM)

    if high_count > 0:
        return RiskLevel.HIGH
    if medium_count > 1:
        return RiskLevel.HIGH
    if medium_count > 0:
        return RiskLevel.MEDIUM

    return RiskLevel.LOW
