"""
Pattern-based Privacy Detection
Registry patterns → contextual detectors (organizations, location phrases)
"""
from typing import Callable, List, Optional
import re
import logging

from privacy_filter.config import PrivacyFilterConfig
from privacy_filter.exceptions import DetectionError
from privacy_filter.patterns import (
    PATTERNS,
    OPTIONAL_PATTERNS,
    COMPANY_PATTERN,
    LOCATION_CONTEXT_PATTERN,
)
from privacy_filter.types import Category, DetectionSource, Finding, RiskLevel

logger = logging.getLogger(__name__)


class PatternDetector:
    """Deterministic detection over the fixed pattern registry"""

    def __init__(self, config: Optional[PrivacyFilterConfig] = None):
        """
        Initialize pattern detector

        Args:
            config: PrivacyFilterConfig; only detect_possible_names is read here
        """
        self.config = config or PrivacyFilterConfig()
        self.patterns = dict(PATTERNS)
        if self.config.detect_possible_names:
            self.patterns.update(OPTIONAL_PATTERNS)

    def detect_all(self, text: str) -> List[Finding]:
        """
        Run every pattern detector over text

        Args:
            text: Input text to scan

        Returns:
            Findings in detection order. Overlaps between categories are kept.

        Raises:
            DetectionError: If text is not a string
        """
        if not isinstance(text, str):
            raise DetectionError(f"Expected text as str, got {type(text).__name__}")

        findings = self.detect_patterns(text)
        logger.debug(f"Registry patterns detected {len(findings)} findings")

        contextual = self.detect_organizations(text) + self.detect_location_context(text)
        findings.extend(contextual)
        logger.debug(f"Contextual detectors detected {len(contextual)} findings")

        return findings

    def detect_patterns(self, text: str) -> List[Finding]:
        """Run the registry in table order"""
        findings = []
        for category, entry in self.patterns.items():
            findings.extend(
                self.detect(text, category, entry.pattern, entry.severity, entry.validator)
            )
        return findings

    def detect_organizations(self, text: str) -> List[Finding]:
        """Capitalized word followed by a business-entity suffix"""
        return self.detect(text, Category.COMPANY_NAME, COMPANY_PATTERN, RiskLevel.MEDIUM)

    def detect_location_context(self, text: str) -> List[Finding]:
        """Phrases like 'based in Springfield' or 'office near Union Square'"""
        return self.detect(
            text, Category.LOCATION_CONTEXT, LOCATION_CONTEXT_PATTERN, RiskLevel.MEDIUM
        )

    @staticmethod
    def detect(
        text: str,
        category: Category,
        pattern: re.Pattern,
        severity: RiskLevel,
        validator: Optional[Callable[[str], bool]] = None,
    ) -> List[Finding]:
        """
        Emit one finding per match of pattern

        The offset is the first literal occurrence of the matched value in
        text, not the position of the match itself. Repeated values therefore
        share one offset.
        """
        findings = []
        for match in pattern.finditer(text):
            value = match.group(0)
            if validator is not None and not validator(value):
                continue
            findings.append(Finding(
                category=category,
                value=value,
                severity=severity,
                offset=text.find(value),
                source=DetectionSource.PATTERN,
            ))
        return findings
