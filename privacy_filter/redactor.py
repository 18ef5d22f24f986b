"""
Privacy Redaction
Replaces each finding with a category placeholder like [EMAIL_REDACTED]
"""
from typing import Dict, List, Tuple
import logging

from privacy_filter.exceptions import RedactionError
from privacy_filter.types import Category, Finding

logger = logging.getLogger(__name__)

DEFAULT_PLACEHOLDER = "[REDACTED]"

PLACEHOLDERS: Dict[Category, str] = {
    Category.EMAIL: "[EMAIL_REDACTED]",
    Category.PHONE: "[PHONE_REDACTED]",
    Category.SSN: "[SSN_REDACTED]",
    Category.CREDIT_CARD: "[CARD_REDACTED]",
    Category.BANK_ACCOUNT: "[ACCOUNT_REDACTED]",
    Category.ROUTING_NUMBER: "[ROUTING_REDACTED]",
    Category.CURRENCY: "[AMOUNT_REDACTED]",
    Category.ADDRESS: "[ADDRESS_REDACTED]",
    Category.ZIP_CODE: "[ZIP_REDACTED]",
    Category.COORDINATES: "[COORDINATES_REDACTED]",
    Category.IP_ADDRESS: "[IP_REDACTED]",
    Category.API_KEY: "[API_KEY_REDACTED]",
    Category.POSSIBLE_NAME: "[NAME_REDACTED]",
    Category.PERSON_NAME: "[NAME_REDACTED]",
    Category.COMPANY_NAME: "[COMPANY_REDACTED]",
    Category.FINANCIAL_INFO: "[FINANCIAL_INFO_REDACTED]",
    Category.LOCATION: "[LOCATION_REDACTED]",
    Category.LOCATION_CONTEXT: "[LOCATION_CONTEXT_REDACTED]",
    Category.CONFIDENTIAL_INFO: "[CONFIDENTIAL_REDACTED]",
}


def get_placeholder(category) -> str:
    """Placeholder for a category, [REDACTED] when unknown"""
    return PLACEHOLDERS.get(category, DEFAULT_PLACEHOLDER)


class PrivacyRedactor:
    """Rewrite text right-to-left so pending offsets stay valid"""

    def redact(
        self,
        text: str,
        findings: List[Finding]
    ) -> Tuple[str, Dict[str, str]]:
        """
        Redact findings from text

        Args:
            text: Original text
            findings: Findings whose offsets index into text

        Returns:
            (filtered_text, redaction_map) where redaction_map maps each
            replaced value to its placeholder (last write wins)

        Example:
            Input:  "Email: john@test.com"
            Output: ("Email: [EMAIL_REDACTED]", {"john@test.com": "[EMAIL_REDACTED]"})

        Findings that share an offset are applied in detection order on the
        already rewritten text.

        Raises:
            RedactionError: If a finding's span lies outside text
        """
        filtered_text = text
        redaction_map = {}

        # sorted() is stable, so equal offsets keep detection order
        locatable = [f for f in findings if f.offset >= 0]
        for finding in locatable:
            if finding.offset + len(finding.value) > len(text):
                raise RedactionError(
                    f"{finding.category} finding at offset {finding.offset} "
                    f"exceeds text length {len(text)}"
                )
        skipped = len(findings) - len(locatable)
        if skipped:
            logger.debug(f"Skipping {skipped} findings not present verbatim in text")

        for finding in sorted(locatable, key=lambda f: f.offset, reverse=True):
            placeholder = get_placeholder(finding.category)

            filtered_text = (
                filtered_text[:finding.offset] +
                placeholder +
                filtered_text[finding.offset + len(finding.value):]
            )

            redaction_map[finding.value] = placeholder

        return filtered_text, redaction_map
