"""
AI-assisted privacy detection

The oracle is an optional collaborator that reviews text and returns
category-bucketed phrases. The engine works without one.
"""
from typing import Any, Dict, List, Mapping, Optional, Protocol, Tuple, Union, runtime_checkable
import json
import logging
import re

from privacy_filter.config import PrivacyFilterConfig
from privacy_filter.exceptions import OracleError
from privacy_filter.types import Category, DetectionSource, Finding, RiskLevel

logger = logging.getLogger(__name__)

Assessment = Mapping[str, Any]

# Response field → (category, severity)
AI_BUCKETS: Dict[str, Tuple[Category, RiskLevel]] = {
    "personal_names": (Category.PERSON_NAME, RiskLevel.HIGH),
    "organization_names": (Category.COMPANY_NAME, RiskLevel.MEDIUM),
    "financial_info": (Category.FINANCIAL_INFO, RiskLevel.HIGH),
    "locations": (Category.LOCATION, RiskLevel.MEDIUM),
    "confidential_info": (Category.CONFIDENTIAL_INFO, RiskLevel.HIGH),
}

SYSTEM_PROMPT = (
    "You are a privacy expert. Analyze content for sensitive information "
    "that should not be shared publicly on social media."
)

USER_PROMPT_TEMPLATE = """Analyze the following content for privacy risks and sensitive information:

"{text}"

Identify:
1. Personal names (first/last names)
2. Company names
3. Sensitive financial information
4. Private locations or addresses
5. Confidential project names or internal references

Quote each item exactly as it appears in the content.

Return a JSON object with:
{{
  "personal_names": ["name1", "name2"],
  "organization_names": ["company1", "company2"],
  "financial_info": ["info1", "info2"],
  "locations": ["location1", "location2"],
  "confidential_info": ["info1", "info2"]
}}"""

_CODE_FENCE = re.compile(r'^\s*```(?:json)?\s*(.*?)\s*```\s*$', re.DOTALL)


@runtime_checkable
class PrivacyOracle(Protocol):
    """Anything that can assess text for privacy risks"""

    def assess(self, text: str) -> Optional[Union[Assessment, str]]:
        ...


def parse_assessment(raw: Any) -> Optional[Assessment]:
    """
    Normalize an oracle response into a mapping

    Accepts a mapping or a JSON object string, optionally fenced as a
    Markdown code block. Returns None for anything else.
    """
    if raw is None:
        return None
    if isinstance(raw, Mapping):
        return raw
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if not isinstance(raw, str):
        logger.warning(f"Unsupported oracle response type: {type(raw).__name__}")
        return None

    fenced = _CODE_FENCE.match(raw)
    if fenced:
        raw = fenced.group(1)

    try:
        parsed = json.loads(raw)
    except ValueError as e:
        logger.warning(f"Oracle response is not valid JSON: {e}")
        return None

    if not isinstance(parsed, dict):
        logger.warning("Oracle response is not a JSON object")
        return None
    return parsed


def adapt_assessment(assessment: Assessment, original_text: str) -> List[Finding]:
    """
    Translate an oracle assessment into findings

    Args:
        assessment: Mapping with optional list fields named in AI_BUCKETS
        original_text: Text that was assessed

    Returns:
        Findings with source AI. Values not present verbatim get offset -1.
    """
    findings = []

    for field_name, (category, severity) in AI_BUCKETS.items():
        values = assessment.get(field_name)
        if values is None:
            continue
        if not isinstance(values, list):
            logger.debug(f"Ignoring non-list oracle field {field_name}")
            continue

        for value in values:
            if not isinstance(value, str) or not value:
                continue
            findings.append(Finding(
                category=category,
                value=value,
                severity=severity,
                offset=original_text.find(value),
                source=DetectionSource.AI,
            ))

    return findings


class OpenAIPrivacyOracle:
    """
    Privacy oracle backed by the OpenAI chat completions API

    Requires the optional dependency: pip install privacy-filter[ai]
    """

    def __init__(
        self,
        config: Optional[PrivacyFilterConfig] = None,
        client: Any = None,
        api_key: Optional[str] = None,
    ):
        """
        Args:
            config: Supplies model, timeout, max tokens and temperature
            client: Pre-built OpenAI client (skips importing openai)
            api_key: API key used when building a client

        Raises:
            OracleError: If openai is not installed
        """
        self.config = config or PrivacyFilterConfig()
        self.client = client if client is not None else self._load_client(api_key)

    def assess(self, text: str) -> Optional[Assessment]:
        """Ask the model for an assessment; errors propagate to the caller"""
        response = self.client.chat.completions.create(
            model=self.config.ai_model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": USER_PROMPT_TEMPLATE.format(text=text)},
            ],
            max_tokens=self.config.ai_max_tokens,
            temperature=self.config.ai_temperature,
            timeout=self.config.ai_timeout,
        )
        content = response.choices[0].message.content
        return parse_assessment(content)

    def _load_client(self, api_key: Optional[str]):
        """Load OpenAI client"""
        try:
            import openai
        except ImportError as e:
            raise OracleError(
                "openai not installed. Install with: pip install privacy-filter[ai]"
            ) from e
        return openai.OpenAI(api_key=api_key)
