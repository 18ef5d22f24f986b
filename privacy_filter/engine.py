"""
Privacy Engine - Main Facade Class
One analysis call, one gated filter call, and convenience queries
"""
from typing import Any, List, Mapping, Optional, Union
import logging
import os

from privacy_filter.config import PrivacyFilterConfig
from privacy_filter.detector import PatternDetector
from privacy_filter.exceptions import ConfigurationError
from privacy_filter.oracle import (
    OpenAIPrivacyOracle,
    PrivacyOracle,
    adapt_assessment,
    parse_assessment,
)
from privacy_filter.redactor import PrivacyRedactor, get_placeholder
from privacy_filter.risk import calculate_risk_level
from privacy_filter.suggestions import generate_suggestions
from privacy_filter.types import (
    AnalysisResult,
    FilterOptions,
    FilterResult,
    Finding,
    FindingSummary,
    RiskLevel,
    SuggestionReport,
)

logger = logging.getLogger(__name__)


class PrivacyEngine:
    """
    Main facade for privacy analysis and filtering

    Example:
        >>> engine = PrivacyEngine()
        >>> result = engine.analyze("Email: john@test.com")
        >>> print(result.filtered_text)
        Email: [EMAIL_REDACTED]
        >>> print(result.risk_level.value)
        high
    """

    def __init__(
        self,
        config: Optional[PrivacyFilterConfig] = None,
        oracle: Optional[PrivacyOracle] = None,
        **kwargs
    ):
        """
        Initialize Privacy Engine

        Args:
            config: PrivacyFilterConfig instance (if provided, kwargs ignored)
            oracle: Optional AI oracle with an assess(text) method
            **kwargs: PrivacyFilterConfig fields, e.g. enabled=True

        Raises:
            ConfigurationError: If configuration is invalid

        Example:
            >>> engine = PrivacyEngine()
            >>> engine = PrivacyEngine(enabled=True)
            >>> engine = PrivacyEngine(config=PrivacyFilterConfig.from_env())
        """
        try:
            self.config = config if config is not None else PrivacyFilterConfig.from_dict(kwargs)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Failed to initialize PrivacyEngine: {e}") from e

        self.detector = PatternDetector(self.config)
        self.redactor = PrivacyRedactor()
        self.oracle = oracle

        logger.info(
            f"PrivacyEngine initialized, filter enabled={self.config.enabled}, "
            f"ai oracle={'yes' if self.oracle is not None else 'no'}"
        )

    @classmethod
    def from_env(cls, config: Optional[PrivacyFilterConfig] = None) -> "PrivacyEngine":
        """
        Build an engine from environment variables

        An OpenAI oracle is attached when OPENAI_API_KEY is set and AI is
        enabled. If it cannot be built the engine runs pattern-only.

        Args:
            config: Overrides the configuration read from the environment
        """
        config = config or PrivacyFilterConfig.from_env()
        oracle = None

        api_key = os.getenv("OPENAI_API_KEY")
        if not config.enable_ai:
            logger.info("AI oracle disabled, using pattern-based filtering only")
        elif api_key:
            try:
                oracle = OpenAIPrivacyOracle(config=config, api_key=api_key)
                logger.info("OpenAI privacy oracle initialized")
            except Exception as e:
                logger.warning(f"Privacy oracle initialization failed: {e}")
        else:
            logger.warning("AI oracle not available, using pattern-based filtering only")

        return cls(config=config, oracle=oracle)

    def analyze(self, text: str) -> AnalysisResult:
        """
        Detect, redact and classify text

        Never raises: an internal failure returns a HIGH risk result with
        error set.

        Example:
            >>> engine = PrivacyEngine()
            >>> result = engine.analyze("My SSN is 123-45-6789")
            >>> print(result.filtered_text)
            My SSN is [SSN_REDACTED]
        """
        result = AnalysisResult(original_text=text, filtered_text=text)

        try:
            # Step 1: Pattern-based detection
            findings = self.detector.detect_all(text)

            # Step 2: AI-assisted detection (if available)
            findings.extend(self._detect_ai(text))
            result.findings = findings

            # Step 3: Redaction
            result.filtered_text, result.redaction_map = self.redactor.redact(text, findings)

            # Step 4: Risk level
            result.risk_level = calculate_risk_level(findings)

            # Step 5: Suggestions
            result.suggestions = generate_suggestions(findings, result.risk_level)

        except Exception as e:
            logger.error(f"Privacy analysis failed: {e}")
            result.error = f"Privacy analysis failed: {e}"
            result.risk_level = RiskLevel.HIGH

        return result

    def filter_content(
        self,
        text: str,
        options: Optional[Union[FilterOptions, Mapping[str, Any]]] = None
    ) -> FilterResult:
        """
        Filter text when enabled by the caller and by configuration

        Filtering runs when options.enable_filter is true and either the
        configuration enables it or options.force_filter is set. options may
        also be a plain mapping such as {"enable_filter": False}.

        Example:
            >>> engine = PrivacyEngine()
            >>> engine.filter_content("a@b.com").enabled
            False
            >>> engine.filter_content("a@b.com", FilterOptions(force_filter=True)).filtered_text
            '[EMAIL_REDACTED]'
        """
        if isinstance(options, Mapping):
            options = FilterOptions.from_dict(options)
        options = options or FilterOptions()
        enabled = options.enable_filter and (self.config.enabled or options.force_filter)

        if not enabled:
            return FilterResult(filtered_text=text, analysis=None, enabled=False)

        analysis = self.analyze(text)
        return FilterResult(
            filtered_text=analysis.filtered_text,
            analysis=analysis,
            enabled=True,
        )

    def is_safe(self, text: str) -> bool:
        """
        Check if text is safe for public posting

        Example:
            >>> engine = PrivacyEngine()
            >>> engine.is_safe("Hello world")
            True
            >>> engine.is_safe("SSN: 123-45-6789")
            False
        """
        return self.analyze(text).is_safe

    def suggestions_only(self, text: str) -> SuggestionReport:
        """Risk level, advice and per-finding placeholders, without raw values"""
        analysis = self.analyze(text)
        return SuggestionReport(
            risk_level=analysis.risk_level,
            suggestions=analysis.suggestions,
            findings=[
                FindingSummary(
                    category=f.category,
                    severity=f.severity,
                    placeholder=get_placeholder(f.category),
                )
                for f in analysis.findings
            ],
        )

    def analyze_batch(self, texts: List[str]) -> List[AnalysisResult]:
        """Analyze multiple texts independently"""
        return [self.analyze(text) for text in texts]

    def _detect_ai(self, text: str) -> List[Finding]:
        """Ask the oracle once; any failure means no AI findings this call"""
        if self.oracle is None or not self.config.enable_ai:
            return []

        try:
            assessment = parse_assessment(self.oracle.assess(text))
        except Exception as e:
            logger.warning(f"AI-based privacy analysis failed: {e}")
            return []

        if assessment is None:
            logger.warning("AI-based privacy analysis returned no usable assessment")
            return []

        findings = adapt_assessment(assessment, text)
        logger.debug(f"AI oracle detected {len(findings)} findings")
        return findings
