"""
Tests for the PrivacyEngine facade.

Covers end-to-end analysis, the gated filter call, convenience queries,
optional AI oracle merging and the fail-closed error path.
"""
import logging
from unittest.mock import MagicMock, patch

import pytest

from privacy_filter.config import PrivacyFilterConfig
from privacy_filter.engine import PrivacyEngine
from privacy_filter.exceptions import ConfigurationError, OracleError
from privacy_filter.redactor import DEFAULT_PLACEHOLDER, PLACEHOLDERS
from privacy_filter.suggestions import HIGH_RISK_WARNINGS, SUGGESTIONS
from privacy_filter.types import (
    Category,
    DetectionSource,
    FilterOptions,
    RiskLevel,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

class FakeOracle:
    """Oracle returning a fixed response and recording calls"""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def assess(self, text):
        self.calls.append(text)
        if self.error is not None:
            raise self.error
        return self.response


def of_category(findings, category):
    return [f for f in findings if f.category == category]


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------

class TestAnalyze:

    def setup_method(self):
        self.engine = PrivacyEngine()

    def test_single_email(self):
        result = self.engine.analyze("Contact me at john.doe@example.com for more info")
        assert len(result.findings) == 1
        assert result.findings[0].category == Category.EMAIL
        assert result.findings[0].value == "john.doe@example.com"
        assert result.findings[0].severity == RiskLevel.HIGH
        assert result.filtered_text == "Contact me at [EMAIL_REDACTED] for more info"
        assert result.original_text == "Contact me at john.doe@example.com for more info"
        assert result.error is None

    def test_ssn_is_high_risk(self):
        result = self.engine.analyze("My SSN is 123-45-6789")
        assert len(of_category(result.findings, Category.SSN)) == 1
        assert result.risk_level == RiskLevel.HIGH
        assert result.filtered_text == "My SSN is [SSN_REDACTED]"

    def test_two_emails_redacted_independently(self):
        result = self.engine.analyze("Email john@test.com and mary@test.com")
        assert result.filtered_text == "Email [EMAIL_REDACTED] and [EMAIL_REDACTED]"
        assert len(result.findings) == 2

    def test_email_and_phone(self):
        result = self.engine.analyze("Email me at test@example.com or call (555) 123-4567")
        assert result.filtered_text == "Email me at [EMAIL_REDACTED] or call [PHONE_REDACTED]"
        assert len(result.redaction_map) == 2

    def test_company_names_filtered(self):
        result = self.engine.analyze("Working at Google Inc and Apple Corp")
        assert result.filtered_text == "Working at [COMPANY_REDACTED] and [COMPANY_REDACTED]"
        assert len(of_category(result.findings, Category.COMPANY_NAME)) == 2

    def test_single_medium_finding_is_medium(self):
        result = self.engine.analyze("I work at 123 Main Street in Springfield")
        assert result.risk_level == RiskLevel.MEDIUM
        assert result.filtered_text == "I work at [ADDRESS_REDACTED]"

    def test_two_medium_findings_are_high(self):
        result = self.engine.analyze("Office at 123 Main St, zip 12345, in Springfield near downtown")
        assert [f.category for f in result.findings] == [Category.ADDRESS, Category.ZIP_CODE]
        assert result.risk_level == RiskLevel.HIGH

    def test_mixed_pii_is_high(self):
        result = self.engine.analyze("My email is test@example.com and SSN is 123-45-6789")
        assert result.risk_level == RiskLevel.HIGH

    def test_suggestions(self):
        result = self.engine.analyze("Contact me at test@example.com")
        assert SUGGESTIONS[Category.EMAIL] in result.suggestions
        assert HIGH_RISK_WARNINGS[0] in result.suggestions

    def test_duplicate_suggestions_removed(self):
        result = self.engine.analyze("Email test1@example.com and test2@example.com")
        assert len([s for s in result.suggestions if "email" in s]) == 1

    @pytest.mark.parametrize("text", [
        "",
        "   \n\t   ",
        "Just posted about my latest project on GitHub",
    ])
    def test_clean_text(self, text):
        result = self.engine.analyze(text)
        assert result.findings == []
        assert result.risk_level == RiskLevel.LOW
        assert result.filtered_text == text
        assert result.suggestions == []
        assert result.is_safe

    def test_very_long_content(self):
        result = self.engine.analyze("A" * 10000 + " test@example.com")
        emails = of_category(result.findings, Category.EMAIL)
        assert len(emails) == 1
        assert result.filtered_text.endswith(" [EMAIL_REDACTED]")

    def test_redaction_does_not_rematch_placeholders(self):
        first = self.engine.analyze("Email a@b.com, call (555) 123-4567, SSN 123-45-6789")
        assert {f.category for f in first.findings} == {Category.EMAIL, Category.PHONE, Category.SSN}

        second = self.engine.analyze(first.filtered_text)
        assert second.findings == []
        assert second.filtered_text == first.filtered_text

    @pytest.mark.parametrize("placeholder", sorted(set(PLACEHOLDERS.values()) | {DEFAULT_PLACEHOLDER}))
    def test_placeholders_are_not_detected(self, placeholder):
        result = self.engine.analyze(f"see {placeholder} here")
        assert result.findings == []
        assert result.risk_level == RiskLevel.LOW

    def test_all_caps_location_is_not_safe(self):
        result = self.engine.analyze("Our team is based in NY")
        assert [f.category for f in result.findings] == [Category.LOCATION_CONTEXT]
        assert result.risk_level == RiskLevel.MEDIUM
        assert result.filtered_text == "Our team is [LOCATION_CONTEXT_REDACTED]"
        assert not result.is_safe

    def test_long_local_part_email_is_fully_redacted(self):
        result = self.engine.analyze("mail " + "a" * 65 + "@example.com")
        assert Category.EMAIL in {f.category for f in result.findings}
        assert "example.com" not in result.filtered_text

    def test_repeated_literal_keeps_legacy_rewrite(self):
        result = self.engine.analyze("ping a@b.io or a@b.io")
        assert result.filtered_text == "ping [EMAIL_REDACTED]_REDACTED] or a@b.io"

    def test_to_dict_is_json_ready(self):
        data = self.engine.analyze("My SSN is 123-45-6789").to_dict()
        assert data["risk_level"] == "high"
        assert data["findings"][0]["category"] == "ssn"
        assert data["findings"][0]["source"] == "pattern"


# ---------------------------------------------------------------------------
# Fail-closed behaviour
# ---------------------------------------------------------------------------

class TestFailClosed:

    def setup_method(self):
        self.engine = PrivacyEngine()

    def test_internal_failure_reports_high_risk(self):
        with patch.object(self.engine.detector, "detect_all", side_effect=RuntimeError("boom")):
            result = self.engine.analyze("hello")
        assert result.risk_level == RiskLevel.HIGH
        assert "Privacy analysis failed" in result.error
        assert result.filtered_text == "hello"

    def test_internal_failure_is_not_safe(self):
        with patch.object(self.engine.detector, "detect_all", side_effect=RuntimeError("boom")):
            assert self.engine.is_safe("hello") is False

    def test_non_string_input_degrades(self):
        result = self.engine.analyze(None)
        assert result.risk_level == RiskLevel.HIGH
        assert result.error is not None


# ---------------------------------------------------------------------------
# AI oracle
# ---------------------------------------------------------------------------

class TestOracleMerging:

    TEXT = "Jane Doe shared the Project Falcon roadmap today"

    def test_ai_findings_are_merged_and_redacted(self):
        oracle = FakeOracle({
            "personal_names": ["Jane Doe"],
            "confidential_info": ["Project Falcon roadmap"],
        })
        result = PrivacyEngine(oracle=oracle).analyze(self.TEXT)

        assert oracle.calls == [self.TEXT]
        assert [f.category for f in result.findings] == [
            Category.PERSON_NAME, Category.CONFIDENTIAL_INFO,
        ]
        assert all(f.source == DetectionSource.AI for f in result.findings)
        assert result.filtered_text == "[NAME_REDACTED] shared the [CONFIDENTIAL_REDACTED] today"
        assert result.risk_level == RiskLevel.HIGH

    def test_ai_findings_follow_pattern_findings(self):
        oracle = FakeOracle({"personal_names": ["Jane"]})
        result = PrivacyEngine(oracle=oracle).analyze("Jane: a@b.com")
        assert [f.source for f in result.findings] == [DetectionSource.PATTERN, DetectionSource.AI]
        assert result.filtered_text == "[NAME_REDACTED]: [EMAIL_REDACTED]"

    def test_json_string_response(self):
        oracle = FakeOracle('{"locations": ["Austin"]}')
        result = PrivacyEngine(oracle=oracle).analyze("Meet me in Austin")
        assert result.filtered_text == "Meet me in [LOCATION_REDACTED]"
        assert result.risk_level == RiskLevel.MEDIUM

    def test_paraphrased_value_counts_but_is_not_redacted(self):
        oracle = FakeOracle({"locations": ["downtown Chicago office"]})
        result = PrivacyEngine(oracle=oracle).analyze("Meet me downtown")
        assert result.findings[0].offset == -1
        assert result.filtered_text == "Meet me downtown"
        assert result.redaction_map == {}
        assert result.risk_level == RiskLevel.MEDIUM
        assert SUGGESTIONS[Category.LOCATION] in result.suggestions

    @pytest.mark.parametrize("oracle", [
        FakeOracle(error=TimeoutError("timed out")),
        FakeOracle(error=ConnectionError("network down")),
        FakeOracle("this is not json"),
        FakeOracle(None),
        FakeOracle(["a", "list"]),
    ])
    def test_oracle_failures_fall_back_to_patterns(self, oracle):
        result = PrivacyEngine(oracle=oracle).analyze("My SSN is 123-45-6789")
        assert result.error is None
        assert [f.category for f in result.findings] == [Category.SSN]
        assert result.filtered_text == "My SSN is [SSN_REDACTED]"

    def test_oracle_called_once_per_analysis(self):
        oracle = FakeOracle(error=TimeoutError("timed out"))
        PrivacyEngine(oracle=oracle).analyze("hello")
        assert len(oracle.calls) == 1

    def test_oracle_skipped_when_ai_disabled(self):
        oracle = MagicMock()
        engine = PrivacyEngine(config=PrivacyFilterConfig(enable_ai=False), oracle=oracle)
        engine.analyze("Jane Doe")
        oracle.assess.assert_not_called()


# ---------------------------------------------------------------------------
# Gated filtering
# ---------------------------------------------------------------------------

class TestFilterContent:

    TEXT = "My email is test@example.com"

    def test_disabled_by_caller(self):
        engine = PrivacyEngine(enabled=True)
        result = engine.filter_content(self.TEXT, FilterOptions(enable_filter=False))
        assert result.filtered_text == self.TEXT
        assert result.analysis is None
        assert result.enabled is False

    def test_disabled_by_default_config(self):
        result = PrivacyEngine().filter_content(self.TEXT)
        assert result.filtered_text == self.TEXT
        assert result.analysis is None
        assert result.enabled is False

    def test_enabled_by_config(self):
        result = PrivacyEngine(enabled=True).filter_content(self.TEXT)
        assert result.filtered_text == "My email is [EMAIL_REDACTED]"
        assert result.enabled is True
        assert result.analysis is not None
        assert result.analysis.risk_level == RiskLevel.HIGH

    def test_forced_by_caller(self):
        result = PrivacyEngine().filter_content(self.TEXT, FilterOptions(force_filter=True))
        assert result.filtered_text == "My email is [EMAIL_REDACTED]"
        assert result.enabled is True

    def test_caller_disable_beats_force(self):
        options = FilterOptions(enable_filter=False, force_filter=True)
        result = PrivacyEngine(enabled=True).filter_content(self.TEXT, options)
        assert result.enabled is False
        assert result.filtered_text == self.TEXT

    def test_both_settings_in_one_process(self):
        on = PrivacyEngine(enabled=True)
        off = PrivacyEngine(enabled=False)
        assert on.filter_content(self.TEXT).enabled is True
        assert off.filter_content(self.TEXT).enabled is False

    def test_mapping_options_disable(self):
        result = PrivacyEngine(enabled=True).filter_content(self.TEXT, {"enable_filter": False})
        assert result.enabled is False
        assert result.filtered_text == self.TEXT

    def test_mapping_options_force(self):
        result = PrivacyEngine().filter_content(self.TEXT, {"force_filter": True, "mode": "x"})
        assert result.enabled is True
        assert result.filtered_text == "My email is [EMAIL_REDACTED]"


# ---------------------------------------------------------------------------
# Convenience queries
# ---------------------------------------------------------------------------

class TestConvenience:

    def setup_method(self):
        self.engine = PrivacyEngine()

    def test_is_safe(self):
        assert self.engine.is_safe("This is a safe post about technology") is True
        assert self.engine.is_safe("My email is test@example.com") is False

    @pytest.mark.parametrize("text", [
        "",
        "hello world",
        "I work at 123 Main Street in Springfield",
        "Server IP is 192.168.1.100",
        "My SSN is 123-45-6789",
    ])
    def test_is_safe_matches_risk_level(self, text):
        assert self.engine.is_safe(text) == (self.engine.analyze(text).risk_level == RiskLevel.LOW)

    def test_suggestions_only(self):
        report = self.engine.suggestions_only(
            "My email is test@example.com and phone is (555) 123-4567"
        )
        assert report.risk_level == RiskLevel.HIGH
        assert len(report.findings) == 2
        assert report.findings[0].category == Category.EMAIL
        assert report.findings[0].placeholder == "[EMAIL_REDACTED]"
        assert report.findings[1].placeholder == "[PHONE_REDACTED]"
        assert SUGGESTIONS[Category.EMAIL] in report.suggestions

    def test_suggestions_only_hides_raw_values(self):
        data = self.engine.suggestions_only("My email is test@example.com").to_dict()
        assert "test@example.com" not in repr(data)
        assert data["findings"] == [
            {"category": "email", "severity": "high", "placeholder": "[EMAIL_REDACTED]"},
        ]

    def test_analyze_batch(self):
        results = self.engine.analyze_batch(["hello", "My SSN is 123-45-6789"])
        assert [r.risk_level for r in results] == [RiskLevel.LOW, RiskLevel.HIGH]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:

    def test_invalid_kwargs_raise_configuration_error(self):
        with pytest.raises(ConfigurationError):
            PrivacyEngine(ai_timeout=0)

    def test_kwargs_build_config(self):
        engine = PrivacyEngine(enabled=True, detect_possible_names=True)
        assert engine.config.enabled is True
        assert engine.config.detect_possible_names is True

    def test_from_env_without_api_key_is_pattern_only(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.setenv("ENABLE_PRIVACY_FILTER", "true")
        engine = PrivacyEngine.from_env()
        assert engine.oracle is None
        assert engine.config.enabled is True

    def test_from_env_builds_oracle(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        with patch("privacy_filter.engine.OpenAIPrivacyOracle") as oracle_cls:
            engine = PrivacyEngine.from_env()
        assert engine.oracle is oracle_cls.return_value
        assert oracle_cls.call_args.kwargs["api_key"] == "sk-test"

    def test_from_env_survives_oracle_failure(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        with patch("privacy_filter.engine.OpenAIPrivacyOracle", side_effect=OracleError("no openai")):
            engine = PrivacyEngine.from_env()
        assert engine.oracle is None

    def test_from_env_respects_ai_switch(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("PRIVACY_ENABLE_AI", "false")
        with patch("privacy_filter.engine.OpenAIPrivacyOracle") as oracle_cls:
            engine = PrivacyEngine.from_env()
        oracle_cls.assert_not_called()
        assert engine.oracle is None

    def test_from_env_ai_disabled_does_not_warn(self, monkeypatch, caplog):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.setenv("PRIVACY_ENABLE_AI", "false")
        with caplog.at_level(logging.INFO, logger="privacy_filter.engine"):
            PrivacyEngine.from_env()
        assert "AI oracle not available" not in caplog.text
        assert not [r for r in caplog.records if r.levelno >= logging.WARNING]

    def test_from_env_missing_key_warns(self, monkeypatch, caplog):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        monkeypatch.delenv("PRIVACY_ENABLE_AI", raising=False)
        with caplog.at_level(logging.INFO, logger="privacy_filter.engine"):
            PrivacyEngine.from_env()
        assert "AI oracle not available" in caplog.text
