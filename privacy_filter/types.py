"""
Type definitions for Privacy Filter
"""
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import List, Dict, Any, Optional


class RiskLevel(str, Enum):
    """Ordinal risk, used for finding severity and aggregate risk"""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DetectionSource(str, Enum):
    """Where a finding came from"""
    PATTERN = "pattern"
    AI = "ai"


class Category(str, Enum):
    """Finding categories"""
    # Personal information
    EMAIL = "email"
    PHONE = "phone"
    SSN = "ssn"
    CREDIT_CARD = "credit_card"

    # Financial data
    BANK_ACCOUNT = "bank_account"
    ROUTING_NUMBER = "routing_number"
    CURRENCY = "currency"

    # Location data
    ADDRESS = "address"
    ZIP_CODE = "zip_code"
    COORDINATES = "coordinates"

    # Technical identifiers
    IP_ADDRESS = "ip_address"
    API_KEY = "api_key"

    # Contextual
    POSSIBLE_NAME = "possible_name"
    COMPANY_NAME = "company_name"
    LOCATION_CONTEXT = "location_context"

    # AI-assisted only
    PERSON_NAME = "person_name"
    FINANCIAL_INFO = "financial_info"
    LOCATION = "location"
    CONFIDENTIAL_INFO = "confidential_info"


@dataclass
class Finding:
    """Detected span of concern"""
    category: Category
    value: str              # Exact matched text
    severity: RiskLevel     # Fixed per category at detection time
    offset: int             # First occurrence of value in the original text, -1 if absent
    source: DetectionSource

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category.value,
            "value": self.value,
            "severity": self.severity.value,
            "offset": self.offset,
            "source": self.source.value,
        }


@dataclass
class AnalysisResult:
    """Result of a single privacy analysis"""
    original_text: str
    filtered_text: str
    findings: List[Finding] = field(default_factory=list)
    risk_level: RiskLevel = RiskLevel.LOW
    suggestions: List[str] = field(default_factory=list)
    redaction_map: Dict[str, str] = field(default_factory=dict)  # value → placeholder
    error: Optional[str] = None

    @property
    def is_safe(self) -> bool:
        """Check if text is safe for public posting"""
        return self.risk_level == RiskLevel.LOW

    @property
    def has_findings(self) -> bool:
        return len(self.findings) > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "original_text": self.original_text,
            "filtered_text": self.filtered_text,
            "findings": [f.to_dict() for f in self.findings],
            "risk_level": self.risk_level.value,
            "suggestions": list(self.suggestions),
            "redaction_map": dict(self.redaction_map),
            "error": self.error,
        }


@dataclass
class FilterOptions:
    """Per-call options for PrivacyEngine.filter_content"""
    enable_filter: bool = True
    force_filter: bool = False

    @classmethod
    def from_dict(cls, options: Dict[str, Any]) -> "FilterOptions":
        # Unknown keys are ignored
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        return cls(**{k: v for k, v in options.items() if k in valid_keys})


@dataclass
class FilterResult:
    """Result of a gated filter call"""
    filtered_text: str
    analysis: Optional[AnalysisResult]
    enabled: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filtered_text": self.filtered_text,
            "analysis": self.analysis.to_dict() if self.analysis else None,
            "enabled": self.enabled,
        }


@dataclass
class FindingSummary:
    """Finding without its raw value"""
    category: Category
    severity: RiskLevel
    placeholder: str


@dataclass
class SuggestionReport:
    """Risk and advice only, no matched values"""
    risk_level: RiskLevel
    suggestions: List[str]
    findings: List[FindingSummary]

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["risk_level"] = self.risk_level.value
        data["findings"] = [
            {
                "category": s.category.value,
                "severity": s.severity.value,
                "placeholder": s.placeholder,
            }
            for s in self.findings
        ]
        return data
