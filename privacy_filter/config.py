"""
Privacy Filter Configuration
"""
import os
from typing import Dict, Any
from dataclasses import dataclass, asdict


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class PrivacyFilterConfig:
    """Configuration for privacy analysis and filtering"""

    # Process-wide gate for filter_content (callers may still force it)
    enabled: bool = False

    # Detection layers
    enable_ai: bool = True
    detect_possible_names: bool = False

    # AI oracle settings
    ai_model: str = "gpt-3.5-turbo"
    ai_timeout: float = 10.0
    ai_max_tokens: int = 800
    ai_temperature: float = 0.1

    def __post_init__(self):
        """Validate configuration"""
        if self.ai_timeout <= 0:
            raise ValueError(f"ai_timeout must be positive, got {self.ai_timeout}")
        if self.ai_max_tokens <= 0:
            raise ValueError(f"ai_max_tokens must be positive, got {self.ai_max_tokens}")
        if not 0 <= self.ai_temperature <= 2:
            raise ValueError(
                f"ai_temperature must be between 0 and 2, got {self.ai_temperature}"
            )

    @classmethod
    def from_env(cls) -> "PrivacyFilterConfig":
        """
        Create configuration from environment variables

        Environment Variables:
            ENABLE_PRIVACY_FILTER: Enable filtering by default (default: false)
            PRIVACY_ENABLE_AI: Use the AI oracle when one is available (default: true)
            PRIVACY_DETECT_NAMES: Flag capitalized word pairs as names (default: false)
            OPENAI_MODEL: Chat model for the AI oracle (default: gpt-3.5-turbo)
            PRIVACY_AI_TIMEOUT: Oracle request timeout in seconds (default: 10)
            PRIVACY_AI_MAX_TOKENS: Oracle completion budget (default: 800)
            PRIVACY_AI_TEMPERATURE: Oracle sampling temperature (default: 0.1)
        """
        return cls(
            enabled=_env_flag("ENABLE_PRIVACY_FILTER", "false"),
            enable_ai=_env_flag("PRIVACY_ENABLE_AI", "true"),
            detect_possible_names=_env_flag("PRIVACY_DETECT_NAMES", "false"),
            ai_model=os.getenv("OPENAI_MODEL", "gpt-3.5-turbo"),
            ai_timeout=float(os.getenv("PRIVACY_AI_TIMEOUT", "10")),
            ai_max_tokens=int(os.getenv("PRIVACY_AI_MAX_TOKENS", "800")),
            ai_temperature=float(os.getenv("PRIVACY_AI_TEMPERATURE", "0.1")),
        )

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "PrivacyFilterConfig":
        """Create configuration from dictionary"""
        # Unknown keys are ignored
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_keys}
        return cls(**filtered)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Default configuration instance
DEFAULT_CONFIG = PrivacyFilterConfig()
