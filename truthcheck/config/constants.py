from dataclasses import dataclass


@dataclass(frozen=True)
class LLMConfig:
    REQUEST_TIMEOUT: float = 60.0
    CANDIDATE_COUNT: int = 1
    MIN_CONFIDENCE: int = 0
    MAX_CONFIDENCE: int = 100


@dataclass(frozen=True)
class DisplayConfig:
    """Thresholds used when colouring the confidence bar."""
    HIGH_CONFIDENCE: int = 75
    MEDIUM_CONFIDENCE: int = 40
    DEFAULT_LANGUAGE: str = "en"
    LOG_CLAIM_PREVIEW: int = 50


LLM_CONFIG = LLMConfig()
DISPLAY_CONFIG = DisplayConfig()
