import logging
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("truthcheck")

from .constants import (
    LLM_CONFIG,
    DISPLAY_CONFIG,
)


class Settings(BaseSettings):
    """Loads all environment variables into a single, accessible object."""
    model_config = SettingsConfigDict(env_file='.env', env_file_encoding='utf-8', extra='ignore')

    GEMINI_API_KEY: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY"),
    )
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_BASE_URL: str = "https://generativelanguage.googleapis.com"

    @property
    def GEMINI_ENDPOINT(self) -> str:
        return f"{self.GEMINI_BASE_URL}/v1beta/models/{self.GEMINI_MODEL}:generateContent"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def check_api_keys_on_startup(settings: Optional[Settings] = None) -> bool:
    """Check for the Gemini credential on startup."""
    settings = settings or get_settings()
    if not settings.GEMINI_API_KEY:
        logger.warning("Missing API key: GEMINI_API_KEY. Every analysis request will fail.")
        return False
    logger.info("Gemini API key is configured (model: %s).", settings.GEMINI_MODEL)
    return True


__all__ = [
    "logger",
    "Settings",
    "get_settings",
    "check_api_keys_on_startup",
    "LLM_CONFIG",
    "DISPLAY_CONFIG",
]
