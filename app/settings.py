"""
Application settings and configuration.
Loads environment variables and provides typed config objects.
"""

import os
from functools import lru_cache
from dotenv import load_dotenv

load_dotenv()


def _first_env(*names: str) -> str:
    """Return the first non-empty environment variable among names."""
    for name in names:
        value = os.getenv(name, "")
        if value:
            return value
    return ""


class Settings:
    """Application settings loaded from environment variables."""

    # Gemini API (API_KEY / VITE_API_KEY are the names the browser build used)
    GEMINI_API_KEY: str = _first_env("GEMINI_API_KEY", "API_KEY", "VITE_API_KEY")

    # Models
    CHAPTER_MODEL: str = os.getenv("CHAPTER_MODEL", "gemini-3-pro-preview")
    CAPTION_MODEL: str = os.getenv("CAPTION_MODEL", "gemini-3-pro-preview")
    CAPTION_FALLBACK_MODEL: str = os.getenv("CAPTION_FALLBACK_MODEL", "gemini-2.5-flash")

    # Generation configuration
    CHAPTER_TEMPERATURE: float = 0.2
    CAPTION_TEMPERATURE: float = 0.1
    CAPTION_MAX_OUTPUT_TOKENS: int = 8192

    # Bunny.net Stream API
    BUNNY_API_BASE_URL: str = os.getenv("BUNNY_API_BASE_URL", "https://video.bunnycdn.com")
    BUNNY_TIMEOUT_SECONDS: float = float(os.getenv("BUNNY_TIMEOUT_SECONDS", "15"))

    # HTTP
    ALLOWED_ORIGINS: str = os.getenv("ALLOWED_ORIGINS", "*")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def allowed_origins(self) -> list[str]:
        """ALLOWED_ORIGINS split on commas."""
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

    def validate(self) -> list[str]:
        """Check for missing required settings. Returns list of missing keys."""
        missing = []
        if not self.GEMINI_API_KEY:
            missing.append("GEMINI_API_KEY")
        return missing


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
