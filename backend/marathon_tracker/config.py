"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
"""

from pathlib import Path
from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field, field_validator, ConfigDict

# Project root: marathon-tracker/
PROJECT_ROOT = Path(__file__).parent.parent.parent
# Content directory: marathon-tracker/content/
CONTENT_DIR = PROJECT_ROOT / "content"


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # === CORS ===
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # === Upstream JSON API ===
    marathon_api_base: Optional[str] = Field(
        default=None,
        description="Base URL of the results JSON API (enables name search)"
    )
    marathon_event_id: str = Field(default="133", description="Event id for the JSON API")
    upstream_timeout_s: float = Field(default=30.0)

    # === Result pages (headless browser) ===
    result_page_url: str = Field(
        default="https://myresult.co.kr/133/{bib}",
        description="Per-bib results page, {bib} is substituted"
    )
    chromium_path: Optional[str] = Field(
        default=None,
        description="Chromium executable, falls back to `chromium` on PATH"
    )
    page_load_timeout_s: float = Field(default=30.0)
    table_wait_timeout_s: float = Field(default=10.0)

    # === Course ===
    course_file: Optional[Path] = Field(
        default=None,
        description="YAML or GPX course file, built-in Seoul course if unset"
    )

    # === Tracking ===
    poll_interval_s: float = Field(default=30.0, gt=0)

    @field_validator('marathon_api_base')
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        """Drop trailing slash, treat empty string as unset."""
        if v is None:
            return None
        v = v.strip().rstrip("/")
        return v or None

    @field_validator('result_page_url')
    @classmethod
    def require_bib_placeholder(cls, v: str) -> str:
        if "{bib}" not in v:
            raise ValueError("result_page_url must contain a {bib} placeholder")
        return v

    @field_validator('cors_origins', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from comma-separated string."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',')]
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
