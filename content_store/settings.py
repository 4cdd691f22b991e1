import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    CONTENT_DIR: str = "content/blog"
    CHECKLIST_PATH: str = "content/seo-checklist.md"

    # Comma-separated; empty means category is free text
    ALLOWED_CATEGORIES: str = ""

    # Reading time
    WORDS_PER_MINUTE: int = Field(200, gt=0)

    # Logging
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def content_path(self) -> Path:
        return Path(self.CONTENT_DIR)

    @property
    def checklist_path(self) -> Path:
        return Path(self.CHECKLIST_PATH)

    @property
    def allowed_categories(self) -> frozenset[str]:
        return frozenset(
            item.strip() for item in self.ALLOWED_CATEGORIES.split(",") if item.strip()
        )


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
