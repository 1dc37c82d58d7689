"""Configuration management for KnowledgeQuest."""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

STORAGE_BACKENDS = ("json", "sqlite", "memory")


def _sanitize_secret(value: str) -> str:
    """Remove BOM characters and whitespace from secrets.

    Secrets pasted into .env files or injected by hosting platforms may carry
    a BOM that breaks HTTP headers.
    """
    if not value:
        return value
    return value.lstrip("\ufeff").strip()


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Google AI API
    google_api_key: str = ""

    @field_validator("google_api_key", mode="after")
    @classmethod
    def sanitize_secrets(cls, value: str) -> str:
        """Remove BOM and whitespace from secret values."""
        return _sanitize_secret(value)

    # Model settings (fixed sampling configuration)
    llm_model: str = "gemini-3-flash-preview"
    llm_temperature: float = 0.7
    llm_top_p: float = 0.95
    llm_top_k: int = 40

    # Storage
    data_dir: Path = Path("./data")
    storage_backend: str = "json"
    storage_key: str = "kq_docs"

    @field_validator("storage_backend", mode="after")
    @classmethod
    def validate_storage_backend(cls, value: str) -> str:
        """Only known storage backends are accepted."""
        backend = value.strip().lower()
        if backend not in STORAGE_BACKENDS:
            raise ValueError(
                f"storage_backend must be one of {', '.join(STORAGE_BACKENDS)}, got '{value}'"
            )
        return backend

    # Logging
    log_level: str = "INFO"
    log_json: bool = False
    debug: bool = False

    @property
    def sqlite_path(self) -> Path:
        """SQLite database file used by the sqlite storage backend."""
        return self.data_dir / "knowledgequest.db"

    def ensure_directories(self) -> None:
        """Create all required directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)


# Global settings instance
settings = Settings()
