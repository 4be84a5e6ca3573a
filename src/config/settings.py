# src/config/settings.py — v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for all deployment-specific settings.
Environment variables use the ``ANTIPLAG_`` prefix (e.g. ``ANTIPLAG_NGRAM_SIZE``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_KNOWN_FORMATS = {"txt", "docx"}


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ANTIPLAG_",
        extra="ignore",
    )

    # === Detection ===
    ngram_size: int = 4
    min_similarity: float = 0.3
    tokenizer: Literal["whitespace", "word"] = "whitespace"

    # === Input ===
    documents_dir: Path = Path("./documents")
    scan_recursive: bool = False
    scan_formats: str = "txt,docx"

    # === Report ===
    report_file: Path | None = None
    report_format: Literal["text", "json"] = "text"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("ngram_size")
    @classmethod
    def validate_ngram_size(cls, v: int) -> int:  # noqa: N805
        """Shingles need at least one token."""
        if v < 1:
            raise ValueError("ngram_size must be >= 1")
        return v

    @field_validator("min_similarity")
    @classmethod
    def validate_min_similarity(cls, v: float) -> float:  # noqa: N805
        """Threshold is a fraction of the scored document's shingles."""
        if not 0.0 <= v <= 1.0:
            raise ValueError("min_similarity must be within [0, 1]")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Validate cross-field consistency rules."""
        errors: list[str] = []

        unknown = set(self.scan_formats_list) - _KNOWN_FORMATS
        if unknown:
            errors.append(
                f"SCAN_FORMATS contains unsupported formats: "
                f"{', '.join(sorted(unknown))}"
            )
        if not self.scan_formats_list:
            errors.append("SCAN_FORMATS must list at least one format")

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self

    # --- Helpers ---

    @property
    def scan_formats_list(self) -> list[str]:
        """Parse comma-separated scan formats."""
        return [
            f.strip().lower().lstrip(".")
            for f in self.scan_formats.split(",")
            if f.strip()
        ]


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or CLI flags).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
