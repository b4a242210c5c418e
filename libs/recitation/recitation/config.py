"""Configuration management using pydantic-settings."""

from pathlib import Path
from typing import Any

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from recitation.alignment.aligner import AlignerConfig
from recitation.alignment.normalizer import validate_scripts
from recitation.exceptions import ConfigurationError

_ENV_FILES = (".env", "../.env", "../../.env")

_REPO_ROOT = Path(__file__).resolve().parents[3]


def _resolve_repo_path(value: str) -> str:
    raw = str(value or "").strip()
    if not raw:
        return raw
    p = Path(raw)
    if p.is_absolute():
        return str(p)
    return str((_REPO_ROOT / p).resolve())


def _split_csv(value: str) -> list[str]:
    return [part.strip() for part in str(value or "").split(",") if part.strip()]


class AlignmentConfig(BaseSettings):
    """Aligner tuning (lookahead, fuzz tolerance, warning thresholds)."""

    model_config = SettingsConfigDict(
        env_prefix="ALIGN_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    lookahead_window: int = Field(default=3, ge=0)
    fuzzy_min_length: int = Field(
        default=4, ge=1, description="Words shorter than this (in letters) match exactly only."
    )
    consecutive_error_threshold: int = Field(default=3, ge=1)
    omission_ratio: float = Field(default=0.8, ge=0, le=1)
    filler_words: str = "uh,um,ah,er,hmm"
    scripts: str = "gurmukhi"

    @model_validator(mode="after")
    def _validate_scripts(self) -> "AlignmentConfig":
        try:
            validate_scripts(_split_csv(self.scripts))
        except ValueError as exc:
            raise ConfigurationError(f"ALIGN_SCRIPTS: {exc}") from exc
        return self

    def to_aligner_config(self) -> AlignerConfig:
        return AlignerConfig(
            lookahead_window=int(self.lookahead_window),
            fuzzy_min_length=int(self.fuzzy_min_length),
            consecutive_error_threshold=int(self.consecutive_error_threshold),
            omission_ratio=float(self.omission_ratio),
            filler_words=frozenset(w.lower() for w in _split_csv(self.filler_words)),
            scripts=validate_scripts(_split_csv(self.scripts)),
        )


class ComparisonConfig(BaseSettings):
    """Comparison provider configuration (local aligner or remote service)."""

    model_config = SettingsConfigDict(
        env_prefix="COMPARISON_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    provider: str = "local"  # "local" | "remote"
    base_url: str = "http://localhost:8000"
    timeout: float = Field(default=10.0, gt=0)
    max_attempts: int = Field(default=3, ge=1)


class ReferenceConfig(BaseSettings):
    """Reference text source."""

    model_config = SettingsConfigDict(
        env_prefix="REFERENCE_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    text_path: str | None = None

    @model_validator(mode="after")
    def _resolve_paths(self) -> "ReferenceConfig":
        if self.text_path:
            self.text_path = _resolve_repo_path(self.text_path)
        return self


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
    console: bool = True
    file: str | None = None
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=0)
    backup_count: int = Field(default=5, ge=0)


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILES, env_file_encoding="utf-8", extra="ignore"
    )

    log_dir: str = "./logs"

    # Reference text
    reference: ReferenceConfig = ReferenceConfig()

    # Aligner
    alignment: AlignmentConfig = AlignmentConfig()

    # Comparison provider
    comparison: ComparisonConfig = ComparisonConfig()

    # Logging
    logging: LoggingSettings = LoggingSettings()

    @model_validator(mode="after")
    def _resolve_paths(self) -> "Settings":
        # Running apps with `uv run --directory apps/*` changes CWD; keep paths stable.
        self.log_dir = _resolve_repo_path(self.log_dir)
        return self

    @property
    def aligner_config(self) -> AlignerConfig:
        return self.alignment.to_aligner_config()

    def comparison_config(self) -> dict[str, Any]:
        """Return a comparison config dict for the provider registry."""
        cfg = self.comparison.model_dump()
        provider = str(cfg.get("provider") or "").strip().lower()
        if provider not in {"local", "remote"}:
            raise ConfigurationError(
                f"Unknown comparison provider: {provider!r} (expected: local/remote)"
            )
        cfg["provider"] = provider
        cfg["aligner_config"] = self.aligner_config
        return cfg
