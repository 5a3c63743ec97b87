from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .core.logging import setup_logging

LOG_FORMATS = ("logfmt", "plain")


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    log_format: str = "logfmt"


def load_env_config(
    *, use_dotenv: bool = True, dotenv_path: str | None = None
) -> Settings:
    """Load logging settings from environment (optional .env)."""
    if use_dotenv:
        load_dotenv(dotenv_path)
    log_level = os.getenv("HALSON_LOG_LEVEL", "").strip().upper() or "INFO"
    log_format = os.getenv("HALSON_LOG_FORMAT", "").strip().lower() or "logfmt"
    if log_format not in LOG_FORMATS:
        raise ValueError(
            f"HALSON_LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}; "
            f"got {log_format!r}"
        )
    return Settings(log_level=log_level, log_format=log_format)


def configure_logging(settings: Settings | None = None) -> Settings:
    """Apply logging settings, reading them from the environment if not given."""
    settings = settings or load_env_config()
    setup_logging(settings.log_level, settings.log_format)
    return settings


__all__ = ["Settings", "load_env_config", "configure_logging"]
