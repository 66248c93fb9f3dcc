"""Environment-based configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

ALLOWED_CONSOLATION_MAX = (15, 45)


def resolve_consolation_max() -> int:
    """Resolve the consolation tier size.

    The board runs in one of two variants: 15 consolation numbers (default)
    or 45 for the large event.
    """

    raw = os.getenv("CONSOLATION_MAX", "").strip()
    try:
        value = int(raw) if raw else ALLOWED_CONSOLATION_MAX[0]
    except ValueError:
        return ALLOWED_CONSOLATION_MAX[0]
    if value not in ALLOWED_CONSOLATION_MAX:
        return ALLOWED_CONSOLATION_MAX[0]
    return value


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class BaseConfig:
    """Base configuration shared by all environments."""

    APP_ENV: str = os.getenv("APP_ENV", "development")
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Storage: one JSON document
    DATA_DIR: str = os.getenv("DATA_DIR", os.path.join(os.getcwd(), "data"))
    RESULTS_FILENAME: str = os.getenv("RESULTS_FILENAME", "results.json")

    # Board variant
    CONSOLATION_MAX: int = resolve_consolation_max()
    SHOW_TOASTS: bool = _env_flag("SHOW_TOASTS", True)
    TOAST_DURATION_MS: int = 4200


@dataclass(frozen=True)
class DevelopmentConfig(BaseConfig):
    """Development configuration."""

    DEBUG: bool = True


@dataclass(frozen=True)
class ProductionConfig(BaseConfig):
    """Production configuration."""

    DEBUG: bool = False


@dataclass(frozen=True)
class TestingConfig(BaseConfig):
    """Test configuration. DATA_DIR is expected to be overridden per test."""

    DEBUG: bool = False
    TESTING: bool = True
    LOG_LEVEL: str = "WARNING"


def get_config() -> type[BaseConfig]:
    """Resolve configuration class based on APP_ENV."""

    env = os.getenv("APP_ENV", "development").lower().strip()
    if env == "production":
        return ProductionConfig
    if env == "testing":
        return TestingConfig
    return DevelopmentConfig
