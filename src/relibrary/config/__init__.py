"""Application configuration helpers."""

from __future__ import annotations

from .apple_music import (
    AppleMusicConfig,
    AppleMusicHost,
    build_resilience_config,
    get_apple_music_config,
)
from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .storage import StorageConfig, get_storage_config

__all__ = [
    "AppleMusicConfig",
    "AppleMusicHost",
    "CacheConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "StorageConfig",
    "build_resilience_config",
    "configure_logging",
    "get_apple_music_config",
    "get_storage_config",
    "optional_env_var",
    "require_env_vars",
]
