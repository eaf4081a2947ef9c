"""Apple Music configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig, RetryPolicy, ShouldCacheHook

APPLE_MUSIC_TIMEOUT_SECONDS = 20.0


class AppleMusicHost(StrEnum):
    """API hosts the client knows how to talk to."""

    AMP_API = "amp-api"

    @property
    def base_url(self) -> str:
        return f"https://{self.value}.music.apple.com"


@dataclass(frozen=True)
class AppleMusicConfig:
    """Holds Apple Music API credentials and transport settings."""

    developer_token: str
    user_token: str
    storefront: str
    resilience: ResilienceConfig
    origin: str | None = None
    host: AppleMusicHost = AppleMusicHost.AMP_API


def _should_cache_payload(payload: object) -> bool:
    # Only catalog albums are stable; library payloads change as we migrate.
    if not isinstance(payload, dict):
        return False
    data = payload.get("data")
    if not isinstance(data, list) or not data:
        return False
    return all(isinstance(item, dict) and item.get("type") == "albums" for item in data)


def build_resilience_config(
    *,
    host: AppleMusicHost = AppleMusicHost.AMP_API,
    developer_token: str,
    origin: str | None = None,
    cache_backend: str = "off",
    cache_predicate: ShouldCacheHook | None = _should_cache_payload,
) -> ResilienceConfig:
    if cache_backend not in {"memory", "sqlite", "off"}:
        raise ConfigurationError(f"Unsupported HTTP cache backend: {cache_backend}")

    headers = {"Authorization": f"Bearer {developer_token}"}
    if origin is not None:
        headers["Origin"] = origin

    cache = (
        None
        if cache_backend == "off"
        else CacheConfig(
            backend="sqlite" if cache_backend == "sqlite" else "memory",
            should_cache=cache_predicate,
        )
    )
    return ResilienceConfig(
        name="apple-music",
        base_url=host.base_url,
        timeout_seconds=APPLE_MUSIC_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        retry=RetryPolicy(total=3),
        cache=cache,
        default_headers=headers,
    )


def get_apple_music_config(
    *,
    developer_token: str | None = None,
    user_token: str | None = None,
    storefront: str | None = None,
    origin: str | None = None,
    host: AppleMusicHost = AppleMusicHost.AMP_API,
) -> AppleMusicConfig:
    """Build the config from explicit values, falling back to the environment."""

    values = require_env_vars(
        (
            "APPLE_MUSIC_DEVELOPER_TOKEN",
            "APPLE_MUSIC_USER_TOKEN",
            "APPLE_MUSIC_STOREFRONT",
        ),
        overrides={
            "APPLE_MUSIC_DEVELOPER_TOKEN": developer_token,
            "APPLE_MUSIC_USER_TOKEN": user_token,
            "APPLE_MUSIC_STOREFRONT": storefront,
        },
    )
    effective_origin = optional_env_var("APPLE_MUSIC_ORIGIN", override=origin)
    cache_backend = optional_env_var("RELIBRARY_HTTP_CACHE") or "off"

    return AppleMusicConfig(
        developer_token=values["APPLE_MUSIC_DEVELOPER_TOKEN"],
        user_token=values["APPLE_MUSIC_USER_TOKEN"],
        storefront=values["APPLE_MUSIC_STOREFRONT"],
        origin=effective_origin,
        host=host,
        resilience=build_resilience_config(
            host=host,
            developer_token=values["APPLE_MUSIC_DEVELOPER_TOKEN"],
            origin=effective_origin,
            cache_backend=cache_backend,
        ),
    )
