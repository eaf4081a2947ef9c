from __future__ import annotations

import pytest

_APPLE_MUSIC_ENV_VARS = (
    "APPLE_MUSIC_DEVELOPER_TOKEN",
    "APPLE_MUSIC_USER_TOKEN",
    "APPLE_MUSIC_STOREFRONT",
    "APPLE_MUSIC_ORIGIN",
    "RELIBRARY_HTTP_CACHE",
)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tokens from the developer's shell out of every test."""

    for name in _APPLE_MUSIC_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
