"""Apple Music API client."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from relibrary.adapters.http_resilience import ResilientClient

from .schema import CatalogAlbumResponse, LibraryAlbumResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    import httpx

    from relibrary.config.apple_music import AppleMusicConfig
    from relibrary.config.http_resilience import ResilienceConfig

log = getLogger(__name__)

USER_TOKEN_HEADER = "Media-User-Token"


class AppleMusicAPIError(RuntimeError):
    """Raised when the Apple Music API returns an unexpected response."""


class AppleMusicClient:
    """Low-level HTTP client for the four album/library endpoints we use."""

    def __init__(
        self,
        *,
        config: AppleMusicConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resilience
        self._client_factory = client_factory or ResilientClient

    def get_catalog_album(self, catalog_id: str) -> CatalogAlbumResponse:
        path = f"/v1/catalog/{self._config.storefront}/albums/{catalog_id}"
        payload = asyncio.run(self._request_json("GET", path))
        return CatalogAlbumResponse.model_validate(payload)

    def get_library_album(self, library_id: str) -> LibraryAlbumResponse:
        path = f"/v1/me/library/albums/{library_id}"
        payload = asyncio.run(
            self._request_json("GET", path, params={"include": "catalog"}, user=True)
        )
        return LibraryAlbumResponse.model_validate(payload)

    def add_songs_to_library(self, catalog_ids: Sequence[str]) -> None:
        if not catalog_ids:
            raise ValueError("catalog_ids must not be empty")
        asyncio.run(
            self._request(
                "POST",
                "/v1/me/library",
                params={"ids[songs]": ",".join(catalog_ids)},
                user=True,
            )
        )

    def remove_album_from_library(self, library_id: str) -> None:
        asyncio.run(self._request("DELETE", f"/v1/me/library/albums/{library_id}", user=True))

    async def _request_json(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        user: bool = False,
    ) -> dict[str, object]:
        response = await self._request(method, path, params=params, user=user)
        payload = response.json()
        if not isinstance(payload, dict):
            raise AppleMusicAPIError(f"Unexpected Apple Music response payload for {path}")
        return payload

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        user: bool = False,
    ) -> httpx.Response:
        if self._resilience.base_url is None:
            raise AppleMusicAPIError("Missing Apple Music base_url in resilience configuration")
        headers = {USER_TOKEN_HEADER: self._config.user_token} if user else None

        log.debug("%s %s params=%s", method, path, params)
        async with self._client_factory(self._resilience) as client:
            response = await client.request(method, path, params=params, headers=headers)
            await response.aread()
        response.raise_for_status()
        return response
