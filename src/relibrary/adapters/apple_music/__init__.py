"""Apple Music adapter package."""

from __future__ import annotations

from .client import AppleMusicAPIError, AppleMusicClient
from .fetcher import AppleMusicLibrary
from .schema import CatalogAlbumResponse, LibraryAlbumResponse
from .translator import attach_library_info, build_album
from .validation import (
    is_valid_catalog_id,
    is_valid_developer_token,
    is_valid_library_album_id,
    is_valid_storefront,
)

__all__ = [
    "AppleMusicAPIError",
    "AppleMusicClient",
    "AppleMusicLibrary",
    "CatalogAlbumResponse",
    "LibraryAlbumResponse",
    "attach_library_info",
    "build_album",
    "is_valid_catalog_id",
    "is_valid_developer_token",
    "is_valid_library_album_id",
    "is_valid_storefront",
]
