"""Public domain model surface."""

from __future__ import annotations

from relibrary.domain.model.music import Album, CatalogTrack, LibraryTrack
from relibrary.domain.model.primitives import CatalogId, Isrc, LibraryId, ReleaseDate

__all__ = [
    "Album",
    "CatalogId",
    "CatalogTrack",
    "Isrc",
    "LibraryId",
    "LibraryTrack",
    "ReleaseDate",
]
