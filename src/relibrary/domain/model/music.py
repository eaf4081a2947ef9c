"""Album and track value objects.

An album is generic over its track shape. Catalog tracks come straight from the
catalog; library tracks are catalog tracks with the personal-library id attached.
The two shapes share data but not behavior, so they are separate records joined
by ``CatalogTrack.with_library_id`` rather than a class hierarchy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .primitives import CatalogId, Isrc, LibraryId, ReleaseDate


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogTrack:
    catalog_id: CatalogId
    name: str
    # All of the track's artists, as one credit string
    artist_name: str
    is_explicit: bool
    isrc: Isrc
    release_date: ReleaseDate

    def with_library_id(self, library_id: LibraryId | None) -> LibraryTrack:
        return LibraryTrack(
            catalog_id=self.catalog_id,
            name=self.name,
            artist_name=self.artist_name,
            is_explicit=self.is_explicit,
            isrc=self.isrc,
            release_date=self.release_date,
            library_id=library_id,
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class LibraryTrack:
    catalog_id: CatalogId
    name: str
    artist_name: str
    is_explicit: bool
    isrc: Isrc
    release_date: ReleaseDate
    # Starts with ``i.``; None when the track is not in the library
    library_id: LibraryId | None = None

    @property
    def in_library(self) -> bool:
        return self.library_id is not None


@dataclass(frozen=True, kw_only=True)
class Album[TrackT: (CatalogTrack, LibraryTrack)]:
    catalog_id: CatalogId
    name: str
    # All of the album's artists
    artist_name: str
    release_date: ReleaseDate
    # Canonical order: (disc number, track number) ascending
    tracks: tuple[TrackT, ...]

    def position_of(self, catalog_id: CatalogId) -> int:
        """Return the 1-based canonical position of the track with ``catalog_id``."""

        for index, track in enumerate(self.tracks, start=1):
            if track.catalog_id == catalog_id:
                return index
        raise ValueError(f"track {catalog_id} not on album {self.catalog_id}")
