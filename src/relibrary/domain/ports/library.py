"""Port for reading and changing a user's Apple Music library."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from relibrary.domain.model import Album, CatalogId, CatalogTrack, LibraryId, LibraryTrack


@runtime_checkable
class AlbumLibrary(Protocol):
    """What a migration needs from the music service."""

    def fetch_library_album(self, library_id: LibraryId) -> Album[LibraryTrack]:
        """Load a library album as its catalog album annotated with library ids."""
        ...

    def fetch_catalog_album(self, catalog_id: CatalogId) -> Album[CatalogTrack]:
        ...

    def add_songs_to_library(self, catalog_ids: Sequence[CatalogId]) -> None:
        ...

    def remove_album_from_library(self, library_id: LibraryId) -> None:
        ...
