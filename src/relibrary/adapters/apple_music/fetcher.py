"""Apple Music implementation of the album library port."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from relibrary.domain.errors import IntegrityError

from .client import AppleMusicClient
from .translator import attach_library_info, build_album

if TYPE_CHECKING:
    from collections.abc import Sequence

    from relibrary.config.apple_music import AppleMusicConfig
    from relibrary.domain.model import Album, CatalogTrack, LibraryTrack

log = getLogger(__name__)


class AppleMusicLibrary:
    """Fetch albums as domain entities and apply library changes."""

    def __init__(
        self,
        *,
        config: AppleMusicConfig,
        client: AppleMusicClient | None = None,
    ) -> None:
        self._client = client or AppleMusicClient(config=config)

    def fetch_library_album(self, library_id: str) -> Album[LibraryTrack]:
        library_response = self._client.get_library_album(library_id)
        returned_id = library_response.library_id()
        if returned_id != library_id:
            raise IntegrityError(f"requested library album {library_id}, got {returned_id}")

        catalog_album = self.fetch_catalog_album(library_response.catalog_id())
        album = attach_library_info(catalog_album, library_response)
        log.debug(
            "Loaded library album %s as catalog album %s (%d tracks)",
            library_id,
            album.catalog_id,
            len(album.tracks),
        )
        return album

    def fetch_catalog_album(self, catalog_id: str) -> Album[CatalogTrack]:
        return build_album(self._client.get_catalog_album(catalog_id))

    def add_songs_to_library(self, catalog_ids: Sequence[str]) -> None:
        log.info("Adding %d songs to the library", len(catalog_ids))
        self._client.add_songs_to_library(catalog_ids)

    def remove_album_from_library(self, library_id: str) -> None:
        log.info("Removing album %s from the library", library_id)
        self._client.remove_album_from_library(library_id)
