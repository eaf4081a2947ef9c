"""Translate Apple Music payloads into validated domain albums."""

from __future__ import annotations

from typing import TYPE_CHECKING

from relibrary.domain.errors import (
    CatalogValidationError,
    IntegrityError,
    MalformedSourceDataError,
)
from relibrary.domain.model import Album, CatalogTrack, LibraryTrack

from .schema import MAX_TRACK_NUMBER, ContentRating

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import CatalogAlbumResponse, CatalogSong, LibraryAlbumResponse

type NumberedTrack = tuple[int, int, CatalogTrack]


def build_album(response: CatalogAlbumResponse) -> Album[CatalogTrack]:
    """Build a canonical album from a catalog album response.

    Tracks come back sorted by (disc number, track number). The response is
    rejected unless it holds exactly one album whose declared track count
    matches the songs it carries, each disc is numbered 1..n without gaps or
    repeats, and no catalog id appears twice.
    """

    if len(response.data) != 1:
        raise CatalogValidationError(
            f"expected exactly one catalog album, got {len(response.data)}"
        )
    album = response.data[0]

    numbered = [_numbered_track(song) for song in album.relationships.tracks.data]
    if len(numbered) != album.attributes.track_count:
        raise CatalogValidationError(
            f"album {album.id} declares {album.attributes.track_count} tracks "
            f"but the response has {len(numbered)}"
        )
    if not numbered:
        raise CatalogValidationError(f"album {album.id} has no tracks")

    numbered.sort(key=lambda item: (item[0], item[1]))
    _check_contiguous_numbering(numbered, album_id=album.id)
    tracks = tuple(track for _, _, track in numbered)
    _check_unique_catalog_ids(tracks, album_id=album.id)

    return Album(
        catalog_id=album.id,
        name=album.attributes.name,
        artist_name=album.attributes.artist_name,
        release_date=album.attributes.release_date,
        tracks=tracks,
    )


def attach_library_info(
    album: Album[CatalogTrack],
    response: LibraryAlbumResponse,
) -> Album[LibraryTrack]:
    """Annotate ``album`` with the library ids found in ``response``."""

    if len(response.data) != 1:
        raise MalformedSourceDataError(
            f"expected exactly one library album, got {len(response.data)}"
        )
    library_album = response.data[0]

    linked = [ref.id for ref in library_album.relationships.catalog.data]
    if linked != [album.catalog_id]:
        raise IntegrityError(
            f"library album {library_album.id} links catalog albums {linked}, "
            f"expected [{album.catalog_id!r}]"
        )

    known_ids = {track.catalog_id for track in album.tracks}
    catalog_to_library: dict[str, str] = {}
    for library_song in library_album.relationships.tracks.data:
        catalog_id = library_song.attributes.play_params.catalog_id
        if catalog_id in catalog_to_library:
            raise MalformedSourceDataError(
                f"catalog track {catalog_id} appears twice in library album {library_album.id}"
            )
        if catalog_id not in known_ids:
            raise IntegrityError(
                f"library track {library_song.id} references catalog track {catalog_id}, "
                f"which is not on album {album.catalog_id}"
            )
        catalog_to_library[catalog_id] = library_song.id

    if not catalog_to_library:
        raise MalformedSourceDataError(f"library album {library_album.id} has no tracks")

    return Album(
        catalog_id=album.catalog_id,
        name=album.name,
        artist_name=album.artist_name,
        release_date=album.release_date,
        tracks=tuple(
            track.with_library_id(catalog_to_library.get(track.catalog_id))
            for track in album.tracks
        ),
    )


def _numbered_track(song: CatalogSong) -> NumberedTrack:
    attributes = song.attributes
    return (
        attributes.disc_number,
        attributes.track_number,
        CatalogTrack(
            catalog_id=song.id,
            name=attributes.name,
            artist_name=attributes.artist_name,
            is_explicit=attributes.content_rating is ContentRating.EXPLICIT,
            isrc=attributes.isrc,
            release_date=attributes.release_date,
        ),
    )


def _check_contiguous_numbering(numbered: Iterable[NumberedTrack], *, album_id: str) -> None:
    current_disc: int | None = None
    expected = 1
    for disc, number, track in numbered:
        if disc != current_disc:
            current_disc = disc
            expected = 1
        if number != expected:
            raise CatalogValidationError(
                f"album {album_id} disc {disc}: expected track number {expected}, "
                f"got {number} for track {track.catalog_id}"
            )
        if expected == MAX_TRACK_NUMBER:
            raise CatalogValidationError(
                f"album {album_id} disc {disc} overflows the track number range at track "
                f"{track.catalog_id}"
            )
        expected += 1


def _check_unique_catalog_ids(tracks: Iterable[CatalogTrack], *, album_id: str) -> None:
    seen: set[str] = set()
    for track in tracks:
        if track.catalog_id in seen:
            raise CatalogValidationError(f"album {album_id} lists track {track.catalog_id} twice")
        seen.add(track.catalog_id)
