"""Builders for albums, tracks and raw Apple Music payloads used across tests."""

from __future__ import annotations

from relibrary.domain.model import Album, CatalogTrack, LibraryTrack

type Payload = dict[str, object]


def catalog_track(
    catalog_id: str,
    *,
    name: str | None = None,
    artist_name: str = "Artist",
    isrc: str | None = None,
    is_explicit: bool = False,
    release_date: str = "2020-01-01",
) -> CatalogTrack:
    return CatalogTrack(
        catalog_id=catalog_id,
        name=name or f"Song {catalog_id}",
        artist_name=artist_name,
        is_explicit=is_explicit,
        isrc=isrc or f"ISRC{catalog_id}",
        release_date=release_date,
    )


def library_track(
    catalog_id: str,
    *,
    library_id: str | None = None,
    name: str | None = None,
    artist_name: str = "Artist",
    isrc: str | None = None,
    is_explicit: bool = False,
    release_date: str = "2020-01-01",
) -> LibraryTrack:
    return catalog_track(
        catalog_id,
        name=name,
        artist_name=artist_name,
        isrc=isrc,
        is_explicit=is_explicit,
        release_date=release_date,
    ).with_library_id(library_id)


def album[TrackT: (CatalogTrack, LibraryTrack)](
    catalog_id: str,
    tracks: list[TrackT],
    *,
    name: str = "Album 1",
    artist_name: str = "Artist",
    release_date: str = "2020-01-01",
) -> Album[TrackT]:
    return Album(
        catalog_id=catalog_id,
        name=name,
        artist_name=artist_name,
        release_date=release_date,
        tracks=tuple(tracks),
    )


def song_payload(
    catalog_id: str,
    *,
    disc_number: int = 1,
    track_number: int = 1,
    name: str | None = None,
    artist_name: str = "Artist",
    isrc: str | None = None,
    content_rating: str | None = None,
    release_date: str = "2000-01-01",
) -> Payload:
    attributes: Payload = {
        "artistName": artist_name,
        "discNumber": disc_number,
        "isrc": isrc or f"ISRC{catalog_id}",
        "name": name or f"Song {catalog_id}",
        "releaseDate": release_date,
        "trackNumber": track_number,
        "durationInMillis": 180000,
    }
    if content_rating is not None:
        attributes["contentRating"] = content_rating
    return {"id": catalog_id, "type": "songs", "attributes": attributes}


def catalog_album_payload(
    album_id: str,
    songs: list[Payload],
    *,
    track_count: int | None = None,
    name: str = "Album",
    artist_name: str = "Artist",
    release_date: str = "2000-01-01",
) -> Payload:
    return {
        "data": [
            {
                "id": album_id,
                "type": "albums",
                "attributes": {
                    "artistName": artist_name,
                    "name": name,
                    "releaseDate": release_date,
                    "trackCount": len(songs) if track_count is None else track_count,
                    "upc": "000000000000",
                },
                "relationships": {"tracks": {"data": songs}},
            }
        ]
    }


def library_album_payload(
    library_id: str,
    *,
    catalog_ids: list[str],
    songs: list[tuple[str, str]],
) -> Payload:
    """Build a library album; ``songs`` holds (library song id, catalog song id) pairs."""

    return {
        "data": [
            {
                "id": library_id,
                "type": "library-albums",
                "attributes": {"name": "Album"},
                "relationships": {
                    "catalog": {"data": [{"id": cid, "type": "albums"} for cid in catalog_ids]},
                    "tracks": {
                        "data": [
                            {
                                "id": song_id,
                                "type": "library-songs",
                                "attributes": {
                                    "name": f"Song {catalog_id}",
                                    "playParams": {
                                        "id": song_id,
                                        "kind": "song",
                                        "isLibrary": True,
                                        "catalogId": catalog_id,
                                    },
                                },
                            }
                            for song_id, catalog_id in songs
                        ]
                    },
                },
            }
        ]
    }
