"""Album construction and library merge from Apple Music payloads."""

from __future__ import annotations

import pytest

from relibrary.adapters.apple_music.schema import CatalogAlbumResponse, LibraryAlbumResponse
from relibrary.adapters.apple_music.translator import attach_library_info, build_album
from relibrary.domain.errors import (
    CatalogValidationError,
    IntegrityError,
    MalformedSourceDataError,
)
from relibrary.domain.model import Album, CatalogTrack
from tests.helpers.albums import (
    catalog_album_payload,
    catalog_track,
    library_album_payload,
    song_payload,
)


def _build(payload: dict[str, object]) -> Album[CatalogTrack]:
    return build_album(CatalogAlbumResponse.model_validate(payload))


def _catalog_album(*catalog_ids: str) -> Album[CatalogTrack]:
    return Album(
        catalog_id="1",
        name="Album",
        artist_name="Artist",
        release_date="2000-01-01",
        tracks=tuple(catalog_track(catalog_id) for catalog_id in catalog_ids),
    )


def test_build_album_single_track() -> None:
    album = _build(catalog_album_payload("1", [song_payload("1", name="Song 1")]))

    assert album == Album(
        catalog_id="1",
        name="Album",
        artist_name="Artist",
        release_date="2000-01-01",
        tracks=(
            CatalogTrack(
                catalog_id="1",
                name="Song 1",
                artist_name="Artist",
                is_explicit=False,
                isrc="ISRC1",
                release_date="2000-01-01",
            ),
        ),
    )


def test_build_album_sorts_tracks() -> None:
    album = _build(
        catalog_album_payload(
            "1",
            [song_payload("2", track_number=2), song_payload("1", track_number=1)],
        )
    )

    assert [track.catalog_id for track in album.tracks] == ["1", "2"]


def test_build_album_sorts_across_discs() -> None:
    album = _build(
        catalog_album_payload(
            "1",
            [
                song_payload("3", disc_number=2, track_number=1),
                song_payload("2", disc_number=1, track_number=2),
                song_payload("1", disc_number=1, track_number=1),
            ],
        )
    )

    assert [track.catalog_id for track in album.tracks] == ["1", "2", "3"]


def test_build_album_marks_explicit_tracks() -> None:
    album = _build(
        catalog_album_payload(
            "1",
            [
                song_payload("1", track_number=1, content_rating="explicit"),
                song_payload("2", track_number=2, content_rating="clean"),
                song_payload("3", track_number=3),
            ],
        )
    )

    assert [track.is_explicit for track in album.tracks] == [True, False, False]


def test_build_album_rejects_track_count_mismatch() -> None:
    payload = catalog_album_payload("1", [song_payload("1")], track_count=2)

    with pytest.raises(CatalogValidationError, match="declares 2 tracks"):
        _build(payload)


def test_build_album_rejects_duplicate_track_number() -> None:
    payload = catalog_album_payload(
        "1",
        [song_payload("1", track_number=1), song_payload("2", track_number=1)],
    )

    with pytest.raises(CatalogValidationError, match="expected track number 2"):
        _build(payload)


def test_build_album_rejects_missing_track_number() -> None:
    payload = catalog_album_payload(
        "1",
        [song_payload("1", track_number=1), song_payload("3", track_number=3)],
    )

    with pytest.raises(CatalogValidationError, match="expected track number 2, got 3"):
        _build(payload)


def test_build_album_accepts_254_tracks_on_one_disc() -> None:
    songs = [song_payload(str(1000 + n), track_number=n) for n in range(1, 255)]

    album = _build(catalog_album_payload("1", songs))

    assert len(album.tracks) == 254
    assert album.tracks[-1].catalog_id == "1254"


def test_build_album_rejects_track_number_counter_overflow() -> None:
    songs = [song_payload(str(1000 + n), track_number=n) for n in range(1, 256)]

    with pytest.raises(
        CatalogValidationError, match="overflows the track number range at track 1255"
    ):
        _build(catalog_album_payload("1", songs))


def test_build_album_resets_track_number_counter_per_disc() -> None:
    songs = [
        *(song_payload(str(1000 + n), disc_number=1, track_number=n) for n in range(1, 255)),
        song_payload("2001", disc_number=2, track_number=1),
    ]

    album = _build(catalog_album_payload("1", songs))

    assert album.tracks[-1].catalog_id == "2001"


def test_build_album_rejects_missing_track_number_on_second_disc() -> None:
    payload = catalog_album_payload(
        "1",
        [
            song_payload("1", disc_number=1, track_number=1),
            song_payload("2", disc_number=2, track_number=2),
        ],
    )

    with pytest.raises(CatalogValidationError, match="disc 2: expected track number 1"):
        _build(payload)


def test_build_album_rejects_duplicate_catalog_id() -> None:
    payload = catalog_album_payload(
        "1",
        [song_payload("1", track_number=1), song_payload("1", track_number=2)],
    )

    with pytest.raises(CatalogValidationError, match="lists track 1 twice"):
        _build(payload)


def test_build_album_rejects_duplicate_catalog_id_across_discs() -> None:
    payload = catalog_album_payload(
        "1",
        [
            song_payload("1", disc_number=1, track_number=1),
            song_payload("1", disc_number=2, track_number=1),
        ],
    )

    with pytest.raises(CatalogValidationError, match="lists track 1 twice"):
        _build(payload)


def test_build_album_rejects_multiple_albums() -> None:
    single = catalog_album_payload("1", [song_payload("1")])
    albums = single["data"]
    assert isinstance(albums, list)

    with pytest.raises(CatalogValidationError, match="exactly one catalog album, got 2"):
        _build({"data": [*albums, *albums]})


def test_build_album_rejects_empty_album() -> None:
    with pytest.raises(CatalogValidationError, match="has no tracks"):
        _build(catalog_album_payload("1", []))


def test_catalog_validation_error_is_malformed_source_data() -> None:
    assert issubclass(CatalogValidationError, MalformedSourceDataError)


def test_attach_library_info_single_track() -> None:
    album = _catalog_album("1")
    response = LibraryAlbumResponse.model_validate(
        library_album_payload("l.1", catalog_ids=["1"], songs=[("i.1", "1")])
    )

    annotated = attach_library_info(album, response)

    assert annotated.catalog_id == "1"
    assert [track.library_id for track in annotated.tracks] == ["i.1"]


def test_attach_library_info_keeps_album_order() -> None:
    album = _catalog_album("1", "2", "3")
    response = LibraryAlbumResponse.model_validate(
        library_album_payload("l.1", catalog_ids=["1"], songs=[("i.3", "3"), ("i.1", "1")])
    )

    annotated = attach_library_info(album, response)

    assert [track.catalog_id for track in annotated.tracks] == ["1", "2", "3"]
    assert [track.library_id for track in annotated.tracks] == ["i.1", None, "i.3"]
    assert [track.in_library for track in annotated.tracks] == [True, False, True]


def test_attach_library_info_rejects_duplicate_tracks() -> None:
    response = LibraryAlbumResponse.model_validate(
        library_album_payload("l.1", catalog_ids=["1"], songs=[("i.1", "1"), ("i.2", "1")])
    )

    with pytest.raises(MalformedSourceDataError, match="appears twice"):
        attach_library_info(_catalog_album("1", "2"), response)


def test_attach_library_info_rejects_other_catalog_album() -> None:
    response = LibraryAlbumResponse.model_validate(
        library_album_payload("l.1", catalog_ids=["2"], songs=[("i.1", "1")])
    )

    with pytest.raises(IntegrityError, match="links catalog albums"):
        attach_library_info(_catalog_album("1"), response)


def test_attach_library_info_rejects_missing_catalog_link() -> None:
    response = LibraryAlbumResponse.model_validate(
        library_album_payload("l.1", catalog_ids=[], songs=[("i.1", "1")])
    )

    with pytest.raises(IntegrityError):
        attach_library_info(_catalog_album("1"), response)


def test_attach_library_info_rejects_unknown_track() -> None:
    response = LibraryAlbumResponse.model_validate(
        library_album_payload("l.1", catalog_ids=["1"], songs=[("i.9", "9")])
    )

    with pytest.raises(IntegrityError, match="catalog track 9"):
        attach_library_info(_catalog_album("1"), response)


def test_attach_library_info_rejects_album_without_library_tracks() -> None:
    response = LibraryAlbumResponse.model_validate(
        library_album_payload("l.1", catalog_ids=["1"], songs=[])
    )

    with pytest.raises(MalformedSourceDataError, match="has no tracks"):
        attach_library_info(_catalog_album("1"), response)


def test_attach_library_info_rejects_multiple_library_albums() -> None:
    with pytest.raises(MalformedSourceDataError, match="exactly one library album, got 0"):
        attach_library_info(_catalog_album("1"), LibraryAlbumResponse(data=[]))
