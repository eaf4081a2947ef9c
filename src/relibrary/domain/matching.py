"""Track matching between two editions of one album.

Each source track is matched independently, in canonical source order:

1. by ISRC, the cross-release recording identifier;
2. failing that, by exact ``(name, artist_name)``, which must be unambiguous.

Every destination track can be claimed at most once. Claims are tracked as a set
of destination indices so the destination album stays untouched and can be
re-iterated for diagnostics.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Literal

from relibrary.domain.errors import (
    AmbiguousMatchError,
    MatchCollisionError,
    MatchPreconditionError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from relibrary.domain.model import Album, CatalogTrack, Isrc, LibraryTrack


class MatchStatus(StrEnum):
    MATCH = "match"
    NO_MATCH = "no_match"


class MatchKey(StrEnum):
    """Which key paired a source track with its destination."""

    ISRC = "isrc"
    NAME_ARTIST = "name_artist"


@dataclass(frozen=True, slots=True, kw_only=True)
class TrackMatch:
    source: LibraryTrack
    destination: CatalogTrack
    key: MatchKey
    status: Literal[MatchStatus.MATCH] = MatchStatus.MATCH


@dataclass(frozen=True, slots=True, kw_only=True)
class TrackNoMatch:
    source: LibraryTrack
    status: Literal[MatchStatus.NO_MATCH] = MatchStatus.NO_MATCH


type TrackMatchResult = TrackMatch | TrackNoMatch
type NameArtistKey = tuple[str, str]


@dataclass(slots=True)
class _DestinationIndex:
    by_isrc: dict[Isrc, int]
    by_name_artist: dict[NameArtistKey, list[int]]
    claimed: set[int] = field(default_factory=set[int])

    @classmethod
    def build(cls, destination: Album[CatalogTrack]) -> _DestinationIndex:
        by_name_artist: defaultdict[NameArtistKey, list[int]] = defaultdict(list)
        for index, track in enumerate(destination.tracks):
            by_name_artist[(track.name, track.artist_name)].append(index)
        return cls(
            by_isrc={track.isrc: index for index, track in enumerate(destination.tracks)},
            by_name_artist=dict(by_name_artist),
        )

    def claim(self, index: int, *, catalog_id: str, key: MatchKey) -> None:
        if index in self.claimed:
            raise MatchCollisionError(
                f"destination track {catalog_id} matched by {key} is already claimed"
            )
        self.claimed.add(index)


def match_tracks(
    source: Album[LibraryTrack],
    destination: Album[CatalogTrack],
) -> list[TrackMatchResult]:
    """Pair every source track with at most one destination track.

    Returns one verdict per source track, in source order. Raises a
    :class:`~relibrary.domain.errors.MatchError` subclass, without any partial
    result, when the albums are not valid matching inputs or a track cannot be
    matched unambiguously.
    """

    _check_preconditions(source, destination)

    index = _DestinationIndex.build(destination)
    return [_match_track(track, destination=destination, index=index) for track in source.tracks]


def _match_track(
    track: LibraryTrack,
    *,
    destination: Album[CatalogTrack],
    index: _DestinationIndex,
) -> TrackMatchResult:
    isrc_hit = index.by_isrc.get(track.isrc)
    if isrc_hit is not None:
        return _claim(track, isrc_hit, destination=destination, index=index, key=MatchKey.ISRC)

    candidates = index.by_name_artist.get((track.name, track.artist_name), [])
    if not candidates:
        return TrackNoMatch(source=track)
    if len(candidates) > 1:
        candidate_ids = tuple(destination.tracks[i].catalog_id for i in candidates)
        raise AmbiguousMatchError(
            f"ambiguous name and artist match for source track {track.catalog_id} "
            f"({track.name!r} by {track.artist_name!r}): {', '.join(candidate_ids)}",
            candidates=candidate_ids,
        )
    return _claim(
        track,
        candidates[0],
        destination=destination,
        index=index,
        key=MatchKey.NAME_ARTIST,
    )


def _claim(
    track: LibraryTrack,
    destination_index: int,
    *,
    destination: Album[CatalogTrack],
    index: _DestinationIndex,
    key: MatchKey,
) -> TrackMatch:
    destination_track = destination.tracks[destination_index]
    index.claim(destination_index, catalog_id=destination_track.catalog_id, key=key)
    return TrackMatch(source=track, destination=destination_track, key=key)


def _check_preconditions(
    source: Album[LibraryTrack],
    destination: Album[CatalogTrack],
) -> None:
    if source.catalog_id == destination.catalog_id:
        raise MatchPreconditionError(
            f"source and destination albums have the same catalog ID: {source.catalog_id}"
        )
    if not source.tracks:
        raise MatchPreconditionError("source album has no tracks")
    if not destination.tracks:
        raise MatchPreconditionError("destination album has no tracks")

    source_ids = _require_unique(
        (track.catalog_id for track in source.tracks), label="catalog ID in source"
    )
    destination_ids = _require_unique(
        (track.catalog_id for track in destination.tracks), label="catalog ID in destination"
    )
    if not source_ids.isdisjoint(destination_ids):
        raise MatchPreconditionError(
            "source and destination albums have overlapping track catalog IDs"
        )

    _require_unique((track.isrc for track in source.tracks), label="ISRC in source")
    _require_unique((track.isrc for track in destination.tracks), label="ISRC in destination")


def _require_unique(values: Iterable[str], *, label: str) -> set[str]:
    seen: set[str] = set()
    for value in values:
        if value in seen:
            raise MatchPreconditionError(f"duplicate {label}: {value}")
        seen.add(value)
    return seen
