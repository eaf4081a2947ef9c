"""Turn match verdicts into the library changes a migration performs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from relibrary.domain.errors import MigrationError
from relibrary.domain.matching import TrackMatch, TrackNoMatch

if TYPE_CHECKING:
    from collections.abc import Sequence

    from relibrary.domain.matching import TrackMatchResult
    from relibrary.domain.model import Album, CatalogId, CatalogTrack, LibraryTrack


@dataclass(frozen=True, slots=True, kw_only=True)
class MatchedEntry:
    source_position: int
    source: LibraryTrack
    destination_position: int
    destination: CatalogTrack

    @property
    def same_title(self) -> bool:
        return (
            self.source.name == self.destination.name
            and self.source.artist_name == self.destination.artist_name
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class UnmatchedEntry:
    source_position: int
    source: LibraryTrack


@dataclass(frozen=True, slots=True, kw_only=True)
class MigrationPlan:
    """Library changes for one album; only tracks already in the library count."""

    source: Album[LibraryTrack]
    destination: Album[CatalogTrack]
    matched: tuple[MatchedEntry, ...] = field(default_factory=tuple)
    unmatched: tuple[UnmatchedEntry, ...] = field(default_factory=tuple)

    @property
    def songs_to_add(self) -> tuple[CatalogId, ...]:
        return tuple(entry.destination.catalog_id for entry in self.matched)

    @property
    def is_empty(self) -> bool:
        return not self.matched and not self.unmatched

    def require_songs(self) -> tuple[CatalogId, ...]:
        songs = self.songs_to_add
        if not songs:
            raise MigrationError("no tracks to migrate")
        return songs


def plan_migration(
    source: Album[LibraryTrack],
    destination: Album[CatalogTrack],
    results: Sequence[TrackMatchResult],
) -> MigrationPlan:
    """Collect matched and unmatched library tracks, in source order."""

    matched: list[MatchedEntry] = []
    unmatched: list[UnmatchedEntry] = []
    for result in results:
        if not result.source.in_library:
            continue
        position = source.position_of(result.source.catalog_id)
        match result:
            case TrackMatch(destination=destination_track):
                matched.append(
                    MatchedEntry(
                        source_position=position,
                        source=result.source,
                        destination_position=destination.position_of(
                            destination_track.catalog_id
                        ),
                        destination=destination_track,
                    )
                )
            case TrackNoMatch():
                unmatched.append(UnmatchedEntry(source_position=position, source=result.source))

    return MigrationPlan(
        source=source,
        destination=destination,
        matched=tuple(matched),
        unmatched=tuple(unmatched),
    )
