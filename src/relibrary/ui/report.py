"""Plain-text rendering of migration plans."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from relibrary.domain.migration import MatchedEntry, MigrationPlan
    from relibrary.domain.model import Album, CatalogTrack, LibraryTrack

EXPLICIT_MARK = " [E]"
ARROW = "→"


def _album_header(label: str, album: Album[CatalogTrack] | Album[LibraryTrack]) -> str:
    return (
        f'{label}: "{album.name}" by {album.artist_name} '
        f"({album.release_date}, {len(album.tracks)} tracks)"
    )


def _matched_line(entry: MatchedEntry) -> str:
    both_explicit = entry.source.is_explicit and entry.destination.is_explicit
    src_mark = EXPLICIT_MARK if entry.source.is_explicit and not both_explicit else ""
    dst_mark = EXPLICIT_MARK if entry.destination.is_explicit and not both_explicit else ""
    src, dst = entry.source_position, entry.destination_position
    if entry.same_title:
        return f"  #{src}{src_mark} {ARROW} #{dst}{dst_mark} {entry.source.name}"
    return (
        f"  #{src} {entry.source.name}{src_mark} {ARROW} "
        f"#{dst} {entry.destination.name}{dst_mark}"
    )


def render_plan(plan: MigrationPlan) -> list[str]:
    """Describe what a migration would do, without doing it."""

    lines = [
        _album_header("Source", plan.source),
        _album_header("Destination", plan.destination),
        "",
    ]
    if plan.matched:
        lines.append("Matched tracks:")
        lines.extend(_matched_line(entry) for entry in plan.matched)
    if plan.unmatched:
        if plan.matched:
            lines.append("")
        lines.append("Unmatched tracks (in library, no match in destination):")
        for entry in plan.unmatched:
            mark = EXPLICIT_MARK if entry.source.is_explicit else ""
            lines.append(f"  #{entry.source_position} {entry.source.name}{mark}")
    if plan.is_empty:
        lines.append("No tracks in the library to migrate.")
    return lines


def render_applied(plan: MigrationPlan) -> list[str]:
    """List both albums with library status before and after the migration."""

    added = set(plan.songs_to_add)
    lines = ["Before:"]
    for position, track in enumerate(plan.source.tracks, start=1):
        suffix = " [in library]" if track.in_library else ""
        lines.append(f"  #{position} {track.name}{suffix}")
    lines.extend(["", "After:"])
    for position, track in enumerate(plan.destination.tracks, start=1):
        suffix = " [added]" if track.catalog_id in added else ""
        lines.append(f"  #{position} {track.name}{suffix}")
    return lines
