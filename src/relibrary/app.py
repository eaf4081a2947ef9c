"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from relibrary.adapters.apple_music import (
    AppleMusicLibrary,
    is_valid_catalog_id,
    is_valid_developer_token,
    is_valid_library_album_id,
    is_valid_storefront,
)
from relibrary.config import ConfigurationError, get_apple_music_config
from relibrary.domain.errors import IntegrityError, MatchPreconditionError
from relibrary.domain.matching import match_tracks
from relibrary.domain.migration import plan_migration

if TYPE_CHECKING:
    from relibrary.config import AppleMusicConfig
    from relibrary.domain.migration import MigrationPlan
    from relibrary.domain.ports import AlbumLibrary

log = getLogger(__name__)


@dataclass(slots=True, frozen=True)
class MigrationResult:
    """Outcome of one album migration."""

    plan: MigrationPlan
    applied: bool


def validate_config(config: AppleMusicConfig) -> None:
    if not is_valid_developer_token(config.developer_token):
        raise ConfigurationError("invalid developer token")
    if not is_valid_storefront(config.storefront):
        raise ConfigurationError(f"invalid storefront: {config.storefront}")


def validate_album_ids(*, source_library_id: str, destination_catalog_id: str) -> None:
    if not is_valid_library_album_id(source_library_id):
        raise ValueError(f"invalid source album library ID: {source_library_id}")
    if not is_valid_catalog_id(destination_catalog_id):
        raise ValueError(f"invalid destination album catalog ID: {destination_catalog_id}")


def migrate_album(
    *,
    source_library_id: str,
    destination_catalog_id: str,
    dry_run: bool = False,
    library: AlbumLibrary | None = None,
    config: AppleMusicConfig | None = None,
) -> MigrationResult:
    """Move library status from a library album to another catalog edition.

    The source album's library tracks are matched against the destination album.
    Unless ``dry_run`` is set, the source album is then removed from the library
    and the matched destination songs are added. A dry run never touches the
    library.
    """

    validate_album_ids(
        source_library_id=source_library_id,
        destination_catalog_id=destination_catalog_id,
    )
    if library is None:
        effective_config = config or get_apple_music_config()
        validate_config(effective_config)
        library = AppleMusicLibrary(config=effective_config)

    log.info(
        "Starting migration: source=%s, destination=%s, dry_run=%s",
        source_library_id,
        destination_catalog_id,
        dry_run,
    )
    source = library.fetch_library_album(source_library_id)
    destination = library.fetch_catalog_album(destination_catalog_id)
    if destination.catalog_id != destination_catalog_id:
        raise IntegrityError(
            f"requested catalog album {destination_catalog_id}, got {destination.catalog_id}"
        )
    if source.catalog_id == destination.catalog_id:
        raise MatchPreconditionError("source and destination albums are the same")

    results = match_tracks(source, destination)
    plan = plan_migration(source, destination, results)
    log.info(
        "Matched %d of %d library tracks (%d unmatched)",
        len(plan.matched),
        len(plan.matched) + len(plan.unmatched),
        len(plan.unmatched),
    )

    if dry_run:
        return MigrationResult(plan=plan, applied=False)

    songs = plan.require_songs()
    library.remove_album_from_library(source_library_id)
    library.add_songs_to_library(songs)
    log.info("Finished migration: added=%d, removed=%s", len(songs), source_library_id)
    return MigrationResult(plan=plan, applied=True)
