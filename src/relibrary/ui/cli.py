# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from relibrary import __version__
from relibrary.app import migrate_album, validate_album_ids, validate_config
from relibrary.config import (
    AppleMusicHost,
    ConfigurationError,
    configure_logging,
    get_apple_music_config,
)
from relibrary.domain.errors import RelibraryError
from relibrary.ui.report import render_applied, render_plan

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="relibrary",
        description="Move Apple Music library status between album editions",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log HTTP requests and matching details",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    migrate = subparsers.add_parser(
        "migrate",
        help="Migrate library status of songs from one album to another",
    )
    migrate.add_argument(
        "-D",
        "--developer-token",
        type=str,
        help="Apple Music developer token JWT (default: $APPLE_MUSIC_DEVELOPER_TOKEN)",
    )
    migrate.add_argument(
        "-O",
        "--origin",
        type=str,
        help="Origin header value (default: $APPLE_MUSIC_ORIGIN)",
    )
    migrate.add_argument(
        "-U",
        "--user-token",
        type=str,
        help="Apple Music user token (default: $APPLE_MUSIC_USER_TOKEN)",
    )
    migrate.add_argument(
        "-H",
        "--host",
        type=AppleMusicHost,
        choices=list(AppleMusicHost),
        default=AppleMusicHost.AMP_API,
        help="Apple Music API host (default: %(default)s)",
    )
    migrate.add_argument(
        "-S",
        "--storefront",
        type=str,
        help="Apple Music catalog storefront, e.g. us (default: $APPLE_MUSIC_STOREFRONT)",
    )
    migrate.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the matched tracks and do not make any changes",
    )
    migrate.add_argument(
        "source_library_id",
        help="Library ID (starts with l.) of the album whose songs are in the library",
    )
    migrate.add_argument(
        "destination_catalog_id",
        help="Catalog ID (numeric) of the album that will have songs added to the library",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        if parsed_args.verbose:
            configure_logging(level=logging.DEBUG, force=True)
        validate_album_ids(
            source_library_id=parsed_args.source_library_id,
            destination_catalog_id=parsed_args.destination_catalog_id,
        )
        config = get_apple_music_config(
            developer_token=parsed_args.developer_token,
            user_token=parsed_args.user_token,
            storefront=parsed_args.storefront,
            origin=parsed_args.origin,
            host=parsed_args.host,
        )
        validate_config(config)
    except (ValueError, ConfigurationError) as exc:
        log.error("CLI validation error: %s", exc)  # noqa: TRY400
        sys.exit(2)

    try:
        result = migrate_album(
            source_library_id=parsed_args.source_library_id,
            destination_catalog_id=parsed_args.destination_catalog_id,
            dry_run=parsed_args.dry_run,
            config=config,
        )
    except RelibraryError as exc:
        log.error("Migration aborted: %s", exc)  # noqa: TRY400
        sys.exit(1)
    except Exception:
        log.exception("Fatal error during migration")
        sys.exit(1)

    lines = render_applied(result.plan) if result.applied else render_plan(result.plan)
    for line in lines:
        print(line)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
