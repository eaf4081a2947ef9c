"""Failure taxonomy shared by album construction, library merge and matching.

Every error rejects the whole operation; nothing is applied partially and
nothing is retried, since each one describes a deterministic data-shape problem.
"""

from __future__ import annotations


class RelibraryError(Exception):
    """Base class for all domain failures."""


class MalformedSourceDataError(RelibraryError):
    """A single payload is internally inconsistent (cardinality, counts, duplicates)."""


class CatalogValidationError(MalformedSourceDataError):
    """A catalog album payload cannot be turned into a canonical album."""


class IntegrityError(RelibraryError):
    """Two payloads that should describe the same album disagree."""


class MatchError(RelibraryError):
    """Base class for track-matching failures."""


class MatchPreconditionError(MatchError):
    """The source/destination pair is not a valid input for matching."""


class AmbiguousMatchError(MatchError):
    """A source track has more than one name/artist candidate in the destination."""

    def __init__(self, message: str, *, candidates: tuple[str, ...]) -> None:
        super().__init__(message)
        self.candidates = candidates


class MatchCollisionError(MatchError):
    """A destination track would be claimed by two source tracks."""


class MigrationError(RelibraryError):
    """A migration cannot proceed with the computed plan."""
