"""Domain primitives: scalar aliases for catalog identities."""

from __future__ import annotations

type CatalogId = str
type LibraryId = str
type Isrc = str
# YYYY-MM-DD, kept verbatim from the catalog.
type ReleaseDate = str
