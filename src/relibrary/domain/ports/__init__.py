"""Domain port definitions for adapters."""

from __future__ import annotations

from .library import AlbumLibrary

__all__ = ["AlbumLibrary"]
