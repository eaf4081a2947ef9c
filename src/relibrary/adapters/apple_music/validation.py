"""Shape checks for Apple Music identifiers and tokens.

These only catch obvious typos (a library id pasted where a catalog id belongs,
a truncated token); the API remains the authority on what actually exists.
"""

from __future__ import annotations

LIBRARY_ALBUM_PREFIX = "l."


def _is_ascii_digits(value: str) -> bool:
    return bool(value) and value.isascii() and value.isdigit()


def is_valid_catalog_id(catalog_id: str) -> bool:
    return _is_ascii_digits(catalog_id)


def is_valid_library_album_id(library_id: str) -> bool:
    if not library_id.startswith(LIBRARY_ALBUM_PREFIX):
        return False
    rest = library_id.removeprefix(LIBRARY_ALBUM_PREFIX)
    return bool(rest) and rest.isascii() and rest.isalnum()


def is_valid_developer_token(token: str) -> bool:
    """Check that the developer token looks like a JWT (three dot-separated parts)."""

    parts = token.split(".")
    return len(parts) == 3 and all(parts)


def is_valid_storefront(storefront: str) -> bool:
    return len(storefront) == 2 and all("a" <= char <= "z" for char in storefront)
