"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence


def require_env_vars(
    names: Sequence[str],
    *,
    overrides: Mapping[str, str | None] | None = None,
) -> dict[str, str]:
    """Return the given environment variables or raise if any are missing/blank.

    ``overrides`` takes precedence over the process environment, so command-line
    flags can stand in for variables that are not exported.
    """

    missing: list[str] = []
    values: dict[str, str] = {}
    for name in names:
        value = (overrides or {}).get(name) or os.getenv(name)
        if value is None or not value.strip():
            missing.append(name)
            continue
        values[name] = value.strip()

    if missing:
        missing_list = ", ".join(sorted(missing))
        raise MissingConfigurationError(f"Missing configuration for: {missing_list}")

    return values


def optional_env_var(name: str, *, override: str | None = None) -> str | None:
    """Return an optional variable, treating blank values as unset."""

    value = override if override is not None else os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()
