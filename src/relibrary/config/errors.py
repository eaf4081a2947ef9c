"""Errors raised while assembling Apple Music credentials and client settings."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """A token, storefront or cache setting is present but unusable.

    The CLI reports these and exits with status 2 before contacting Apple Music.
    """


class MissingConfigurationError(ConfigurationError):
    """No flag or environment variable supplied a required setting.

    The message lists every missing variable name, e.g.
    ``APPLE_MUSIC_USER_TOKEN``, so one run reveals all of them.
    """
