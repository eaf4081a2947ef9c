from tests.helpers.apple_music import apple_music_config, make_client_factory

__all__ = ["apple_music_config", "make_client_factory"]
