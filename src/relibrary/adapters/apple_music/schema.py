"""Minimal Pydantic models for the Apple Music API album endpoints."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from relibrary.domain.errors import MalformedSourceDataError

# Track and disc numbers are unsigned bytes in the catalog contract.
MAX_TRACK_NUMBER = 255


class AppleMusicBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", alias_generator=to_camel, populate_by_name=True)


class ContentRating(StrEnum):
    EXPLICIT = "explicit"
    CLEAN = "clean"


class ResourceRef(AppleMusicBaseModel):
    id: str
    type: str | None = None


# Catalog album ---------------------------------------------------------------


class CatalogSongAttributes(AppleMusicBaseModel):
    # All of the song's artists
    artist_name: str
    content_rating: ContentRating | None = None
    disc_number: int = Field(ge=0, le=MAX_TRACK_NUMBER)
    isrc: str
    name: str
    # YYYY-MM-DD
    release_date: str
    track_number: int = Field(ge=0, le=MAX_TRACK_NUMBER)


class CatalogSong(AppleMusicBaseModel):
    id: str
    type: str | None = None
    attributes: CatalogSongAttributes


class CatalogSongsRelationship(AppleMusicBaseModel):
    data: list[CatalogSong] = Field(default_factory=list["CatalogSong"])
    next: str | None = None


class CatalogAlbumRelationships(AppleMusicBaseModel):
    tracks: CatalogSongsRelationship


class CatalogAlbumAttributes(AppleMusicBaseModel):
    # All of the album's artists
    artist_name: str
    name: str
    # YYYY-MM-DD
    release_date: str
    track_count: int = Field(ge=0, le=MAX_TRACK_NUMBER)


class CatalogAlbum(AppleMusicBaseModel):
    id: str
    type: str | None = None
    attributes: CatalogAlbumAttributes
    relationships: CatalogAlbumRelationships


class CatalogAlbumResponse(AppleMusicBaseModel):
    data: list[CatalogAlbum] = Field(default_factory=list["CatalogAlbum"])


# Library album ---------------------------------------------------------------


class LibrarySongPlayParams(AppleMusicBaseModel):
    catalog_id: str


class LibrarySongAttributes(AppleMusicBaseModel):
    name: str | None = None
    play_params: LibrarySongPlayParams


class LibrarySong(AppleMusicBaseModel):
    id: str
    type: str | None = None
    attributes: LibrarySongAttributes


class LibrarySongsRelationship(AppleMusicBaseModel):
    data: list[LibrarySong] = Field(default_factory=list["LibrarySong"])


class LibraryCatalogRelationship(AppleMusicBaseModel):
    data: list[ResourceRef] = Field(default_factory=list["ResourceRef"])


class LibraryAlbumRelationships(AppleMusicBaseModel):
    catalog: LibraryCatalogRelationship
    tracks: LibrarySongsRelationship


class LibraryAlbum(AppleMusicBaseModel):
    id: str
    type: str | None = None
    relationships: LibraryAlbumRelationships


class LibraryAlbumResponse(AppleMusicBaseModel):
    data: list[LibraryAlbum] = Field(default_factory=list["LibraryAlbum"])

    def single_album(self) -> LibraryAlbum:
        if len(self.data) != 1:
            raise MalformedSourceDataError(
                f"expected exactly one library album, got {len(self.data)}"
            )
        return self.data[0]

    def library_id(self) -> str:
        return self.single_album().id

    def catalog_id(self) -> str:
        """Return the id of the one catalog album this library album links to."""

        linked = self.single_album().relationships.catalog.data
        if len(linked) != 1:
            raise MalformedSourceDataError(
                f"expected exactly one linked catalog album, got {len(linked)}"
            )
        return linked[0].id
