from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class SearchFolkInput(BaseModel):
    query: str = Field(max_length=500)

    @field_validator("query")
    @classmethod
    def query_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("query must not be empty")
        return v


class GetPageInput(BaseModel):
    path: str = Field(max_length=2048)

    @field_validator("path")
    @classmethod
    def path_is_absolute(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("path must not be empty")
        if not (v.startswith("/") or v.startswith(("http://", "https://"))):
            raise ValueError("path must start with '/' or be an http(s) URL")
        return v


class IndexFilterInput(BaseModel):
    filter: str | None = Field(default=None, max_length=200)

    @field_validator("filter")
    @classmethod
    def blank_filter_is_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None


class ArtistDiscographyInput(BaseModel):
    artist: str = Field(max_length=500)

    @field_validator("artist")
    @classmethod
    def artist_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("artist must not be empty")
        return v
