from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


MediaKind = Literal["movie", "series"]
SearchStatus = Literal["idle", "loading", "success", "error"]

TITLE_PLACEHOLDER = "—"


class DisplayItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    kind: MediaKind
    title: str = Field(min_length=1)
    original_title: str = Field(min_length=1)
    original_language: str | None = None
    vote_average: float | None = None
    poster_path: str | None = None
    overview: str = ""


class SearchRequest(BaseModel):
    query: str = ""


class CardOut(BaseModel):
    id: str
    kind: MediaKind
    kind_label: str
    title: str
    original_title: str
    language_label: str
    stars: int = Field(ge=1, le=5)
    star_slots: list[bool]
    stars_label: str
    poster_url: str | None = None
    has_poster: bool
    poster_placeholder: str | None = None
    overview: str = ""


class SearchViewOut(BaseModel):
    status: SearchStatus
    query: str = ""
    error: str | None = None
    busy: bool = False
    submit_label: str
    summary: str | None = None
    cards: list[CardOut] = Field(default_factory=list)
