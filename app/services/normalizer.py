from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from app.schemas.search import TITLE_PLACEHOLDER, DisplayItem, MediaKind
from app.services.ratings import is_finite_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _KindFields:
    kind: MediaKind
    title_field: str
    alternate_title_field: str


# TMDB discriminator -> how to read that record. Anything else ("person", ...) is dropped.
_SUPPORTED_KINDS: dict[str, _KindFields] = {
    "movie": _KindFields(kind="movie", title_field="title", alternate_title_field="original_title"),
    "tv": _KindFields(kind="series", title_field="name", alternate_title_field="original_name"),
}


def _text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _external_id(value: Any) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, str) and value.strip().isdigit():
        return value.strip()
    return None


def normalize_result(raw: Any, *, position: int | None = None) -> DisplayItem | None:
    if not isinstance(raw, Mapping):
        return None

    media_type = raw.get("media_type")
    fields = _SUPPORTED_KINDS.get(media_type) if isinstance(media_type, str) else None
    if fields is None:
        return None

    primary = _text(raw.get(fields.title_field))
    alternate = _text(raw.get(fields.alternate_title_field))
    vote_average = raw.get("vote_average")
    overview = raw.get("overview")
    poster_path = raw.get("poster_path")

    external_id = _external_id(raw.get("id"))
    if external_id is None:
        # Records without a usable id are told apart by their position in the result list.
        external_id = "unknown" if position is None else f"unknown{position}"

    return DisplayItem(
        id=f"{fields.kind}_{external_id}",
        kind=fields.kind,
        title=primary or alternate or TITLE_PLACEHOLDER,
        original_title=alternate or primary or TITLE_PLACEHOLDER,
        original_language=_text(raw.get("original_language")),
        vote_average=float(vote_average) if is_finite_number(vote_average) else None,
        poster_path=poster_path if isinstance(poster_path, str) and poster_path else None,
        overview=overview if isinstance(overview, str) else "",
    )


def normalize_results(raw_results: Iterable[Any]) -> list[DisplayItem]:
    """Normalize a raw result list, dropping unsupported records and repeated ids."""
    out: list[DisplayItem] = []
    seen: set[str] = set()
    for position, raw in enumerate(raw_results):
        item = normalize_result(raw, position=position)
        if item is None:
            continue
        if item.id in seen:
            logger.debug("dropping duplicate result id=%s", item.id)
            continue
        seen.add(item.id)
        out.append(item)
    return out
