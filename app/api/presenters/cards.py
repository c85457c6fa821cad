from __future__ import annotations

from app.schemas.search import CardOut, DisplayItem, SearchViewOut
from app.services.languages import DEFAULT_DISPLAY_LOCALE, resolve_language_label
from app.services.ratings import MAX_STARS, stars_for
from app.services.search import SearchSnapshot

IMAGE_BASE_URL = "https://image.tmdb.org/t/p/"
IMAGE_SIZE = "w342"

_KIND_LABELS = {"movie": "Film", "series": "Serie"}
NO_POSTER_LABEL = "Nessun poster"
NO_RESULTS_LABEL = "Nessun risultato"


def poster_url(
    path: str | None,
    *,
    base_url: str = IMAGE_BASE_URL,
    size: str = IMAGE_SIZE,
) -> str | None:
    if not path:
        return None
    return f"{base_url}{size}{path}"


def build_card(
    item: DisplayItem,
    *,
    locale: str = DEFAULT_DISPLAY_LOCALE,
    image_base_url: str = IMAGE_BASE_URL,
    image_size: str = IMAGE_SIZE,
) -> CardOut:
    stars = stars_for(item.vote_average)
    url = poster_url(item.poster_path, base_url=image_base_url, size=image_size)
    return CardOut(
        id=item.id,
        kind=item.kind,
        kind_label=_KIND_LABELS[item.kind],
        title=item.title,
        original_title=item.original_title,
        language_label=resolve_language_label(item.original_language, locale),
        stars=stars,
        star_slots=[i < stars for i in range(MAX_STARS)],
        stars_label=f"{stars} su {MAX_STARS} stelle",
        poster_url=url,
        has_poster=url is not None,
        poster_placeholder=None if url else NO_POSTER_LABEL,
        overview=item.overview,
    )


def _summary(snapshot: SearchSnapshot) -> str | None:
    if snapshot.status != "success":
        return None
    if not snapshot.results:
        return NO_RESULTS_LABEL
    return f"Trovati {len(snapshot.results)} risultati (film + serie)"


def build_search_view(
    snapshot: SearchSnapshot,
    *,
    locale: str = DEFAULT_DISPLAY_LOCALE,
    image_base_url: str = IMAGE_BASE_URL,
    image_size: str = IMAGE_SIZE,
) -> SearchViewOut:
    busy = snapshot.status == "loading"
    return SearchViewOut(
        status=snapshot.status,
        query=snapshot.query,
        error=snapshot.error if snapshot.status == "error" else None,
        busy=busy,
        submit_label="Cerco..." if busy else "Cerca",
        summary=_summary(snapshot),
        cards=[
            build_card(
                item,
                locale=locale,
                image_base_url=image_base_url,
                image_size=image_size,
            )
            for item in snapshot.results
        ],
    )
