from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from functools import partial
from typing import Any, Awaitable, Callable

import httpx

from app.core.config import Settings
from app.schemas.search import DisplayItem, SearchStatus
from app.services.normalizer import normalize_results
from app.services.tmdb import (
    NETWORK_ERROR_MESSAGE,
    ConfigurationError,
    TMDBError,
    tmdb_search_multi,
)

logger = logging.getLogger(__name__)

SearchFetcher = Callable[..., Awaitable[list[Any]]]


@dataclass(frozen=True)
class SearchSnapshot:
    status: SearchStatus = "idle"
    query: str = ""
    error: str | None = None
    results: tuple[DisplayItem, ...] = field(default_factory=tuple)
    generation: int = 0


class SearchOrchestrator:
    """Owns the lifecycle of one visible search.

    Every submit gets a new generation number. With ``discard_stale`` (the
    default) a response only lands if no other submit happened meanwhile, so
    the last submission wins. Without it every response is applied as it
    arrives and the last response to resolve wins.
    """

    def __init__(
        self,
        *,
        api_key: str | None,
        fetcher: SearchFetcher = tmdb_search_multi,
        discard_stale: bool = True,
    ) -> None:
        self._api_key = api_key
        self._fetcher = fetcher
        self.discard_stale = discard_stale
        self._generation = 0
        self._state = SearchSnapshot()

    @property
    def status(self) -> SearchStatus:
        return self._state.status

    def snapshot(self) -> SearchSnapshot:
        return self._state

    def _is_current(self, generation: int) -> bool:
        return not self.discard_stale or generation == self._generation

    def _apply(self, generation: int, **changes: Any) -> bool:
        if not self._is_current(generation):
            logger.debug(
                "discarding stale search response generation=%s latest=%s",
                generation,
                self._generation,
            )
            return False
        self._state = replace(self._state, generation=generation, **changes)
        return True

    def reset(self) -> SearchSnapshot:
        self._generation += 1
        self._state = SearchSnapshot(generation=self._generation)
        return self._state

    async def submit(self, query: str | None) -> SearchSnapshot:
        q = (query or "").strip()
        if not q:
            return self.reset()

        self._generation += 1
        generation = self._generation

        if not self._api_key:
            self._state = SearchSnapshot(
                status="error",
                query=q,
                error=str(ConfigurationError()),
                generation=generation,
            )
            return self._state

        self._state = SearchSnapshot(status="loading", query=q, generation=generation)
        logger.info("search started query=%r generation=%s", q, generation)

        try:
            raw_results = await self._fetcher(q, api_key=self._api_key)
        except TMDBError as exc:
            self._apply(generation, status="error", query=q, error=str(exc) or NETWORK_ERROR_MESSAGE, results=())
            return self._state
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("search failed query=%r generation=%s", q, generation, exc_info=exc)
            self._apply(generation, status="error", query=q, error=str(exc) or NETWORK_ERROR_MESSAGE, results=())
            return self._state
        except Exception:
            # Failures never leave the orchestrator; the caller only sees the error state.
            logger.exception("search crashed query=%r generation=%s", q, generation)
            self._apply(generation, status="error", query=q, error=NETWORK_ERROR_MESSAGE, results=())
            return self._state

        items = normalize_results(raw_results if isinstance(raw_results, list) else [])
        if self._apply(generation, status="success", query=q, error=None, results=tuple(items)):
            logger.info("search finished query=%r generation=%s results=%s", q, generation, len(items))
        return self._state


def build_search_orchestrator(settings: Settings, *, discard_stale: bool = True) -> SearchOrchestrator:
    fetcher = partial(
        tmdb_search_multi,
        base_url=settings.tmdb_base_url,
        language=settings.tmdb_language,
        timeout=settings.tmdb_timeout_seconds,
    )
    return SearchOrchestrator(
        api_key=settings.tmdb_api_key,
        fetcher=fetcher,
        discard_stale=discard_stale,
    )
