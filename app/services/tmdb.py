from __future__ import annotations

import logging
from typing import Any

import httpx

TMDB_API_BASE_URL = "https://api.themoviedb.org/3"
TMDB_DEFAULT_LANGUAGE = "it-IT"
TMDB_TIMEOUT_SECONDS = 10.0

MISSING_API_KEY_MESSAGE = "API key mancante. Imposta TMDB_API_KEY nel file .env."
NETWORK_ERROR_MESSAGE = "Errore di rete"

logger = logging.getLogger(__name__)


class TMDBError(RuntimeError):
    pass


class ConfigurationError(TMDBError):
    def __init__(self, message: str = MISSING_API_KEY_MESSAGE) -> None:
        super().__init__(message)


class TransportError(TMDBError):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"TMDB ha risposto {status_code}")
        self.status_code = status_code


class NetworkError(TMDBError):
    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or NETWORK_ERROR_MESSAGE)


def search_params(q: str, *, api_key: str, language: str = TMDB_DEFAULT_LANGUAGE) -> dict[str, str]:
    return {
        "api_key": api_key,
        "query": q.strip(),
        "include_adult": "false",
        "language": language,
    }


def _results_from_payload(data: Any) -> list[Any]:
    if not isinstance(data, dict):
        return []
    results = data.get("results")
    return results if isinstance(results, list) else []


async def tmdb_search_multi(
    q: str,
    *,
    api_key: str | None,
    base_url: str = TMDB_API_BASE_URL,
    language: str = TMDB_DEFAULT_LANGUAGE,
    timeout: float = TMDB_TIMEOUT_SECONDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[Any]:
    """Run one `/search/multi` request and return the raw `results` list.

    Records are returned untouched; filtering and reshaping happen in the
    normalizer. Failures are raised as `TMDBError` subclasses.
    """
    if not api_key:
        raise ConfigurationError()

    params = search_params(q, api_key=api_key, language=language)
    headers = {"Accept": "application/json"}

    try:
        async with httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport) as client:
            r = await client.get("/search/multi", params=params, headers=headers)
    except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
        logger.warning("TMDB search request failed query=%r", params["query"], exc_info=exc)
        raise NetworkError(str(exc)) from exc

    if not r.is_success:
        logger.warning("TMDB search returned status=%s query=%r", r.status_code, params["query"])
        raise TransportError(r.status_code)

    try:
        data = r.json()
    except ValueError as exc:
        logger.warning("TMDB search returned invalid JSON query=%r", params["query"], exc_info=exc)
        raise NetworkError(str(exc)) from exc

    return _results_from_payload(data)
