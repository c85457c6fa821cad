import os
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

# IMPORTANT:
# Set env vars BEFORE importing app.settings/app.main (pydantic settings load at import time)
os.environ["ENV"] = "test"
os.environ.setdefault("CORS_ORIGINS", "http://localhost:5173")

from app.main import app as fastapi_app  # noqa: E402
from app.api.deps import get_search_orchestrator  # noqa: E402
from app.services.search import SearchOrchestrator  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def raw_movie():
    def _make(**overrides: Any) -> dict[str, Any]:
        record = {
            "media_type": "movie",
            "id": 603,
            "title": "Matrix",
            "original_title": "The Matrix",
            "original_language": "en",
            "vote_average": 8.2,
            "poster_path": "/matrix.jpg",
            "overview": "Un hacker scopre la verità.",
        }
        record.update(overrides)
        return record

    return _make


@pytest.fixture
def raw_series():
    def _make(**overrides: Any) -> dict[str, Any]:
        record = {
            "media_type": "tv",
            "id": 1399,
            "name": "Il Trono di Spade",
            "original_name": "Game of Thrones",
            "original_language": "en",
            "vote_average": 8.4,
            "poster_path": "/got.jpg",
            "overview": "Sette famiglie nobili combattono.",
        }
        record.update(overrides)
        return record

    return _make


@pytest.fixture
def fetcher_factory():
    """Builds fake fetchers that record every call they receive."""

    def _factory(results: list[Any] | None = None, *, error: Exception | None = None):
        calls: list[dict[str, Any]] = []

        async def _fetch(query: str, *, api_key: str) -> list[Any]:
            calls.append({"query": query, "api_key": api_key})
            if error is not None:
                raise error
            return list(results or [])

        _fetch.calls = calls  # type: ignore[attr-defined]
        return _fetch

    return _factory


@pytest.fixture
def orchestrator_override():
    def _override(orchestrator: SearchOrchestrator) -> SearchOrchestrator:
        fastapi_app.dependency_overrides[get_search_orchestrator] = lambda: orchestrator
        return orchestrator

    yield _override
    fastapi_app.dependency_overrides.pop(get_search_orchestrator, None)


@pytest.fixture
async def client():
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
