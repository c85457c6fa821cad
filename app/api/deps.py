from __future__ import annotations

from fastapi import Request

from app.core.config import Settings, settings
from app.services.search import SearchOrchestrator


def get_settings() -> Settings:
    return settings


def get_search_orchestrator(request: Request) -> SearchOrchestrator:
    return request.app.state.search_orchestrator
