from __future__ import annotations

from fastapi import APIRouter, Depends

from app.api.deps import get_search_orchestrator, get_settings
from app.api.presenters.cards import build_search_view
from app.core.config import Settings
from app.schemas.search import SearchRequest, SearchViewOut
from app.services.search import SearchOrchestrator, SearchSnapshot

router = APIRouter(prefix="/search", tags=["search"])


def _to_view(snapshot: SearchSnapshot, cfg: Settings) -> SearchViewOut:
    return build_search_view(
        snapshot,
        locale=cfg.display_locale,
        image_base_url=cfg.tmdb_image_base_url,
        image_size=cfg.tmdb_image_size,
    )


@router.get("", response_model=SearchViewOut)
async def get_search_state(
    orchestrator: SearchOrchestrator = Depends(get_search_orchestrator),
    cfg: Settings = Depends(get_settings),
):
    return _to_view(orchestrator.snapshot(), cfg)


@router.post("", response_model=SearchViewOut)
async def submit_search(
    payload: SearchRequest,
    orchestrator: SearchOrchestrator = Depends(get_search_orchestrator),
    cfg: Settings = Depends(get_settings),
):
    # Empty query resets to idle; failures come back as status="error", never as HTTP errors.
    snapshot = await orchestrator.submit(payload.query)
    return _to_view(snapshot, cfg)


@router.delete("", response_model=SearchViewOut)
async def reset_search(
    orchestrator: SearchOrchestrator = Depends(get_search_orchestrator),
    cfg: Settings = Depends(get_settings),
):
    return _to_view(orchestrator.reset(), cfg)
