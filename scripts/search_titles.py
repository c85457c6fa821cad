#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from app.api.presenters.cards import build_search_view
from app.core.config import Settings
from app.schemas.search import CardOut, SearchViewOut
from app.services.search import SearchOrchestrator, build_search_orchestrator

logger = logging.getLogger("search_titles")

FILLED_STAR = "★"
EMPTY_STAR = "☆"


def _format_stars(card: CardOut) -> str:
    return "".join(FILLED_STAR if filled else EMPTY_STAR for filled in card.star_slots)


def _format_card(card: CardOut) -> str:
    line = f"{_format_stars(card)} {card.title} ({card.kind_label}) — {card.language_label}"
    if card.original_title != card.title:
        line += f" [{card.original_title}]"
    return line


def _render_text(view: SearchViewOut) -> list[str]:
    if view.status == "idle":
        return []
    lines: list[str] = []
    if view.summary:
        lines.append(view.summary)
    lines.extend(_format_card(card) for card in view.cards)
    return lines


async def run_search(
    query: str,
    *,
    settings: Settings,
    orchestrator: SearchOrchestrator | None = None,
) -> SearchViewOut:
    orchestrator = orchestrator or build_search_orchestrator(settings)
    snapshot = await orchestrator.submit(query)
    return build_search_view(
        snapshot,
        locale=settings.display_locale,
        image_base_url=settings.tmdb_image_base_url,
        image_size=settings.tmdb_image_size,
    )


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search TMDB for movies and series.")
    parser.add_argument("query", help="Title to search for.")
    parser.add_argument("--json", action="store_true", help="Print the full search view as JSON.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable info logs.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = Settings()
    logging.basicConfig(
        level=logging.INFO if args.verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    view = asyncio.run(run_search(args.query, settings=settings))

    if args.json:
        print(view.model_dump_json(indent=2))
    else:
        for line in _render_text(view):
            print(line)

    if view.status == "error":
        print(view.error, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
