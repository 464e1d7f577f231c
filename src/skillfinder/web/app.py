"""FastAPI application exposing skill search, loading and duplicate checks."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from skillfinder.config import AppConfig
from skillfinder.index.categories import build_categories, format_categories
from skillfinder.index.dedup import find_duplicates
from skillfinder.index.indexer import build_index
from skillfinder.index.search import SearchResult, search_skills
from skillfinder.ingestion.collection import SkillCollection
from skillfinder.ingestion.loader import find_entry, load_skill
from skillfinder.models import SkillIndex
from skillfinder.web.frontend import router as frontend_router

LOGGER = logging.getLogger(__name__)

MAX_LIMIT = 50
SUGGESTION_LIMIT = 5

app = FastAPI(title="SkillFinder Web", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(frontend_router)

_INDEX_CACHE: Dict[Path, SkillIndex] = {}


class SearchPayload(BaseModel):
    query: str
    skills_dir: Path | None = None
    limit: int = 20


class LoadPayload(BaseModel):
    name: str
    include_resources: bool = False
    skills_dir: Path | None = None


class IndexPayload(BaseModel):
    skills_dir: Path | None = None


def _resolve_skills_dir(skills_dir: Path | None) -> Path:
    config = AppConfig(skills_dir=skills_dir if skills_dir is not None else AppConfig().skills_dir)
    return config.resolve_skills_dir(Path.cwd())


def _require_skills_dir(skills_dir: Path | None) -> Path:
    resolved = _resolve_skills_dir(skills_dir)
    if not resolved.is_dir():
        raise HTTPException(status_code=404, detail=f"Skills directory not found at {resolved}")
    return resolved


def clear_index_cache() -> None:
    _INDEX_CACHE.clear()


async def _get_index(skills_dir: Path, *, refresh: bool = False) -> SkillIndex:
    key = skills_dir.resolve()
    if refresh or key not in _INDEX_CACHE:
        _INDEX_CACHE[key] = await asyncio.to_thread(build_index, key)
    return _INDEX_CACHE[key]


@app.on_event("startup")
async def startup_event() -> None:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")


@app.post("/search")
async def search(payload: SearchPayload) -> dict[str, List[SearchResult]]:
    query = payload.query.strip()
    if not query:
        raise HTTPException(status_code=400, detail="Empty query")

    limit = max(1, min(payload.limit, MAX_LIMIT))
    index = await _get_index(_require_skills_dir(payload.skills_dir))
    return {"results": search_skills(index, query, limit)}


@app.post("/load")
async def load(payload: LoadPayload) -> dict[str, str]:
    skills_dir = _require_skills_dir(payload.skills_dir)
    index = await _get_index(skills_dir)

    entry = find_entry(index, payload.name)
    if entry is None:
        detail = f'Skill "{payload.name}" not found.'
        suggestions = search_skills(index, payload.name, SUGGESTION_LIMIT)
        if suggestions:
            detail = f"{detail} Did you mean: {', '.join(result.name for result in suggestions)}?"
        raise HTTPException(status_code=404, detail=detail)

    try:
        content = load_skill(entry, SkillCollection(skills_dir), payload.include_resources)
    except FileNotFoundError as exc:
        LOGGER.error("Skill file vanished for %s: %s", entry.dir_name, exc)
        raise HTTPException(status_code=404, detail=f"Skill file not found: {entry.dir_name}") from exc

    return {"name": entry.name, "dir_name": entry.dir_name, "content": content}


@app.get("/skills")
async def list_skills(skills_dir: Path | None = None) -> dict[str, Any]:
    index = await _get_index(_require_skills_dir(skills_dir))
    skills = [
        {
            "name": entry.name,
            "dir_name": entry.dir_name,
            "description": entry.description,
            "has_resources": entry.has_resources,
        }
        for entry in index.entries
    ]
    return {"skills": skills, "count": len(skills)}


@app.get("/categories")
async def list_categories(skills_dir: Path | None = None) -> dict[str, Any]:
    index = await _get_index(_require_skills_dir(skills_dir))
    categories = build_categories(index.entries)
    return {
        "total": index.total_docs,
        "categories": categories,
        "text": format_categories(categories, index.total_docs),
    }


@app.get("/duplicates")
async def duplicates(skills_dir: Path | None = None) -> dict[str, Any]:
    resolved = _require_skills_dir(skills_dir)
    report = await asyncio.to_thread(find_duplicates, resolved)
    return asdict(report)


@app.post("/index")
async def reindex(payload: IndexPayload) -> dict[str, Any]:
    resolved = _require_skills_dir(payload.skills_dir)
    index = await _get_index(resolved, refresh=True)
    return {
        "status": "ok",
        "skills_dir": str(resolved),
        "total_docs": index.total_docs,
        "distinct_tokens": len(index.idf_scores),
    }
