# devotional/main.py
from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Depends, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from .config import CORS_ORIGINS, SEARCH_MAX_RESULTS, WINDOW_DAYS_AFTER, WINDOW_DAYS_BEFORE
from .content import ALL, CATEGORIES, is_category
from .dates import parse_date_identifier, to_date_identifier, today
from .db import create_all, ping
from .schema import (
    DevotionalDay, DevotionalEntry, FavoriteIn, JournalEntryView, JournalIn, JournalRecord,
)
from .store import AnnotationStore
from .views import day_view, favorite_entries, journal_entries
from .window import build_window, search

logger = logging.getLogger(__name__)

# ───────── App ─────────
app = FastAPI(title="Daily Devotional API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# ───────── Pydantic models ─────────
class SearchResponse(BaseModel):
    center: str
    category: str
    query: str
    window_size: int
    count: int
    items: List[DevotionalEntry]

class FavoriteState(BaseModel):
    id: str
    favorite: bool

# ───────── Store dependency ─────────
def get_store(request: Request) -> AnnotationStore:
    return request.app.state.store

def canonical_id(ymd: str) -> str:
    return to_date_identifier(parse_date_identifier(ymd))

# ───────── Lifecycle ─────────
@app.on_event("startup")
async def on_startup():
    ping()
    create_all()
    app.state.store = AnnotationStore().load()
    logger.info("Devotional API ready")

@app.get("/healthz")
async def healthz():
    return {"ok": True}

@app.get("/categories", response_model=List[str])
async def categories():
    return list(CATEGORIES)

# ───────── /devotional ─────────
@app.get("/devotional", response_model=DevotionalDay)
async def devotional_today(store: AnnotationStore = Depends(get_store)):
    return day_view(store, today())

@app.get("/devotional/{ymd}", response_model=DevotionalDay)
async def devotional_for_date(ymd: str, store: AnnotationStore = Depends(get_store)):
    return day_view(store, parse_date_identifier(ymd))

# ───────── /search (generated window; nothing persisted) ─────────
@app.get("/search", response_model=SearchResponse)
async def search_devotionals(
    center: Optional[str] = Query(None, description="YYYY-MM-DD, defaults to today"),
    category: str = Query(ALL, description="One of /categories, or All"),
    q: str = Query("", description="Case-insensitive text to find"),
    before: int = Query(WINDOW_DAYS_BEFORE, ge=0, le=3660),
    after: int = Query(WINDOW_DAYS_AFTER, ge=0, le=3660),
    limit: int = Query(SEARCH_MAX_RESULTS, ge=1, le=500),
):
    if category.lower() != ALL.lower() and not is_category(category):
        raise HTTPException(status_code=400, detail=f"Unknown category: {category}")

    center_date = parse_date_identifier(center) if center else today()
    try:
        window = build_window(center_date, before, after)
    except OverflowError:
        raise HTTPException(status_code=400, detail="Window runs past the supported date range")

    items = search(window, category, q, limit)
    return SearchResponse(
        center=to_date_identifier(center_date),
        category=category,
        query=q.strip(),
        window_size=len(window),
        count=len(items),
        items=items,
    )

# ───────── /favorites ─────────
@app.get("/favorites", response_model=List[DevotionalEntry])
async def list_favorites(store: AnnotationStore = Depends(get_store)):
    return favorite_entries(store)

@app.post("/favorites/{ymd}/toggle", response_model=FavoriteState)
async def toggle_favorite(ymd: str, store: AnnotationStore = Depends(get_store)):
    entry_id = canonical_id(ymd)
    try:
        value = store.toggle_favorite(entry_id)
    except SQLAlchemyError as e:
        raise HTTPException(status_code=502, detail=f"Storage failure: {e}")
    return FavoriteState(id=entry_id, favorite=value)

@app.put("/favorites/{ymd}", response_model=FavoriteState)
async def set_favorite(ymd: str, body: FavoriteIn, store: AnnotationStore = Depends(get_store)):
    entry_id = canonical_id(ymd)
    try:
        store.set_favorite(entry_id, body.favorite)
    except SQLAlchemyError as e:
        raise HTTPException(status_code=502, detail=f"Storage failure: {e}")
    return FavoriteState(id=entry_id, favorite=body.favorite)

# ───────── /journal ─────────
@app.get("/journal", response_model=List[JournalEntryView])
async def list_journal(store: AnnotationStore = Depends(get_store)):
    return journal_entries(store)

@app.put("/journal/{ymd}", response_model=JournalRecord)
async def save_journal(ymd: str, body: JournalIn, store: AnnotationStore = Depends(get_store)):
    entry_id = canonical_id(ymd)
    try:
        return store.set_journal_text(entry_id, body.text)
    except SQLAlchemyError as e:
        raise HTTPException(status_code=502, detail=f"Storage failure: {e}")

@app.delete("/journal/{ymd}")
async def delete_journal(ymd: str, store: AnnotationStore = Depends(get_store)):
    entry_id = canonical_id(ymd)
    try:
        removed = store.delete_journal_entry(entry_id)
    except SQLAlchemyError as e:
        raise HTTPException(status_code=502, detail=f"Storage failure: {e}")
    if not removed:
        raise HTTPException(status_code=404, detail=f"No journal entry for {entry_id}")
    return {"id": entry_id, "deleted": True}
