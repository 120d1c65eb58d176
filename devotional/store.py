# devotional/store.py
from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Callable, Dict, Optional, Set

import pytz
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from .config import STATE_KEY
from .db import SessionLocal
from .models import AppState
from .schema import AnnotationRecord, JournalRecord

logger = logging.getLogger(__name__)

State = Dict[str, Dict[str, Any]]


def utc_now_iso() -> str:
    # same shape as JS Date.toISOString(): 2024-01-01T12:00:00.000Z
    return datetime.now(pytz.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def empty_state() -> State:
    return {"favorites": {}, "journal": {}}


def safe_json_parse(raw: str, fallback: Any) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        return fallback


def parse_state(raw: Optional[str]) -> State:
    """Decode the persisted record; anything unreadable becomes the empty state."""
    if not raw:
        return empty_state()
    parsed = safe_json_parse(raw, None)
    if not isinstance(parsed, dict):
        logger.warning("Persisted annotation state is malformed, starting empty")
        return empty_state()
    favorites = parsed.get("favorites")
    journal = parsed.get("journal")
    return {
        "favorites": favorites if isinstance(favorites, dict) else {},
        "journal": journal if isinstance(journal, dict) else {},
    }


def _journal_record(meta: Any) -> JournalRecord:
    if not isinstance(meta, dict):
        return JournalRecord(text="", updated_at="")
    return JournalRecord(text=str(meta.get("text") or ""), updated_at=str(meta.get("updatedAt") or ""))


class AnnotationStore:
    """
    Favorites and journal text keyed by entry identifier (YYYY-MM-DD).

    The whole state lives in memory after load() and is written back as one
    JSON document on every mutation.
    """

    def __init__(
        self,
        session_factory: sessionmaker = SessionLocal,
        key: str = STATE_KEY,
        clock: Callable[[], str] = utc_now_iso,
    ):
        self.session_factory = session_factory
        self.key = key
        self.clock = clock
        self.state: State = empty_state()

    # ───────── lifecycle ─────────
    def load(self) -> "AnnotationStore":
        try:
            with self.session_factory() as session:
                row = session.get(AppState, self.key)
                raw = row.value if row else None
        except SQLAlchemyError as e:
            logger.error("Could not read annotation state: %s", e)
            raw = None
        self.state = parse_state(raw)
        logger.info(
            "Loaded annotation state: %d favorites, %d journal entries",
            len(self.state["favorites"]), len(self.state["journal"]),
        )
        return self

    def flush(self, state: Optional[State] = None):
        payload = json.dumps(self.state if state is None else state, ensure_ascii=False)
        with self.session_factory() as session:
            session.merge(AppState(key=self.key, value=payload, updated_at=self.clock()))
            session.commit()
        logger.debug("Flushed annotation state")

    def _replace(self, **maps: Dict[str, Any]):
        # memory only changes once the write is committed
        candidate = {**self.state, **maps}
        self.flush(candidate)
        self.state = candidate

    # ───────── reads ─────────
    def get(self, entry_id: str) -> Optional[AnnotationRecord]:
        favorites, journal = self.state["favorites"], self.state["journal"]
        if entry_id not in favorites and entry_id not in journal:
            return None
        return AnnotationRecord(
            id=entry_id,
            favorite=bool(favorites[entry_id]) if entry_id in favorites else None,
            journal=_journal_record(journal[entry_id]) if entry_id in journal else None,
        )

    def is_favorite(self, entry_id: str) -> bool:
        return bool(self.state["favorites"].get(entry_id))

    def list_favorite_ids(self) -> Set[str]:
        return {k for k, v in self.state["favorites"].items() if v}

    def list_journal_ids(self) -> Set[str]:
        return set(self.state["journal"])

    # ───────── writes ─────────
    def set_favorite(self, entry_id: str, value: bool):
        self._replace(favorites={**self.state["favorites"], entry_id: bool(value)})

    def toggle_favorite(self, entry_id: str) -> bool:
        value = not self.is_favorite(entry_id)
        self.set_favorite(entry_id, value)
        return value

    def set_journal_text(self, entry_id: str, text: str) -> JournalRecord:
        meta = {"text": text, "updatedAt": self.clock()}
        self._replace(journal={**self.state["journal"], entry_id: meta})
        return _journal_record(meta)

    def delete_journal_entry(self, entry_id: str) -> bool:
        if entry_id not in self.state["journal"]:
            return False
        journal = dict(self.state["journal"])
        del journal[entry_id]
        self._replace(journal=journal)
        return True
