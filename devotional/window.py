# devotional/window.py
from __future__ import annotations

from datetime import timedelta
from typing import Iterable, List

from .config import SEARCH_MAX_RESULTS, WINDOW_DAYS_AFTER, WINDOW_DAYS_BEFORE
from .content import ALL
from .dates import DateLike, local_date
from .generator import generate
from .schema import DevotionalEntry


def build_window(
    center: DateLike,
    days_before: int = WINDOW_DAYS_BEFORE,
    days_after: int = WINDOW_DAYS_AFTER,
) -> List[DevotionalEntry]:
    """One entry per day from center - days_before to center + days_after, ascending."""
    if days_before < 0 or days_after < 0:
        raise ValueError("window bounds must be >= 0")
    center = local_date(center)
    start = center - timedelta(days=days_before)
    return [generate(start + timedelta(days=k)) for k in range(days_before + days_after + 1)]


def search_blob(entry: DevotionalEntry) -> str:
    return " ".join((
        entry.title,
        entry.focus,
        entry.scripture_ref,
        entry.scripture_idea,
        entry.guided_prayer,
        entry.action_step,
    )).lower()


def matches_category(entry: DevotionalEntry, category: str) -> bool:
    if not category or category.lower() == ALL.lower():
        return True
    return entry.category == category


def search(
    window: Iterable[DevotionalEntry],
    category: str = ALL,
    query: str = "",
    limit: int = SEARCH_MAX_RESULTS,
) -> List[DevotionalEntry]:
    """Filter in window order; the cap is applied only after the full scan."""
    q = (query or "").strip().lower()
    hits = [
        e for e in window
        if matches_category(e, category) and (not q or q in search_blob(e))
    ]
    return hits[:max(0, limit)]
