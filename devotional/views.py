# devotional/views.py
from __future__ import annotations

from typing import List

from .dates import DateLike, parse_date_identifier, shift_identifier
from .generator import generate
from .schema import DevotionalDay, JournalEntryView, DevotionalEntry
from .store import AnnotationStore


def day_view(store: AnnotationStore, d: DateLike) -> DevotionalDay:
    entry = generate(d)
    record = store.get(entry.id)
    return DevotionalDay(
        entry=entry,
        is_favorite=bool(record and record.favorite),
        journal=record.journal if record else None,
        previous_id=shift_identifier(entry.id, -1),
        next_id=shift_identifier(entry.id, 1),
    )


def favorite_entries(store: AnnotationStore) -> List[DevotionalEntry]:
    # ids sort chronologically as strings
    ids = sorted(store.list_favorite_ids(), reverse=True)
    return [generate(parse_date_identifier(i)) for i in ids]


def journal_entries(store: AnnotationStore) -> List[JournalEntryView]:
    items: List[JournalEntryView] = []
    for entry_id in store.list_journal_ids():
        record = store.get(entry_id)
        entry = generate(parse_date_identifier(entry_id))
        items.append(JournalEntryView(
            **entry.model_dump(),
            journal_text=record.journal.text if record and record.journal else "",
            updated_at=record.journal.updated_at if record and record.journal else "",
        ))
    # most recently updated first; ties newest date first
    items.sort(key=lambda v: (v.updated_at, v.date_iso), reverse=True)
    return items
