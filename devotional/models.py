# devotional/models.py
from __future__ import annotations
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Text
from .db import Base

# One row per persisted state record; the annotation store keeps all
# favorites and journal text as a single JSON document under STATE_KEY.
class AppState(Base):
    __tablename__ = "app_state"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)

    # ISO-8601 UTC of the last flush
    updated_at: Mapped[str | None] = mapped_column(String(40), nullable=True)
