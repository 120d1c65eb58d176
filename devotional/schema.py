from typing import List

from pydantic import BaseModel, Field


class DevotionalEntry(BaseModel):
    id: str                    # YYYY-MM-DD, also the annotation key
    date_iso: str
    day_of_year: int
    category: str
    title: str
    focus: str
    scripture_ref: str
    scripture_idea: str
    guided_prayer: str
    journal_prompts: List[str]
    action_step: str


class JournalRecord(BaseModel):
    text: str
    updated_at: str = Field(alias="updatedAt")

    model_config = {"populate_by_name": True}


class AnnotationRecord(BaseModel):
    id: str
    favorite: bool | None = None
    journal: JournalRecord | None = None


class DevotionalDay(BaseModel):
    entry: DevotionalEntry
    is_favorite: bool = False
    journal: JournalRecord | None = None
    previous_id: str
    next_id: str


class JournalEntryView(DevotionalEntry):
    journal_text: str = ""
    # same wire name as JournalRecord
    updated_at: str = Field("", alias="updatedAt")

    model_config = {"populate_by_name": True}


class FavoriteIn(BaseModel):
    favorite: bool


class JournalIn(BaseModel):
    text: str
