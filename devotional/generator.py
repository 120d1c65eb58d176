# devotional/generator.py
from __future__ import annotations

from typing import Sequence

from .content import CATEGORIES, MODULES, action_pool
from .dates import DateLike, day_of_year, local_date, to_date_identifier
from .schema import DevotionalEntry

# Variation hash. Changing any of these remaps every saved date to new content.
I1_MULTIPLIER, I1_MODULUS = 7, 997
I2_MULTIPLIER, I2_MODULUS = 13, 991
SECOND_PROMPT_OFFSET = 3


def pick_from(pool: Sequence, idx: int):
    if not pool:
        return ""
    return pool[idx % len(pool)]


def capitalize(s: str) -> str:
    # str.capitalize() would lowercase the rest ("God" must stay "God")
    if not s:
        return s
    return s[0].upper() + s[1:]


def category_for(doy: int) -> str:
    return CATEGORIES[(doy - 1) % len(CATEGORIES)]


def variation_indices(doy: int, year: int) -> tuple[int, int]:
    i1 = (doy * I1_MULTIPLIER + year) % I1_MODULUS
    i2 = (doy * I2_MULTIPLIER + year) % I2_MODULUS
    return i1, i2


def generate(d: DateLike) -> DevotionalEntry:
    d = local_date(d)
    doy = day_of_year(d)
    cat = category_for(doy)
    mod = MODULES[cat]
    i1, i2 = variation_indices(doy, d.year)

    focus = pick_from(mod["focuses"], i1)
    scripture = pick_from(mod["scriptures"], i2) or ("", "")
    prayer = pick_from(mod["prayers"], i1)
    prompt_a = pick_from(mod["prompts"], i1)
    prompt_b = pick_from(mod["prompts"], i2 + SECOND_PROMPT_OFFSET)

    ymd = to_date_identifier(d)
    return DevotionalEntry(
        id=ymd,
        date_iso=ymd,
        day_of_year=doy,
        category=cat,
        title=f"{cat}: {capitalize(focus)}",
        focus=focus,
        scripture_ref=scripture[0],
        scripture_idea=scripture[1],
        guided_prayer=prayer,
        journal_prompts=[p for p in (prompt_a, prompt_b) if p],
        action_step=pick_from(action_pool(cat), i2),
    )
