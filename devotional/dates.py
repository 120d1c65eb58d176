# devotional/dates.py
from __future__ import annotations

import logging
import re
from datetime import date, datetime, timedelta, MINYEAR, MAXYEAR
from typing import Optional, Union

from .config import TZ

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]

_LEADING_INT = re.compile(r"^\s*(\d{1,9})")


def today() -> date:
    return datetime.now(TZ).date()


def local_date(d: DateLike) -> date:
    """Calendar date of `d` in the configured zone; naive values are already local."""
    if isinstance(d, datetime):
        if d.tzinfo is not None:
            d = d.astimezone(TZ)
        return d.date()
    return d


def to_date_identifier(d: DateLike) -> str:
    d = local_date(d)
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def _leading_int(part: str) -> Optional[int]:
    m = _LEADING_INT.match(part)
    return int(m.group(1)) if m else None


def parse_date_identifier(s: Optional[str]) -> date:
    """
    Parse YYYY-MM-DD as a local calendar date without ever raising.
    - month/day missing, non-numeric or 0 -> 1
    - month/day past the end roll over (2023-02-29 -> 2023-03-01)
    - unusable year -> today
    """
    parts = str(s or "").strip().split("-")
    year = _leading_int(parts[0])
    month = _leading_int(parts[1]) if len(parts) > 1 else None
    day = _leading_int(parts[2]) if len(parts) > 2 else None
    month = month or 1
    day = day or 1

    if year is None or not (MINYEAR <= year <= MAXYEAR):
        logger.debug("Unusable date identifier %r, defaulting to today", s)
        return today()

    year += (month - 1) // 12
    month = (month - 1) % 12 + 1
    try:
        return date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        logger.debug("Date identifier %r out of range, defaulting to today", s)
        return today()


def day_of_year(d: DateLike) -> int:
    # days since Dec 31 of the previous year: Jan 1 -> 1
    d = local_date(d)
    return (d - date(d.year, 1, 1)).days + 1


def shift_identifier(s: str, days: int) -> str:
    d = parse_date_identifier(s)
    try:
        d = d + timedelta(days=days)
    except OverflowError:
        pass  # stays on the first/last representable day
    return to_date_identifier(d)
