# devotional/build_year.py
from __future__ import annotations

import calendar
import json
import os
from datetime import date, timedelta
from pathlib import Path
from typing import List

from .dates import today
from .generator import generate
from .schema import DevotionalEntry

# What we want to build
YEAR = int(os.getenv("YEAR", str(today().year)))
OUTPUT = Path(os.getenv("YEAR_OUTPUT", f"devotional_{YEAR}.json"))


def build_year(year: int) -> List[DevotionalEntry]:
    """Every day of `year` in date order (365 or 366 entries)."""
    start = date(year, 1, 1)
    days = 366 if calendar.isleap(year) else 365
    return [generate(start + timedelta(days=k)) for k in range(days)]


def write_year(year: int, output: Path) -> int:
    entries = build_year(year)
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8") as f:
        json.dump([e.model_dump() for e in entries], f, indent=2, ensure_ascii=False)
    return len(entries)


def main():
    count = write_year(YEAR, OUTPUT)
    print(f"[build_year] DONE: wrote {count} entries for {YEAR} to {OUTPUT}")


if __name__ == "__main__":
    main()
