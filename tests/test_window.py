from datetime import date, timedelta

import pytest

from devotional.content import CATEGORIES
from devotional.generator import generate
from devotional.window import build_window, search, search_blob

CENTER = date(2024, 3, 1)


@pytest.fixture(scope="module")
def window():
    return build_window(CENTER, 120, 30)


def test_default_window_has_151_days_in_order(window):
    assert len(window) == 151
    assert window[0].date_iso == (CENTER - timedelta(days=120)).isoformat() == "2023-11-02"
    assert window[-1].date_iso == (CENTER + timedelta(days=30)).isoformat() == "2024-03-31"
    ids = [e.id for e in window]
    assert ids == sorted(ids)
    assert len(set(ids)) == 151


def test_window_entries_are_the_generated_entries(window):
    assert window[120] == generate(CENTER)


def test_window_defaults_match_search_window():
    assert len(build_window(CENTER)) == 151


def test_window_spans_leap_day():
    ids = [e.id for e in build_window(date(2024, 2, 28), 0, 2)]
    assert ids == ["2024-02-28", "2024-02-29", "2024-03-01"]


def test_single_day_window():
    assert [e.id for e in build_window(CENTER, 0, 0)] == ["2024-03-01"]


def test_negative_bounds_are_rejected():
    with pytest.raises(ValueError):
        build_window(CENTER, -1, 0)


def test_search_forgive_respects_category(window):
    target = next(e for e in window if e.category == "Marriage" and "forgive" in e.guided_prayer.lower())
    assert target in search(window, "All", "forgive")
    assert target not in search(window, "Children", "forgive")


def test_search_is_case_insensitive_and_trimmed(window):
    assert search(window, "All", "  FORGIVE ") == search(window, "All", "forgive")


def test_search_covers_scripture_fields(window):
    hits = search(window, "All", "Proverbs 22:6")
    assert hits
    assert all("proverbs 22:6" in search_blob(e) for e in hits)
    assert {e.category for e in hits} <= {"Children", "Grandchildren"}


def test_search_does_not_match_journal_prompts(window):
    # prompt text only; not part of the searchable fields
    assert search(window, "All", "which child (or area)") == []


def test_empty_query_filters_only_by_category(window):
    hits = search(window, "Parents", "", limit=1000)
    assert hits == [e for e in window if e.category == "Parents"]
    assert len(hits) == 30


def test_all_filter_is_case_insensitive(window):
    assert search(window, "all", "", limit=1000) == window


def test_unknown_category_matches_nothing(window):
    assert search(window, "Cousins", "") == []


def test_results_keep_window_order_and_cap_after_filtering(window):
    capped = search(window, "All", "")
    assert capped == window[:60]
    marriage = search(window, "Marriage", "", limit=5)
    assert marriage == [e for e in window if e.category == "Marriage"][:5]


def test_every_category_appears_in_the_window(window):
    assert {e.category for e in window} == set(CATEGORIES)
