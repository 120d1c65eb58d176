from datetime import date, timedelta

import pytest

from devotional import generator
from devotional.content import CATEGORIES, COMMON_ACTION_STEPS, MODULES, action_pool
from devotional.dates import day_of_year, parse_date_identifier
from devotional.generator import capitalize, generate, pick_from, variation_indices


def test_same_date_generates_identical_entry():
    d = date(2024, 8, 17)
    assert generate(d) == generate(d)
    assert generate(d).model_dump() == generate(date(2024, 8, 17)).model_dump()


def test_new_year_maps_to_first_category():
    entry = generate(parse_date_identifier("2024-01-01"))
    assert entry.day_of_year == 1
    assert entry.category == CATEGORIES[0]
    assert entry.id == entry.date_iso == "2024-01-01"


def test_category_rotation_follows_day_of_year():
    d = date(2023, 11, 1)
    for _ in range(120):
        assert generate(d).category == CATEGORIES[(day_of_year(d) - 1) % 5]
        d += timedelta(days=1)


def test_consecutive_days_cycle_through_categories():
    start = date(2024, 1, 1)
    seen = [generate(start + timedelta(days=k)).category for k in range(10)]
    assert seen == list(CATEGORIES) * 2


def test_rotation_restarts_every_january_first():
    # Dec 31 of a common year is day 365 -> last category; Jan 1 is always first
    assert generate(date(2023, 12, 31)).category == CATEGORIES[4]
    assert generate(date(2024, 1, 1)).category == CATEGORIES[0]
    # day 366 of a leap year -> first category, then Jan 1 -> first again
    assert generate(date(2024, 12, 31)).category == CATEGORIES[0]
    assert generate(date(2025, 1, 1)).category == CATEGORIES[0]


def test_same_day_of_year_in_other_year_keeps_category_but_varies_content():
    a = generate(date(2023, 3, 15))
    b = generate(date(2025, 3, 15))
    assert a.day_of_year == b.day_of_year
    assert a.category == b.category
    # two years apart shifts i1 and i2 by 2
    assert (a.focus, a.scripture_ref) != (b.focus, b.scripture_ref)


def test_indices_match_the_hash_constants():
    assert variation_indices(1, 2024) == ((7 + 2024) % 997, (13 + 2024) % 991)
    assert variation_indices(366, 2024) == ((366 * 7 + 2024) % 997, (366 * 13 + 2024) % 991)


def test_fields_are_picked_per_pool_length():
    d = date(2024, 1, 1)
    i1, i2 = variation_indices(1, 2024)  # 37, 55
    mod = MODULES["Marriage"]
    entry = generate(d)
    assert entry.focus == mod["focuses"][i1 % 15]
    assert (entry.scripture_ref, entry.scripture_idea) == mod["scriptures"][i2 % 10]
    assert entry.guided_prayer == mod["prayers"][i1 % 8]
    assert entry.journal_prompts == [mod["prompts"][i1 % 5], mod["prompts"][(i2 + 3) % 5]]
    assert entry.action_step == action_pool("Marriage")[i2 % 9]


def test_known_entry_for_new_year_2024():
    entry = generate(date(2024, 1, 1))
    assert entry.title == "Marriage: Friendship and joy"
    assert entry.scripture_ref == "Proverbs 4:23"
    assert entry.guided_prayer == "Protect our marriage from temptation, distraction, and division."
    assert entry.journal_prompts == [
        "Is there anything we need to forgive or address gently and directly?",
        "What is one practical way I can honor my spouse today?",
    ]
    assert entry.action_step.startswith("Ask: ")


def test_title_capitalizes_focus():
    entry = generate(date(2024, 6, 2))
    assert entry.title == f"{entry.category}: {capitalize(entry.focus)}"


def test_action_pool_appends_common_steps():
    pool = action_pool("Parents")
    assert pool[-len(COMMON_ACTION_STEPS):] == COMMON_ACTION_STEPS
    assert action_pool("Unknown") == COMMON_ACTION_STEPS


@pytest.mark.parametrize("s, expected", [
    ("", ""),
    ("a", "A"),
    ("healthy decision-making", "Healthy decision-making"),
    ("early love for God", "Early love for God"),
])
def test_capitalize_only_touches_first_character(s, expected):
    assert capitalize(s) == expected


def test_pick_from_handles_tiny_and_empty_pools():
    assert pick_from(("only",), 997) == "only"
    assert pick_from((), 5) == ""
    assert pick_from(("a", "b", "c"), 4) == "b"


def test_empty_pools_degrade_to_empty_strings(monkeypatch):
    empty = {"focuses": (), "scriptures": (), "prayers": (), "prompts": ()}
    monkeypatch.setitem(generator.MODULES, "Marriage", empty)
    entry = generate(date(2024, 1, 1))
    assert entry.focus == ""
    assert entry.title == "Marriage: "
    assert entry.scripture_ref == entry.scripture_idea == ""
    assert entry.guided_prayer == ""
    assert entry.journal_prompts == []


def test_every_day_of_a_year_resolves():
    d = date(2024, 1, 1)
    while d.year == 2024:
        entry = generate(d)
        assert entry.focus and entry.scripture_ref and entry.guided_prayer and entry.action_step
        assert 1 <= len(entry.journal_prompts) <= 2
        d += timedelta(days=1)
