from __future__ import annotations

from datetime import datetime, timezone

import pytest

from kalendar.dates.grammar import contains_year, find_weekday_index, parse_calendar_text, wants_next_week

REFERENCE = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


def utc(*fields: int) -> datetime:
    return datetime(*fields, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("March 5", utc(2026, 3, 5)),
        ("march 5th", utc(2026, 3, 5)),
        ("Mar. 5, 2027", utc(2027, 3, 5)),
        ("5 March 2028", utc(2028, 3, 5)),
        ("the", None),
        ("Friday, March 5, 2027", utc(2027, 3, 5)),
        ("Sept 12 at 3pm", utc(2026, 9, 12, 15)),
        ("December 24 18:30", utc(2026, 12, 24, 18, 30)),
        ("2026-03-05", utc(2026, 3, 5)),
        ("2026/03/05 09:15", utc(2026, 3, 5, 9, 15)),
        ("3/5/2026", utc(2026, 3, 5)),
        ("12th of August", utc(2026, 8, 12)),
    ],
)
def test_parse_calendar_text(text, expected):
    assert parse_calendar_text(text, REFERENCE) == expected


@pytest.mark.parametrize(
    "text",
    ["February 30", "Smarch 5", "March 5 15", "March 5 13pm", "2026-13-01", "friday", "next friday 3pm"],
)
def test_parse_calendar_text_rejects_unknown_or_impossible_dates(text):
    assert parse_calendar_text(text, REFERENCE) is None


def test_leap_day_without_year_uses_next_leap_year():
    assert parse_calendar_text("Feb 29", REFERENCE) == utc(2028, 2, 29)


@pytest.mark.parametrize(
    ("text", "index"),
    [
        ("sunday brunch", 0),
        ("MON", 1),
        ("see you Tue", 2),
        ("wednesday", 3),
        ("thur", 4),
        ("thu", 4),
        ("Friday", 5),
        ("sat.", 6),
        ("someday", None),
        ("monsoon", None),
    ],
)
def test_find_weekday_index(text, index):
    assert find_weekday_index(text) == index


def test_year_and_next_tokens():
    assert contains_year("March 5, 2026")
    assert not contains_year("March 5 at 10:30")
    assert wants_next_week("Next Friday")
    assert not wants_next_week("nextfriday")
