"""Enumerated English date grammar used before falling back to weekday names.

Month and weekday names are fixed English tables rather than ``calendar``'s
locale-dependent ones so that parsing behaves the same on every machine.
"""

from __future__ import annotations

import re
from datetime import MAXYEAR, date, datetime, time, timezone
from typing import Optional

MONTH_NAMES = (
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
)

_MONTH_LOOKUP = {name: idx for idx, name in enumerate(MONTH_NAMES, start=1)}
_MONTH_LOOKUP.update({name[:3]: idx for idx, name in enumerate(MONTH_NAMES, start=1)})
_MONTH_LOOKUP["sept"] = 9

# Sunday is index 0.
WEEKDAY_ALIASES = (
    (0, re.compile(r"\b(sunday|sun)\b", re.IGNORECASE)),
    (1, re.compile(r"\b(monday|mon)\b", re.IGNORECASE)),
    (2, re.compile(r"\b(tuesday|tue)\b", re.IGNORECASE)),
    (3, re.compile(r"\b(wednesday|wed)\b", re.IGNORECASE)),
    (4, re.compile(r"\b(thursday|thu|thur)\b", re.IGNORECASE)),
    (5, re.compile(r"\b(friday|fri)\b", re.IGNORECASE)),
    (6, re.compile(r"\b(saturday|sat)\b", re.IGNORECASE)),
)

_WEEKDAY_PREFIX = (
    r"(?:(?:sunday|sun|monday|mon|tuesday|tues|tue|wednesday|wed|"
    r"thursday|thurs|thur|thu|friday|fri|saturday|sat)\.?,?\s+)?"
)
_DAY = r"(?P<day>\d{1,2})(?:st|nd|rd|th)?"
_YEAR = r"(?P<year>\d{4})"
_TIME_CORE = (
    r"(?P<hour>\d{1,2})(?::(?P<minute>\d{2})(?::(?P<second>\d{2}))?)?"
    r"\s*(?P<meridiem>am|pm)?"
)
_TIME = rf"(?:,?\s+(?:at\s+)?{_TIME_CORE})?"

_PATTERNS = (
    re.compile(rf"^{_YEAR}[-/](?P<month>\d{{1,2}})[-/](?P<day>\d{{1,2}})(?:[ t]{_TIME_CORE})?$"),
    re.compile(rf"^(?P<month>\d{{1,2}})/(?P<day>\d{{1,2}})/{_YEAR}{_TIME}$"),
    re.compile(rf"^{_WEEKDAY_PREFIX}(?P<month_name>[a-z]+)\.?\s+{_DAY}(?:,?\s+{_YEAR})?{_TIME}$"),
    re.compile(rf"^{_WEEKDAY_PREFIX}{_DAY}\s+(?:of\s+)?(?P<month_name>[a-z]+)\.?(?:,?\s+{_YEAR})?{_TIME}$"),
)

YEAR_TOKEN = re.compile(r"\b\d{4}\b")
NEXT_TOKEN = re.compile(r"\bnext\b", re.IGNORECASE)


def _month_from(match: re.Match[str]) -> Optional[int]:
    groups = match.groupdict()
    if groups.get("month_name"):
        return _MONTH_LOOKUP.get(groups["month_name"])
    month = int(groups["month"])
    return month if 1 <= month <= 12 else None


def _time_from(match: re.Match[str]) -> Optional[time]:
    groups = match.groupdict()
    if groups.get("hour") is None:
        return time()
    hour = int(groups["hour"])
    minute = int(groups["minute"] or 0)
    second = int(groups["second"] or 0)
    meridiem = groups.get("meridiem")
    if meridiem:
        if not 1 <= hour <= 12:
            return None
        if meridiem == "pm" and hour < 12:
            hour += 12
        if meridiem == "am" and hour == 12:
            hour = 0
    elif groups.get("minute") is None:
        # A bare number after the date is not a time without am/pm.
        return None
    if hour > 23 or minute > 59 or second > 59:
        return None
    return time(hour, minute, second)


def _first_valid_year(month: int, day: int, start_year: int) -> Optional[int]:
    try:
        date(2000, month, day)
    except ValueError:
        return None
    for year in range(start_year, MAXYEAR + 1):
        try:
            date(year, month, day)
        except ValueError:
            continue
        return year
    return None


def parse_calendar_text(text: str, reference: datetime) -> Optional[datetime]:
    """Parse ``text`` with the enumerated grammar, returning a UTC instant.

    Dates written without a year are placed in the reference's year (or the
    next year in which that month/day exists). Returns ``None`` when the text
    does not match or names an impossible date or time.
    """

    cleaned = " ".join(text.lower().split())
    for pattern in _PATTERNS:
        match = pattern.match(cleaned)
        if match:
            break
    else:
        return None

    month = _month_from(match)
    clock = _time_from(match)
    if month is None or clock is None:
        return None
    day = int(match.group("day"))

    if match.group("year"):
        year: Optional[int] = int(match.group("year"))
    else:
        year = _first_valid_year(month, day, reference.year)
    if year is None:
        return None

    try:
        return datetime.combine(date(year, month, day), clock, tzinfo=timezone.utc)
    except ValueError:
        return None


def find_weekday_index(text: str) -> Optional[int]:
    for index, pattern in WEEKDAY_ALIASES:
        if pattern.search(text):
            return index
    return None


def contains_year(text: str) -> bool:
    return YEAR_TOKEN.search(text) is not None


def wants_next_week(text: str) -> bool:
    return NEXT_TOKEN.search(text) is not None
