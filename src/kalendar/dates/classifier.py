from __future__ import annotations

import re
from datetime import datetime, timedelta
from typing import Optional

from ..domain import Candidate, DateKind
from .errors import EmptyDateInput, UnparseableDate
from .grammar import contains_year, find_weekday_index, parse_calendar_text, wants_next_week

ISO_UTC_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?Z$")


def _parse_iso_utc(text: str) -> Optional[datetime]:
    if not ISO_UTC_PATTERN.match(text):
        return None
    stamp, _, fraction = text[:-1].partition(".")
    day_end = stamp.endswith("T24:00:00") and not fraction.strip("0")
    if day_end:
        # 24:00:00 is midnight at the end of that day.
        stamp = stamp[:-8] + "00:00:00"
    try:
        parsed = datetime.fromisoformat(f"{stamp}+00:00")
    except ValueError:
        return None
    if day_end:
        return parsed + timedelta(days=1)
    if fraction:
        parsed = parsed.replace(microsecond=int(fraction[:3].ljust(3, "0")) * 1000)
    return parsed


def weekday_on_or_after(weekday_index: int, reference: datetime) -> datetime:
    """Midnight of the first ``weekday_index`` (Sunday=0) on/after the reference date."""

    base = reference.replace(hour=0, minute=0, second=0, microsecond=0)
    reference_index = (base.weekday() + 1) % 7
    offset = (weekday_index - reference_index + 7) % 7
    return base + timedelta(days=offset)


def classify(raw: str, reference: datetime) -> Candidate:
    """Pick the interpretation for ``raw`` and build its initial candidate.

    Priority: strict ISO-8601 UTC, then the calendar grammar, then a
    weekday name search. ``"next"`` adds a week to weekday matches
    unconditionally.
    """

    text = raw.strip() if raw else ""
    if not text:
        raise EmptyDateInput()

    iso = _parse_iso_utc(text)
    if iso is not None:
        return Candidate(iso, DateKind.ISO)

    parsed = parse_calendar_text(text, reference)
    if parsed is not None:
        kind = DateKind.GENERAL if contains_year(text) else DateKind.MONTH_DAY
        return Candidate(parsed, kind)

    weekday_index = find_weekday_index(text)
    if weekday_index is not None:
        candidate = Candidate(weekday_on_or_after(weekday_index, reference), DateKind.WEEKDAY)
        if wants_next_week(text):
            candidate.add_days(7)
        return candidate

    raise UnparseableDate(raw)
