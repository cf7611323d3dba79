from __future__ import annotations

import math
from datetime import datetime, timedelta

from ..domain import Candidate, DateKind

_DAY = timedelta(days=1)


def align_time_of_day(candidate: Candidate, align_with: datetime) -> None:
    """Copy the clock fields of ``align_with`` onto weekday candidates."""

    if candidate.kind is DateKind.WEEKDAY:
        candidate.overlay_time(align_with)


def roll_month_day(candidate: Candidate, reference: datetime) -> None:
    while candidate.is_before(reference):
        candidate.advance_year()


def ensure_future(candidate: Candidate, reference: datetime) -> Candidate:
    """Shift ``candidate`` so it is not earlier than ``reference``.

    Weekdays move by whole weeks and month/day dates by whole years. Anything
    else (explicit years and ISO timestamps) is pushed forward by the number
    of days it trails the reference, rounded up.
    """

    if not candidate.is_before(reference):
        return candidate

    if candidate.kind is DateKind.WEEKDAY:
        while candidate.is_before(reference):
            candidate.add_days(7)
    elif candidate.kind is DateKind.MONTH_DAY:
        roll_month_day(candidate, reference)
    else:
        behind = reference - candidate.instant
        candidate.add_days(math.ceil(behind / _DAY))
    return candidate
