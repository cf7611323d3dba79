from __future__ import annotations

from enum import Enum


class DateKind(str, Enum):
    ISO = "iso"
    MONTH_DAY = "month_day"
    WEEKDAY = "weekday"
    GENERAL = "general"
