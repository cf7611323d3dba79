from __future__ import annotations

from dataclasses import dataclass
from datetime import MAXYEAR, datetime, timedelta, timezone
from typing import Optional

from .enums import DateKind


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime with millisecond precision.

    Naive values are taken to already be UTC wall-clock fields.
    """

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    else:
        value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond - value.microsecond % 1000)


@dataclass(slots=True)
class Candidate:
    """Instant under construction for a single normalization call."""

    instant: datetime
    kind: DateKind

    def __post_init__(self) -> None:
        self.instant = as_utc(self.instant)

    def add_days(self, days: int) -> None:
        self.instant += timedelta(days=days)

    def advance_year(self) -> None:
        """Move to the next year in which the same month and day exist.

        Raises ``OverflowError`` when no such year is left before ``MAXYEAR``.
        """

        for year in range(self.instant.year + 1, MAXYEAR + 1):
            try:
                self.instant = self.instant.replace(year=year)
            except ValueError:
                continue
            return
        raise OverflowError("date value out of range")

    def overlay_time(self, source: datetime) -> None:
        source = as_utc(source)
        self.instant = self.instant.replace(
            hour=source.hour,
            minute=source.minute,
            second=source.second,
            microsecond=source.microsecond,
        )

    def is_before(self, reference: datetime) -> bool:
        return self.instant < reference


@dataclass(frozen=True, slots=True)
class NormalizationOptions:
    reference: datetime
    align_with: Optional[datetime] = None

    @classmethod
    def build(
        cls,
        reference: Optional[datetime] = None,
        align_with: Optional[datetime] = None,
    ) -> "NormalizationOptions":
        resolved = reference if reference is not None else datetime.now(timezone.utc)
        return cls(
            reference=as_utc(resolved),
            align_with=as_utc(align_with) if align_with is not None else None,
        )
