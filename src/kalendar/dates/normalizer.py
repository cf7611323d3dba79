"""Turn free-form date text from upstream agents into future UTC instants."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from ..domain import Candidate, DateKind, NormalizationOptions
from .classifier import classify
from .errors import UnparseableDate
from .future import align_time_of_day, ensure_future, roll_month_day

logger = logging.getLogger(__name__)


def serialize(instant: datetime) -> str:
    """Render ``instant`` as ``YYYY-MM-DDTHH:MM:SS.sssZ``."""

    return (
        f"{instant.year:04d}-{instant.month:02d}-{instant.day:02d}"
        f"T{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}"
        f".{instant.microsecond // 1000:03d}Z"
    )


def resolve(
    text: str,
    *,
    reference: Optional[datetime] = None,
    align_with: Optional[datetime] = None,
) -> Candidate:
    options = NormalizationOptions.build(reference=reference, align_with=align_with)
    try:
        candidate = classify(text, options.reference)

        if options.align_with is not None:
            align_time_of_day(candidate, options.align_with)
        if candidate.kind is DateKind.MONTH_DAY:
            roll_month_day(candidate, options.reference)

        ensure_future(candidate, options.reference)
    except OverflowError as exc:
        # No future instant fits before datetime.MAXYEAR.
        raise UnparseableDate(text) from exc
    logger.debug(
        "Normalized %r as %s -> %s (reference %s)",
        text,
        candidate.kind.value,
        serialize(candidate.instant),
        serialize(options.reference),
    )
    return candidate


def normalize_date(
    text: str,
    *,
    reference: Optional[datetime] = None,
    align_with: Optional[datetime] = None,
) -> datetime:
    return resolve(text, reference=reference, align_with=align_with).instant


def to_future_iso(
    text: str,
    *,
    reference: Optional[datetime] = None,
    align_with: Optional[datetime] = None,
) -> str:
    """Convert a human-friendly date string into an ISO-8601 UTC timestamp.

    The result is guaranteed to be at or after ``reference`` (the current
    instant when omitted). Raises ``EmptyDateInput`` or ``UnparseableDate``.
    """

    return serialize(normalize_date(text, reference=reference, align_with=align_with))
