from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..dates import resolve
from ..domain import as_utc
from .models import NormalizedDatePayload
from .registry import register_api


def _require_text(name: str, value: Any, *, optional: bool = False) -> None:
    if value is None and optional:
        return
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")


def parse_timestamp(timestamp: str) -> datetime:
    try:
        return as_utc(datetime.fromisoformat(timestamp.strip().replace("Z", "+00:00")))
    except ValueError as exc:  # noqa: TRY003
        raise ValueError(f"Invalid ISO timestamp: {timestamp}") from exc


@register_api(
    "normalize_date",
    description=(
        "Convert a free-form date phrase (ISO timestamp, 'March 5', 'next friday', ...) "
        "into an ISO-8601 UTC timestamp that is never earlier than the reference instant."
    ),
    category="dates",
    tags=("dates", "normalize"),
    parameter_docs={
        "text": "Date phrase to normalize.",
        "reference": "ISO-8601 instant treated as 'now'. Defaults to the current time.",
        "align_with": "ISO-8601 instant whose time of day is applied to weekday-only phrases.",
    },
)
def normalize_date(
    text: str,
    reference: Optional[str] = None,
    align_with: Optional[str] = None,
) -> Dict[str, Any]:
    _require_text("text", text)
    _require_text("reference", reference, optional=True)
    _require_text("align_with", align_with, optional=True)
    reference_dt = parse_timestamp(reference) if reference else as_utc(datetime.now(timezone.utc))
    align_dt = parse_timestamp(align_with) if align_with else None
    candidate = resolve(text, reference=reference_dt, align_with=align_dt)
    payload = NormalizedDatePayload.from_candidate(
        text,
        candidate,
        reference=reference_dt,
        aligned_with=align_dt,
    )
    return payload.model_dump()
