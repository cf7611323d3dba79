"""Kalendar: normalize agent-produced date phrases into future UTC timestamps."""

from __future__ import annotations

from .dates import (
    DateNormalizationError,
    EmptyDateInput,
    UnparseableDate,
    normalize_date,
    to_future_iso,
)

__all__ = [
    "DateNormalizationError",
    "EmptyDateInput",
    "UnparseableDate",
    "normalize_date",
    "to_future_iso",
]
