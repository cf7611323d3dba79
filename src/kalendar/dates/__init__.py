"""Natural-language date normalization."""

from __future__ import annotations

from .errors import DateNormalizationError, EmptyDateInput, UnparseableDate
from .normalizer import normalize_date, resolve, serialize, to_future_iso

__all__ = [
    "DateNormalizationError",
    "EmptyDateInput",
    "UnparseableDate",
    "normalize_date",
    "resolve",
    "serialize",
    "to_future_iso",
]
