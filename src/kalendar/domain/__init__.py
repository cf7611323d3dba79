"""Domain types for date normalization."""

from __future__ import annotations

from .enums import DateKind
from .models import Candidate, NormalizationOptions, as_utc

__all__ = ["Candidate", "DateKind", "NormalizationOptions", "as_utc"]
