from __future__ import annotations


class DateNormalizationError(ValueError):
    """Base class for failures while normalizing free-form date text."""


class EmptyDateInput(DateNormalizationError):
    def __init__(self) -> None:
        super().__init__("Empty date value received")


class UnparseableDate(DateNormalizationError):
    def __init__(self, raw: str) -> None:
        super().__init__(f'Cannot parse date string: "{raw}"')
        self.raw = raw
