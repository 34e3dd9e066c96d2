"""Exceptions raised by year_bounds."""

from __future__ import annotations


class OutOfRangeError(OverflowError):
    """Raised when a computed instant falls outside the range `datetime` can represent."""

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation} is out of range: {detail}")
