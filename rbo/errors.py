"""Exceptions raised by the RBO computation.

Both are input-validation failures detected before any overlap is tracked,
so a caller either gets a complete result or one of these.
"""

from __future__ import annotations


class RboError(ValueError):
    """Base class for RBO input errors."""


class InvalidPersistence(RboError):
    """The persistence parameter is outside ``[0.0, 1.0)``."""

    def __init__(self, p: float):
        self.p = p
        super().__init__("Persistence parameter p must be 0.0 <= p < 1.0")


class DuplicatesInList(RboError):
    """A ranked list contains the same item more than once."""

    def __init__(self):
        super().__init__("Individual ranked lists should not contain duplicates")
