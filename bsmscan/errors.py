from __future__ import annotations

from typing import Iterable, Tuple


class ScanError(Exception):
    """Base class for configuration and wiring defects.

    These are logic errors, never a physical exclusion of a point, and are
    not meant to be caught inside the constraint pipeline.
    """


class AnnotationError(ScanError):
    pass


class UnknownKey(AnnotationError):
    def __init__(self, key: str) -> None:
        super().__init__(f"Unknown key {key}")
        self.key = key


class DuplicateKey(AnnotationError):
    """Raised when an annotation would be overwritten.

    ``keys`` holds every colliding key, which is more than one when raised
    from a merge.
    """

    def __init__(self, message: str, keys: Iterable[str]) -> None:
        super().__init__(message)
        self.keys: Tuple[str, ...] = tuple(keys)


class DimensionMismatch(ScanError, ValueError):
    pass


class InvalidSeverityValue(ScanError):
    """Malformed severity. Not a ValueError, so configuration validators let it through unchanged."""
