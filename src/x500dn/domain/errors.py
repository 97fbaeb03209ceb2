"""
Summary: Lookup failures raised when querying a distinguished name.
Why: Give callers distinct types for "missing" and "more than one" answers.
"""

from __future__ import annotations

from collections.abc import Sequence


class DistinguishedNameError(LookupError):
    """Base class for failed single-value lookups on a distinguished name."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(message)
        self.key: str = key


class NotFoundError(DistinguishedNameError):
    """Raised when no component carries the requested key."""

    def __init__(self, key: str) -> None:
        super().__init__(key, f"no {key} elements found")


class AmbiguityError(DistinguishedNameError):
    """Raised when more than one component carries the requested key."""

    def __init__(self, key: str, values: Sequence[str]) -> None:
        super().__init__(key, f"more than one {key} element found ({len(values)})")
        self.values: tuple[str, ...] = tuple(values)


__all__ = ["AmbiguityError", "DistinguishedNameError", "NotFoundError"]
