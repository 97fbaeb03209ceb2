"""
Summary: Split a canonical distinguished name into trimmed component fields.
Why: Keep separator handling apart from key/value interpretation.
"""

from __future__ import annotations

import re
from typing import Final

# Every "," or ";" separates two fields; runs of separators yield no fields.
SEPARATOR_PATTERN: Final[re.Pattern[str]] = re.compile(r"[,;]")


def split(text: str) -> list[str]:
    """Split ``text`` on ``,`` and ``;`` into whitespace-trimmed fields.

    Empty fields between consecutive separators are discarded. A field that
    holds only whitespace survives as an empty string; the component parser
    drops it later.

    Args:
        text: Canonical distinguished name, e.g. ``"CN=Ethel, OU=Ants"``.

    Returns:
        list[str]: Trimmed fields in order of appearance.
    """
    if not text:
        return []
    return [field.strip() for field in SEPARATOR_PATTERN.split(text) if field]


__all__ = ["SEPARATOR_PATTERN", "split"]
