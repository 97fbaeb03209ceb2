"""Where: src/x500dn/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated values to the CLI without repeating fallback rules.
"""

from __future__ import annotations

from x500dn.config.config import Config
from x500dn.domain.distinguished_name import DEFAULT_SEPARATOR


# Formatting -------------------------------------------------------------------


def format_separator(configuration: Config) -> str:
    """Separator used by the command line when no --separator flag is given.

    An empty or non-string value in the config file falls back to the default.
    """
    separator = getattr(configuration, "separator", None)
    return separator if isinstance(separator, str) and separator else DEFAULT_SEPARATOR


__all__ = ["format_separator"]
