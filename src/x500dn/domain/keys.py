"""
Summary: Standardised attribute keywords for canonical distinguished names.
Why: Name the common attribute types once instead of scattering literals.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Final

COMMON_NAME_KEY: Final[str] = "CN"
LOCALITY_NAME_KEY: Final[str] = "L"
STATE_OR_PROVINCE_NAME_KEY: Final[str] = "ST"
ORGANIZATION_NAME_KEY: Final[str] = "O"
ORGANIZATIONAL_UNIT_KEY: Final[str] = "OU"
COUNTRY_NAME_KEY: Final[str] = "C"
STREET_ADDRESS_KEY: Final[str] = "STREET"


class StandardKey(StrEnum):
    """Standard attribute keywords as an enumeration."""

    COMMON_NAME = COMMON_NAME_KEY
    LOCALITY_NAME = LOCALITY_NAME_KEY
    STATE_OR_PROVINCE_NAME = STATE_OR_PROVINCE_NAME_KEY
    ORGANIZATION_NAME = ORGANIZATION_NAME_KEY
    ORGANIZATIONAL_UNIT = ORGANIZATIONAL_UNIT_KEY
    COUNTRY_NAME = COUNTRY_NAME_KEY
    STREET_ADDRESS = STREET_ADDRESS_KEY


__all__ = [
    "COMMON_NAME_KEY",
    "COUNTRY_NAME_KEY",
    "LOCALITY_NAME_KEY",
    "ORGANIZATIONAL_UNIT_KEY",
    "ORGANIZATION_NAME_KEY",
    "STATE_OR_PROVINCE_NAME_KEY",
    "STREET_ADDRESS_KEY",
    "StandardKey",
]
