# Path: `src/x500dn/domain/__init__.py`
# Summary: Export the parsing and formatting domain symbols.
# Why: Provide a stable import surface for the CLI and tests.

from .component import KEY_VALUE_DELIMITER, Component, parse_component, parse_components
from .distinguished_name import (
    DEFAULT_FORMAT_OPTIONS,
    DEFAULT_SEPARATOR,
    DistinguishedName,
    FormatOptions,
)
from .errors import AmbiguityError, DistinguishedNameError, NotFoundError
from .keys import (
    COMMON_NAME_KEY,
    COUNTRY_NAME_KEY,
    LOCALITY_NAME_KEY,
    ORGANIZATIONAL_UNIT_KEY,
    ORGANIZATION_NAME_KEY,
    STATE_OR_PROVINCE_NAME_KEY,
    STREET_ADDRESS_KEY,
    StandardKey,
)
from .splitter import split

__all__ = [
    "AmbiguityError",
    "COMMON_NAME_KEY",
    "COUNTRY_NAME_KEY",
    "Component",
    "DEFAULT_FORMAT_OPTIONS",
    "DEFAULT_SEPARATOR",
    "DistinguishedName",
    "DistinguishedNameError",
    "FormatOptions",
    "KEY_VALUE_DELIMITER",
    "LOCALITY_NAME_KEY",
    "NotFoundError",
    "ORGANIZATIONAL_UNIT_KEY",
    "ORGANIZATION_NAME_KEY",
    "STATE_OR_PROVINCE_NAME_KEY",
    "STREET_ADDRESS_KEY",
    "StandardKey",
    "parse_component",
    "parse_components",
    "split",
]
