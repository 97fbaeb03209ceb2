"""Parse, query, and rebuild canonical X.500 distinguished names.

    >>> from x500dn import DistinguishedName
    >>> dn = DistinguishedName("CN=Ethel the Aardvark, OU=AntBGone Dept")
    >>> dn.common_name()
    'Ethel the Aardvark'
    >>> dn.format()
    'CN=Ethel the Aardvark; OU=AntBGone Dept'
"""

from x500dn.domain import (
    COMMON_NAME_KEY,
    COUNTRY_NAME_KEY,
    DEFAULT_SEPARATOR,
    LOCALITY_NAME_KEY,
    ORGANIZATIONAL_UNIT_KEY,
    ORGANIZATION_NAME_KEY,
    STATE_OR_PROVINCE_NAME_KEY,
    STREET_ADDRESS_KEY,
    AmbiguityError,
    Component,
    DistinguishedName,
    DistinguishedNameError,
    FormatOptions,
    NotFoundError,
    StandardKey,
    parse_component,
    parse_components,
    split,
)

__version__ = "0.1.0"

__all__ = [
    "AmbiguityError",
    "COMMON_NAME_KEY",
    "COUNTRY_NAME_KEY",
    "Component",
    "DEFAULT_SEPARATOR",
    "DistinguishedName",
    "DistinguishedNameError",
    "FormatOptions",
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
