"""
Summary: Immutable distinguished name with ordered components and a key index.
Why: Offer lookup and normalized reconstruction over one parsed input string.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final, final, override

from x500dn.domain.component import Component, parse_components
from x500dn.domain.errors import AmbiguityError, NotFoundError
from x500dn.domain.keys import COMMON_NAME_KEY
from x500dn.domain.splitter import split
from x500dn.platform.logging import logger

DEFAULT_SEPARATOR: Final[str] = "; "


@final
@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Options controlling how a distinguished name is rendered."""

    # Placed strictly between rendered components.
    separator: str = DEFAULT_SEPARATOR


DEFAULT_FORMAT_OPTIONS: Final[FormatOptions] = FormatOptions()


@final
class DistinguishedName:
    """A canonical distinguished name split into its key/value components.

    Only the simplified canonical syntax is understood: components are
    separated by ``,`` or ``;`` and each one is an optional ``KEY=`` prefix
    followed by a value. Quoting, escaping and multi-valued RDNs are not
    supported.

    Instances never change after construction. Malformed input is never
    rejected; fields that cannot form a component are dropped.
    """

    __slots__ = ("_original", "_components", "_index")

    _original: str
    _components: tuple[Component, ...]
    _index: Mapping[str, tuple[str, ...]]

    def __init__(self, text: str) -> None:
        """Parse ``text`` into components and build the key index.

        Args:
            text: Canonical distinguished name, e.g. ``"CN=Ethel, OU=Ants"``.
        """
        self._original = text
        self._components = tuple(parse_components(text))

        index: dict[str, list[str]] = {}
        for component in self._components:
            index.setdefault(component.key, []).append(component.value)
        self._index = MappingProxyType({key: tuple(values) for key, values in index.items()})

        if not logger.isEnabledFor(logging.DEBUG):
            return
        logger.debug(
            "Parsed %d components from %r",
            len(self._components),
            text,
            extra={
                "dn_event": "dn.parse.complete",
                "original": text,
                "field_count": len(split(text)),
                "component_count": len(self._components),
            },
        )

    @classmethod
    def parse(cls, text: str) -> DistinguishedName:
        """Alternative constructor, identical to ``DistinguishedName(text)``."""
        return cls(text)

    @property
    def original(self) -> str:
        """The raw input string."""
        return self._original

    @property
    def components(self) -> tuple[Component, ...]:
        """Components in order of appearance."""
        return self._components

    @property
    def index(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only mapping of key to its values in order of appearance."""
        return self._index

    def keys(self) -> list[str]:
        """Distinct keys in order of first appearance."""
        return list(self._index)

    def get_values(self, key: str) -> list[str]:
        """Retrieve all the values for a given key.

        Args:
            key: Attribute key, e.g. ``"OU"``. ``""`` selects anonymous values.

        Returns:
            list[str]: Values in order of appearance, empty when the key is absent.
        """
        return list(self._index.get(key, ()))

    def single_value(self, key: str) -> str:
        """Fetch the only value carried by ``key``.

        Raises:
            NotFoundError: If no component has ``key``.
            AmbiguityError: If more than one component has ``key``.
        """
        values = self.get_values(key)
        if not values:
            raise NotFoundError(key)
        if len(values) > 1:
            raise AmbiguityError(key, values)
        return values[0]

    def common_name(self) -> str:
        """Fetch the common name (``CN``) value.

        Raises:
            NotFoundError: If there is no ``CN`` component.
            AmbiguityError: If there is more than one ``CN`` component.
        """
        return self.single_value(COMMON_NAME_KEY)

    def format(self, options: FormatOptions | None = None) -> str:
        """Rebuild a normalized string from the components.

        Args:
            options: Rendering options; defaults to ``"; "`` between components.

        Returns:
            str: e.g. ``"CN=Ethel the Aardvark; OU=Australia"``.
        """
        opts = options or DEFAULT_FORMAT_OPTIONS
        return opts.separator.join(str(component) for component in self._components)

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[Component]:
        return iter(self._components)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DistinguishedName):
            return NotImplemented
        return self._components == other._components

    @override
    def __hash__(self) -> int:
        return hash(self._components)

    @override
    def __str__(self) -> str:
        return self.format()

    @override
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._original!r})"


__all__ = [
    "DEFAULT_FORMAT_OPTIONS",
    "DEFAULT_SEPARATOR",
    "DistinguishedName",
    "FormatOptions",
]
