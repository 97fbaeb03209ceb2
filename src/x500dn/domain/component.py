"""
Summary: Key/value components and the rules that turn fields into them.
Why: Centralize the permissive blank-key and blank-value filtering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, final, override

from x500dn.domain.splitter import split
from x500dn.platform.logging import logger

KEY_VALUE_DELIMITER: Final[str] = "="


@final
@dataclass(frozen=True, slots=True)
class Component:
    """A name component pair, e.g. ``("CN", "Ethel the Aardvark")``.

    An empty ``key`` marks an anonymous value.
    """

    key: str
    value: str

    @property
    def is_anonymous(self) -> bool:
        """Whether the component carries a value without a key."""
        return not self.key

    @override
    def __str__(self) -> str:
        if self.key:
            return f"{self.key}{KEY_VALUE_DELIMITER}{self.value}"
        return self.value


def _drop(field: str, reason: str) -> None:
    logger.debug(
        "Dropped field %r (%s)",
        field,
        reason,
        extra={"dn_event": "dn.component.dropped", "field": field, "reason": reason},
    )


def parse_component(field: str) -> Component | None:
    """Interpret a single field as a component.

    The field is split on every ``=`` and each piece is trimmed. Without
    any ``=`` the field is an anonymous value. Otherwise the first two
    pieces become key and value and any further pieces are ignored, so
    ``a=b=c`` yields ``("a", "b")``.

    Args:
        field: One field produced by :func:`split`.

    Returns:
        Component | None: The parsed component, or ``None`` when the key is
        present but blank (``=Sunny``) or the value is blank (``O= ``).
    """
    sides = [side.strip() for side in field.split(KEY_VALUE_DELIMITER)]

    if len(sides) == 1:
        component = Component(key="", value=sides[0])
    elif sides[0]:
        component = Component(key=sides[0], value=sides[1])
    else:
        # A blank but present key discards the whole field, value included.
        _drop(field, "blank key")
        return None

    if not component.value:
        _drop(field, "blank value")
        return None
    return component


def parse_components(text: str) -> list[Component]:
    """Convert a full canonical distinguished name into its components.

    Args:
        text: Canonical distinguished name.

    Returns:
        list[Component]: Surviving components in order of appearance.
    """
    components: list[Component] = []
    for field in split(text):
        component = parse_component(field)
        if component is not None:
            components.append(component)
    return components


__all__ = ["Component", "KEY_VALUE_DELIMITER", "parse_component", "parse_components"]
