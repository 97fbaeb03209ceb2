"""Tests for settings module behavior."""

from __future__ import annotations

import pytest

from x500dn.config.config import Config
from x500dn.config.settings import format_separator
from x500dn.domain import DEFAULT_SEPARATOR


def test_separator_defaults() -> None:
    """Default configuration formats with the library default separator."""
    assert format_separator(Config()) == DEFAULT_SEPARATOR


def test_separator_from_config() -> None:
    assert format_separator(Config(separator=", ")) == ", "


@pytest.mark.parametrize("value", ["", 7])
def test_invalid_separator_falls_back(value: object) -> None:
    configuration = Config(separator=value)  # pyright: ignore[reportArgumentType]

    assert format_separator(configuration) == DEFAULT_SEPARATOR
