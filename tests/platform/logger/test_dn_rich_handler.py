"""Tests for the ``DnRichHandler`` event rendering."""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any

from rich.console import Console
from rich.text import Text

from x500dn.platform.logging import DnRichHandler


def _make_handler() -> DnRichHandler:
    """Create a handler instance with an in-memory console."""

    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return DnRichHandler(console=console)


def _build_record(msg: str = "", **extras: Any) -> logging.LogRecord:
    """Create a ``LogRecord`` populated with event extras for testing."""

    record = logging.LogRecord(
        name="x500dn",
        level=logging.DEBUG,
        pathname="test",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_render_parse_complete_reports_counts() -> None:
    handler = _make_handler()
    record = _build_record(
        dn_event="dn.parse.complete",
        original=",OU=Australia,O= ,C=OZ",
        field_count=3,
        component_count=2,
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "Parsed [components=2, dropped=1]" in plain
    assert ",OU=Australia,O= ,C=OZ" in plain


def test_render_parse_complete_truncates_long_names() -> None:
    handler = _make_handler()
    original = "CN=" + "x" * 200
    record = _build_record(
        dn_event="dn.parse.complete",
        original=original,
        field_count=1,
        component_count=1,
    )

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)

    plain = rendered.plain
    assert "…" in plain
    assert original not in plain
    assert "dropped" not in plain


def test_render_dropped_field_shows_reason() -> None:
    handler = _make_handler()
    record = _build_record(dn_event="dn.component.dropped", field="=Sunny", reason="blank key")

    rendered = handler.render_message(record, "")
    assert isinstance(rendered, Text)
    assert "Dropped field '=Sunny' (blank key)" in rendered.plain


def test_render_query_error_uses_message() -> None:
    handler = _make_handler()
    record = _build_record("no CN elements found", dn_event="dn.query.error")

    rendered = handler.render_message(record, "no CN elements found")
    assert isinstance(rendered, Text)
    assert "no CN elements found" in rendered.plain


def test_render_plain_records_fall_back_to_rich() -> None:
    handler = _make_handler()
    record = _build_record("Configuration saved")

    rendered = handler.render_message(record, "Configuration saved")
    assert isinstance(rendered, Text)
    assert rendered.plain == "Configuration saved"
