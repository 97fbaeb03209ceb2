"""Rich console handler with dedicated rendering for distinguished-name events.

Where: platform/logging/handlers.py
What: Render structured parse/query log records with icons and colours.
Why: Keep console formatting out of the parsing code that emits the records.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class DnRichHandler(RichHandler):
    """Custom Rich handler that highlights distinguished-name events."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "dn.parse.complete": ("✅", "green"),
        "dn.component.dropped": ("↪️", "yellow"),
        "dn.query.error": ("⛔", "red"),
    }
    _VALUE_PREVIEW_LIMIT: ClassVar[int] = 60

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @classmethod
    def _preview(cls, raw: str) -> str:
        """Return ``raw`` shortened with an ellipsis when it is too long."""

        if len(raw) <= cls._VALUE_PREVIEW_LIMIT:
            return raw
        return raw[: cls._VALUE_PREVIEW_LIMIT - 1] + "…"

    def _render_dn_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured distinguished-name events with dedicated styling."""

        event = getattr(record, "dn_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        if event == "dn.parse.complete":
            fields = getattr(record, "field_count", None)
            kept = getattr(record, "component_count", None)
            _ = body.append("Parsed")
            details: list[str] = []
            if isinstance(kept, int):
                details.append(f"components={kept}")
            if isinstance(fields, int) and isinstance(kept, int) and fields > kept:
                details.append(f"dropped={fields - kept}")
            if details:
                _ = body.append(" [" + ", ".join(details) + "]")
            original = getattr(record, "original", None)
            if isinstance(original, str) and original:
                _ = body.append(" ")
                _ = body.append(self._preview(original), style=Style(color="white"))
        elif event == "dn.component.dropped":
            field = getattr(record, "field", None)
            reason = getattr(record, "reason", None)
            _ = body.append("Dropped field")
            if isinstance(field, str):
                _ = body.append(" ")
                _ = body.append(repr(self._preview(field)), style=Style(color="white"))
            if reason:
                _ = body.append(f" ({reason})")
        else:
            _ = body.append(record.getMessage())

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for distinguished-name events."""

        dn_text = self._render_dn_message(record)
        if dn_text is not None:
            return dn_text

        return super().render_message(record, message)


__all__ = ["DnRichHandler"]
