"""src/x500dn/ui/cli/display/components.py
What: Render parsed fields, components, and values to the console.
Why: Keep console output formatting consistent across the subcommands.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from x500dn.domain import DistinguishedName, FormatOptions


@final
class ComponentDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize component display.

        Args:
            console: Console to print to; a fresh stdout console when omitted.
        """
        self.console = console or Console(soft_wrap=True)

    def show_lines(self, lines: Sequence[str]) -> None:
        """Print each entry verbatim on its own line."""

        for line in lines:
            self.console.print(line, markup=False, highlight=False)

    def show_components(self, dn: DistinguishedName, separator: str) -> None:
        """Render a table of components followed by the normalized form.

        Args:
            dn: Parsed distinguished name.
            separator: Separator used for the normalized form.
        """
        if not dn.components:
            self.console.print("[yellow]No components found[/yellow]")
            return

        table = Table(title="Components", show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Key", style="cyan")
        table.add_column("Value", style="white")

        for position, component in enumerate(dn.components, start=1):
            key = escape(component.key) if component.key else "[dim](anonymous)[/dim]"
            table.add_row(str(position), key, escape(component.value))

        self.console.print(table)
        self.console.print("[bold]Normalized:[/bold]", end=" ")
        self.console.print(
            dn.format(FormatOptions(separator=separator)),
            markup=False,
            highlight=False,
        )


__all__ = ["ComponentDisplay"]
