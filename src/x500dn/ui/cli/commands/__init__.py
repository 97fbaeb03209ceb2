"""Command execution package for CLI."""

from x500dn.ui.cli.commands.executor import CommandExecutor
from x500dn.ui.cli.commands.name import (
    CommonNameCommand,
    FormatCommand,
    GetCommand,
    ParseCommand,
    SplitCommand,
)

__all__ = [
    "CommandExecutor",
    "CommonNameCommand",
    "FormatCommand",
    "GetCommand",
    "ParseCommand",
    "SplitCommand",
]
