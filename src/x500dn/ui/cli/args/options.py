"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final


@final
@dataclass(slots=True)
class NameArgs:
    """Command line arguments for subcommands that act on a whole name."""

    command: Literal["split", "parse", "format", "cn"]
    name: str
    separator: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class GetArgs:
    """Command line arguments for the ``get`` subcommand."""

    command: Literal["get"]
    name: str
    key: str
    verbose: bool
    quiet: bool


CLIArgs = NameArgs | GetArgs

__all__ = ["CLIArgs", "GetArgs", "NameArgs"]
