"""Subcommands that split, parse, format, and query a distinguished name."""

from typing import final, override

from x500dn.domain import DistinguishedNameError, FormatOptions, split
from x500dn.platform.logging import logger
from x500dn.ui.cli.args.options import GetArgs, NameArgs
from x500dn.ui.cli.commands.executor import CommandExecutor


@final
class SplitCommand(CommandExecutor[NameArgs]):
    """Print the trimmed fields of a name."""

    @override
    def execute(self) -> int:
        self.display.show_lines(split(self.args.name))
        return 0


@final
class ParseCommand(CommandExecutor[NameArgs]):
    """Show the components of a name as a table."""

    @override
    def execute(self) -> int:
        self.display.show_components(self.parse_name(), self.args.separator)
        return 0


@final
class FormatCommand(CommandExecutor[NameArgs]):
    """Print the normalized form of a name."""

    @override
    def execute(self) -> int:
        dn = self.parse_name()
        self.display.show_lines([dn.format(FormatOptions(separator=self.args.separator))])
        return 0


@final
class GetCommand(CommandExecutor[GetArgs]):
    """Print every value carried by a key."""

    @override
    def execute(self) -> int:
        values = self.parse_name().get_values(self.args.key)
        if not values:
            logger.error("No %s elements found", self.args.key or "anonymous")
            return 1
        self.display.show_lines(values)
        return 0


@final
class CommonNameCommand(CommandExecutor[NameArgs]):
    """Print the single common name of a name."""

    @override
    def execute(self) -> int:
        try:
            common_name = self.parse_name().common_name()
        except DistinguishedNameError as e:
            logger.error(
                "Cannot resolve common name: %s",
                e,
                extra={"dn_event": "dn.query.error"},
            )
            return 1
        self.display.show_lines([common_name])
        return 0
