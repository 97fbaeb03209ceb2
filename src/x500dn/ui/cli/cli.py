"""Command line interface for x500dn."""

import sys
from typing import final

from x500dn.platform.logging import logger
from x500dn.ui.cli.args import ArgumentParser
from x500dn.ui.cli.args.options import CLIArgs, GetArgs
from x500dn.ui.cli.commands import (
    CommandExecutor,
    CommonNameCommand,
    FormatCommand,
    GetCommand,
    ParseCommand,
    SplitCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)
            exit_code = CommandProcessor._build_command(args).execute()
            if exit_code != 0:
                sys.exit(exit_code)
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)

    @staticmethod
    def _build_command(args: CLIArgs) -> CommandExecutor[CLIArgs]:
        """Select the executor matching the parsed subcommand."""

        if isinstance(args, GetArgs):
            return GetCommand(args)

        commands = {
            "split": SplitCommand,
            "parse": ParseCommand,
            "format": FormatCommand,
            "cn": CommonNameCommand,
        }
        return commands[args.command](args)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Note that underlying
        command processing may call ``sys.exit(...)`` on errors, so this
        return is only reached when processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
