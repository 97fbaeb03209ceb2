"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import final

from x500dn.config import settings
from x500dn.config.config import Config
from x500dn.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from x500dn.ui.cli.args.options import CLIArgs, GetArgs, NameArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            description="x500dn - parse, query, and normalize canonical X.500 distinguished names.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        split_parser = subparsers.add_parser(
            "split",
            help="Print each trimmed field of a name on its own line",
        )
        ArgumentParser._configure_name_parser(split_parser, with_separator=False)

        parse_parser = subparsers.add_parser(
            "parse",
            help="Show the parsed components of a name as a table",
        )
        ArgumentParser._configure_name_parser(parse_parser, with_separator=True)

        format_parser = subparsers.add_parser(
            "format",
            help="Print the normalized form of a name",
        )
        ArgumentParser._configure_name_parser(format_parser, with_separator=True)

        get_parser = subparsers.add_parser(
            "get",
            help="Print every value carried by KEY, one per line",
        )
        ArgumentParser._configure_name_parser(get_parser, with_separator=False)
        _ = get_parser.add_argument(
            "key",
            type=str,
            help='Attribute key to look up, e.g. OU ("" for anonymous values)',
            metavar="KEY",
        )

        cn_parser = subparsers.add_parser(
            "cn",
            help="Print the single common name of a name",
        )
        ArgumentParser._configure_name_parser(cn_parser, with_separator=False)

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If argument validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        # Console first so configuration errors are visible, then the log file.
        _ = setup_logger(console_level=log_level)
        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command in {"split", "parse", "format", "cn"}:
            return ArgumentParser._process_name(parsed_args, configuration)

        if command == "get":
            return ArgumentParser._process_get(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _configure_name_parser(
        parser: argparse.ArgumentParser,
        *,
        with_separator: bool,
    ) -> None:
        """Apply shared configuration for subparsers taking a name."""

        parser.set_defaults(separator=None)
        _ = parser.add_argument(
            "name",
            type=str,
            help='Distinguished name, e.g. "CN=Ethel the Aardvark, OU=Australia"',
            metavar="NAME",
        )
        if with_separator:
            _ = parser.add_argument(
                "--separator",
                type=str,
                help="Separator placed between components (defaults to config or '; ')",
                metavar="SEP",
            )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed parsing information",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all log output except errors",
        )

    @staticmethod
    def _process_name(parsed_args: argparse.Namespace, configuration: Config) -> NameArgs:
        separator: str | None = parsed_args.separator
        if separator is None:
            separator = settings.format_separator(configuration)

        return NameArgs(
            command=parsed_args.command,
            name=parsed_args.name,
            separator=separator,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_get(parsed_args: argparse.Namespace) -> GetArgs:
        # An empty key selects anonymous values.
        return GetArgs(
            command="get",
            name=parsed_args.name,
            key=parsed_args.key.strip(),
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
