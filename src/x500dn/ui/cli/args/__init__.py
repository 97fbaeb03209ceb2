"""Command line argument handling package."""

from x500dn.ui.cli.args.parser import ArgumentParser
from x500dn.ui.cli.args.options import CLIArgs, GetArgs, NameArgs

__all__ = ["ArgumentParser", "CLIArgs", "GetArgs", "NameArgs"]
