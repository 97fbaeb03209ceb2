"""Command line interface package."""

from x500dn.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
