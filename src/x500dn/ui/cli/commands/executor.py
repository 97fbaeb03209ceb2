"""src/x500dn/ui/cli/commands/executor.py
What: Provide shared wiring for CLI command executors.
Why: Reuse parsing and presentation helpers across commands.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from x500dn.domain import DistinguishedName
from x500dn.ui.cli.args.options import CLIArgs
from x500dn.ui.cli.display import ComponentDisplay

ArgsT = TypeVar("ArgsT", bound=CLIArgs)


class CommandExecutor(ABC, Generic[ArgsT]):
    """Base class for command execution."""

    args: ArgsT
    display: ComponentDisplay

    def __init__(self, args: ArgsT, display: ComponentDisplay | None = None) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            display: Output renderer; a default console display when omitted.
        """
        self.args = args
        self.display = display or ComponentDisplay()

    def parse_name(self) -> DistinguishedName:
        """Parse the distinguished name given on the command line."""
        return DistinguishedName(self.args.name)

    @abstractmethod
    def execute(self) -> int:
        """Execute the command.

        Returns:
            int: Process exit code.
        """
        pass
