"""Shows program usage instructions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from smartnus.model import Model

from .base import Command, CommandResult


@dataclass(frozen=True)
class HelpCommand(Command):
    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = "help: Shows program usage instructions.\nExample: help"
    SHOWING_HELP_MESSAGE: ClassVar[str] = "Opened help window."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)
