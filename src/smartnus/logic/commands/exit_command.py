"""Terminates the program."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from smartnus.model import Model

from .base import Command, CommandResult


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = "exit: Exits SmartNUS.\nExample: exit"
    MESSAGE_EXIT_ACKNOWLEDGEMENT: ClassVar[str] = "Exiting SmartNUS as requested ..."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)
