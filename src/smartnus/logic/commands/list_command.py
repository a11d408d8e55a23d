"""Lists all questions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from smartnus.core.models.predicates import SHOW_ALL_QUESTIONS
from smartnus.model import Model

from .base import Command, CommandResult


@dataclass(frozen=True)
class ListCommand(Command):
    """Resets the filtered view to show every question."""

    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = "list: Lists all questions.\nExample: list"
    MESSAGE_SUCCESS: ClassVar[str] = "Listed all questions"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_question_list(SHOW_ALL_QUESTIONS)
        return CommandResult(self.MESSAGE_SUCCESS)
