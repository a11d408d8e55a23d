"""Clears every question from SmartNUS."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from smartnus.core.models.predicates import SHOW_ALL_QUESTIONS
from smartnus.model import Model

from .base import Command, CommandResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClearCommand(Command):
    """Removes all questions and shows the (now empty) full list."""

    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = "clear: Deletes all questions.\nExample: clear"
    MESSAGE_SUCCESS: ClassVar[str] = "SmartNUS has been cleared!"
    mutates_model: ClassVar[bool] = True

    def execute(self, model: Model) -> CommandResult:
        removed = len(model.get_question_list())
        model.set_question_list(())
        model.update_filtered_question_list(SHOW_ALL_QUESTIONS)
        logger.info(f"Cleared {removed} questions")
        return CommandResult(self.MESSAGE_SUCCESS)
