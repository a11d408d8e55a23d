"""Adds a question to SmartNUS."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from smartnus.core.errors import DuplicateQuestionError
from smartnus.core.messages import MESSAGE_DUPLICATE_QUESTION
from smartnus.core.models.questions import Question
from smartnus.model import Model

from .base import Command, CommandResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddCommand(Command):
    """Adds `question` to the end of the question list."""

    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        "add: Adds a question to SmartNUS. "
        "Parameters: qn/QUESTION i/IMPORTANCE opt/CHOICE... ans/ANSWER [t/TAG]...\n"
        "Example: add qn/What is 1 + 1? i/1 opt/1 opt/3 opt/4 ans/2 t/math"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New question added: %s"
    mutates_model: ClassVar[bool] = True

    question: Question

    def execute(self, model: Model) -> CommandResult:
        if model.has_question(self.question):
            raise DuplicateQuestionError(MESSAGE_DUPLICATE_QUESTION)

        model.add_question(self.question)
        logger.info(f"Added question {self.question.name}")
        return CommandResult(self.MESSAGE_SUCCESS % self.question)
