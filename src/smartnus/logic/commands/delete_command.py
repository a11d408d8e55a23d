"""Deletes a question identified by its displayed index."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from smartnus.core.models.index import Index
from smartnus.model import Model

from .base import Command, CommandResult, resolve_displayed_question

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteCommand(Command):
    """
    Deletes the question at `index` in the displayed list.

    The active filter is left as it is.
    """

    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        "delete: Deletes the question identified by the index number used in the "
        "displayed question list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: delete 1"
    )
    MESSAGE_DELETE_QUESTION_SUCCESS: ClassVar[str] = "Deleted Question: %s"
    mutates_model: ClassVar[bool] = True

    index: Index

    def execute(self, model: Model) -> CommandResult:
        question_to_delete = resolve_displayed_question(model, self.index)
        model.delete_question(question_to_delete)
        logger.info(f"Deleted question at {self.index.one_based}: {question_to_delete.name}")
        return CommandResult(self.MESSAGE_DELETE_QUESTION_SUCCESS % question_to_delete)
