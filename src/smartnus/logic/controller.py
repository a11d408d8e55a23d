"""
Module: logic.controller

Purpose:
    Run one command against the model and persist the result.
    Execute → (on success, if the command mutated the list) Save

Key Functions:
    - execute_command(): Main entry point for the UI

Dependencies:
    - logic.commands: Command, CommandResult
    - storage.json_storage: Question bank persistence (optional)

Used By:
    - UI layer (not part of this package)
"""

from __future__ import annotations

import logging
import time
from typing import Optional, Protocol

from smartnus.core.errors import SmartNusError, StorageError
from smartnus.core.models.question_list import QuestionList
from smartnus.model import Model

from .commands.base import Command, CommandResult

logger = logging.getLogger(__name__)

MESSAGE_FILE_OPS_ERROR = "Could not save data to file: %s"


class QuestionBankWriter(Protocol):
    def save_question_bank(self, questions: QuestionList) -> None: ...


def execute_command(
    command: Command,
    model: Model,
    storage: Optional[QuestionBankWriter] = None,
) -> CommandResult:
    """
    Execute `command` and save the question bank if it changed.

    Args:
        command: Validated command from the parser
        model: Session state
        storage: Where to save after a mutating command; None skips saving

    Returns:
        CommandResult from the command

    Raises:
        SmartNusError: If the command fails (model unchanged)
        StorageError: If the command succeeded but saving failed
    """
    start_time = time.perf_counter()
    logger.info(f"Executing command: {command!r}")

    try:
        result = command.execute(model)
    except SmartNusError as e:
        logger.info(f"Command {command.COMMAND_WORD!r} rejected: {e.message}")
        raise

    if storage is not None and command.mutates_model:
        try:
            storage.save_question_bank(model.get_question_list())
        except OSError as e:
            logger.warning(f"Failed to save question bank: {e}")
            raise StorageError(MESSAGE_FILE_OPS_ERROR % e) from e

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    logger.debug(f"Command {command.COMMAND_WORD!r} finished in {elapsed_ms:.1f}ms")
    return result
