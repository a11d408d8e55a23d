"""
Module: logic.commands.base

Purpose:
    Abstract interface shared by all commands, and the result type they
    return to the UI.

Key Classes:
    - Command: Abstract base class with `execute(model)`
    - CommandResult: Feedback message plus UI directives

Dependencies:
    - model.Model

Used By:
    - logic.commands (every concrete command)
    - logic.controller.execute_command
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Sequence

from smartnus.core.errors import IndexOutOfRangeError
from smartnus.core.models.index import Index
from smartnus.core.models.questions import Question
from smartnus.model import Model


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a successful command (immutable).

    Attributes:
        feedback: Message to show the user
        show_help: UI should open the help window
        exit: UI should close the application
    """

    feedback: str
    show_help: bool = False
    exit: bool = False


class Command(ABC):
    """
    A validated, ready-to-run user command.

    Concrete commands are frozen dataclasses, so two commands with the same
    parameters compare equal. `execute` either returns a CommandResult or
    raises a SmartNusError; a command that raises has not changed the model.
    """

    COMMAND_WORD: ClassVar[str] = ""
    MESSAGE_USAGE: ClassVar[str] = ""
    # Whether a successful run changes the question list and needs saving
    mutates_model: ClassVar[bool] = False

    @abstractmethod
    def execute(self, model: Model) -> CommandResult:
        """
        Run the command against `model`.

        Args:
            model: Session state to read and mutate

        Returns:
            CommandResult describing the outcome

        Raises:
            SmartNusError: If the command cannot be applied
        """


def resolve_displayed_question(model: Model, index: Index) -> Question:
    """
    Look up the question shown at `index` in the current filtered view.

    Raises:
        IndexOutOfRangeError: If index is past the end of the view
    """
    last_shown_list: Sequence[Question] = model.get_filtered_question_list()
    if index.zero_based >= len(last_shown_list):
        raise IndexOutOfRangeError()
    return last_shown_list[index.zero_based]
