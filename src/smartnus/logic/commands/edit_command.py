"""
Module: logic.commands.edit_command

Purpose:
    Edits the question shown at a given position of the filtered view.
    The edit is described by a sparse patch (EditQuestionDescriptor) whose
    fields are either UNSET (keep the original value) or a replacement.

Key Classes:
    - Unset / UNSET: Sentinel for "field not supplied"
    - EditQuestionDescriptor: Sparse patch of name, importance and tags
    - EditCommand: Applies a descriptor to one displayed question

Used By:
    - logic.controller.execute_command
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import ClassVar, Union

from smartnus.core.errors import DuplicateQuestionError, ValidationError
from smartnus.core.messages import MESSAGE_DUPLICATE_QUESTION
from smartnus.core.models.fields import Importance, Name, Tag
from smartnus.core.models.index import Index
from smartnus.core.models.predicates import SHOW_ALL_QUESTIONS
from smartnus.core.models.questions import Question, edit_question
from smartnus.model import Model

from .base import Command, CommandResult, resolve_displayed_question

logger = logging.getLogger(__name__)


class Unset(Enum):
    """Marks a descriptor field the user did not supply."""

    UNSET = "UNSET"

    def __repr__(self) -> str:
        return "UNSET"


UNSET = Unset.UNSET


@dataclass(frozen=True)
class EditQuestionDescriptor:
    """
    Sparse patch applied to a question (immutable).

    A field left as UNSET keeps the original value. Setting `tags` to an
    empty collection clears the tags, which is different from leaving it
    UNSET.

    Example:
        >>> d = EditQuestionDescriptor(importance=Importance(4))
        >>> d.is_any_field_edited()
        True
        >>> d.name is UNSET
        True
    """

    name: Union[Name, Unset] = UNSET
    importance: Union[Importance, Unset] = UNSET
    tags: Union[frozenset[Tag], Unset] = field(default=UNSET)

    def __post_init__(self) -> None:
        if self.name is not UNSET and not isinstance(self.name, Name):
            raise ValidationError(f"name must be a Name: {self.name!r}")
        if self.importance is not UNSET and not isinstance(self.importance, Importance):
            raise ValidationError(f"importance must be an Importance: {self.importance!r}")
        if self.tags is not UNSET:
            # Own a fresh immutable set so the caller's collection is never shared
            tags = frozenset(self.tags)
            if not all(isinstance(tag, Tag) for tag in tags):
                raise ValidationError("tags must all be Tag instances")
            object.__setattr__(self, "tags", tags)

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not UNSET for f in fields(self))

    def apply_to(self, original: Question) -> Question:
        """
        Build the edited question.

        Set fields replace the original's; everything else, including the
        choices and the question variant, is copied from `original`.
        """
        return edit_question(
            original,
            name=None if self.name is UNSET else self.name,
            importance=None if self.importance is UNSET else self.importance,
            tags=None if self.tags is UNSET else self.tags,
        )


@dataclass(frozen=True)
class EditCommand(Command):
    """
    Edits the details of the question at `index` in the displayed list.

    Raises ValidationError on construction if `descriptor` sets no field,
    so an empty edit never reaches `execute`.
    """

    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        "edit: Edits the details of the question identified "
        "by the index number used in the displayed question list. "
        "Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) "
        "[qn/NAME] [i/IMPORTANCE] [t/TAG]...\n"
        "Example: edit 1 i/3"
    )
    MESSAGE_EDIT_QUESTION_SUCCESS: ClassVar[str] = "Edited Question: %s"
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_QUESTION: ClassVar[str] = MESSAGE_DUPLICATE_QUESTION
    mutates_model: ClassVar[bool] = True

    index: Index
    descriptor: EditQuestionDescriptor

    def __post_init__(self) -> None:
        if not self.descriptor.is_any_field_edited():
            raise ValidationError(self.MESSAGE_NOT_EDITED)

    def execute(self, model: Model) -> CommandResult:
        question_to_edit = resolve_displayed_question(model, self.index)
        edited_question = self.descriptor.apply_to(question_to_edit)

        if not question_to_edit.is_same_question(edited_question) and model.has_question(edited_question):
            raise DuplicateQuestionError(self.MESSAGE_DUPLICATE_QUESTION)

        model.set_question(question_to_edit, edited_question)
        model.update_filtered_question_list(SHOW_ALL_QUESTIONS)
        logger.info(f"Edited question at {self.index.one_based}: {edited_question.name}")
        return CommandResult(self.MESSAGE_EDIT_QUESTION_SUCCESS % edited_question)
