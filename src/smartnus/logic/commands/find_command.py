"""Finds questions matching a predicate."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar, Union

from smartnus.core.messages import MESSAGE_QUESTIONS_LISTED_OVERVIEW
from smartnus.core.models.predicates import (
    NameContainsKeywordsPredicate,
    TagContainsKeywordsPredicate,
)
from smartnus.model import Model

from .base import Command, CommandResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FindCommand(Command):
    """
    Narrows the filtered view to questions accepted by `predicate`.

    Keyword matching is case-insensitive. Name keywords match whole words.
    """

    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        "find: Finds all questions whose names contain any of "
        "the specified keywords (case-insensitive), or that carry any of the "
        "specified tags, and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]... or t/TAG [t/MORE_TAGS]...\n"
        "Example: find capital france"
    )

    predicate: Union[NameContainsKeywordsPredicate, TagContainsKeywordsPredicate]

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_question_list(self.predicate)
        count = len(model.get_filtered_question_list())
        logger.debug(f"Find matched {count} questions")
        return CommandResult(MESSAGE_QUESTIONS_LISTED_OVERVIEW % count)
