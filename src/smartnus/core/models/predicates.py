"""
Module: predicates

Purpose:
    Filter predicates for the model's filtered view. Keyword predicates
    are frozen dataclasses so FindCommand instances compare by value.

Key Functions:
    - SHOW_ALL_QUESTIONS: Default predicate, accepts everything
    - NameContainsKeywordsPredicate: Whole-word, case-insensitive name match
    - TagContainsKeywordsPredicate: Case-insensitive tag match

Used By:
    - model.Model
    - logic.commands.find.FindCommand
    - logic.commands.list.ListCommand
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ..errors import ValidationError
from .questions import Question

QuestionPredicate = Callable[[Question], bool]


def SHOW_ALL_QUESTIONS(question: Question) -> bool:
    return True


def _normalise_keywords(keywords) -> tuple[str, ...]:
    cleaned = tuple(k.strip() for k in keywords if k and k.strip())
    if not cleaned:
        raise ValidationError("At least one non-blank keyword is required")
    return cleaned


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """
    Matches questions whose name contains any keyword as a whole word.

    Example:
        >>> p = NameContainsKeywordsPredicate(("capital",))
        >>> p(question)  # question.name == "What is the Capital of France?"
        True
    """

    keywords: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "keywords", _normalise_keywords(self.keywords))

    def __call__(self, question: Question) -> bool:
        words = {word.lower() for word in str(question.name).split()}
        return any(keyword.lower() in words for keyword in self.keywords)


@dataclass(frozen=True)
class TagContainsKeywordsPredicate:
    """Matches questions carrying any of the given tags (case-insensitive)."""

    keywords: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "keywords", _normalise_keywords(self.keywords))

    def __call__(self, question: Question) -> bool:
        tag_names = {tag.value.lower() for tag in question.tags}
        return any(keyword.lower() in tag_names for keyword in self.keywords)
