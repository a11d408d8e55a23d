"""
Core Models Package

Immutable, validated value objects plus the one mutable collection
(QuestionList) that the model owns.

All value objects are frozen dataclasses validated in `__post_init__`, so
an invalid Choice, Name or Question can never exist. Edits produce new
instances; nothing is mutated in place.
"""

from .choice import Choice
from .fields import Importance, Name, Tag
from .index import Index
from .prefs import UserPrefs
from .questions import (
    MultipleChoiceQuestion,
    Question,
    QuestionKind,
    TrueFalseQuestion,
    edit_question,
)
from .question_list import QuestionList
from .predicates import (
    SHOW_ALL_QUESTIONS,
    NameContainsKeywordsPredicate,
    TagContainsKeywordsPredicate,
)

__all__ = [
    "Choice",
    "Importance",
    "Index",
    "MultipleChoiceQuestion",
    "Name",
    "NameContainsKeywordsPredicate",
    "Question",
    "QuestionKind",
    "QuestionList",
    "SHOW_ALL_QUESTIONS",
    "Tag",
    "TagContainsKeywordsPredicate",
    "TrueFalseQuestion",
    "UserPrefs",
    "edit_question",
]
