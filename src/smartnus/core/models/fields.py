"""
Module: fields

Purpose:
    Small validated value objects attached to every question:
    Name (the business key), Importance (bounded rating) and Tag.

Key Classes:
    - Name: Non-blank question text
    - Importance: Integer rating in [MIN_VALUE, MAX_VALUE]
    - Tag: Alphanumeric label

Dependencies:
    - dataclasses (std)
    - re (std)

Used By:
    - core.models.questions
    - core.models.predicates
    - logic.commands.edit (EditQuestionDescriptor)
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import ValidationError


@dataclass(frozen=True)
class Name:
    """
    Question name (immutable). Two questions with equal names are the same question.

    Example:
        >>> Name("What is the capital of France?").value
        'What is the capital of France?'
    """

    MESSAGE_CONSTRAINTS = "Names can take any values, and it should not be blank"
    VALIDATION_REGEX = re.compile(r"[^\s].*")

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.is_valid_name(self.value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid_name(cls, test: str) -> bool:
        return cls.VALIDATION_REGEX.fullmatch(test) is not None

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Importance:
    """
    Bounded ordinal rating of how important a question is (immutable).

    Invariants:
        - MIN_VALUE <= value <= MAX_VALUE
    """

    MIN_VALUE = 1
    MAX_VALUE = 5
    MESSAGE_CONSTRAINTS = f"Importance should be an integer from {MIN_VALUE} to {MAX_VALUE}"

    value: int

    def __post_init__(self) -> None:
        if not self.is_valid_importance(self.value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid_importance(cls, test: object) -> bool:
        # bool is an int subclass but never a rating
        if isinstance(test, bool) or not isinstance(test, int):
            return False
        return cls.MIN_VALUE <= test <= cls.MAX_VALUE

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class Tag:
    """Alphanumeric label used to group questions (immutable)."""

    MESSAGE_CONSTRAINTS = "Tags names should be alphanumeric"
    VALIDATION_REGEX = re.compile(r"[^\W_]+")

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.is_valid_tag_name(self.value):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)

    @classmethod
    def is_valid_tag_name(cls, test: str) -> bool:
        return cls.VALIDATION_REGEX.fullmatch(test) is not None

    def __str__(self) -> str:
        return f"[{self.value}]"
