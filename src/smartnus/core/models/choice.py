"""
Module: choice

Purpose:
    Provides the Choice dataclass - one answer option of a question.
    A choice is a non-blank title plus a flag saying whether it is the
    correct answer. Immutable and validated on construction.

Key Functions:
    - Choice.is_valid_title(text): Title check without constructing
    - Choice.has_same_title(other): Case-sensitive title comparison

Dependencies:
    - dataclasses (std)
    - re (std)

Used By:
    - core.models.questions (MultipleChoiceQuestion, TrueFalseQuestion)
    - core.utils.serialization
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from ..errors import ValidationError


@dataclass(frozen=True)
class Choice:
    """
    Answer option of a question (immutable).

    Attributes:
        title: Text shown to the user. First character must not be whitespace.
        is_correct: Whether this option is the answer to its question.

    Invariants:
        - title matches VALIDATION_REGEX (so " " is never a valid title)
        - equality requires both title and is_correct to match

    Example:
        >>> c = Choice("Paris", True)
        >>> str(c)
        'Paris (answer)'
    """

    MESSAGE_CONSTRAINTS = "Choices can take any values, and it should not be blank"
    # First character must not be whitespace, otherwise " " would pass.
    VALIDATION_REGEX = re.compile(r"[^\s].*")
    TRUE_CHOICE_TITLE = "True"
    FALSE_CHOICE_TITLE = "False"

    title: str
    is_correct: bool = False

    def __post_init__(self) -> None:
        """Validate title on construction."""
        if not isinstance(self.title, str) or not self.is_valid_title(self.title):
            raise ValidationError(self.MESSAGE_CONSTRAINTS)
        if not isinstance(self.is_correct, bool):
            raise ValidationError(f"is_correct must be a bool: {self.is_correct!r}")

    @classmethod
    def is_valid_title(cls, test: str) -> bool:
        """Return True if `test` is a valid choice title."""
        return cls.VALIDATION_REGEX.fullmatch(test) is not None

    def has_same_title(self, other: Choice) -> bool:
        """
        Check whether `other` has the same title (case-sensitive).

        Args:
            other: Choice to compare against

        Returns:
            True if other is this choice or shares its title
        """
        return other is self or self.title == other.title

    def __hash__(self) -> int:
        return hash(self.title)

    def __str__(self) -> str:
        return self.title + (" (answer)" if self.is_correct else "")
