"""
Module: questions

Purpose:
    Provides the question variants stored in the question list. Each
    variant is a frozen dataclass carrying its own field set; callers use
    them through the shared `Question` capability protocol rather than a
    base class.

Key Classes:
    - QuestionKind: Closed set of variants (also the stored "kind" tag)
    - Question: Capability protocol shared by all variants
    - MultipleChoiceQuestion: One correct answer among several choices
    - TrueFalseQuestion: Fixed "True"/"False" choices

Key Functions:
    - edit_question(original, ...): Build an edited copy, choices untouched
    - question_class_for(kind): Variant lookup used by deserialization

Dependencies:
    - dataclasses (std)
    - enum (std)
    - .choice.Choice
    - .fields (Name, Importance, Tag)

Used By:
    - core.models.question_list.QuestionList
    - core.utils.serialization
    - logic.commands
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import AbstractSet, Iterable, Optional, Protocol, runtime_checkable

from ..errors import ValidationError
from .choice import Choice
from .fields import Importance, Name, Tag


class QuestionKind(Enum):
    """
    Closed set of question variants.

    The value is the discriminator written to storage.
    """

    MULTIPLE_CHOICE = "mcq"
    TRUE_FALSE = "tf"


@runtime_checkable
class Question(Protocol):
    """
    Capabilities every question variant provides.

    Two questions are "the same question" when their names are equal
    (case-sensitive). This is weaker than `==`, which compares every field.
    """

    name: Name
    importance: Importance
    tags: frozenset[Tag]
    choices: frozenset[Choice]

    @property
    def kind(self) -> QuestionKind: ...

    def is_same_question(self, other: Question) -> bool: ...

    def correct_choices(self) -> tuple[Choice, ...]: ...


# ─────────────────────────────────────────────────────────────────────────────
# Shared helpers (variants call these instead of inheriting)
# ─────────────────────────────────────────────────────────────────────────────

def _freeze_common(question: Question) -> None:
    """Validate the common fields and store tags/choices as frozensets."""
    if not isinstance(question.name, Name):
        raise ValidationError(f"name must be a Name: {question.name!r}")
    if not isinstance(question.importance, Importance):
        raise ValidationError(f"importance must be an Importance: {question.importance!r}")

    tags = frozenset(question.tags)
    if not all(isinstance(tag, Tag) for tag in tags):
        raise ValidationError("tags must all be Tag instances")
    choices = frozenset(question.choices)
    if not all(isinstance(choice, Choice) for choice in choices):
        raise ValidationError("choices must all be Choice instances")

    # Frozen dataclass: bypass __setattr__ to normalise containers
    object.__setattr__(question, "tags", tags)
    object.__setattr__(question, "choices", choices)


def _check_unique_titles(choices: AbstractSet[Choice]) -> None:
    titles = [choice.title for choice in choices]
    if len(titles) != len(set(titles)):
        raise ValidationError("Choices of a question must have different titles")


def _same_name(question: Question, other: Question) -> bool:
    return other is question or (other is not None and other.name == question.name)


def _render(question: Question) -> str:
    choices = ", ".join(str(c) for c in sorted(question.choices, key=lambda c: c.title))
    tags = "".join(str(t) for t in sorted(question.tags))
    text = f"{question.name}; Importance: {question.importance}; Choices: {choices}"
    if tags:
        text += f"; Tags: {tags}"
    return text


def _correct(question: Question) -> tuple[Choice, ...]:
    return tuple(sorted((c for c in question.choices if c.is_correct), key=lambda c: c.title))


# ─────────────────────────────────────────────────────────────────────────────
# Variants
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True, eq=True)
class MultipleChoiceQuestion:
    """
    Multiple-choice question (immutable).

    Attributes:
        name: Question text, also the business key
        importance: Rating from 1 to 5
        tags: Labels attached to the question
        choices: Answer options

    Invariants:
        - at least MIN_CHOICES choices
        - choice titles are unique
        - exactly one choice is correct

    Example:
        >>> q = MultipleChoiceQuestion(
        ...     Name("Capital of France?"), Importance(2),
        ...     choices={Choice("Paris", True), Choice("Lyon"), Choice("Nice")},
        ... )
        >>> q.correct_choices()
        (Choice(title='Paris', is_correct=True),)
    """

    MIN_CHOICES = 2

    name: Name
    importance: Importance
    tags: frozenset[Tag] = field(default_factory=frozenset)
    choices: frozenset[Choice] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate question on construction."""
        _freeze_common(self)
        if len(self.choices) < self.MIN_CHOICES:
            raise ValidationError(
                f"Multiple choice questions need at least {self.MIN_CHOICES} choices"
            )
        _check_unique_titles(self.choices)
        if len(_correct(self)) != 1:
            raise ValidationError(
                "Multiple choice questions must have exactly one correct choice"
            )

    @property
    def kind(self) -> QuestionKind:
        return QuestionKind.MULTIPLE_CHOICE

    def is_same_question(self, other: Question) -> bool:
        return _same_name(self, other)

    def correct_choices(self) -> tuple[Choice, ...]:
        return _correct(self)

    def __str__(self) -> str:
        return _render(self)


@dataclass(frozen=True, eq=True)
class TrueFalseQuestion:
    """
    True/false question (immutable).

    The choices are always exactly `Choice("True", ...)` and
    `Choice("False", ...)` with one of them correct. Use `create()` to
    build one from the answer instead of spelling out the choices.
    """

    name: Name
    importance: Importance
    tags: frozenset[Tag] = field(default_factory=frozenset)
    choices: frozenset[Choice] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        """Validate question on construction."""
        _freeze_common(self)
        titles = {choice.title for choice in self.choices}
        if len(self.choices) != 2 or titles != {Choice.TRUE_CHOICE_TITLE, Choice.FALSE_CHOICE_TITLE}:
            raise ValidationError('True/false questions must have exactly the choices "True" and "False"')
        if len(_correct(self)) != 1:
            raise ValidationError("True/false questions must have exactly one correct choice")

    @classmethod
    def create(
        cls,
        name: Name,
        importance: Importance,
        tags: Iterable[Tag] = (),
        *,
        answer: bool,
    ) -> TrueFalseQuestion:
        """Build a true/false question whose correct choice is `answer`."""
        choices = {
            Choice(Choice.TRUE_CHOICE_TITLE, answer),
            Choice(Choice.FALSE_CHOICE_TITLE, not answer),
        }
        return cls(name, importance, frozenset(tags), frozenset(choices))

    @property
    def kind(self) -> QuestionKind:
        return QuestionKind.TRUE_FALSE

    @property
    def answer(self) -> bool:
        return _correct(self)[0].title == Choice.TRUE_CHOICE_TITLE

    def is_same_question(self, other: Question) -> bool:
        return _same_name(self, other)

    def correct_choices(self) -> tuple[Choice, ...]:
        return _correct(self)

    def __str__(self) -> str:
        return _render(self)


_QUESTION_CLASSES = {
    QuestionKind.MULTIPLE_CHOICE: MultipleChoiceQuestion,
    QuestionKind.TRUE_FALSE: TrueFalseQuestion,
}


def question_class_for(kind: QuestionKind) -> type:
    """Return the dataclass implementing `kind`."""
    return _QUESTION_CLASSES[kind]


def edit_question(
    original: Question,
    *,
    name: Optional[Name] = None,
    importance: Optional[Importance] = None,
    tags: Optional[Iterable[Tag]] = None,
) -> Question:
    """
    Build a new question from `original` with some fields replaced.

    The variant and the choices are always carried over verbatim.

    Args:
        original: Question to copy from
        name: Replacement name, or None to keep the original
        importance: Replacement importance, or None to keep the original
        tags: Replacement tags, or None to keep the original

    Returns:
        New question instance of the same variant (validated again)
    """
    return replace(
        original,
        name=original.name if name is None else name,
        importance=original.importance if importance is None else importance,
        tags=original.tags if tags is None else frozenset(tags),
    )
