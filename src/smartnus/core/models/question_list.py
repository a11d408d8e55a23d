"""
Module: question_list

Purpose:
    Provides QuestionList - the ordered, duplicate-forbidding collection
    of questions owned by the model. Membership and duplicate checks use
    the business key (`Question.is_same_question`), never `==`.

Key Functions:
    - QuestionList.add(q): Append, rejecting same-question duplicates
    - QuestionList.set_question(target, replacement): Replace in place
    - QuestionList.remove(q): Remove by business key
    - QuestionList.set_all(questions): All-or-nothing bulk replacement

Dependencies:
    - logging (std)
    - .questions.Question

Used By:
    - model.Model
    - core.utils.serialization
    - storage.json_storage
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from ..errors import DuplicateQuestionError, QuestionNotFoundError
from .questions import Question

logger = logging.getLogger(__name__)


class QuestionList:
    """
    Ordered list of questions with no two elements being the same question.

    Every mutation checks the no-duplicate invariant before touching the
    underlying list, so a failed call leaves the contents unchanged.

    Example:
        >>> questions = QuestionList()
        >>> questions.add(q1)
        >>> questions.add(q1_renamed_copy)   # same name as q1
        Traceback (most recent call last):
        DuplicateQuestionError: This question already exists in SmartNUS.
    """

    def __init__(self, questions: Optional[Iterable[Question]] = None) -> None:
        self._questions: list[Question] = []
        if questions is not None:
            self.set_all(questions)

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    def contains(self, question: Question) -> bool:
        """Return True if a question with the same business key is present."""
        return any(existing.is_same_question(question) for existing in self._questions)

    def __contains__(self, question: object) -> bool:
        return self.contains(question)  # type: ignore[arg-type]

    def index_of(self, question: Question) -> int:
        """
        Position of the element that is the same question as `question`.

        Raises:
            QuestionNotFoundError: If no element matches
        """
        for position, existing in enumerate(self._questions):
            if existing is question or existing.is_same_question(question):
                return position
        raise QuestionNotFoundError()

    def as_tuple(self) -> tuple[Question, ...]:
        """Immutable snapshot of the current contents."""
        return tuple(self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(tuple(self._questions))

    def __getitem__(self, position: int) -> Question:
        return self._questions[position]

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, QuestionList):
            return NotImplemented
        return self._questions == other._questions

    __hash__ = None  # mutable container

    def __repr__(self) -> str:
        return f"QuestionList({len(self._questions)} questions)"

    # ─────────────────────────────────────────────────────────────────────────
    # Mutations
    # ─────────────────────────────────────────────────────────────────────────

    def add(self, question: Question) -> None:
        """
        Append `question` to the end of the list.

        Raises:
            DuplicateQuestionError: If the same question is already present
        """
        if self.contains(question):
            raise DuplicateQuestionError()
        self._questions.append(question)
        logger.debug(f"Added question {question.name}")

    def set_question(self, target: Question, replacement: Question) -> None:
        """
        Replace `target` with `replacement`, keeping its position.

        `replacement` may share its business key with `target` (an edit that
        keeps the name) but not with any other element.

        Raises:
            QuestionNotFoundError: If `target` is not in the list
            DuplicateQuestionError: If `replacement` clashes with another element
        """
        position = self.index_of(target)
        for other_position, existing in enumerate(self._questions):
            if other_position != position and existing.is_same_question(replacement):
                raise DuplicateQuestionError()
        self._questions[position] = replacement
        logger.debug(f"Replaced question at position {position} with {replacement.name}")

    def remove(self, question: Question) -> None:
        """
        Remove the element that is the same question as `question`.

        Raises:
            QuestionNotFoundError: If no element matches
        """
        position = self.index_of(question)
        del self._questions[position]
        logger.debug(f"Removed question {question.name}")

    def set_all(self, questions: Iterable[Question]) -> None:
        """
        Replace the whole contents with `questions`.

        The incoming sequence is checked for internal duplicates first;
        nothing is replaced if the check fails.

        Raises:
            DuplicateQuestionError: If two incoming questions are the same question
        """
        incoming = list(questions)
        for position, question in enumerate(incoming):
            if any(question.is_same_question(earlier) for earlier in incoming[:position]):
                raise DuplicateQuestionError()
        self._questions = incoming
