"""
Module: model.model

Purpose:
    Session state of a running SmartNUS instance: the question list, the
    active filter predicate and the user preferences. This is the mutation
    API that commands work against. One Model is created per session and
    passed explicitly to every command; there is no global instance.

Key Classes:
    - Model: Owns a QuestionList, a predicate and UserPrefs

Dependencies:
    - core.models (QuestionList, UserPrefs, predicates)

Used By:
    - logic.commands (every Command.execute)
    - logic.controller.execute_command
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from smartnus.core.models.prefs import UserPrefs
from smartnus.core.models.predicates import SHOW_ALL_QUESTIONS, QuestionPredicate
from smartnus.core.models.question_list import QuestionList
from smartnus.core.models.questions import Question

logger = logging.getLogger(__name__)


class Model:
    """
    Mutable session state.

    The filtered view is never stored. `get_filtered_question_list()` applies
    the active predicate to the current list contents on every call, so it
    always reflects the latest mutation and the latest predicate.

    Example:
        >>> model = Model(QuestionList([q1, q2]))
        >>> model.update_filtered_question_list(lambda q: q is q2)
        >>> model.get_filtered_question_list()
        (q2,)
    """

    def __init__(
        self,
        questions: Optional[Iterable[Question]] = None,
        user_prefs: Optional[UserPrefs] = None,
    ) -> None:
        # Copy so the model never shares a list with its caller
        self._questions = QuestionList(questions if questions is not None else ())
        self._user_prefs = user_prefs if user_prefs is not None else UserPrefs()
        self._predicate: QuestionPredicate = SHOW_ALL_QUESTIONS
        logger.debug(f"Initialised model with {len(self._questions)} questions")

    # ─────────────────────────────────────────────────────────────────────────
    # User Preferences
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def user_prefs(self) -> UserPrefs:
        return self._user_prefs

    def set_user_prefs(self, user_prefs: UserPrefs) -> None:
        self._user_prefs = user_prefs

    @property
    def questions_file_path(self) -> Path:
        return self._user_prefs.questions_file_path

    # ─────────────────────────────────────────────────────────────────────────
    # Question List
    # ─────────────────────────────────────────────────────────────────────────

    def get_question_list(self) -> QuestionList:
        """The owned question list, for storage to serialize."""
        return self._questions

    def set_question_list(self, questions: Iterable[Question]) -> None:
        """
        Replace all questions (e.g. after loading from storage).

        Raises:
            DuplicateQuestionError: If `questions` holds duplicates; nothing changes
        """
        self._questions.set_all(questions)

    def has_question(self, question: Question) -> bool:
        return self._questions.contains(question)

    def add_question(self, question: Question) -> None:
        """
        Add a question and show all questions.

        Raises:
            DuplicateQuestionError: If the same question already exists
        """
        self._questions.add(question)
        self.update_filtered_question_list(SHOW_ALL_QUESTIONS)

    def delete_question(self, target: Question) -> None:
        """
        Raises:
            QuestionNotFoundError: If `target` is not in the list
        """
        self._questions.remove(target)

    def set_question(self, target: Question, edited_question: Question) -> None:
        """
        Replace `target` with `edited_question`, keeping its position.

        Raises:
            QuestionNotFoundError: If `target` is not in the list
            DuplicateQuestionError: If `edited_question` clashes with another question
        """
        self._questions.set_question(target, edited_question)

    # ─────────────────────────────────────────────────────────────────────────
    # Filtered View
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def predicate(self) -> QuestionPredicate:
        return self._predicate

    def update_filtered_question_list(self, predicate: QuestionPredicate) -> None:
        """Replace the active predicate. Applied on the next read."""
        self._predicate = predicate

    def get_filtered_question_list(self) -> tuple[Question, ...]:
        """Current questions accepted by the predicate, in list order."""
        return tuple(q for q in self._questions if self._predicate(q))

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Model):
            return NotImplemented
        return (
            self._questions == other._questions
            and self._user_prefs == other._user_prefs
            and self.get_filtered_question_list() == other.get_filtered_question_list()
        )

    __hash__ = None  # mutable
