"""
Serialization Utilities

Provides to/from dict utilities for questions and whole question banks.

- `serialize_*` / `deserialize_*` pairs, one per stored shape
- Deserialization validates against the schema first (optional)
- Any model-level failure while rebuilding objects is reported as
  `DataConversionError` with the JSON path of the bad question
"""

from __future__ import annotations

from typing import Any, Iterable

from ..errors import DataConversionError, DuplicateQuestionError, ValidationError
from ..models.choice import Choice
from ..models.fields import Importance, Name, Tag
from ..models.question_list import QuestionList
from ..models.questions import Question, QuestionKind, question_class_for
from ..schemas.validator import (
    QUESTION_BANK_SCHEMA_VERSION,
    validate_question,
    validate_question_bank,
)


# ─────────────────────────────────────────────────────────────────────────────
# Question Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question(question: Question) -> dict[str, Any]:
    """
    Serialize a question to a dictionary.

    Tags and choices are written in sorted order so saved files are stable
    across runs.
    """
    return {
        "kind": question.kind.value,
        "name": question.name.value,
        "importance": question.importance.value,
        "tags": sorted(tag.value for tag in question.tags),
        "choices": [
            {"title": choice.title, "is_correct": choice.is_correct}
            for choice in sorted(question.choices, key=lambda c: c.title)
        ],
    }


def deserialize_question(data: dict[str, Any], *, validate: bool = True, path: str = "") -> Question:
    """
    Deserialize a question from a dictionary.

    Args:
        data: Dictionary from JSON
        validate: Whether to run the basic structural check first
        path: JSON path used in error messages

    Returns:
        Question of the variant named by data["kind"]

    Raises:
        DataConversionError: If data is malformed or violates a model constraint
    """
    if validate:
        validate_question(data, path=path)

    try:
        cls = question_class_for(QuestionKind(data["kind"]))
        return cls(
            name=Name(data["name"]),
            importance=Importance(data["importance"]),
            tags=frozenset(Tag(t) for t in data.get("tags", [])),
            choices=frozenset(
                Choice(c["title"], c["is_correct"]) for c in data["choices"]
            ),
        )
    except (KeyError, ValueError) as e:
        # ValidationError is a ValueError
        message = e.message if isinstance(e, ValidationError) else str(e)
        raise DataConversionError(
            f"Invalid question: {message}",
            path=path,
            errors=[message]
        ) from e


# ─────────────────────────────────────────────────────────────────────────────
# Question Bank Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_question_bank(questions: Iterable[Question]) -> dict[str, Any]:
    """
    Serialize a question list snapshot to a versioned document.

    The output passes `validate_question_bank(strict=True)`.
    """
    return {
        "schema_version": QUESTION_BANK_SCHEMA_VERSION,
        "questions": [serialize_question(q) for q in questions],
    }


def deserialize_question_bank(data: Any, *, validate: bool = True) -> QuestionList:
    """
    Rebuild a QuestionList from a stored document.

    Args:
        data: Parsed JSON document
        validate: Whether to run full schema validation first

    Returns:
        QuestionList in stored order

    Raises:
        DataConversionError: If the document is invalid or holds duplicates
    """
    if validate:
        validate_question_bank(data, strict=True)

    questions = [
        deserialize_question(q, validate=False, path=f"questions[{i}]")
        for i, q in enumerate(data["questions"])
    ]
    try:
        return QuestionList(questions)
    except DuplicateQuestionError as e:
        raise DataConversionError(
            "Question bank contains duplicate questions",
            path="questions",
            errors=[e.message]
        ) from e
