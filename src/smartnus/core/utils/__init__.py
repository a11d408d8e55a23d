"""
Utils Package

Serialization functions for questions and question banks.
"""

from .serialization import (
    serialize_question,
    deserialize_question,
    serialize_question_bank,
    deserialize_question_bank,
)

__all__ = [
    "serialize_question",
    "deserialize_question",
    "serialize_question_bank",
    "deserialize_question_bank",
]
