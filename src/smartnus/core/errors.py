"""
Module: core.errors

Purpose:
    Typed failures raised by the value objects, the question list, the
    model and the commands. Every error carries a user-facing `message`
    so the UI boundary can display it without inspecting the type.

Key Classes:
    - SmartNusError: Base class, never raised directly
    - ValidationError: Malformed value object at construction
    - DuplicateQuestionError: Business-key collision on add/edit
    - QuestionNotFoundError: Mutation target absent from the list
    - IndexOutOfRangeError: Display index outside the filtered view
    - DataConversionError: Stored question bank is malformed
    - StorageError: Question bank could not be written

Used By:
    - core.models (all value objects)
    - model.Model
    - logic.commands
    - storage
"""

from __future__ import annotations

from .messages import (
    MESSAGE_DUPLICATE_QUESTION,
    MESSAGE_INVALID_QUESTION_DISPLAYED_INDEX,
    MESSAGE_QUESTION_NOT_FOUND,
)


class SmartNusError(Exception):
    """Base class for recoverable SmartNUS failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SmartNusError, ValueError):
    """Raised when a value object is constructed from invalid input."""
    pass


class DuplicateQuestionError(SmartNusError):
    """Raised when a question clashes with an existing one by business key."""

    def __init__(self, message: str = MESSAGE_DUPLICATE_QUESTION):
        super().__init__(message)


class QuestionNotFoundError(SmartNusError):
    """Raised when a question to replace or remove is not in the list."""

    def __init__(self, message: str = MESSAGE_QUESTION_NOT_FOUND):
        super().__init__(message)


class IndexOutOfRangeError(SmartNusError):
    """Raised when a display index is outside the current filtered view."""

    def __init__(self, message: str = MESSAGE_INVALID_QUESTION_DISPLAYED_INDEX):
        super().__init__(message)


class DataConversionError(SmartNusError):
    """Raised when stored data fails schema validation or conversion."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


class StorageError(SmartNusError):
    """Raised when the question bank cannot be written to disk."""
    pass
