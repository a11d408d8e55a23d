"""
Schemas Package

JSON schema definitions and validation utilities for stored question banks.
"""

from .validator import (
    validate_question_bank,
    validate_question,
    QUESTION_BANK_SCHEMA_VERSION,
)

__all__ = [
    "validate_question_bank",
    "validate_question",
    "QUESTION_BANK_SCHEMA_VERSION",
]
