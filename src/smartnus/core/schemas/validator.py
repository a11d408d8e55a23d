"""
Schema Validation Utilities

Validates stored question bank JSON before it is turned into models.

Two levels:
- Basic checks (always): top-level structure, schema version and the
  fields every question needs. Cheap and gives targeted messages.
- Strict mode: full JSON Schema validation with `jsonschema` against
  `question_bank.schema.json`.

Failures raise `DataConversionError` carrying the JSON path of the
offending value.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from ..errors import DataConversionError


# Schema version constants
QUESTION_BANK_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


def validate_question_bank(data: Any, *, strict: bool = True) -> None:
    """
    Validate a stored question bank.

    Args:
        data: Parsed JSON document
        strict: If True, also run full jsonschema validation

    Raises:
        DataConversionError: If data is invalid
    """
    if not isinstance(data, dict):
        raise DataConversionError("Question bank must be a JSON object")

    missing = [f for f in ("schema_version", "questions") if f not in data]
    if missing:
        raise DataConversionError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )

    version = data.get("schema_version")
    if version != QUESTION_BANK_SCHEMA_VERSION:
        raise DataConversionError(
            f"Unsupported question bank schema version: {version} "
            f"(expected {QUESTION_BANK_SCHEMA_VERSION})",
            path="schema_version"
        )

    questions = data.get("questions")
    if not isinstance(questions, list):
        raise DataConversionError("questions must be a list", path="questions")
    for i, question in enumerate(questions):
        validate_question(question, path=f"questions[{i}]")

    if strict:
        schema = _load_schema("question_bank")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise DataConversionError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message]
            ) from e


def validate_question(data: Any, *, path: str = "") -> None:
    """
    Basic structural check of one stored question.

    Args:
        data: Question dictionary
        path: JSON path used in error messages

    Raises:
        DataConversionError: If required fields are missing or malformed
    """
    if not isinstance(data, dict):
        raise DataConversionError("Question must be a JSON object", path=path)

    required = ["kind", "name", "importance", "choices"]
    missing = [f for f in required if f not in data]
    if missing:
        raise DataConversionError(
            f"Question missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing]
        )

    if data["kind"] not in ("mcq", "tf"):
        raise DataConversionError(f"Invalid question kind: {data['kind']!r}", path=f"{path}.kind")

    choices = data["choices"]
    if not isinstance(choices, list):
        raise DataConversionError("choices must be a list", path=f"{path}.choices")
    for i, choice in enumerate(choices):
        if not isinstance(choice, dict) or "title" not in choice or "is_correct" not in choice:
            raise DataConversionError(
                "Choice must have title and is_correct",
                path=f"{path}.choices[{i}]"
            )
