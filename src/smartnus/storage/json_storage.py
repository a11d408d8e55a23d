"""
Module: storage.json_storage

Purpose:
    Read and write the question bank as a single JSON document.

Key Classes:
    - JsonQuestionBankStorage: File-backed question bank

Dependencies:
    - json (std)
    - core.utils.serialization
    - core.schemas.validator (via serialization)

Used By:
    - logic.controller.execute_command (save after mutating commands)
    - application start-up (initial load)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Optional

from smartnus.core.errors import DataConversionError, StorageError
from smartnus.core.models.question_list import QuestionList
from smartnus.core.models.questions import Question
from smartnus.core.utils.serialization import (
    deserialize_question_bank,
    serialize_question_bank,
)

logger = logging.getLogger(__name__)

MESSAGE_FILE_READ_ERROR = "Could not read data from file: %s"


class JsonQuestionBankStorage:
    """
    JSON file holding every question.

    Writes go through a temp file and an atomic rename so an interrupted
    save never leaves a half-written bank behind.

    Example:
        >>> storage = JsonQuestionBankStorage(Path("data/smartnus.json"))
        >>> questions = storage.read_question_bank() or QuestionList()
        >>> storage.save_question_bank(questions)
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def read_question_bank(self, path: Optional[Path] = None) -> Optional[QuestionList]:
        """
        Load the question bank.

        Args:
            path: File to read instead of `self.path`

        Returns:
            QuestionList, or None if the file does not exist

        Raises:
            DataConversionError: If the file is not valid JSON or fails validation
            StorageError: If the file exists but cannot be read
        """
        path = Path(path) if path is not None else self.path
        if not path.exists():
            logger.info(f"Question bank not found at {path}")
            return None

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DataConversionError(
                f"Question bank file is corrupted: {e}",
                path=str(path),
                errors=[str(e)]
            ) from e
        except OSError as e:
            raise StorageError(MESSAGE_FILE_READ_ERROR % e) from e

        questions = deserialize_question_bank(data, validate=True)
        logger.info(f"Loaded {len(questions)} questions from {path}")
        return questions

    def save_question_bank(self, questions: Iterable[Question], path: Optional[Path] = None) -> None:
        """
        Save the question bank atomically.

        Args:
            questions: Question list snapshot to write
            path: File to write instead of `self.path`

        Raises:
            OSError: If the file cannot be written
        """
        path = Path(path) if path is not None else self.path
        path.parent.mkdir(parents=True, exist_ok=True)

        payload = json.dumps(serialize_question_bank(questions), indent=2, ensure_ascii=False)
        temp_path = path.with_suffix(".tmp")
        try:
            temp_path.write_text(payload, encoding="utf-8")
            temp_path.replace(path)
        except OSError:
            if temp_path.exists():
                temp_path.unlink()
            raise
        logger.debug(f"Saved question bank to {path}")
