"""
Module: session

Purpose:
    Start-up wiring for one SmartNUS session: logging, preferences,
    question bank storage and the Model. The UI calls `start_session()`
    once and then passes `session.model` / `session.storage` to
    `logic.execute_command` for every command.

Key Functions:
    - start_session(): Build a ready-to-use Session

Key Classes:
    - Session: The objects a UI needs for the session's lifetime
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from smartnus import __version__
from smartnus.core.errors import DataConversionError, StorageError
from smartnus.model import Model
from smartnus.storage import JsonQuestionBankStorage, PrefsStore
from smartnus.utils.logging_utils import configure_logging
from smartnus.utils.paths import get_app_data_dir, get_log_dir, get_prefs_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    """
    Objects owned by a running session.

    Attributes:
        model: Session state commands run against
        storage: Question bank file for the current preferences
        prefs_store: Persistent preferences
        warnings: Problems met during start-up, for the UI to display
    """

    model: Model
    storage: JsonQuestionBankStorage
    prefs_store: PrefsStore
    warnings: tuple[str, ...] = ()


def start_session(
    prefs_path: Optional[Path] = None,
    *,
    log_level: int = logging.INFO,
    log_to_file: bool = True,
) -> Session:
    """
    Load preferences and the question bank, and build the Model.

    A missing bank starts empty. A corrupted or unreadable bank also starts
    empty (the file is left untouched until the next successful save) and
    adds a warning to the session.

    Args:
        prefs_path: Preferences file; defaults to the app data location
        log_level: Level for the package logger
        log_to_file: Also write a rotating log under the app data directory

    Returns:
        Session ready for command execution
    """
    configure_logging(log_level, get_log_dir() / "smartnus.log" if log_to_file else None)
    logger.info(f"Starting SmartNUS {__version__}")

    warnings: list[str] = []
    prefs_store = PrefsStore(prefs_path if prefs_path is not None else get_prefs_path())
    if prefs_store.load_error:
        logger.warning(prefs_store.load_error)
        warnings.append(prefs_store.load_error)
    user_prefs = prefs_store.get_user_prefs()

    questions_path = user_prefs.questions_file_path
    if not questions_path.is_absolute():
        questions_path = get_app_data_dir() / questions_path
    storage = JsonQuestionBankStorage(questions_path)

    try:
        questions = storage.read_question_bank()
    except (DataConversionError, StorageError) as e:
        logger.warning(f"Question bank at {questions_path} could not be loaded, starting empty: {e.message}")
        warnings.append(e.message)
        questions = None

    model = Model(questions, user_prefs)
    return Session(model=model, storage=storage, prefs_store=prefs_store, warnings=tuple(warnings))
