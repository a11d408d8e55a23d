"""
Module: prefs

Purpose:
    Provides UserPrefs - the user preferences held by the model and
    persisted by storage.prefs_store.PrefsStore.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_QUESTIONS_FILE = Path("data") / "smartnus.json"


@dataclass(frozen=True)
class UserPrefs:
    """
    User preferences (immutable).

    Attributes:
        questions_file_path: Where the question bank is read from and saved to
        window_geometry: Hex-encoded window geometry saved by the UI, if any
    """

    questions_file_path: Path = DEFAULT_QUESTIONS_FILE
    window_geometry: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "questions_file_path", Path(self.questions_file_path))
