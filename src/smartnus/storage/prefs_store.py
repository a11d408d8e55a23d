"""
Preferences persistence for SmartNUS.

Handles the user's persistent preferences with robust error handling.
Malformed data falls back to defaults; the load error is kept so the UI
can tell the user.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtCore import QObject, Signal

from smartnus.core.models.prefs import DEFAULT_QUESTIONS_FILE, UserPrefs

logger = logging.getLogger(__name__)


class PrefsStore(QObject):
    """Lightweight JSON-backed store for persisting user preferences."""

    questionsFilePathChanged = Signal(str)
    CURRENT_VERSION = 1

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = Path(path)
        self.data: Dict[str, object] = {}
        self._load_error: Optional[str] = None

        if self.path.exists():
            try:
                self.data = json.loads(self.path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, UnicodeDecodeError) as e:
                self._load_error = f"Preferences file is corrupted:\n{e}"
                self.data = {}
            except OSError as e:
                self._load_error = f"Failed to read preferences:\n{e}"
                self.data = {}

        if not isinstance(self.data, dict):
            self._load_error = "Preferences file does not contain a JSON object"
            self.data = {}

        # Ensure version is set for new files
        if "version" not in self.data:
            self.data["version"] = self.CURRENT_VERSION

    @property
    def load_error(self) -> Optional[str]:
        return self._load_error

    def get_user_prefs(self) -> UserPrefs:
        """Build UserPrefs from stored data, using defaults for anything missing."""
        return UserPrefs(
            questions_file_path=self.get_questions_file_path(),
            window_geometry=self.get_window_geometry(),
        )

    def set_user_prefs(self, prefs: UserPrefs) -> None:
        previous = self.get_questions_file_path()
        state = self._get_dict()
        state["questions_file_path"] = str(prefs.questions_file_path)
        ui = self._get_ui_dict()
        ui["window_geometry"] = prefs.window_geometry
        self._save()
        if previous != prefs.questions_file_path:
            self.questionsFilePathChanged.emit(str(prefs.questions_file_path))

    def get_questions_file_path(self) -> Path:
        value = self._get_dict().get("questions_file_path")
        return Path(value) if isinstance(value, str) and value else DEFAULT_QUESTIONS_FILE

    def set_questions_file_path(self, value: Path) -> None:
        state = self._get_dict()
        state["questions_file_path"] = str(value)
        self._save()
        self.questionsFilePathChanged.emit(str(value))

    def get_window_geometry(self) -> Optional[str]:
        """Get saved window geometry with hex validation.

        Returns None if geometry is missing or invalid hex.
        """
        ui = self._get_dict().get("ui")
        geo = ui.get("window_geometry") if isinstance(ui, dict) else None
        if not isinstance(geo, str):
            return None
        try:
            bytes.fromhex(geo)
            return geo
        except ValueError:
            logger.warning("Invalid geometry string in preferences, ignoring")
            return None

    def set_window_geometry(self, geometry: str) -> None:
        ui = self._get_ui_dict()
        ui["window_geometry"] = geometry
        self._save()

    def _get_dict(self) -> Dict[str, object]:
        if not isinstance(self.data, dict):
            self.data = {}
        return self.data

    def _get_ui_dict(self) -> Dict[str, object]:
        """The "ui" section, replaced with an empty one if malformed."""
        state = self._get_dict()
        ui = state.get("ui")
        if not isinstance(ui, dict):
            ui = state["ui"] = {}
        return ui

    def _save(self) -> None:
        """Safely write preferences with atomic replacement.

        Uses a temp file to prevent corruption if write is interrupted.
        """
        temp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)

            # Write to temp file first
            temp_path = self.path.with_suffix('.tmp')
            temp_path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")

            # Atomic rename (overwrites existing)
            temp_path.replace(self.path)
        except OSError as e:
            logger.warning(f"Failed to save preferences: {e}")
            if temp_path is not None and temp_path.exists():
                temp_path.unlink()
