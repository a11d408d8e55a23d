"""
Unit tests for preference persistence.
"""
import json
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from smartnus.core.models.prefs import DEFAULT_QUESTIONS_FILE, UserPrefs
from smartnus.storage import PrefsStore


class TestPrefsStore(unittest.TestCase):
    """Test preference persistence."""

    def setUp(self):
        self.temp_dir = TemporaryDirectory()
        self.prefs_path = Path(self.temp_dir.name) / "preferences.json"
        self.store = PrefsStore(self.prefs_path)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_defaults_when_file_missing(self):
        """A fresh store yields default preferences and no load error."""
        self.assertEqual(self.store.get_user_prefs(), UserPrefs())
        self.assertEqual(self.store.get_questions_file_path(), DEFAULT_QUESTIONS_FILE)
        self.assertIsNone(self.store.load_error)
        self.assertFalse(self.prefs_path.exists())

    def test_questions_file_path_persistence(self):
        """Test questions file path is saved and loaded correctly."""
        self.store.set_questions_file_path(Path("banks/cs2103.json"))

        # Create new store instance to test persistence
        new_store = PrefsStore(self.prefs_path)
        self.assertEqual(new_store.get_questions_file_path(), Path("banks/cs2103.json"))

    def test_user_prefs_persistence(self):
        """Test full UserPrefs round trip."""
        prefs = UserPrefs(questions_file_path=Path("x/y.json"), window_geometry="01ab")
        self.store.set_user_prefs(prefs)

        new_store = PrefsStore(self.prefs_path)
        self.assertEqual(new_store.get_user_prefs(), prefs)
        self.assertEqual(new_store.data["version"], PrefsStore.CURRENT_VERSION)

    def test_window_geometry_persistence(self):
        """Geometry must be valid hex to be stored and read back."""
        self.store.set_window_geometry("abc123def456")

        new_store = PrefsStore(self.prefs_path)
        self.assertEqual(new_store.get_window_geometry(), "abc123def456")

    def test_invalid_geometry_ignored(self):
        """Non-hex geometry reads back as None."""
        self.store.set_window_geometry("not-hex")
        with self.assertLogs("smartnus.storage.prefs_store", level="WARNING"):
            self.assertIsNone(self.store.get_window_geometry())

    def test_corrupted_file_falls_back_to_defaults(self):
        """A corrupted file yields defaults and records the load error."""
        self.prefs_path.write_text("{broken", encoding="utf-8")

        store = PrefsStore(self.prefs_path)
        self.assertEqual(store.get_user_prefs(), UserPrefs())
        self.assertIn("corrupted", store.load_error)

    def test_non_object_file_falls_back_to_defaults(self):
        self.prefs_path.write_text(json.dumps(["a", "b"]), encoding="utf-8")

        store = PrefsStore(self.prefs_path)
        self.assertEqual(store.get_user_prefs(), UserPrefs())
        self.assertIsNotNone(store.load_error)

    def test_not_utf8_file_falls_back_to_defaults(self):
        """Undecodable bytes are treated like a corrupted file."""
        self.prefs_path.write_bytes(b"\xff\xfe")

        store = PrefsStore(self.prefs_path)
        self.assertEqual(store.get_user_prefs(), UserPrefs())
        self.assertIn("corrupted", store.load_error)

    def test_malformed_ui_section_replaced_on_write(self):
        """A non-object "ui" section is replaced rather than written into."""
        self.prefs_path.write_text(json.dumps({"version": 1, "ui": "oops"}), encoding="utf-8")
        store = PrefsStore(self.prefs_path)
        self.assertIsNone(store.get_window_geometry())

        store.set_window_geometry("ff")
        self.assertEqual(PrefsStore(self.prefs_path).get_window_geometry(), "ff")

        store.data["ui"] = ["still", "wrong"]
        store.set_user_prefs(UserPrefs(window_geometry="0a"))
        self.assertEqual(PrefsStore(self.prefs_path).get_window_geometry(), "0a")

    def test_path_change_emits_signal(self):
        """Changing the questions file path notifies listeners."""
        received = []
        self.store.questionsFilePathChanged.connect(lambda path: received.append(path))

        self.store.set_user_prefs(UserPrefs(questions_file_path=Path("new.json")))
        # Same path again: no signal
        self.store.set_user_prefs(UserPrefs(questions_file_path=Path("new.json"), window_geometry="ff"))

        self.assertEqual(received, [str(Path("new.json"))])

    def test_save_failure_is_not_raised(self):
        """Unwritable location logs a warning instead of raising."""
        blocker = Path(self.temp_dir.name) / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = PrefsStore(blocker / "preferences.json")

        with self.assertLogs("smartnus.storage.prefs_store", level="WARNING"):
            store.set_questions_file_path(Path("a.json"))


if __name__ == "__main__":
    unittest.main()
