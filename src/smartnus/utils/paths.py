"""
Path utilities for handling dev vs production (frozen) file locations.

Dev mode: Uses local workspace/ directory
Frozen mode: Uses the system-standard application data location
"""
from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtCore import QStandardPaths


def is_frozen() -> bool:
    """Check if running as a frozen (PyInstaller) application."""
    return getattr(sys, 'frozen', False) or hasattr(sys, '_MEIPASS')


def get_app_data_dir() -> Path:
    """
    Get the application data directory for question banks and preferences.

    Frozen: ~/Library/Application Support/SmartNUS (macOS)
            or %LOCALAPPDATA%/SmartNUS (Windows)
    Dev: workspace/
    """
    if is_frozen():
        app_data = Path(QStandardPaths.writableLocation(
            QStandardPaths.StandardLocation.AppLocalDataLocation
        ))
        app_data.mkdir(parents=True, exist_ok=True)
        return app_data
    return Path.cwd() / "workspace"


def get_prefs_path() -> Path:
    """Get the path for storing user preferences."""
    return get_app_data_dir() / "preferences.json"


def get_log_dir() -> Path:
    """Get the directory for rotating log files."""
    return get_app_data_dir() / "logs"
