"""
Storage Package

JSON persistence for the question bank and the user preferences.
"""

from .json_storage import JsonQuestionBankStorage
from .prefs_store import PrefsStore

__all__ = ["JsonQuestionBankStorage", "PrefsStore"]
