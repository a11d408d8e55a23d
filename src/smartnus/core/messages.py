"""
Module: core.messages

Purpose:
    User-facing message templates shared by more than one command.
    Command-specific messages live on the command classes themselves.
"""

MESSAGE_INVALID_QUESTION_DISPLAYED_INDEX = "The question index provided is invalid"
MESSAGE_QUESTIONS_LISTED_OVERVIEW = "%d questions listed!"
MESSAGE_DUPLICATE_QUESTION = "This question already exists in SmartNUS."
MESSAGE_QUESTION_NOT_FOUND = "The question could not be found in SmartNUS."
