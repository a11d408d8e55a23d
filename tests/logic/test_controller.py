"""
Tests for execute_command: execution, saving after mutation, and error propagation.
"""

import json
import logging

import pytest

from smartnus.core.errors import DuplicateQuestionError, IndexOutOfRangeError, StorageError
from smartnus.core.models.index import Index
from smartnus.core.models.predicates import NameContainsKeywordsPredicate
from smartnus.logic import execute_command
from smartnus.logic.commands import (
    AddCommand,
    ClearCommand,
    DeleteCommand,
    FindCommand,
    ListCommand,
)
from smartnus.storage import JsonQuestionBankStorage


class RecordingStorage:
    """Storage double that remembers every snapshot it was asked to save."""

    def __init__(self):
        self.saved = []

    def save_question_bank(self, questions):
        self.saved.append(tuple(questions))


class FailingStorage:
    def save_question_bank(self, questions):
        raise PermissionError("read-only file system")


class TestExecuteCommand:
    """Tests for execute_command()."""

    def test_execute_when_mutating_command_then_saves_snapshot(self, model, make_mcq):
        storage = RecordingStorage()
        question = make_mcq("Saved question")

        result = execute_command(AddCommand(question), model, storage)

        assert result.feedback == AddCommand.MESSAGE_SUCCESS % question
        assert len(storage.saved) == 1
        assert storage.saved[0][-1] == question

    def test_execute_when_read_only_command_then_no_save(self, model):
        storage = RecordingStorage()

        execute_command(ListCommand(), model, storage)
        execute_command(FindCommand(NameContainsKeywordsPredicate(("capital",))), model, storage)

        assert storage.saved == []

    def test_execute_when_command_fails_then_raises_and_no_save(self, model, question_a):
        storage = RecordingStorage()

        with pytest.raises(DuplicateQuestionError):
            execute_command(AddCommand(question_a), model, storage)

        assert storage.saved == []

    def test_execute_when_invalid_index_then_error_message_kept(self, model):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            execute_command(DeleteCommand(Index.from_one_based(10)), model)
        assert exc_info.value.message == "The question index provided is invalid"

    def test_execute_when_no_storage_then_runs_without_saving(self, model):
        execute_command(ClearCommand(), model)
        assert len(model.get_question_list()) == 0

    def test_execute_when_save_fails_then_storage_error_and_model_changed(self, model):
        with pytest.raises(StorageError) as exc_info:
            execute_command(ClearCommand(), model, FailingStorage())

        assert exc_info.value.message.startswith("Could not save data to file: ")
        assert "read-only file system" in exc_info.value.message
        assert isinstance(exc_info.value.__cause__, PermissionError)
        # The command itself already succeeded
        assert len(model.get_question_list()) == 0

    def test_execute_when_json_storage_then_file_reflects_model(self, model, tmp_path):
        storage = JsonQuestionBankStorage(tmp_path / "bank.json")

        execute_command(DeleteCommand(Index.from_one_based(1)), model, storage)

        data = json.loads((tmp_path / "bank.json").read_text(encoding="utf-8"))
        assert [q["name"] for q in data["questions"]] == [
            "What is 2 + 2?",
            "Is the Earth round?",
            "Which planet is the largest?",
        ]
        assert storage.read_question_bank() == model.get_question_list()

    def test_execute_when_logging_enabled_then_command_logged(self, model, caplog):
        caplog.set_level(logging.INFO, logger="smartnus")

        execute_command(ListCommand(), model)

        assert any("Executing command: ListCommand()" in r.getMessage() for r in caplog.records)

    def test_execute_when_rejected_then_rejection_logged(self, model, question_a, caplog):
        caplog.set_level(logging.INFO, logger="smartnus")

        with pytest.raises(DuplicateQuestionError):
            execute_command(AddCommand(question_a), model)

        assert any("rejected" in r.getMessage() for r in caplog.records)
