import copy

import pytest

from smartnus.model import Model


@pytest.fixture
def assert_command_failure():
    """
    Run a command that must fail and check the model is untouched.

    Returns the raised exception for further assertions.
    """

    def _assert(command, model: Model, error_type, message: str):
        before_list = model.get_question_list().as_tuple()
        before_view = model.get_filtered_question_list()
        with pytest.raises(error_type) as exc_info:
            command.execute(model)
        assert exc_info.value.message == message
        assert model.get_question_list().as_tuple() == before_list
        assert model.get_filtered_question_list() == before_view
        return exc_info.value

    return _assert


@pytest.fixture
def show_question_at():
    """Narrow `model`'s filtered view to the single question at a zero-based position."""

    def _show(model: Model, zero_based: int):
        target = model.get_filtered_question_list()[zero_based]
        model.update_filtered_question_list(lambda q: q.is_same_question(target))
        assert len(model.get_filtered_question_list()) == 1
        return target

    return _show


@pytest.fixture
def clone_model():
    """Independent copy of a model's list and prefs (filter reset to show all)."""

    def _clone(model: Model) -> Model:
        return Model(model.get_question_list(), copy.copy(model.user_prefs))

    return _clone
