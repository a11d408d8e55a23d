"""
Unit Tests for Choice Model

Tests for the Choice dataclass: title validation, equality and rendering.
"""

import pytest

from smartnus.core.errors import ValidationError
from smartnus.core.models.choice import Choice


class TestChoice:
    """Tests for Choice dataclass."""

    def test_init_when_valid_title_then_exposes_values(self):
        """Constructed values should be read back unchanged."""
        choice = Choice("Paris", True)

        assert choice.title == "Paris"
        assert choice.is_correct is True
        assert str(choice) == "Paris (answer)"

    def test_str_when_not_correct_then_title_only(self):
        assert str(Choice("Lyon", False)) == "Lyon"

    def test_init_when_leading_whitespace_then_raises_error(self):
        """A title starting with whitespace is rejected."""
        with pytest.raises(ValidationError, match="should not be blank"):
            Choice(" x", False)

    def test_init_when_single_character_then_creates_choice(self):
        assert Choice("x", False).title == "x"

    @pytest.mark.parametrize("title", ["", " ", "\t", "\nanswer"])
    def test_init_when_blank_title_then_raises_error(self, title):
        with pytest.raises(ValidationError):
            Choice(title, True)

    def test_init_when_not_a_string_then_raises_error(self):
        with pytest.raises(ValidationError):
            Choice(42, True)

    def test_init_when_validation_fails_then_is_value_error(self):
        """ValidationError doubles as ValueError for generic callers."""
        with pytest.raises(ValueError):
            Choice("", True)

    def test_is_valid_title_when_checked_then_matches_constructor(self):
        assert Choice.is_valid_title("a b")
        assert Choice.is_valid_title("1")
        assert not Choice.is_valid_title(" a")
        assert not Choice.is_valid_title("")

    def test_has_same_title_when_same_object_then_true(self):
        choice = Choice("Paris", True)
        assert choice.has_same_title(choice)

    def test_has_same_title_when_correctness_differs_then_true(self):
        assert Choice("Paris", True).has_same_title(Choice("Paris", False))

    def test_has_same_title_when_case_differs_then_false(self):
        assert not Choice("Paris", True).has_same_title(Choice("paris", True))

    def test_eq_when_title_and_flag_match_then_equal(self):
        assert Choice("Paris", True) == Choice("Paris", True)

    def test_eq_when_flag_differs_then_not_equal(self):
        assert Choice("Paris", True) != Choice("Paris", False)

    def test_eq_when_compared_with_other_type_then_not_equal(self):
        assert Choice("Paris", True) != "Paris (answer)"

    def test_frozen_when_assigning_then_raises(self):
        choice = Choice("Paris", True)
        with pytest.raises(AttributeError):
            choice.title = "Lyon"
