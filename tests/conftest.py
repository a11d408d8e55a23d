import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import smartnus
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from smartnus.core.models import (  # noqa: E402
    Choice,
    Importance,
    MultipleChoiceQuestion,
    Name,
    Tag,
    TrueFalseQuestion,
)
from smartnus.model import Model  # noqa: E402


def _mcq(name, importance=2, tags=(), answer="Paris", wrong=("Lyon", "Nice", "Lille")):
    choices = {Choice(answer, True)} | {Choice(title, False) for title in wrong}
    return MultipleChoiceQuestion(
        Name(name),
        Importance(importance),
        frozenset(Tag(t) for t in tags),
        frozenset(choices),
    )


# Common test fixtures
@pytest.fixture
def make_mcq():
    """Factory for multiple-choice questions with sensible defaults."""
    return _mcq


@pytest.fixture
def question_a():
    return _mcq("What is the capital of France?", 2, ("geography",))


@pytest.fixture
def question_b():
    return _mcq("What is 2 + 2?", 1, ("math",), answer="4", wrong=("3", "5", "22"))


@pytest.fixture
def question_c():
    return TrueFalseQuestion.create(
        Name("Is the Earth round?"), Importance(3), (Tag("science"),), answer=True
    )


@pytest.fixture
def question_d():
    return _mcq(
        "Which planet is the largest?", 4, ("science", "space"),
        answer="Jupiter", wrong=("Mars", "Venus", "Saturn"),
    )


@pytest.fixture
def typical_questions(question_a, question_b, question_c, question_d):
    """Four questions with distinct names, in insertion order."""
    return [question_a, question_b, question_c, question_d]


@pytest.fixture
def model(typical_questions):
    """Model preloaded with the typical questions and default prefs."""
    return Model(typical_questions)
