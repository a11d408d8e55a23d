"""
SmartNUS Core Package

Shared value objects, question variants, errors and serialization used by
the model, the commands and storage.

**DESIGN NOTES:**

1. **Immutable Value Objects**
   - Choice, Name, Importance, Tag and every question variant are frozen
   - An edit builds a new question that replaces the old one in the list

2. **Business Key vs Structural Equality**
   - `is_same_question()` compares names only; used for duplicate detection
   - `==` compares every field; used for exact comparisons in tests

3. **Variants Without Inheritance**
   - MultipleChoiceQuestion and TrueFalseQuestion share the `Question`
     protocol and a few module helpers, not a base class
"""

from .errors import (
    DataConversionError,
    DuplicateQuestionError,
    IndexOutOfRangeError,
    QuestionNotFoundError,
    SmartNusError,
    StorageError,
    ValidationError,
)
from .models import (
    Choice,
    Importance,
    Index,
    MultipleChoiceQuestion,
    Name,
    Question,
    QuestionKind,
    QuestionList,
    Tag,
    TrueFalseQuestion,
    UserPrefs,
)

__all__ = [
    "Choice",
    "DataConversionError",
    "DuplicateQuestionError",
    "Importance",
    "Index",
    "IndexOutOfRangeError",
    "MultipleChoiceQuestion",
    "Name",
    "Question",
    "QuestionKind",
    "QuestionList",
    "QuestionNotFoundError",
    "SmartNusError",
    "StorageError",
    "Tag",
    "TrueFalseQuestion",
    "UserPrefs",
    "ValidationError",
]
