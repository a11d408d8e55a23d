"""
Module: index

Purpose:
    Provides the Index value object used by commands that address a
    question by its position in the displayed (filtered) list. Stores the
    zero-based value and exposes both conventions.

Used By:
    - logic.commands.edit.EditCommand
    - logic.commands.delete.DeleteCommand
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import ValidationError


@dataclass(frozen=True, order=True)
class Index:
    """
    Position in the displayed list (immutable).

    Users see one-based positions; list access needs zero-based ones.
    Construct through `from_one_based` / `from_zero_based` rather than
    directly so the convention is explicit at the call site.

    Example:
        >>> Index.from_one_based(1).zero_based
        0
    """

    zero_based: int

    def __post_init__(self) -> None:
        if isinstance(self.zero_based, bool) or not isinstance(self.zero_based, int):
            raise ValidationError(f"Index must be an integer: {self.zero_based!r}")
        if self.zero_based < 0:
            raise ValidationError("Index must be a positive integer")

    @classmethod
    def from_zero_based(cls, zero_based_index: int) -> Index:
        return cls(zero_based_index)

    @classmethod
    def from_one_based(cls, one_based_index: int) -> Index:
        if isinstance(one_based_index, bool) or not isinstance(one_based_index, int):
            raise ValidationError(f"Index must be an integer: {one_based_index!r}")
        return cls(one_based_index - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1

    def __repr__(self) -> str:
        return f"Index({self.one_based})"
