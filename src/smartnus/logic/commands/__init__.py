"""
Commands Package

One frozen dataclass per user command. Each encapsulates its parameters
and implements `execute(model) -> CommandResult`.
"""

from .base import Command, CommandResult
from .add_command import AddCommand
from .clear_command import ClearCommand
from .delete_command import DeleteCommand
from .edit_command import UNSET, EditCommand, EditQuestionDescriptor, Unset
from .exit_command import ExitCommand
from .find_command import FindCommand
from .help_command import HelpCommand
from .list_command import ListCommand

__all__ = [
    "AddCommand",
    "ClearCommand",
    "Command",
    "CommandResult",
    "DeleteCommand",
    "EditCommand",
    "EditQuestionDescriptor",
    "ExitCommand",
    "FindCommand",
    "HelpCommand",
    "ListCommand",
    "UNSET",
    "Unset",
]
