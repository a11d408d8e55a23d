"""
Logic Package

Commands and the controller that runs them.
"""

from .controller import execute_command

__all__ = ["execute_command"]
