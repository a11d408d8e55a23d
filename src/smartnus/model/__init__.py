"""
Model Package

Session state and mutation API used by commands.
"""

from .model import Model

__all__ = ["Model"]
