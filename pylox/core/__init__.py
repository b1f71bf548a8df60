"""
Core module for pylox.

This module contains the session driver and the error reporting shared by
every pipeline stage.
"""

from .errors import ErrorReporter, LoxError, ScriptReadError
from .session import RunResult, Session, Stage

__all__ = [
    "ErrorReporter",
    "LoxError",
    "ScriptReadError",
    "RunResult",
    "Session",
    "Stage",
]
