"""
Utility modules for pylox.

This package contains configuration helpers used throughout the interpreter.
"""

from .settings import DEFAULT_SETTINGS, Settings

__all__ = [
    "DEFAULT_SETTINGS",
    "Settings",
]
