"""
Test suite for pylox.

This package contains tests for the lexer, the error reporter, the session
driver and the command-line interface.
"""

__version__ = "0.1.0"
