"""
pylox - Lox scanner and session driver

Turns Lox source text into a flat list of classified tokens and reports
lexical errors in a single pass. The session driver runs whole script files
or an interactive prompt and picks the exit code.

Example:
    >>> from pylox import Lexer
    >>> result = Lexer().tokenize("var x = 1 + 2;")
    >>> [t.type.name for t in result.tokens]
    ['VAR', 'IDENTIFIER', 'EQUAL', 'NUMBER', 'PLUS', 'NUMBER', 'SEMICOLON', 'EOF']

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "pylox Team"

from .core import ErrorReporter, LoxError, Session
from .frontend import Diagnostic, Lexer, Token, TokenType

__all__ = [
    "__version__",
    "__author__",
    "Diagnostic",
    "ErrorReporter",
    "Lexer",
    "LoxError",
    "Session",
    "Token",
    "TokenType",
]
