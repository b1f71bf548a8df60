"""
Frontend module for pylox.

This module provides the scanner that turns Lox source text into tokens,
along with the diagnostic types every pipeline stage reports through.
"""

from .diagnostics import Diagnostic, DiagnosticKind
from .lexer import KEYWORDS, Lexer, ScanResult, Scanner, Token, TokenType, tokenize_source

__all__ = [
    # Lexer components
    "KEYWORDS",
    "Lexer",
    "ScanResult",
    "Scanner",
    "Token",
    "TokenType",
    "tokenize_source",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
]
