"""
Error reporting for pylox.

This module contains the package exceptions and the ErrorReporter, the
shared sink every pipeline stage reports diagnostics through. A reporter
belongs to one session and tracks whether that session has seen an error.
"""

import logging
import sys
from typing import List, Optional, TextIO

from ..frontend.diagnostics import Diagnostic, DiagnosticKind
from ..frontend.lexer import Token, TokenType

logger = logging.getLogger(__name__)


class LoxError(Exception):
    """Base exception for pylox."""


class ScriptReadError(LoxError):
    """Exception raised when a script file cannot be read."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not read {path}: {reason}")


class ErrorReporter:
    """Collects and prints diagnostics for one session.

    Example:
        >>> reporter = ErrorReporter()
        >>> reporter.error(3, "Unexpected character.")
        >>> reporter.had_error
        True
    """

    def __init__(self, err: Optional[TextIO] = None):
        """Initialize the reporter.

        Args:
            err: Stream diagnostics are written to (defaults to sys.stderr)
        """
        self._err = err
        self.diagnostics: List[Diagnostic] = []

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)

    def add(self, diagnostic: Diagnostic) -> None:
        """Record a diagnostic and print it immediately."""
        self.diagnostics.append(diagnostic)
        stream = self._err if self._err is not None else sys.stderr
        print(diagnostic, file=stream)

    def report(self, line: int, where: str, message: str,
               kind: DiagnosticKind = DiagnosticKind.SYNTAX) -> Diagnostic:
        """Report a problem at a line with an explicit location suffix.

        Args:
            line: Line number (1-indexed)
            where: Location suffix (empty, " at end" or " at '<lexeme>'")
            message: Human-readable message
            kind: Diagnostic category

        Returns:
            The recorded Diagnostic
        """
        diagnostic = Diagnostic(kind=kind, line=line, message=message, where=where)
        self.add(diagnostic)
        return diagnostic

    def error(self, line: int, message: str,
              kind: DiagnosticKind = DiagnosticKind.UNEXPECTED_CHARACTER) -> Diagnostic:
        """Report a scan-time problem that is not tied to a particular token."""
        return self.report(line, "", message, kind)

    def error_at(self, token: Token, message: str) -> Diagnostic:
        """Report a problem attributed to a consumed token."""
        if token.type == TokenType.EOF:
            return self.report(token.line, " at end", message)
        return self.report(token.line, f" at '{token.lexeme}'", message)

    def reset(self) -> None:
        """Forget every diagnostic so the next run starts clean."""
        if self.diagnostics:
            logger.debug(f"Clearing {len(self.diagnostics)} diagnostics")
        self.diagnostics = []
