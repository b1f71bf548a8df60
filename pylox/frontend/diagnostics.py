"""
Structured diagnostics shared by every pylox pipeline stage.
"""

from dataclasses import dataclass
from enum import Enum


class DiagnosticKind(Enum):
    """Categories of problems a pipeline stage can report."""
    UNEXPECTED_CHARACTER = "unexpected-character"
    UNTERMINATED_STRING = "unterminated-string"
    SYNTAX = "syntax"


@dataclass(frozen=True)
class Diagnostic:
    """A single reported problem.

    Attributes:
        kind: The diagnostic category
        line: Line number (1-indexed) the problem is attributed to
        message: Human-readable message
        where: Location suffix, empty for scan errors, otherwise
            " at end" or " at '<lexeme>'"
    """
    kind: DiagnosticKind
    line: int
    message: str
    where: str = ""

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"
