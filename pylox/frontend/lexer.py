"""
Lexer module for pylox.

This module provides a hand-written, single-pass scanner for Lox source code.
It converts source text into a stream of tokens for a downstream parser and
collects lexical problems as structured diagnostics instead of raising.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import Iterator, List, Mapping, Optional, Union

from .diagnostics import Diagnostic, DiagnosticKind

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types for the Lox language."""
    # Single-character tokens
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    SLASH = auto()          # /
    STAR = auto()           # *

    # One or two character tokens
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF = auto()


# Reserved words, shared by every scan
KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})


@dataclass(frozen=True)
class Token:
    """Represents a token in the source code.

    Attributes:
        type: The token type
        lexeme: The exact source text of the token
        literal: Decoded value for NUMBER (float) and STRING (str) tokens
        line: Line number (1-indexed) on which the token starts
    """
    type: TokenType
    lexeme: str
    literal: Optional[Union[float, str]]
    line: int

    def __str__(self) -> str:
        return f"{self.type.name} {self.lexeme} {self.literal}"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.lexeme!r}, line={self.line})"


@dataclass
class ScanResult:
    """Tokens and diagnostics produced by one scan.

    Attributes:
        tokens: Token list, always terminated by an EOF token
        diagnostics: Lexical problems in the order they were found
    """
    tokens: List[Token] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def had_error(self) -> bool:
        return bool(self.diagnostics)


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_alpha(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z") or c == "_"


def _is_alpha_numeric(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


class Scanner:
    """Scans a single source string.

    A scanner holds the cursor for one pass over its source and is not
    reused. Iterating it yields tokens lazily; any lexical problems found
    along the way are appended to ``diagnostics``.
    """

    _SINGLE_CHAR_TOKENS = {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
        "*": TokenType.STAR,
    }

    # first char -> (type when followed by '=', type otherwise)
    _EQUAL_SUFFIX_TOKENS = {
        "!": (TokenType.BANG_EQUAL, TokenType.BANG),
        "=": (TokenType.EQUAL_EQUAL, TokenType.EQUAL),
        "<": (TokenType.LESS_EQUAL, TokenType.LESS),
        ">": (TokenType.GREATER_EQUAL, TokenType.GREATER),
    }

    _WHITESPACE = frozenset(" \r\t")

    def __init__(self, source: str):
        self.source = source
        self.diagnostics: List[Diagnostic] = []
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1

    def scan_tokens(self) -> ScanResult:
        """Scan the whole source.

        Returns:
            ScanResult with the token list and any diagnostics
        """
        tokens = list(self)
        return ScanResult(tokens=tokens, diagnostics=self.diagnostics)

    def __iter__(self) -> Iterator[Token]:
        while not self._is_at_end():
            self._start = self._current
            self._start_line = self._line
            token = self._scan_token()
            if token is not None:
                yield token
        yield Token(TokenType.EOF, "", None, self._line)

    def _scan_token(self) -> Optional[Token]:
        """Consume one lexeme and return its token, if it produces one."""
        c = self._advance()

        if c in self._SINGLE_CHAR_TOKENS:
            return self._make_token(self._SINGLE_CHAR_TOKENS[c])

        if c in self._EQUAL_SUFFIX_TOKENS:
            matched, unmatched = self._EQUAL_SUFFIX_TOKENS[c]
            return self._make_token(matched if self._match("=") else unmatched)

        if c == "/":
            if self._match("/"):
                # Comment runs to end of line; the newline is left for the next step
                while self._peek() != "\n" and not self._is_at_end():
                    self._advance()
                return None
            return self._make_token(TokenType.SLASH)

        if c in self._WHITESPACE:
            return None

        if c == "\n":
            self._line += 1
            return None

        if c == '"':
            return self._string()

        if _is_digit(c):
            return self._number()

        if _is_alpha(c):
            return self._identifier()

        self._error(DiagnosticKind.UNEXPECTED_CHARACTER, "Unexpected character.")
        return None

    def _string(self) -> Optional[Token]:
        while self._peek() != '"' and not self._is_at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._is_at_end():
            self._error(DiagnosticKind.UNTERMINATED_STRING, "Unterminated string.")
            return None

        # The closing quote
        self._advance()

        value = self.source[self._start + 1:self._current - 1]
        return self._make_token(TokenType.STRING, value)

    def _number(self) -> Token:
        while _is_digit(self._peek()):
            self._advance()

        # A fractional part needs at least one digit after the dot
        if self._peek() == "." and _is_digit(self._peek_next()):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()

        return self._make_token(TokenType.NUMBER, float(self._lexeme()))

    def _identifier(self) -> Token:
        while _is_alpha_numeric(self._peek()):
            self._advance()

        token_type = KEYWORDS.get(self._lexeme(), TokenType.IDENTIFIER)
        return self._make_token(token_type)

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self._is_at_end():
            return False
        if self.source[self._current] != expected:
            return False
        self._current += 1
        return True

    def _peek(self) -> str:
        if self._is_at_end():
            return "\0"
        return self.source[self._current]

    def _peek_next(self) -> str:
        if self._current + 1 >= len(self.source):
            return "\0"
        return self.source[self._current + 1]

    def _is_at_end(self) -> bool:
        return self._current >= len(self.source)

    def _advance(self) -> str:
        c = self.source[self._current]
        self._current += 1
        return c

    def _lexeme(self) -> str:
        return self.source[self._start:self._current]

    def _make_token(self, token_type: TokenType,
                    literal: Optional[Union[float, str]] = None) -> Token:
        return Token(token_type, self._lexeme(), literal, self._start_line)

    def _error(self, kind: DiagnosticKind, message: str) -> None:
        self.diagnostics.append(Diagnostic(kind=kind, line=self._line, message=message))


class Lexer:
    """Lexer for tokenizing Lox source code.

    Every call builds a fresh Scanner, so one Lexer can be shared freely.

    Example:
        >>> lexer = Lexer()
        >>> result = lexer.tokenize("var x = 1;")
        >>> for token in result.tokens:
        ...     print(token)
    """

    def tokenize(self, source: str) -> ScanResult:
        """Tokenize Lox source code.

        Args:
            source: Lox source code string

        Returns:
            ScanResult with the tokens (ending in EOF) and any diagnostics
        """
        result = Scanner(source).scan_tokens()
        logger.debug(
            f"Scanned {len(result.tokens)} tokens with "
            f"{len(result.diagnostics)} diagnostics"
        )
        return result

    def tokenize_iter(self, source: str,
                      diagnostics: Optional[List[Diagnostic]] = None) -> Iterator[Token]:
        """Tokenize Lox source code lazily.

        Args:
            source: Lox source code string
            diagnostics: Optional list that receives diagnostics as they are found

        Yields:
            Token objects one at a time, ending with EOF
        """
        scanner = Scanner(source)
        if diagnostics is not None:
            scanner.diagnostics = diagnostics
        yield from scanner

    def is_keyword(self, name: str) -> bool:
        """Check if a name is a reserved word.

        Args:
            name: Identifier to check

        Returns:
            True if name is a keyword
        """
        return name in KEYWORDS

    def get_keyword_tokens(self) -> List[str]:
        """Get list of reserved words.

        Returns:
            List of keyword strings
        """
        return sorted(KEYWORDS)


def tokenize_source(source: str) -> List[Token]:
    """Convenience function to tokenize source code.

    Diagnostics are discarded; use Lexer.tokenize to inspect them.

    Args:
        source: Lox source code string

    Returns:
        List of Token objects
    """
    return Lexer().tokenize(source).tokens
