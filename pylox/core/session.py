"""
Session driver for pylox.

This module provides the Session class that feeds source text to the lexer,
reports diagnostics, and hands the tokens to a downstream stage, both for
whole script files and for an interactive prompt.
"""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, TextIO, Union

from ..frontend.diagnostics import Diagnostic
from ..frontend.lexer import Lexer, Token
from ..utils.settings import DEFAULT_SETTINGS, EX_OK, Settings
from .errors import ErrorReporter, ScriptReadError

logger = logging.getLogger(__name__)

# A downstream stage consumes the token list and reports through the shared sink
Stage = Callable[[List[Token], ErrorReporter], None]


@dataclass
class RunResult:
    """Result of running one piece of source.

    Attributes:
        tokens: Tokens produced by the lexer, ending with EOF
        diagnostics: Lexical diagnostics found in this source
        had_error: Whether the session has seen an error so far
    """
    tokens: List[Token] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)
    had_error: bool = False


class Session:
    """Runs Lox source through the pipeline for one file or one prompt loop.

    The session owns the ErrorReporter, so error state never leaks between
    sessions. By default the downstream stage prints every token.

    Example:
        >>> session = Session()
        >>> status = session.run_file(Path("hello.lox"))
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        stage: Optional[Stage] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None
    ):
        """Initialize the session.

        Args:
            settings: Driver settings (defaults to DEFAULT_SETTINGS)
            stage: Downstream stage called with the tokens of every run
            out: Stream for prompts and token output (defaults to sys.stdout)
            err: Stream for diagnostics (defaults to sys.stderr)
        """
        self.settings = settings or DEFAULT_SETTINGS
        self.reporter = ErrorReporter(err)
        self._stage = stage or self.print_tokens
        self._out = out
        self._lexer = Lexer()

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def had_error(self) -> bool:
        return self.reporter.had_error

    def run(self, source: str) -> RunResult:
        """Tokenize source, report its diagnostics and run the downstream stage.

        Args:
            source: Lox source code string

        Returns:
            RunResult: The tokens and diagnostics of this run
        """
        result = self._lexer.tokenize(source)
        for diagnostic in result.diagnostics:
            self.reporter.add(diagnostic)

        self._stage(result.tokens, self.reporter)

        return RunResult(
            tokens=result.tokens,
            diagnostics=result.diagnostics,
            had_error=self.reporter.had_error
        )

    def read_script(self, path: Union[str, Path]) -> str:
        """Read a whole script file as text.

        The bytes are decoded as they are: line endings are not translated,
        and bytes invalid in the configured encoding become U+FFFD.

        Raises:
            ScriptReadError: If the file is missing or unreadable, or the
                configured encoding is unknown
        """
        path = Path(path)
        encoding = self.settings.source_encoding
        logger.debug(f"Reading {path} as {encoding}")
        try:
            return path.read_bytes().decode(encoding, errors="replace")
        except (OSError, LookupError) as e:
            raise ScriptReadError(str(path), str(e)) from e

    def run_file(self, path: Union[str, Path]) -> int:
        """Run a script file.

        Args:
            path: Path to the script

        Returns:
            int: Exit code (0 on success, the data-error status if any
            error was reported)

        Raises:
            ScriptReadError: If the script cannot be read
        """
        source = self.read_script(path)
        self.run(source)

        if self.reporter.had_error:
            logger.debug(f"{path}: {len(self.reporter.diagnostics)} errors reported")
            return self.settings.exit_data_error
        return EX_OK

    def run_prompt(self, stream: Optional[TextIO] = None) -> int:
        """Run an interactive loop until the input stream ends.

        Each line is run on its own, and the error state is cleared after
        every line.

        Args:
            stream: Input stream (defaults to sys.stdin)

        Returns:
            int: Exit code (always 0)
        """
        stream = stream if stream is not None else sys.stdin
        logger.debug("Starting interactive session")

        while True:
            print(self.settings.prompt, end="", file=self.out, flush=True)
            try:
                line = stream.readline()
            except KeyboardInterrupt:
                print(file=self.out)
                break
            if not line:
                break

            self.run(line.rstrip("\r\n"))
            self.reporter.reset()

        logger.debug("Interactive session ended")
        return EX_OK

    def print_tokens(self, tokens: List[Token], reporter: ErrorReporter) -> None:
        """Default downstream stage: print one token per line."""
        for token in tokens:
            print(token, file=self.out)
