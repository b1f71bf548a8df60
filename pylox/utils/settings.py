"""
Configuration settings for pylox.

This module contains default configuration values and settings used
by the session driver and the command-line interface.
"""

import locale
from dataclasses import dataclass
from typing import Optional

# Exit statuses from sysexits.h
EX_OK = 0
EX_USAGE = 64
EX_DATAERR = 65
EX_NOINPUT = 66


@dataclass
class Settings:
    """Driver settings and configuration.

    Attributes:
        prompt: Text printed before each interactive read
        encoding: Encoding used to read script files; None means the
            platform default
        exit_usage: Exit status for a bad command line
        exit_data_error: Exit status when a script reported errors
        exit_no_input: Exit status when a script cannot be read
    """
    prompt: str = "> "
    encoding: Optional[str] = None
    exit_usage: int = EX_USAGE
    exit_data_error: int = EX_DATAERR
    exit_no_input: int = EX_NOINPUT

    @property
    def source_encoding(self) -> str:
        """Get the encoding to read script files with."""
        return self.encoding or locale.getpreferredencoding(False)


# Global default settings instance
DEFAULT_SETTINGS = Settings()
