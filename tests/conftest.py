"""
Pytest configuration and fixtures for pylox tests.
"""

import io

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def sample_lox_file(temp_dir):
    """Create a sample Lox script for testing."""
    lox_file = temp_dir / "sample.lox"
    lox_file.write_text("var x = 1 + 2;\nprint x;\n", encoding="utf-8")
    return lox_file


@pytest.fixture
def bad_lox_file(temp_dir):
    """Create a Lox script with lexical errors."""
    lox_file = temp_dir / "bad.lox"
    lox_file.write_text("var x = 1;\n@\nprint \"oops;\n", encoding="utf-8")
    return lox_file


@pytest.fixture
def lexer():
    """Provide a Lexer instance."""
    from pylox.frontend import Lexer
    return Lexer()


@pytest.fixture
def out():
    """Provide a stream that captures token output."""
    return io.StringIO()


@pytest.fixture
def err():
    """Provide a stream that captures diagnostics."""
    return io.StringIO()
