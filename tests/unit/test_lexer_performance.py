"""
Lexer Performance Benchmark

Measures scan throughput for programs of growing size and checks that
scanning a large program does not hold on to unexpected memory.
"""

import time
from dataclasses import dataclass
from typing import List

import pytest

from pylox.frontend import Lexer, TokenType


def _has_psutil() -> bool:
    """Check if psutil is available for memory monitoring."""
    try:
        import psutil  # noqa: F401
        return True
    except ImportError:
        return False


@dataclass
class ScanTiming:
    """Results from a scan benchmark."""
    test_name: str
    scan_time_ms: float
    lines_of_code: int
    token_count: int

    @property
    def tokens_per_ms(self) -> float:
        return self.token_count / self.scan_time_ms if self.scan_time_ms else 0.0


def measure_scan_time(lexer: Lexer, source: str, iterations: int = 5, warmup: int = 2) -> tuple:
    """
    Measure average scan time.

    Returns:
        (scan_time_ms, token_count)
    """
    for _ in range(warmup):
        lexer.tokenize(source)

    times: List[float] = []
    token_count = 0
    for _ in range(iterations):
        start = time.perf_counter()
        result = lexer.tokenize(source)
        end = time.perf_counter()
        times.append((end - start) * 1000)
        token_count = len(result.tokens)

    return sum(times) / len(times), token_count


UNIT_PROGRAM = """
fun fib(n) {
  if (n <= 1) return n; // base case
  return fib(n - 2) + fib(n - 1);
}

var total = 0;
for (var i = 0; i < 20; i = i + 1) {
  total = total + fib(i) * 1.5;
}
print "total: " + total;
"""

TEST_PROGRAMS = {
    "tiny": UNIT_PROGRAM,
    "medium": UNIT_PROGRAM * 50,
    "large": UNIT_PROGRAM * 500,
}


class TestLexerPerformance:
    """Throughput and memory checks for the lexer."""

    @pytest.fixture(scope="class")
    def lexer(self):
        return Lexer()

    @pytest.mark.parametrize("name", ["tiny", "medium", "large"])
    def test_scan_throughput(self, lexer, name):
        """Scan programs of growing size and report throughput."""
        source = TEST_PROGRAMS[name]
        scan_time_ms, token_count = measure_scan_time(lexer, source)
        timing = ScanTiming(
            test_name=name,
            scan_time_ms=scan_time_ms,
            lines_of_code=len(source.splitlines()),
            token_count=token_count,
        )

        print(f"\n{timing.test_name}: {timing.lines_of_code} lines, "
              f"{timing.token_count} tokens in {timing.scan_time_ms:.2f} ms "
              f"({timing.tokens_per_ms:.0f} tokens/ms)")

        assert timing.token_count > 1

    def test_token_count_scales_linearly(self, lexer):
        """Repeating a program repeats its tokens exactly."""
        unit = lexer.tokenize(UNIT_PROGRAM).tokens
        large = lexer.tokenize(TEST_PROGRAMS["large"]).tokens
        assert len(large) - 1 == (len(unit) - 1) * 500
        assert large[-1].type == TokenType.EOF
        assert large[-1].line == UNIT_PROGRAM.count("\n") * 500 + 1

    @pytest.mark.skipif(not _has_psutil(), reason="psutil not installed")
    def test_memory_released_after_scan(self, lexer):
        """Scanning repeatedly should not keep growing the process."""
        import psutil

        process = psutil.Process()
        source = TEST_PROGRAMS["large"]
        lexer.tokenize(source)
        baseline = process.memory_info().rss

        for _ in range(5):
            lexer.tokenize(source)

        growth_mb = (process.memory_info().rss - baseline) / (1024 * 1024)
        print(f"\nRSS growth after 5 scans: {growth_mb:.2f} MB")
        assert growth_mb < 64
