# tests/conftest.py
# Shared sinks for writer / pipeline tests, and the golden-file switch.
#
#   pytest --update-golden      rewrite tests/testdata/*.bin from the current
#                               engine (only after an intentional change)

from __future__ import annotations

import pytest


class CountingSink:
    """Accepts everything; records every write."""

    def __init__(self) -> None:
        self.chunks: list[bytes] = []

    def write(self, data: bytes) -> int:
        self.chunks.append(bytes(data))
        return len(data)

    @property
    def received(self) -> int:
        return sum(len(c) for c in self.chunks)


class FailingSink(CountingSink):
    """Accepts ``fail_after`` writes, then raises ``exc`` on every write."""

    def __init__(self, fail_after: int, exc: Exception | None = None) -> None:
        super().__init__()
        self.fail_after = fail_after
        self.exc = exc or OSError("disk full")
        self.attempts = 0

    def write(self, data: bytes) -> int:
        self.attempts += 1
        if self.attempts > self.fail_after:
            raise self.exc
        return super().write(data)


class ShortSink(CountingSink):
    """Reports a one-byte write for every call."""

    def write(self, data: bytes) -> int:
        super().write(data[:1])
        return 1


class SilentSink(CountingSink):
    """A ``write`` that returns None, like some file-like wrappers."""

    def write(self, data: bytes):
        super().write(data)
        return None


def pytest_addoption(parser):
    parser.addoption(
        "--update-golden",
        action="store_true",
        default=False,
        help="regenerate the golden raw streams under tests/testdata",
    )


@pytest.fixture
def update_golden(request) -> bool:
    return request.config.getoption("--update-golden")


@pytest.fixture
def counting_sink() -> CountingSink:
    return CountingSink()
