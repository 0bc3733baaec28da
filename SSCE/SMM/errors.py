# =============================================================================
# errors.py - SSCE Error Taxonomy
# =============================================================================
#
#   SignalError
#     ├── InvalidParameter   bad configuration (raised at construction)
#     └── WriteFailure       the byte sink refused a write
#
# The math and encoding path never raises; only these two leave the core.

from __future__ import annotations


class SignalError(Exception):
    """Base class for every error raised by the engine."""


class InvalidParameter(SignalError, ValueError):
    """A configuration value is non-finite or outside its domain."""

    def __init__(self, name: str, value, reason: str) -> None:
        self.name   = name
        self.value  = value
        self.reason = reason
        super().__init__(f"invalid {name}={value!r}: {reason}")


class WriteFailure(SignalError, IOError):
    """
    The output sink rejected a write.

    ``bytes_written`` is the number of bytes the sink had accepted before the
    failure.  Nothing is retried or rolled back; the caller decides whether to
    truncate, retry or abandon the partial output.
    """

    def __init__(self, bytes_written: int, message: str) -> None:
        self.bytes_written = bytes_written
        super().__init__(f"unable to write data after {bytes_written} bytes: {message}")
