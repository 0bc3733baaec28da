# =============================================================================
# config.py - SignalConfig: the immutable tone description
# =============================================================================
#
# One SignalConfig fully determines an output stream.  It is validated once,
# at construction, and never mutated afterwards; every derived quantity
# (sample count, per-sample time, output size) is computed on demand.
#
#   cfg = create(440.0, 1.0)                                  # PCM16, 44.1 kHz
#   cfg = create(440.0, timedelta(milliseconds=500), amplitude=0.8,
#                format=SampleFormat.FLOAT64)
#   louder = cfg.with_options(amplitude=1.0)                  # new instance
#
# SAMPLE COUNT:
#   sample_count = floor(sampling_rate * duration_seconds)
#   Duration 0 is valid and yields an empty stream.

from __future__ import annotations

import dataclasses
import math
from datetime import timedelta
from typing import Union

from SSCE.SMM.constants import DEFAULT_AMPLITUDE, DEFAULT_SAMPLE_RATE
from SSCE.SMM.errors import InvalidParameter
from SSCE.SGM.sample_encoder import SampleFormat

Duration = Union[float, int, timedelta]


def _as_seconds(duration: Duration) -> float:
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    if isinstance(duration, bool):
        raise InvalidParameter("duration", duration, "must be a number of seconds or a timedelta")
    try:
        return float(duration)
    except (TypeError, ValueError):
        raise InvalidParameter(
            "duration", duration, "must be a number of seconds or a timedelta"
        ) from None


def _as_float(name: str, value) -> float:
    if isinstance(value, bool):
        raise InvalidParameter(name, value, "must be a number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidParameter(name, value, "must be a number") from None


def _require_positive(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidParameter(name, value, "must be finite")
    if value <= 0.0:
        raise InvalidParameter(name, value, "must be > 0")


def _require_non_negative(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise InvalidParameter(name, value, "must be finite")
    if value < 0.0:
        raise InvalidParameter(name, value, "must be >= 0")


@dataclasses.dataclass(frozen=True)
class SignalConfig:
    """
    Immutable description of a mono sine tone and its output format.

    Attributes:
        frequency:     tone frequency in Hz (> 0)
        duration:      length in seconds (>= 0); a timedelta is accepted and
                       normalized to float seconds
        amplitude:     peak value (>= 0), default 1.0
        sampling_rate: samples per second (> 0), default 44100.0
        format:        SampleFormat, default PCM16 (a format name is accepted)

    Raises:
        InvalidParameter: on any non-finite or out-of-domain value.
    """

    frequency:     float
    duration:      float
    amplitude:     float = DEFAULT_AMPLITUDE
    sampling_rate: float = DEFAULT_SAMPLE_RATE
    format:        SampleFormat = SampleFormat.PCM16

    def __post_init__(self) -> None:
        frequency     = _as_float("frequency", self.frequency)
        duration      = _as_seconds(self.duration)
        amplitude     = _as_float("amplitude", self.amplitude)
        sampling_rate = _as_float("sampling_rate", self.sampling_rate)
        fmt           = SampleFormat.from_name(self.format)

        _require_positive("frequency", frequency)
        _require_non_negative("duration", duration)
        _require_non_negative("amplitude", amplitude)
        _require_positive("sampling_rate", sampling_rate)
        if not math.isfinite(sampling_rate * duration):
            raise InvalidParameter(
                "duration", duration,
                f"sample count overflows at sampling_rate={sampling_rate!r}",
            )

        # frozen dataclass: normalized values go in through object.__setattr__
        object.__setattr__(self, "frequency", frequency)
        object.__setattr__(self, "duration", duration)
        object.__setattr__(self, "amplitude", amplitude)
        object.__setattr__(self, "sampling_rate", sampling_rate)
        object.__setattr__(self, "format", fmt)

    # ── Derived quantities ───────────────────────────────────────────────────

    @property
    def duration_seconds(self) -> float:
        return self.duration

    @property
    def sample_count(self) -> int:
        # int() floors here: both factors are validated non-negative
        return int(self.sampling_rate * self.duration)

    @property
    def nyquist_limit(self) -> float:
        return self.sampling_rate / 2.0

    @property
    def byte_length(self) -> int:
        """Exact size of the encoded output stream in bytes."""
        return self.sample_count * self.format.sample_width

    def sample_time(self, n: int) -> float:
        """Time offset in seconds of sample index ``n``."""
        return n / self.sampling_rate

    # ── Copies ───────────────────────────────────────────────────────────────

    def with_options(self, **overrides) -> "SignalConfig":
        """Return a new, re-validated config with ``overrides`` applied."""
        return dataclasses.replace(self, **overrides)

    def to_dict(self) -> dict:
        return {
            "frequency":     self.frequency,
            "duration":      self.duration,
            "amplitude":     self.amplitude,
            "sampling_rate": self.sampling_rate,
            "format":        str(self.format),
        }


def create(
    frequency: float,
    duration: Duration,
    *,
    amplitude: float = DEFAULT_AMPLITUDE,
    sampling_rate: float = DEFAULT_SAMPLE_RATE,
    format: Union[SampleFormat, str] = SampleFormat.PCM16,
) -> SignalConfig:
    """Build a validated SignalConfig.  Options left out take their defaults."""
    return SignalConfig(
        frequency=frequency,
        duration=duration,
        amplitude=amplitude,
        sampling_rate=sampling_rate,
        format=format,
    )


def from_mapping(params: dict) -> SignalConfig:
    """
    Build a config from a loose mapping (JSON body, CLI namespace, ...).

    Recognized keys: frequency, duration (seconds) or duration_ms,
    amplitude, sampling_rate (alias sample_rate), format.
    """
    if "frequency" not in params:
        raise InvalidParameter("frequency", None, "is required")
    if "duration" in params:
        duration = params["duration"]
    elif "duration_ms" in params:
        duration = _as_float("duration_ms", params["duration_ms"]) / 1000.0
    else:
        raise InvalidParameter("duration", None, "is required")

    options = {}
    if params.get("amplitude") is not None:
        options["amplitude"] = params["amplitude"]
    rate = params.get("sampling_rate", params.get("sample_rate"))
    if rate is not None:
        options["sampling_rate"] = rate
    if params.get("format") is not None:
        options["format"] = params["format"]

    return create(params["frequency"], duration, **options)
