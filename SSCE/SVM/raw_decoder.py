#!/usr/bin/env python3
# =============================================================================
# raw_decoder.py - Raw Sample Stream Decoder
# =============================================================================
#
# Inverse of the sample encoder.  Accepts the headerless little-endian byte
# stream the writer produces and returns the sample words, plus a couple of
# measurements used by the validation suite and tools/quick_check_raw.py.
#
# Because the stream has no header, the caller must supply the format (and
# the sample rate when reading through libsndfile).
#
#   decode_bytes(data, fmt)             bytes  → int16 / int32 / float64 array
#   dequantize(words, fmt)              words  → float samples in [-1, 1]
#   read_raw_file(path, fmt, rate)      file   → words (via soundfile RAW)
#   estimate_frequency(samples, rate)   zero-crossing frequency estimate
#
# =============================================================================

from __future__ import annotations

import numpy as np
import soundfile as sf

from SSCE.SMM.constants import CHANNELS
from SSCE.SGM.sample_encoder import SampleFormat


def decode_bytes(data: bytes, fmt: SampleFormat) -> np.ndarray:
    """
    Split a raw stream into sample words.

    Raises:
        ValueError: if ``len(data)`` is not a multiple of the sample width
                    (a truncated or misaligned stream).
    """
    fmt = SampleFormat.from_name(fmt)
    if len(data) % fmt.sample_width:
        raise ValueError(
            f"{len(data)} bytes is not a whole number of {fmt} samples "
            f"({fmt.sample_width} bytes each)"
        )
    return np.frombuffer(data, dtype=fmt.dtype)


def dequantize(words, fmt: SampleFormat) -> np.ndarray:
    """Scale decoded PCM words back to float.  FLOAT64 words pass through."""
    fmt = SampleFormat.from_name(fmt)
    words = np.asarray(words)
    if not fmt.is_pcm:
        return words.astype(np.float64)
    return words.astype(np.float64) / fmt.full_scale


def read_raw_file(file, fmt: SampleFormat, sample_rate: float) -> np.ndarray:
    """
    Read a raw stream from a path or binary file object with libsndfile.

    PCM formats come back as the stored integers (no rescaling);
    FLOAT64 as the stored doubles.
    """
    fmt = SampleFormat.from_name(fmt)
    dtype = "float64" if not fmt.is_pcm else fmt.dtype.name
    data, _ = sf.read(
        file,
        samplerate=int(sample_rate),
        channels=CHANNELS,
        format="RAW",
        subtype=fmt.sndfile_subtype,
        endian="LITTLE",
        dtype=dtype,
    )
    return data


def estimate_frequency(samples, sample_rate: float) -> float | None:
    """
    Estimate a tone's frequency from its sign changes.

    A sine crosses zero twice per period; the estimate is the mean distance
    between the first and last crossing.  Returns None when fewer than two
    crossings exist (silence, DC, or less than half a period).
    """
    s = np.sign(np.asarray(samples, dtype=np.float64))
    s[s == 0] = 1
    edges = np.where(np.diff(s) != 0)[0]
    if len(edges) < 2:
        return None
    half_periods = (edges[-1] - edges[0]) / (len(edges) - 1)
    return sample_rate / (2.0 * half_periods)


def peak_and_rms(samples) -> tuple[float, float]:
    x = np.asarray(samples, dtype=np.float64)
    if x.size == 0:
        return 0.0, 0.0
    return float(np.max(np.abs(x))), float(np.sqrt(np.mean(x ** 2)))
