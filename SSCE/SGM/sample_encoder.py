# =============================================================================
# sample_encoder.py - Fixed-width Sample Encoder (PCM16 / PCM32 / FLOAT64)
# =============================================================================
#
# Converts float64 signal values into raw little-endian sample words.
#
# Every variant is a two-step conversion:
#   quantize : float64 → the format's numeric representation
#   encode   : representation → exactly bit_depth // 8 bytes
#
#   PCM16    clamp [-1, 1] → * 32767      → trunc → int16   → '<h'  (2 bytes)
#   PCM32    clamp [-1, 1] → * 2147483647 → trunc → int32   → '<i'  (4 bytes)
#   FLOAT64  identity                                        → '<d'  (8 bytes)
#
# The conversion is TOTAL: no input value raises.
#   - out-of-range PCM inputs saturate at the boundary, never wrap
#   - +/-Inf saturate like any other out-of-range value
#   - NaN quantizes to PCM_NAN_VALUE (0)
#   - FLOAT64 keeps NaN / Inf / -0.0 bit patterns as they are
#
# The set of formats is closed: three variants, dispatched on the enum member.

from __future__ import annotations

import enum
import math
import struct

import numpy as np

from SSCE.SMM.constants import (
    FULL_SCALE,
    PCM16_BITS, PCM16_MAX,
    PCM32_BITS, PCM32_MAX,
    FLOAT64_BITS,
    PCM_NAN_VALUE,
)
from SSCE.SMM.errors import InvalidParameter


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Bound ``value`` to ``[min_val, max_val]``.  NaN passes through untouched."""
    if value < min_val:
        return min_val
    if value > max_val:
        return max_val
    return value


class SampleFormat(enum.Enum):
    """
    Closed set of output sample formats.

    Each member carries its static description:
        bit_depth, struct code, numpy dtype, libsndfile RAW subtype and the
        ffmpeg raw demuxer name (for converting the output by hand).
    """

    #          bits          struct  dtype   sndfile    ffmpeg
    PCM16   = (PCM16_BITS,   "<h",   "<i2",  "PCM_16",  "s16le")
    PCM32   = (PCM32_BITS,   "<i",   "<i4",  "PCM_32",  "s32le")
    FLOAT64 = (FLOAT64_BITS, "<d",   "<f8",  "DOUBLE",  "f64le")

    def __init__(self, bits, struct_code, dtype, sndfile_subtype, ffmpeg_name):
        self._bits            = bits
        self.struct_code      = struct_code
        self.dtype            = np.dtype(dtype)
        self.sndfile_subtype  = sndfile_subtype
        self.ffmpeg_name      = ffmpeg_name

    # ── Static description ───────────────────────────────────────────────────

    @property
    def bit_depth(self) -> int:
        return self._bits

    @property
    def sample_width(self) -> int:
        """Bytes per encoded sample."""
        return self._bits // 8

    @property
    def is_pcm(self) -> bool:
        return self is not SampleFormat.FLOAT64

    @property
    def full_scale(self) -> int:
        """Integer produced for an input of +1.0 (PCM only)."""
        if self is SampleFormat.PCM16:
            return PCM16_MAX
        if self is SampleFormat.PCM32:
            return PCM32_MAX
        raise AttributeError("FLOAT64 has no integer full scale")

    @classmethod
    def from_name(cls, name: str) -> "SampleFormat":
        """
        Parse a format name.  Accepts member names and ffmpeg names,
        case-insensitively: "pcm16", "S16LE", "float64", "f64le", ...
        """
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        for member in cls:
            if key in (member.name.lower(), member.ffmpeg_name):
                return member
        valid = sorted(m.name.lower() for m in cls)
        raise InvalidParameter("format", name, f"expected one of {valid}")

    # ── Core encoder ─────────────────────────────────────────────────────────

    def quantize(self, sample: float):
        """
        Map a float sample to the format's numeric representation.

        Returns:
            int for PCM variants (already within the signed range),
            the unchanged float for FLOAT64.
        """
        if not self.is_pcm:
            return sample
        if math.isnan(sample):
            return PCM_NAN_VALUE
        # int() truncates toward zero, matching a C-style float→int cast
        return int(clamp(sample, -FULL_SCALE, FULL_SCALE) * self.full_scale)

    def encode(self, value) -> bytes:
        """Pack one quantized value into little-endian bytes."""
        return struct.pack(self.struct_code, value)

    def convert_sample(self, sample: float) -> bytes:
        """quantize + encode.  Always returns exactly ``sample_width`` bytes."""
        return self.encode(self.quantize(sample))

    # ── Batch helpers ────────────────────────────────────────────────────────

    def quantize_array(self, samples) -> np.ndarray:
        """
        Vectorized ``quantize``.  Element i of the result equals
        ``quantize(samples[i])``; the dtype is the format's little-endian dtype.
        """
        samples = np.asarray(samples, dtype=np.float64)
        if not self.is_pcm:
            return samples.astype(self.dtype, copy=True)
        clipped = np.clip(samples, -FULL_SCALE, FULL_SCALE)
        clipped = np.where(np.isnan(clipped), float(PCM_NAN_VALUE), clipped)
        # astype truncates toward zero
        return (clipped * self.full_scale).astype(self.dtype)

    def convert_samples(self, samples) -> bytes:
        """Encode a whole buffer.  Byte-identical to joining ``convert_sample``."""
        return self.quantize_array(samples).tobytes()

    def __str__(self) -> str:
        return self.name.lower()
