#!/usr/bin/env python3
# =============================================================================
# validate.py - SSCE Self-Validation Suite
# =============================================================================
#
# Run directly:  python -m SSCE.SVM.validate
#             or python SSCE/SVM/validate.py (from project root)
#
# Tests:
#   1. Generator     - sample count, amplitude bound, known sample values
#   2. Nyquist gate  - inclusive boundary, below-limit signal passes
#   3. Encoder       - known byte patterns, saturation, FLOAT64 bit fidelity
#   4. Writer        - byte accounting, determinism, libsndfile read-back
# =============================================================================

import io
import math
import os
import struct
import sys

# Allow running from project root without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

import numpy as np

from SSCE.SMM.config import create
from SSCE.SGM.sample_encoder import SampleFormat
from SSCE.SGM.sine_generator import generate
from SSCE.SGM.stream_writer import render_bytes, write_to
from SSCE.SVM.raw_decoder import decode_bytes, estimate_frequency, read_raw_file

PASS = "[PASS]"
FAIL = "[FAIL]"
INFO = "[INFO]"

failures = 0


def check(label: str, condition: bool, detail: str = "") -> bool:
    global failures
    if condition:
        print(f"  {PASS} {label}")
    else:
        print(f"  {FAIL} {label}{(' -- ' + detail) if detail else ''}")
        failures += 1
    return bool(condition)


def section(title: str) -> None:
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)


def _bits(x: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", x))[0]


def validate_generator() -> None:
    section("TEST 1 - Generator")

    # Scenario A
    samples = generate(create(440.0, 1.0))
    check("440 Hz / 1 s / 44.1 kHz: 44100 samples", len(samples) == 44_100,
          f"got {len(samples)}")
    check("sample[0] == 0.0 (sin 0)", samples[0] == 0.0, f"got {samples[0]!r}")
    check("|sample| <= amplitude", bool(np.all(np.abs(samples) <= 1.0)))

    # Scenario B
    samples = generate(create(1.0, 1.0, sampling_rate=10.0))
    expected = [math.sin(2 * math.pi * n / 10) for n in range(10)]
    check("1 Hz / 10 Hz rate: 10 samples", len(samples) == 10, f"got {len(samples)}")
    check("1 Hz / 10 Hz rate: sin(2πn/10)",
          bool(np.allclose(samples, expected, rtol=0.0, atol=1e-12)))

    check("duration 0: empty buffer", len(generate(create(440.0, 0.0))) == 0)

    quiet = generate(create(440.0, 0.1, amplitude=0.25))
    check("amplitude 0.25 bound holds", bool(np.all(np.abs(quiet) <= 0.25)))


def validate_gate() -> None:
    section("TEST 2 - Nyquist Gate")

    # Scenario D
    at_nyquist = generate(create(22_050.0, 0.1, sampling_rate=44_100.0))
    check("22050 Hz @ 44.1 kHz: every sample silenced",
          bool(np.all(at_nyquist == 0.0)))

    above = generate(create(30_000.0, 0.1, sampling_rate=44_100.0))
    check("30 kHz @ 44.1 kHz: every sample silenced", bool(np.all(above == 0.0)))

    below = generate(create(1_000.0, 0.01, sampling_rate=44_100.0))
    check("1 kHz @ 44.1 kHz: signal present",
          bool(np.max(np.abs(below)) > 0.01))

    est = estimate_frequency(generate(create(1_000.0, 1.0)), 44_100.0)
    check("1 kHz zero-crossing estimate within 1 Hz",
          est is not None and abs(est - 1_000.0) < 1.0, f"got {est}")


def validate_encoder() -> None:
    section("TEST 3 - Encoder")

    pcm16 = SampleFormat.PCM16
    check("PCM16 0.5 → FF 3F", pcm16.convert_sample(0.5) == b"\xff\x3f",
          pcm16.convert_sample(0.5).hex())
    check("PCM16 1.0 → FF 7F", pcm16.convert_sample(1.0) == b"\xff\x7f")
    check("PCM16 -1.0 → 01 80", pcm16.convert_sample(-1.0) == b"\x01\x80")
    check("PCM16 2.5 saturates to 1.0", pcm16.quantize(2.5) == pcm16.quantize(1.0))
    check("PCM16 -inf saturates to -1.0",
          pcm16.quantize(float("-inf")) == pcm16.quantize(-1.0))
    check("PCM16 NaN → 0", pcm16.quantize(float("nan")) == 0)

    pcm32 = SampleFormat.PCM32
    check("PCM32 1.0 → FF FF FF 7F", pcm32.convert_sample(1.0) == b"\xff\xff\xff\x7f")
    check("PCM32 9.0 saturates to 1.0", pcm32.quantize(9.0) == pcm32.quantize(1.0))

    f64 = SampleFormat.FLOAT64
    for value in (0.0, -0.0, float("inf"), float("-inf"), float("nan"), 0.123456789):
        raw = f64.convert_sample(value)
        back = struct.unpack("<d", raw)[0]
        check(f"FLOAT64 {value!r}: bit pattern preserved", _bits(back) == _bits(value))

    for fmt in SampleFormat:
        check(f"{fmt}: {fmt.sample_width} bytes per sample",
              all(len(fmt.convert_sample(x)) == fmt.sample_width
                  for x in (0.0, 1e308, -1e308, float("nan"))))


def validate_writer() -> None:
    section("TEST 4 - Writer")

    for fmt in SampleFormat:
        cfg = create(440.0, 0.25, format=fmt)
        buf = io.BytesIO()
        n = write_to(cfg, buf)
        check(f"{fmt}: bytes written == sample_count * width",
              n == cfg.sample_count * fmt.sample_width == len(buf.getvalue()),
              f"n={n} buffer={len(buf.getvalue())}")

    cfg = create(440.0, 0.1, amplitude=0.8)
    check("identical configs → identical bytes", render_bytes(cfg) == render_bytes(cfg))

    data = render_bytes(cfg)
    words = decode_bytes(data, cfg.format)
    via_sf = read_raw_file(io.BytesIO(data), cfg.format, cfg.sampling_rate)
    check("libsndfile RAW read-back matches numpy decode",
          bool(np.array_equal(words, via_sf)))
    print(f"  {INFO} {cfg.sample_count} samples, peak word {int(np.max(np.abs(words)))}")


def main() -> int:
    validate_generator()
    validate_gate()
    validate_encoder()
    validate_writer()

    print("\n" + "=" * 60)
    if failures == 0:
        print("  ALL TESTS PASSED")
    else:
        print(f"  {failures} TEST(S) FAILED")
    print("=" * 60 + "\n")
    return 0 if failures == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
