# =============================================================================
# Sine Signal Creation Engine (SSCE)
# =============================================================================
#
# Renders pure sine tones as raw, headerless, little-endian mono sample
# streams.
#
# ── DATA FLOW ─────────────────────────────────────────────────────────────────
#   SignalConfig → Generator → Nyquist gate → float64 buffer
#                → Encoder (PCM16 | PCM32 | FLOAT64) → Writer → byte sink
#
# RESPONSIBLE for:
#   - Deterministic sample values: sample n depends only on (n, config)
#   - The inclusive Nyquist guard (f >= rate/2 → silence)
#   - Bit-exact sample words, little-endian, fixed width per format
#   - Exact byte accounting on every write, partial counts on failure
#
# NOT responsible for:
#   - Container headers (WAV/RIFF), multi-channel interleaving, filtering
#
# ── Module layout ─────────────────────────────────────────────────────────────
#   SMM/  Signal Model Module        constants, SignalConfig, errors
#   SGM/  Signal Generation Module   generator, gate, encoder, writer, bridge
#   SVM/  Signal Verification Module raw decoder, self-validation suite
#   cli.py     sinegen command line
#   server.py  Flask HTTP bridge
# =============================================================================

from SSCE.SMM.config import SignalConfig, create
from SSCE.SMM.errors import InvalidParameter, SignalError, WriteFailure
from SSCE.SGM.sample_encoder import SampleFormat
from SSCE.SGM.sine_generator import SineGenerator, generate, sample_at
from SSCE.SGM.stream_writer import render_bytes, write_file, write_to

__version__ = "0.3.0"

__all__ = [
    "SignalConfig", "create",
    "SignalError", "InvalidParameter", "WriteFailure",
    "SampleFormat",
    "SineGenerator", "generate", "sample_at",
    "render_bytes", "write_file", "write_to",
]
