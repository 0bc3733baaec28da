# =============================================================================
# SGM - Signal Generation Module
# Subfolder of SSCE (Sine Signal Creation Engine)
# =============================================================================
#
# Generates deterministic sine sample buffers and serializes them.
#
# Modules:
#   sine_generator.py - sample index → gated float64 value; full buffers
#   nyquist_gate.py   - silences tones at or above half the sampling rate
#   sample_encoder.py - SampleFormat: PCM16 / PCM32 / FLOAT64 words
#   stream_writer.py  - generate → encode → write, with byte accounting
#   export_bridge.py  - JSON / base64 entry point
#
# Constants live in SSCE/SMM/constants.py
# Verification tools live in SSCE/SVM/
# =============================================================================
