# =============================================================================
# nyquist_gate.py - Anti-aliasing Gate
# =============================================================================
#
# A binary gate, not a filter kernel.  If the tone frequency sits AT or ABOVE
# the Nyquist limit (sampling_rate / 2) the signal is replaced by silence;
# otherwise it passes through untouched.
#
# The decision depends only on (frequency, sampling_rate), both constant for
# a generation call, so a whole buffer is either fully silenced or untouched.
#
# BOUNDARY: the comparison is inclusive.  A tone exactly at Nyquist is
# silenced.  Do not change this to a strict '>'.

from __future__ import annotations

import logging

import numpy as np

logger = logging.getLogger(__name__)


def nyquist_limit(sampling_rate: float) -> float:
    """Half the sampling rate, in Hz."""
    return sampling_rate / 2.0


def is_aliased(frequency: float, sampling_rate: float) -> bool:
    """True when ``frequency`` cannot be represented at ``sampling_rate``."""
    return frequency >= nyquist_limit(sampling_rate)


def apply_gate(signal, frequency: float, sampling_rate: float):
    """
    Silence ``signal`` if ``frequency`` is at or above Nyquist.

    Args:
        signal:        a float sample, or a numpy array of samples.
        frequency:     tone frequency in Hz.
        sampling_rate: sampling rate in Hz.

    Returns:
        ``signal`` unchanged, or 0.0 (an all-zero float64 array for array
        input) when the gate is closed.  The actual signal value is discarded,
        NaN included.
    """
    if not is_aliased(frequency, sampling_rate):
        return signal

    if isinstance(signal, np.ndarray):
        logger.debug(
            "gate closed: %.3f Hz >= Nyquist %.3f Hz, silencing %d samples",
            frequency, nyquist_limit(sampling_rate), signal.size,
        )
        return np.zeros(signal.shape, dtype=np.float64)
    return 0.0
