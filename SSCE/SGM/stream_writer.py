# =============================================================================
# stream_writer.py - Generate → Encode → Write pipeline
# =============================================================================
#
# Streams a configured tone into any byte sink (file, io.BytesIO, socket
# file, HTTP response buffer...).  The sink only needs ``write(bytes)``.
#
# STATES:
#   Configured → Generated → Encoding & Writing → Completed | Failed
#
#   - The full sample buffer is generated first.
#   - Samples are then encoded and written one at a time, in index order.
#   - The first failing write aborts the run with WriteFailure carrying the
#     byte count the sink had already accepted.  No retry, no rollback.
#
# On success:  bytes_written == sample_count * (bit_depth // 8)

from __future__ import annotations

import io
import logging
import os

from SSCE.SMM.config import SignalConfig
from SSCE.SMM.errors import WriteFailure
from .sine_generator import generate

logger = logging.getLogger(__name__)


def write_to(config: SignalConfig, sink) -> int:
    """
    Generate the tone and write every encoded sample to ``sink``.

    Args:
        config: the tone to render.
        sink:   object with a ``write(bytes)`` method.  If ``write`` returns an
                int it is taken as the number of bytes accepted.

    Returns:
        Total bytes written.

    Raises:
        WriteFailure: the sink raised (any exception, chained as __cause__),
                      or accepted fewer bytes than offered.
    """
    samples = generate(config)
    fmt = config.format
    total_bytes_written = 0

    for index, sample in enumerate(samples):
        data = fmt.convert_sample(sample)
        try:
            n = sink.write(data)
        except Exception as exc:
            logger.error(
                "sink write failed at sample %d after %d bytes: %s",
                index, total_bytes_written, exc,
            )
            raise WriteFailure(total_bytes_written, str(exc)) from exc

        if n is None:
            n = len(data)
        total_bytes_written += n
        if n < len(data):
            logger.error(
                "short write at sample %d: %d of %d bytes accepted",
                index, n, len(data),
            )
            raise WriteFailure(
                total_bytes_written,
                f"short write at sample {index} ({n} of {len(data)} bytes)",
            )

    logger.debug("wrote %d samples, %d bytes (%s)", len(samples), total_bytes_written, fmt)
    return total_bytes_written


def render_bytes(config: SignalConfig) -> bytes:
    """The complete encoded stream as a bytes object."""
    buf = io.BytesIO()
    write_to(config, buf)
    return buf.getvalue()


def write_file(config: SignalConfig, path) -> int:
    """
    Write the encoded stream to ``path``, creating parent directories.

    The file is left as-is (possibly partial) if a write fails.
    """
    parent = os.path.dirname(os.fspath(path))
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "wb") as fh:
        return write_to(config, fh)
