# =============================================================================
# cli.py - sinegen command line
# =============================================================================
#
# Usage:
#   sinegen                                   # 440 Hz, 4 s, PCM16 → data/output.bin
#   sinegen -f 1000 -d 0.5 -a 0.8 --format pcm32 -o tone.bin
#   sinegen -f 220 -d 1 -o - | ffplay -f s16le -ar 44100 -ac 1 -
#
# The output is a raw stream; the command prints the ffmpeg line that wraps
# it into a WAV file.
#
# Exit codes:  0 ok | 1 write failure | 2 invalid parameter
# =============================================================================

from __future__ import annotations

import argparse
import logging
import sys

from SSCE.SMM.constants import (
    DEFAULT_FREQUENCY, DEFAULT_DURATION_S, DEFAULT_AMPLITUDE,
    DEFAULT_SAMPLE_RATE, DEFAULT_OUTPUT_PATH, CHANNELS,
)
from SSCE.SMM.config import SignalConfig, create
from SSCE.SMM.errors import InvalidParameter, WriteFailure
from SSCE.SGM.sample_encoder import SampleFormat
from SSCE.SGM.stream_writer import write_file, write_to

logger = logging.getLogger("SSCE.cli")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sinegen",
        description="Render a sine tone as a raw little-endian mono sample stream.",
    )
    p.add_argument("-f", "--frequency", type=float, default=DEFAULT_FREQUENCY,
                   help=f"tone frequency in Hz (default {DEFAULT_FREQUENCY})")
    p.add_argument("-d", "--duration", type=float, default=DEFAULT_DURATION_S,
                   help=f"duration in seconds (default {DEFAULT_DURATION_S})")
    p.add_argument("-a", "--amplitude", type=float, default=DEFAULT_AMPLITUDE,
                   help=f"peak amplitude (default {DEFAULT_AMPLITUDE})")
    p.add_argument("-r", "--sampling-rate", type=float, default=DEFAULT_SAMPLE_RATE,
                   help=f"sampling rate in Hz (default {DEFAULT_SAMPLE_RATE:.0f})")
    p.add_argument("--format", default="pcm16",
                   help="sample format: pcm16 | pcm32 | float64 (default pcm16)")
    p.add_argument("-o", "--output", default=DEFAULT_OUTPUT_PATH,
                   help=f"output path, '-' for stdout (default {DEFAULT_OUTPUT_PATH})")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return p


def ffmpeg_hint(config: SignalConfig, raw_path: str) -> str:
    wav_path = raw_path.rsplit(".", 1)[0] + ".wav"
    return (
        f"ffmpeg -f {config.format.ffmpeg_name} -ar {config.sampling_rate:.0f} "
        f"-ac {CHANNELS} -i {raw_path} {wav_path}"
    )


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = create(
            args.frequency,
            args.duration,
            amplitude=args.amplitude,
            sampling_rate=args.sampling_rate,
            format=SampleFormat.from_name(args.format),
        )
    except InvalidParameter as exc:
        print(f"[!!] {exc}", file=sys.stderr)
        return 2

    if config.frequency >= config.nyquist_limit:
        logger.warning(
            "%.1f Hz is at or above the Nyquist limit (%.1f Hz); output will be silent",
            config.frequency, config.nyquist_limit,
        )

    try:
        if args.output == "-":
            n = write_to(config, sys.stdout.buffer)
            sys.stdout.buffer.flush()
        else:
            n = write_file(config, args.output)
    except WriteFailure as exc:
        print(f"[!!] {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"[!!] cannot open {args.output}: {exc}", file=sys.stderr)
        return 1

    if args.output != "-":
        print(f"Bytes written: {n}")
        print(f"Saved {config.sample_count} {config.format} samples to {args.output}")
        print(f"  {ffmpeg_hint(config, args.output)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
