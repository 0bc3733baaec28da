# =============================================================================
# constants.py - SMM Signal Defaults and Sample Format Limits
# =============================================================================
#
# Every default and numeric limit used by the engine lives here.  Other
# SSCE sub-modules import from this file; never redefine these elsewhere.
#
# Output stream contract (applies to every format below):
#   - headerless, mono, little-endian
#   - one fixed-width word per sample, width fixed by the format
#   - the consumer must be told rate / format out-of-band
#     e.g.  ffmpeg -f s16le -ar 44100 -ac 1 -i output.bin output.wav

# -----------------------------------------------------------------------------
# SIGNAL DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_FREQUENCY   = 440.0       # Hz - concert A, used by the CLI only
DEFAULT_DURATION_S  = 4.0         # seconds - CLI default run length
DEFAULT_AMPLITUDE   = 1.0         # full scale
DEFAULT_SAMPLE_RATE = 44_100.0    # Hz - CD rate

# Number of output channels.  The engine only ever writes mono.
CHANNELS = 1

# -----------------------------------------------------------------------------
# QUANTIZATION LIMITS
# -----------------------------------------------------------------------------
# PCM scaling is symmetric: +1.0 → +MAX and -1.0 → -MAX.  The most negative
# integer (-MAX - 1) is never produced.

FULL_SCALE = 1.0                  # clamp window is [-FULL_SCALE, FULL_SCALE]

PCM16_BITS = 16
PCM16_MAX  = 32_767               # 2**15 - 1
PCM16_MIN  = -32_768

PCM32_BITS = 32
PCM32_MAX  = 2_147_483_647        # 2**31 - 1
PCM32_MIN  = -2_147_483_648

FLOAT64_BITS = 64

# Value a PCM quantizer emits for NaN input.
PCM_NAN_VALUE = 0

# -----------------------------------------------------------------------------
# OUTPUT / BRIDGE
# -----------------------------------------------------------------------------

DEFAULT_OUTPUT_PATH = "data/output.bin"

BRIDGE_HOST = "127.0.0.1"
BRIDGE_PORT = 5000
