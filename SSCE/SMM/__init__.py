# =============================================================================
# SSCE/SMM/__init__.py - Signal Model Module
# =============================================================================
#
# Single source of truth for what a tone IS: defaults and quantization
# limits, the immutable SignalConfig, and the error taxonomy.
#
# Sub-modules:
#   constants.py  - defaults, PCM limits, bridge address
#   config.py     - SignalConfig, create(), from_mapping()
#   errors.py     - SignalError, InvalidParameter, WriteFailure
# =============================================================================
