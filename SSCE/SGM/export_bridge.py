# =============================================================================
# SSCE/SGM/export_bridge.py - JSON / base64 export bridge
# =============================================================================
#
# String-in, string-out entry point for hosts that cannot hand Python a file
# object (an embedded interpreter, the HTTP bridge's JSON route, ...).
#
#   render_tone_json(params_json) -> str
#       params_json : JSON string - {frequency, duration | duration_ms,
#                                    amplitude?, sampling_rate?, format?}
#       returns     : JSON string {pcm_b64, format, sample_rate, n_samples,
#                                  bit_depth, byte_length}
#                     pcm_b64 is the base64-encoded raw little-endian stream
#
# On bad input the JSON result is {"error": ..., "parameter": ...} instead;
# this function never raises for malformed parameters.
# =============================================================================

from __future__ import annotations

import base64
import json
import logging

from SSCE.SMM.config import SignalConfig, from_mapping
from SSCE.SMM.errors import InvalidParameter
from .stream_writer import render_bytes

logger = logging.getLogger(__name__)


def render_tone(config: SignalConfig) -> dict:
    """Render ``config`` and describe the result as a JSON-ready dict."""
    data = render_bytes(config)
    return {
        "pcm_b64":     base64.b64encode(data).decode("ascii"),
        "format":      str(config.format),
        "sample_rate": config.sampling_rate,
        "n_samples":   config.sample_count,
        "bit_depth":   config.format.bit_depth,
        "byte_length": len(data),
    }


def render_tone_json(params_json: str) -> str:
    """
    Safe entry point.  Always returns a JSON string.
    """
    try:
        params = json.loads(params_json)
    except json.JSONDecodeError as exc:
        return json.dumps({"error": f"malformed JSON: {exc}"})
    if not isinstance(params, dict):
        return json.dumps({"error": "expected a JSON object of tone parameters"})

    try:
        config = from_mapping(params)
    except InvalidParameter as exc:
        logger.info("rejected tone parameters: %s", exc)
        return json.dumps({"error": str(exc), "parameter": exc.name})

    return json.dumps(render_tone(config))
