# =============================================================================
# server.py - HTTP bridge
# =============================================================================
#
# Serves rendered tones over HTTP so a browser or another process can pull a
# raw stream without touching the filesystem.
#
#   POST /tone        JSON params → application/octet-stream (raw samples)
#                     headers: X-Sample-Rate, X-Sample-Format, X-Sample-Count
#   POST /tone.json   JSON params → export-bridge JSON (base64 payload)
#   GET  /health      {"status": "ok"}
#
# Params: {frequency, duration | duration_ms, amplitude?, sampling_rate?, format?}
# Invalid params → 400 {"error": ..., "parameter": ...}
#
# Run:  python -m SSCE.server   (binds BRIDGE_HOST:BRIDGE_PORT)
# =============================================================================

from __future__ import annotations

import io
import logging

from flask import Flask, Response, jsonify, request

from SSCE.SMM.constants import BRIDGE_HOST, BRIDGE_PORT
from SSCE.SMM.config import from_mapping
from SSCE.SMM.errors import InvalidParameter
from SSCE.SGM.export_bridge import render_tone
from SSCE.SGM.stream_writer import write_to

logger = logging.getLogger(__name__)


def _params_or_400():
    params = request.get_json(silent=True)
    if not isinstance(params, dict):
        return None, (jsonify({"error": "expected a JSON object of tone parameters"}), 400)
    try:
        return from_mapping(params), None
    except InvalidParameter as exc:
        return None, (jsonify({"error": str(exc), "parameter": exc.name}), 400)


def create_app() -> Flask:
    app = Flask(__name__)

    @app.route("/tone", methods=["POST"])
    def tone():
        config, error = _params_or_400()
        if error is not None:
            return error
        buf = io.BytesIO()
        n = write_to(config, buf)
        logger.info("served %d bytes (%s)", n, config.to_dict())
        resp = Response(buf.getvalue(), mimetype="application/octet-stream")
        resp.headers["X-Sample-Rate"]   = f"{config.sampling_rate:g}"
        resp.headers["X-Sample-Format"] = str(config.format)
        resp.headers["X-Sample-Count"]  = str(config.sample_count)
        return resp

    @app.route("/tone.json", methods=["POST"])
    def tone_json():
        config, error = _params_or_400()
        if error is not None:
            return error
        return jsonify(render_tone(config))

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    return app


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    create_app().run(host=BRIDGE_HOST, port=BRIDGE_PORT)
