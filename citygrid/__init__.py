"""
project: citygrid
module: __init__.py
License: MIT

Flask application factory for the city layout service.

The generator itself (``citygrid.city``) has no web dependency; this module
only wires it to an HTTP blueprint so a rendering client can fetch finished
layout documents. Configuration is sourced from environment variables (a
local ``.env`` is honoured) with defaults suitable for development.
"""

import logging
import uuid

from dotenv import load_dotenv
from flask import Flask, jsonify

__version__ = "0.1.0"


def create_app(overrides=None):
    """Build the Flask app.

    ``overrides`` is applied on top of the environment-derived config, which
    lets tests pin a seed or recipe without touching os.environ.
    """
    # Load .env if present so CITYGRID_* settings can be supplied without
    # exporting shell variables during development.
    load_dotenv()

    from citygrid.city import CityConfig

    app = Flask(__name__)
    city_cfg = CityConfig.from_env()
    app.config.update(
        CITYGRID_RECIPE=city_cfg.recipe,
        CITYGRID_SEED=city_cfg.seed,
        CITYGRID_ENABLE_METRICS=city_cfg.enable_metrics,
    )
    # Keep cell fields in wire order (type, x, y, ...)
    app.json.sort_keys = False
    if overrides:
        app.config.update(overrides)

    from citygrid.routes.city_api import bp_city

    app.register_blueprint(bp_city)

    @app.errorhandler(500)
    def internal_error(e):
        error_id = uuid.uuid4().hex[:8]
        logging.exception("Unhandled exception (id=%s)", error_id)
        return jsonify({"error": "internal", "error_id": error_id}), 500

    return app
