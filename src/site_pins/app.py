from flask import Flask, request, jsonify

import logging
import sqlite3
from typing import Optional
try:
    from . import config  # when running as a package
except ImportError:
    import config  # when running src/site_pins/app.py directly
try:
    from .database_client import MarkerStore, logger as store_logger
    from .marker_validation import MarkerValidationError, validate_marker_payload
except ImportError:
    from database_client import MarkerStore, logger as store_logger
    from marker_validation import MarkerValidationError, validate_marker_payload

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configure_logging(app: Flask):
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    level = app.config.get("LOG_LEVEL", "INFO")
    for logger in (app.logger, store_logger):
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.setLevel(level)
        logger.propagate = False


def get_store(app: Flask) -> MarkerStore:
    return app.extensions["marker_store"]


def create_app(config_overrides: Optional[dict] = None) -> Flask:
    app = Flask(__name__)
    app.config.update(
        MARKERS_DB_PATH=config.DB_PATH,
        LOG_LEVEL=config.LOG_LEVEL,
    )
    if config_overrides:
        app.config.update(config_overrides)

    _configure_logging(app)

    # Opened once and reused by every request
    store = MarkerStore(app.config["MARKERS_DB_PATH"])
    store.initialize()
    app.extensions["marker_store"] = store

    @app.route("/markers", methods=["GET"])
    def list_markers():
        try:
            markers = get_store(app).list_all()
        except Exception:
            app.logger.exception("Failed to fetch markers")
            return jsonify({"error": "Failed to fetch markers"}), 500
        return jsonify(markers)

    @app.route("/markers", methods=["POST"])
    def create_marker():
        try:
            data = request.get_json(force=True)

            try:
                marker = validate_marker_payload(data)
            except MarkerValidationError as e:
                app.logger.warning("Rejected marker: %s", e)
                return jsonify({"error": str(e)}), 400

            try:
                result = get_store(app).insert(marker)
            except sqlite3.Error as e:
                app.logger.exception("Database error")
                return jsonify({"error": f"Database error: {e}"}), 500

            app.logger.info("Stored marker %s for %s", result["lastInsertRowid"], marker.website)
            return jsonify(result)
        except Exception as e:
            app.logger.exception("Server error")
            return jsonify({"error": f"Server error: {e}"}), 500

    return app


if __name__ == "__main__":
    create_app().run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
