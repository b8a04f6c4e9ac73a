import logging
import os

from flask import Flask, jsonify, current_app
from flask_cors import CORS

import config
from models.db import Database
from routes.calculate_routes import calculate_bp
from routes.city_routes import city_bp
from utils.errors import GeocodingError, GeocodingServiceError, RouteNotFoundError, RoutingServiceError
from utils.osrm_client import OSRMClient


def handle_not_found(error):
    current_app.logger.warning(f"Lookup failed: {error}")
    return jsonify({"error": str(error)}), 404


def handle_upstream_error(error):
    current_app.logger.error(f"Upstream service error: {error}")
    return jsonify({"error": str(error)}), 502


def create_app(overrides=None):
    app = Flask(__name__)
    CORS(app)

    app.secret_key = config.SECRET_KEY
    app.config.update(overrides or {})

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', config.LOG_LEVEL),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    # explicit handles instead of module-level globals; tests pass their own
    app.extensions['route_client'] = app.config.get('ROUTE_CLIENT') or OSRMClient(
        base_url=app.config.get('OSRM_BASE_URL'),
        timeout=app.config.get('HTTP_TIMEOUT')
    )
    app.extensions['db'] = app.config.get('DATABASE') or Database()

    # Register blueprints
    app.register_blueprint(calculate_bp)
    app.register_blueprint(city_bp)

    app.register_error_handler(RouteNotFoundError, handle_not_found)
    app.register_error_handler(GeocodingError, handle_not_found)
    app.register_error_handler(RoutingServiceError, handle_upstream_error)
    app.register_error_handler(GeocodingServiceError, handle_upstream_error)

    return app


app = create_app()

if __name__ == "__main__":
    app.run(host='0.0.0.0', port=int(os.environ.get('PORT', 5000)), debug=False)
