import math

from flask import Blueprint, request, jsonify, current_app

from models.route import Coordinate, MODES, MODE_ALIASES, serialize_routes
from utils.route_service import (
    calculate_co2_emissions,
    calculate_multimodal_routes,
    calculate_route,
    geocode_location,
)

calculate_bp = Blueprint('calculate', __name__)


def resolve_location(value):
    """Accept either {'lat', 'lng'} or a place name to geocode"""
    if isinstance(value, dict):
        return Coordinate.from_dict(value)
    if isinstance(value, str) and value.strip():
        return geocode_location(value.strip())
    raise ValueError(f"Invalid location: {value!r}")


def read_trip(data):
    departure = data.get('departure')
    destination = data.get('destination')
    if not departure or not destination:
        raise ValueError("Both departure and destination are required")
    return resolve_location(departure), resolve_location(destination)


@calculate_bp.route('/routes/multimodal', methods=['POST'])
def multimodal_routes():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return jsonify({"error": "Request body must be JSON"}), 400

    try:
        departure, destination = read_trip(data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    routes = calculate_multimodal_routes(
        departure, destination, client=current_app.extensions['route_client']
    )
    current_app.logger.info(f"Returning {len(routes)} route options")

    return jsonify({
        "status": "success",
        "departure": departure.as_pair(),
        "destination": destination.as_pair(),
        "routes": serialize_routes(routes)
    }), 200


@calculate_bp.route('/routes', methods=['POST'])
def single_route():
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or not data:
        return jsonify({"error": "Request body must be JSON"}), 400

    mode = str(data.get('mode') or 'car').strip().lower()
    mode = MODE_ALIASES.get(mode, mode)
    if mode not in MODES or mode == 'wait':
        return jsonify({"error": f"Unsupported mode: {mode}"}), 400

    try:
        departure, destination = read_trip(data)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    route = calculate_route(departure, destination, mode, client=current_app.extensions['route_client'])
    return jsonify({"status": "success", "mode": mode, "route": route}), 200


@calculate_bp.route('/geocode', methods=['GET'])
def geocode():
    query = request.args.get('q', '').strip()
    if not query:
        return jsonify({"error": "Query parameter 'q' is required"}), 400

    coordinate = geocode_location(query)
    return jsonify({"lat": coordinate.lat, "lng": coordinate.lng}), 200


@calculate_bp.route('/co2', methods=['GET'])
def co2():
    distance = request.args.get('distance', type=float)
    mode = request.args.get('mode', 'car')
    if distance is None or not math.isfinite(distance) or distance < 0:
        return jsonify({"error": "A non-negative 'distance' in metres is required"}), 400

    return jsonify({
        "distance": distance,
        "mode": mode,
        "co2Emissions": calculate_co2_emissions(distance, mode)
    }), 200
