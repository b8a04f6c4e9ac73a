"""Route calculation and CO2 comparison entry points."""
import logging

from utils.co2_calculator import calculate_co2_emissions
from utils.geocoder import geocode_location
from utils.osrm_client import OSRMClient, convert_transport_mode
from utils.scenarios import build_scenarios

logger = logging.getLogger(__name__)

__all__ = [
    'calculate_route',
    'calculate_multimodal_routes',
    'calculate_co2_emissions',
    'geocode_location',
    'select_routes',
]


def calculate_route(departure, destination, mode, client=None):
    """Real route for a single mode with its CO2 estimate.

    Raises RouteNotFoundError ('Aucun itinéraire trouvé') when the routing
    service has nothing and RoutingServiceError when it is unreachable.
    """
    client = client or OSRMClient()
    route = client.route(departure, destination, convert_transport_mode(mode), steps=True)
    return {
        'distance': route['distance'],
        'duration': route['duration'],
        'geometry': route['geometry'],
        'co2Emissions': calculate_co2_emissions(route['distance'], mode),
        'steps': route['steps'],
    }


def compromise_score(route, max_duration, max_co2):
    duration_term = route.duration / max_duration if max_duration else 0
    co2_term = route.co2_emissions / max_co2 if max_co2 else 0
    return duration_term + co2_term


def select_routes(routes):
    """Rank scenario results: fastest, lowest CO2, best compromise, then all of them.

    Ties go to the earliest scenario. Entries with the same label, distance,
    duration and CO2 are only kept once.
    """
    fastest = min(routes, key=lambda r: r.duration)
    lowest_co2 = min(routes, key=lambda r: r.co2_emissions)

    max_duration = max(r.duration for r in routes)
    max_co2 = max(r.co2_emissions for r in routes)
    compromise = None
    for route in routes:
        score = compromise_score(route, max_duration, max_co2)
        if compromise is None or score < compromise.score:
            compromise = route.with_score(score)

    seen = set()
    unique_routes = []
    for route in [fastest, lowest_co2, compromise] + list(routes):
        if route.dedup_key not in seen:
            seen.add(route.dedup_key)
            unique_routes.append(route)
    return unique_routes


def calculate_multimodal_routes(departure, destination, client=None):
    """Compare car, train, bus, bike, walk and bus+plane+bus between two points.

    Per-leg routing failures degrade to haversine estimates. Only a failure of
    the car route itself is raised.
    """
    client = client or OSRMClient()
    logger.info(f"Calculating multimodal routes from {departure} to {destination}")
    routes = build_scenarios(client, departure, destination)
    return select_routes(routes)
