"""OSRM adapter.

Talks to an OSRM server over HTTP, converts internal (lat, lng) coordinates
to OSRM's lon,lat order and normalises the reply. Knows nothing about
scenarios or emissions.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests

import config
from utils.errors import RouteError, RouteNotFoundError, RoutingServiceError
from utils.geo import haversine_m

logger = logging.getLogger(__name__)

NO_ROUTE_MESSAGE = 'Aucun itinéraire trouvé'

# modes that never follow a road network
STRAIGHT_LINE_MODES = ('train', 'plane')


def convert_transport_mode(mode):
    """Map an application mode to an OSRM profile"""
    m = (mode or '').lower()
    if m in ('bike', 'bicycle'):
        return 'bike'
    if m in ('walk', 'foot'):
        return 'foot'
    # OSRM has no public transport profile, bus and train ride the road network
    return 'car'


@dataclass(frozen=True)
class RealRoute:
    """Leg geometry and distance as returned by the routing service."""
    distance: float
    geometry: Optional[Dict[str, Any]]
    is_fallback = False


@dataclass(frozen=True)
class HaversineFallback:
    """Great-circle estimate used when no real route is available."""
    distance: float
    geometry = None
    is_fallback = True


class OSRMClient:
    def __init__(self, base_url=None, timeout=None):
        self.base_url = (base_url or config.OSRM_BASE_URL).rstrip('/')
        self.timeout = timeout or config.HTTP_TIMEOUT

        if not self.base_url:
            raise ValueError("OSRM base URL not set. Please set OSRM_BASE_URL.")

    def format_coordinates(self, start, end):
        return f"{start.lng},{start.lat};{end.lng},{end.lat}"

    def route(self, start, end, profile='car', steps=False):
        """
        Calls the OSRM /route endpoint between two coordinates.

        Returns:
            {
                "distance": float,  # metres
                "duration": float,  # seconds
                "geometry": dict,   # GeoJSON LineString
                "steps": list,      # raw OSRM steps of the first leg, [] unless steps=True
            }

        Raises RouteNotFoundError when OSRM has no route and
        RoutingServiceError when it cannot be reached.
        """
        url = f"{self.base_url}/route/v1/{profile}/{self.format_coordinates(start, end)}"
        params = {
            'overview': 'full',
            'geometries': 'geojson',
        }
        if steps:
            params['steps'] = 'true'

        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            data = response.json()
        except requests.exceptions.RequestException as e:
            raise RoutingServiceError(f"Routing service unavailable: {e}") from e
        except ValueError as e:
            raise RoutingServiceError(f"Invalid reply from routing service: {e}") from e

        if not isinstance(data, dict) or data.get('code') != 'Ok' or not data.get('routes'):
            raise RouteNotFoundError(NO_ROUTE_MESSAGE)

        route = data['routes'][0]
        legs = route.get('legs') or []
        return {
            'distance': route.get('distance', 0),
            'duration': route.get('duration', 0),
            'geometry': route.get('geometry'),
            'steps': (legs[0].get('steps') or []) if legs else [],
        }

    def resolve_leg(self, start, end, mode):
        """Real route for one leg, or a haversine estimate when none is available.

        Train and plane legs are never routed.
        """
        if mode in STRAIGHT_LINE_MODES:
            return HaversineFallback(distance=haversine_m(start, end))

        try:
            route = self.route(start, end, convert_transport_mode(mode))
        except RouteError as e:
            logger.debug(f"Falling back to haversine for {mode} leg: {str(e)}")
            return HaversineFallback(distance=haversine_m(start, end))

        return RealRoute(distance=route['distance'], geometry=route['geometry'])
