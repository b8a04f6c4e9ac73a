import logging

import requests

import config
from models.route import Coordinate
from utils.errors import GeocodingError, GeocodingServiceError

logger = logging.getLogger(__name__)


def geocode_location(location_name, timeout=None):
    """Convert a place name (e.g. 'Lyon') to a Coordinate using Nominatim"""
    params = {
        'format': 'json',
        'q': location_name,
    }
    headers = {
        'User-Agent': config.GEOCODER_USER_AGENT
    }

    try:
        response = requests.get(
            f"{config.NOMINATIM_URL.rstrip('/')}/search",
            params=params,
            headers=headers,
            timeout=timeout or config.HTTP_TIMEOUT
        )
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.RequestException as e:
        logger.error(f"Geocoding API error for {location_name}: {str(e)}")
        raise GeocodingServiceError(f"Geocoding service unavailable: {e}") from e
    except ValueError as e:
        logger.error(f"Invalid geocoding reply for {location_name}: {str(e)}")
        raise GeocodingServiceError(f"Invalid reply from geocoding service: {e}") from e

    if not data:
        raise GeocodingError(f'Aucun résultat trouvé pour "{location_name}"')

    first = data[0]
    return Coordinate(lat=float(first['lat']), lng=float(first['lon']))
