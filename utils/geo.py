import math

from models.route import Coordinate

EARTH_RADIUS_KM = 6371.0


def haversine_km(a, b):
    """Great-circle distance in km between two coordinates"""
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    dphi = math.radians(b.lat - a.lat)
    dlambda = math.radians(b.lng - a.lng)

    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def haversine_m(a, b):
    return haversine_km(a, b) * 1000


def interpolate(a, b, ratio):
    """Point at `ratio` along the straight lat/lng segment from a to b.

    Linear in degrees, not along the great circle. Good enough for the
    station/airport placeholders which sit at 1-2% from either end.
    """
    return Coordinate(
        lat=a.lat + (b.lat - a.lat) * ratio,
        lng=a.lng + (b.lng - a.lng) * ratio,
    )
