class EcoTrajetError(Exception):
    """Base class for errors surfaced to API callers."""
    pass


class RouteError(EcoTrajetError):
    pass


class RouteNotFoundError(RouteError):
    """The routing service answered but had no route for the request."""
    pass


class RoutingServiceError(RouteError):
    """The routing service could not be reached or sent an unusable reply."""
    pass


class GeocodingError(EcoTrajetError):
    pass


class GeocodingServiceError(GeocodingError):
    """The geocoding service could not be reached or sent an unusable reply."""
    pass
