import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

MODES = ('walk', 'car', 'bus', 'train', 'plane', 'bike', 'wait')

# alternative spellings accepted from API callers
MODE_ALIASES = {'foot': 'walk', 'bicycle': 'bike'}


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float

    @staticmethod
    def from_dict(data):
        """Parse {'lat': .., 'lng': ..}; raises ValueError on anything else"""
        try:
            lat = float(data['lat'])
            lng = float(data['lng'])
        except (KeyError, TypeError, ValueError):
            raise ValueError(f"Invalid coordinate: {data!r}")

        if not (math.isfinite(lat) and math.isfinite(lng)):
            raise ValueError(f"Invalid coordinate: {data!r}")
        if not (-90 <= lat <= 90 and -180 <= lng <= 180):
            raise ValueError(f"Coordinate out of range: {data!r}")
        return Coordinate(lat=lat, lng=lng)

    def as_pair(self):
        return [self.lat, self.lng]


@dataclass(frozen=True)
class Leg:
    """One homogeneous-mode segment of an itinerary."""

    mode: str
    description: str
    duration: float = 0.0   # seconds
    co2: int = 0            # grams
    distance: float = 0.0   # metres
    geometry: Optional[Dict[str, Any]] = None  # GeoJSON LineString, None = straight line
    start: Optional[Coordinate] = None
    end: Optional[Coordinate] = None
    name: Optional[str] = None

    def to_dict(self):
        data = {
            'mode': self.mode,
            'description': self.description,
            'duration': self.duration,
            'co2': self.co2,
            'distance': self.distance,
            'geometry': self.geometry,
        }
        if self.start is not None:
            data['from'] = self.start.as_pair()
        if self.end is not None:
            data['to'] = self.end.as_pair()
        if self.name is not None:
            data['name'] = self.name
        return data


@dataclass(frozen=True)
class ScenarioResult:
    label: str
    scenario: str
    modes: Tuple[str, ...]
    distance: float
    duration: float
    co2_emissions: int
    legs: Tuple[Leg, ...] = field(default_factory=tuple)
    geometry: Optional[Dict[str, Any]] = None
    score: Optional[float] = None

    @property
    def dedup_key(self):
        return f"{self.label}|{self.distance}|{self.duration}|{self.co2_emissions}"

    def with_score(self, score):
        return replace(self, score=score)

    def to_dict(self):
        data = {
            'label': self.label,
            'scenario': self.scenario,
            'modes': list(self.modes),
            'distance': self.distance,
            'duration': self.duration,
            'co2Emissions': self.co2_emissions,
            'geometry': self.geometry,
            'steps': [leg.to_dict() for leg in self.legs],
        }
        if self.score is not None:
            data['score'] = self.score
        return data


def serialize_routes(routes: List[ScenarioResult]):
    return [route.to_dict() for route in routes]
