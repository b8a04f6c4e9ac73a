"""Scenario builder.

Each scenario is a row in SCENARIOS: a tag, a label, the modes shown to the
user and a function laying out its legs between departure and destination.
Leg distances come from the routing service when it has a route and from the
haversine formula otherwise; durations are either fixed or derived from an
average speed.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from models.route import Coordinate, Leg, ScenarioResult
from utils.co2_calculator import calculate_co2_emissions
from utils.geo import haversine_m, interpolate

logger = logging.getLogger(__name__)

# average speeds, km/h
TRAIN_SPEED_KMH = 200
PLANE_SPEED_KMH = 700
BUS_SPEED_KMH = 60
BIKE_SPEED_KMH = 20
WALK_SPEED_KMH = 5

# fixed durations, seconds
STATION_WALK_S = 900
AIRPORT_BUS_S = 1800
AIRPORT_WAIT_S = 1800

# placeholder stations and airports sit this far along the trip from either end
STATION_RATIO = 0.01
AIRPORT_RATIO = 0.02


@dataclass(frozen=True)
class LegSpec:
    mode: str
    description: str  # may use {km}, filled in once the distance is known
    start: Optional[Coordinate] = None
    end: Optional[Coordinate] = None
    duration: Optional[float] = None
    speed_kmh: Optional[float] = None


@dataclass(frozen=True)
class ScenarioDescriptor:
    tag: str
    label: str
    modes: Tuple[str, ...]
    legs: Optional[Callable[[Coordinate, Coordinate], List[LegSpec]]] = None
    # report the whole trip's great-circle distance instead of the leg sum
    direct_distance: bool = False
    # custom builder, for scenarios that do not decompose into LegSpecs
    build: Optional[Callable] = None


def train_legs(departure, destination):
    station_start = interpolate(departure, destination, STATION_RATIO)
    station_end = interpolate(departure, destination, 1 - STATION_RATIO)
    return [
        LegSpec('walk', 'Walk to the train station', departure, station_start, duration=STATION_WALK_S),
        LegSpec('train', 'Train ride ({km:.1f} km)', station_start, station_end, speed_kmh=TRAIN_SPEED_KMH),
        LegSpec('walk', 'Walk from the train station to your destination', station_end, destination,
                duration=STATION_WALK_S),
    ]


def single_mode_legs(mode, description, speed_kmh):
    def legs(departure, destination):
        return [LegSpec(mode, description, departure, destination, speed_kmh=speed_kmh)]
    return legs


def bus_plane_bus_legs(departure, destination):
    airport_start = interpolate(departure, destination, AIRPORT_RATIO)
    airport_end = interpolate(departure, destination, 1 - AIRPORT_RATIO)
    return [
        LegSpec('bus', 'Bus to the airport', departure, airport_start, duration=AIRPORT_BUS_S),
        LegSpec('wait', 'Waiting at the airport', duration=AIRPORT_WAIT_S),
        LegSpec('plane', 'Flight ({km:.1f} km)', airport_start, airport_end, speed_kmh=PLANE_SPEED_KMH),
        LegSpec('wait', 'Waiting at arrival airport', duration=AIRPORT_WAIT_S),
        LegSpec('bus', 'Bus from the airport to your destination', airport_end, destination,
                duration=AIRPORT_BUS_S),
    ]


def build_leg(client, leg_spec):
    if leg_spec.mode == 'wait':
        return Leg(mode='wait', description=leg_spec.description, duration=leg_spec.duration or 0)

    outcome = client.resolve_leg(leg_spec.start, leg_spec.end, leg_spec.mode)
    # a zero-length real route is treated like a missing one
    distance = outcome.distance or haversine_m(leg_spec.start, leg_spec.end)

    if leg_spec.duration is not None:
        duration = leg_spec.duration
    else:
        duration = distance / 1000 / leg_spec.speed_kmh * 3600

    return Leg(
        mode=leg_spec.mode,
        description=leg_spec.description.format(km=distance / 1000),
        duration=duration,
        co2=calculate_co2_emissions(distance, leg_spec.mode),
        distance=distance,
        geometry=outcome.geometry,
        start=leg_spec.start,
        end=leg_spec.end,
    )


def describe_step(step):
    """Short instruction for a raw OSRM step, e.g. 'Turn left onto Rue Garibaldi'"""
    maneuver = step.get('maneuver') or {}
    action = ' '.join(p for p in (maneuver.get('type'), maneuver.get('modifier')) if p)
    action = (action or 'continue').capitalize()
    name = step.get('name')
    return f"{action} onto {name}" if name else action


def build_car_scenario(client, descriptor, departure, destination):
    """Car only: one real route, totals recomputed from its steps.

    Route failures propagate; there is no sensible car estimate without one.
    """
    route = client.route(departure, destination, 'car', steps=True)

    legs = []
    for step in route['steps']:
        distance = step.get('distance') or 0
        legs.append(Leg(
            mode='car',
            description=describe_step(step),
            duration=step.get('duration') or 0,
            co2=calculate_co2_emissions(distance, 'car'),
            distance=distance,
            geometry=step.get('geometry'),
            name=step.get('name'),
        ))

    # no steps: fall back to the route's own totals
    duration = sum(leg.duration for leg in legs) or route['duration']
    co2 = sum(leg.co2 for leg in legs) or calculate_co2_emissions(route['distance'], 'car')
    distance = sum(leg.distance for leg in legs) or route['distance']

    return ScenarioResult(
        label=descriptor.label,
        scenario=descriptor.tag,
        modes=descriptor.modes,
        distance=distance,
        duration=duration,
        co2_emissions=co2,
        legs=tuple(legs),
        geometry=route['geometry'],
    )


def build_leg_scenario(client, descriptor, departure, destination):
    legs = [build_leg(client, leg_spec) for leg_spec in descriptor.legs(departure, destination)]

    if descriptor.direct_distance:
        distance = haversine_m(departure, destination)
    else:
        distance = sum(leg.distance for leg in legs)

    return ScenarioResult(
        label=descriptor.label,
        scenario=descriptor.tag,
        modes=descriptor.modes,
        distance=distance,
        duration=sum(leg.duration for leg in legs),
        co2_emissions=sum(leg.co2 for leg in legs),
        legs=tuple(legs),
    )


SCENARIOS = (
    ScenarioDescriptor('car', 'Car only', ('car',), build=build_car_scenario),
    ScenarioDescriptor('train', 'Train only', ('walk', 'train', 'walk'), legs=train_legs, direct_distance=True),
    ScenarioDescriptor('bus', 'Bus only', ('bus',),
                       legs=single_mode_legs('bus', 'Bus ride ({km:.1f} km)', BUS_SPEED_KMH)),
    ScenarioDescriptor('bike', 'Bike only', ('bike',),
                       legs=single_mode_legs('bike', 'Bike ride ({km:.1f} km)', BIKE_SPEED_KMH)),
    ScenarioDescriptor('walk', 'Walk only', ('walk',),
                       legs=single_mode_legs('walk', 'Walk ({km:.1f} km)', WALK_SPEED_KMH)),
    ScenarioDescriptor('bus+plane+bus', 'Bus + Plane + Bus', ('bus', 'plane', 'bus'), legs=bus_plane_bus_legs),
)


def build_scenarios(client, departure, destination, scenarios=SCENARIOS):
    """Build every scenario in order, one after the other"""
    results = []
    for descriptor in scenarios:
        build = descriptor.build or build_leg_scenario
        result = build(client, descriptor, departure, destination)
        logger.debug(f"{result.label}: {result.distance:.0f} m, {result.duration:.0f} s, "
                     f"{result.co2_emissions} g CO2")
        results.append(result)
    return results
