import pytest

from tests_helpers import StubRouteClient
from models.route import ScenarioResult
from tests_helpers import LINE, osrm_route
from utils.errors import RouteNotFoundError
from utils.osrm_client import OSRMClient
from utils.route_service import calculate_multimodal_routes, select_routes
from utils.scenarios import build_scenarios


def scenario(label, duration, co2, distance=1000):
    return ScenarioResult(label=label, scenario=label.lower(), modes=(label.lower(),),
                          distance=distance, duration=duration, co2_emissions=co2)


def test_selection_order_and_dedup():
    a = scenario('A', 100, 50)
    b = scenario('B', 50, 100)
    c = scenario('C', 60, 60)

    result = select_routes([a, b, c])

    assert [r.label for r in result] == ['B', 'A', 'C']
    assert result[2].score == pytest.approx(1.2)


def test_ties_go_to_the_first_scenario():
    a = scenario('A', 50, 100)
    b = scenario('B', 100, 50)
    c = scenario('C', 50, 50)

    result = select_routes([a, b, c])

    assert result[0] is a
    assert result[1] is b
    assert result[2].label == 'C'


def test_compromise_tie_keeps_earliest():
    a = scenario('A', 100, 50)
    b = scenario('B', 50, 100)

    result = select_routes([a, b])

    # both score 1.5, the compromise is A and collapses into the lowest-CO2 entry
    assert all(r.score is None for r in result)
    assert [r.label for r in result] == ['B', 'A']


def test_zero_emissions_everywhere_does_not_divide_by_zero():
    a = scenario('A', 100, 0)
    b = scenario('B', 50, 0)
    result = select_routes([a, b])
    assert [r.label for r in result] == ['B', 'A']


def test_multimodal_structure(stub_client, lyon, lyon_nearby):
    routes = calculate_multimodal_routes(lyon, lyon_nearby, client=stub_client)

    assert 3 <= len(routes) <= 6
    for route in routes:
        data = route.to_dict()
        for key in ('label', 'distance', 'duration', 'co2Emissions', 'steps'):
            assert key in data
        assert isinstance(data['steps'], list)


def test_first_entry_is_the_fastest(stub_client, lyon, lyon_nearby):
    base = build_scenarios(StubRouteClient(), lyon, lyon_nearby)
    routes = calculate_multimodal_routes(lyon, lyon_nearby, client=stub_client)

    assert routes[0].duration == min(r.duration for r in base)
    car = next(r for r in routes if r.scenario == 'car')
    assert car.duration == 1200
    assert car.co2_emissions == 1930


def test_labels_are_unique(stub_client, lyon, lyon_nearby):
    routes = calculate_multimodal_routes(lyon, lyon_nearby, client=stub_client)
    keys = [r.dedup_key for r in routes]
    assert len(keys) == len(set(keys))


def test_same_departure_and_destination(lyon):
    client = StubRouteClient(
        car_route={'distance': 0, 'duration': 0, 'geometry': LINE, 'steps': []},
        leg_distance=0,
    )
    routes = calculate_multimodal_routes(lyon, lyon, client=client)
    assert routes
    assert all(r.distance == 0 for r in routes)


def test_car_route_failure_is_raised(no_route_client, lyon, lyon_nearby):
    with pytest.raises(RouteNotFoundError, match='Aucun itinéraire trouvé'):
        calculate_multimodal_routes(lyon, lyon_nearby, client=no_route_client)


def test_with_osrm_client(fake_http, lyon, lyon_nearby):
    def handler(url, params):
        if params.get('steps'):
            return osrm_route(10000, 1200, steps=[
                {'distance': 1000, 'duration': 120},
                {'distance': 9000, 'duration': 1080},
            ])
        return osrm_route(10000)

    fake_http.handler = handler
    routes = calculate_multimodal_routes(lyon, lyon_nearby, client=OSRMClient(base_url='http://osrm.test'))

    assert 3 <= len(routes) <= 6
    car = next(r for r in routes if r.scenario == 'car')
    assert car.duration == 1200
    assert car.co2_emissions == 1930
    # one car route, two walks, bus, bike, walk, two airport buses; no train or plane fetch
    assert len(fake_http.calls) == 8


def test_with_unreachable_osrm_only_car_fails(fake_http, lyon, lyon_nearby):
    def handler(url, params):
        if params.get('steps'):
            return osrm_route(10000, 1200, steps=[])
        return {'code': 'NoRoute', 'routes': []}

    fake_http.handler = handler
    routes = calculate_multimodal_routes(lyon, lyon_nearby, client=OSRMClient(base_url='http://osrm.test'))

    bus = next(r for r in routes if r.scenario == 'bus')
    assert bus.legs[0].geometry is None
    assert bus.distance > 0
