import pytest

from models.route import Coordinate


def test_coordinate_from_dict():
    assert Coordinate.from_dict({'lat': '45.75', 'lng': 4.85}) == Coordinate(lat=45.75, lng=4.85)


def test_coordinate_bounds_are_inclusive():
    assert Coordinate.from_dict({'lat': -90, 'lng': 180}) == Coordinate(lat=-90.0, lng=180.0)


@pytest.mark.parametrize("data", [
    {'lat': 'nan', 'lng': 0},
    {'lat': 0, 'lng': 'inf'},
    {'lat': float('-inf'), 'lng': 0},
    {'lat': 90.5, 'lng': 0},
    {'lat': 0, 'lng': -180.1},
    {'lat': 0},
    {'lat': None, 'lng': 0},
    'Lyon',
])
def test_coordinate_rejects_invalid_values(data):
    with pytest.raises(ValueError):
        Coordinate.from_dict(data)
