import pytest
import requests

from app import create_app
from models.route import Coordinate
from tests_helpers import FakeDatabase, FakeResponse, StubRouteClient
from utils.errors import RouteNotFoundError


class FakeHTTP:
    """Stands in for requests.get.

    `handler` is a canned payload, a FakeResponse, an exception to raise,
    or a callable (url, params) returning one of those.
    """

    def __init__(self):
        self.calls = []
        self.handler = None

    def __call__(self, url, params=None, headers=None, timeout=None):
        self.calls.append({'url': url, 'params': params or {}, 'headers': headers or {}, 'timeout': timeout})
        result = self.handler(url, params or {}) if callable(self.handler) else self.handler
        if isinstance(result, requests.exceptions.RequestException):
            raise result
        if isinstance(result, FakeResponse):
            return result
        return FakeResponse(result)


@pytest.fixture
def fake_http(monkeypatch):
    fake = FakeHTTP()
    monkeypatch.setattr(requests, 'get', fake)
    return fake


@pytest.fixture
def stub_client():
    return StubRouteClient()


@pytest.fixture
def no_route_client():
    return StubRouteClient(car_error=RouteNotFoundError('Aucun itinéraire trouvé'))


@pytest.fixture
def lyon():
    return Coordinate(lat=45.75, lng=4.85)


@pytest.fixture
def lyon_nearby():
    return Coordinate(lat=45.76, lng=4.86)


@pytest.fixture
def make_client():
    def _make(route_client=None, database=None):
        app = create_app({
            'TESTING': True,
            'ROUTE_CLIENT': route_client or StubRouteClient(),
            'DATABASE': database or FakeDatabase(),
        })
        return app.test_client()
    return _make
