import pytest
import httpx
from fastapi.testclient import TestClient

from api import create_app
from config import ProxySettings

UPSTREAM_HOST = "api.clashofclans.com"


@pytest.fixture(scope="session")
def proxy_settings():
    """Settings with a fake key and a clan tag that needs encoding"""
    return ProxySettings(api_key="test-api-key-0123456789abcdef", clan_tag="#2Y29VCP89")


@pytest.fixture(scope="function")
def client(proxy_settings):
    """Test client with the app lifespan running, so the upstream client is open"""
    with TestClient(create_app(proxy_settings)) as test_client:
        yield test_client


@pytest.fixture
def upstream(respx_mock):
    """Register a mocked upstream route; returns the respx route for call assertions"""
    def _route(method="GET", status_code=200, json=None, side_effect=None):
        route = respx_mock.route(method=method, host=UPSTREAM_HOST)
        if side_effect is not None:
            return route.mock(side_effect=side_effect)
        return route.mock(return_value=httpx.Response(status_code, json=json))
    return _route
