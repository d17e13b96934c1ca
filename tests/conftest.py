"""
Common test fixtures and configuration.
"""

import httpx
import pytest

from weather_lookup.config import WeatherClientConfig
from weather_lookup.models.weather import WeatherModel
from weather_lookup.services.external_api import WeatherAPIClient

TEST_WEATHER_URL = "https://weather.test/data/2.5/weather"


@pytest.fixture
def client_config():
    """Client configuration pointing at a fake upstream host."""
    return WeatherClientConfig(
        base_url=TEST_WEATHER_URL,
        api_key="test-key",
        units="metric",
    )


@pytest.fixture
def weather_payload():
    """Upstream payload for a clear day in San Francisco."""
    return {
        "coord": {"lon": -122.42, "lat": 37.77},
        "name": "San Francisco",
        "main": {"temp": 27.1, "humidity": 40},
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky"}],
    }


@pytest.fixture
def weather_model():
    """Presentation model matching ``weather_payload``."""
    return WeatherModel(
        city_name="San Francisco",
        temperature=27.1,
        temperature_string="27.1",
        condition_id=800,
        condition_name="sun.max",
    )


@pytest.fixture
async def make_weather_client(client_config):
    """
    Build weather clients whose HTTP traffic goes to a handler function.

    Yields:
        Callable: ``make(handler, config=None) -> WeatherAPIClient``
    """
    http_clients = []

    def make(handler, config=None):
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        http_clients.append(http_client)
        return WeatherAPIClient(config or client_config, client=http_client)

    yield make

    for http_client in http_clients:
        await http_client.aclose()
