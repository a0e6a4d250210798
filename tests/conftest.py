import random

import httpx
import pytest
from fastapi.testclient import TestClient

from tests.stubs import UpstreamStub
from travel_assistant.api import app
from travel_assistant.config import Settings, get_settings
from travel_assistant.dependencies import get_http_client, get_rng


@pytest.fixture
def test_settings():
    """Settings with a weather key and Spanish upstream languages."""
    return Settings(openweather_api_key="test-weather-key")


@pytest.fixture
def upstream():
    return UpstreamStub()


@pytest.fixture
def mock_http_client(upstream):
    """Async client whose transport is the upstream stub."""
    return httpx.AsyncClient(transport=httpx.MockTransport(upstream))


@pytest.fixture
def test_client(test_settings, upstream):
    """FastAPI test client with settings, upstream APIs and randomness pinned."""

    async def http_client_override():
        async with httpx.AsyncClient(transport=httpx.MockTransport(upstream)) as client:
            yield client

    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_http_client] = http_client_override
    app.dependency_overrides[get_rng] = lambda: random.Random(1234)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def wiki_payload():
    """Sample Wikipedia REST summary response."""
    return {
        "type": "standard",
        "title": "Lima",
        "extract": "Lima es la capital de la República del Perú.",
        "content_urls": {
            "desktop": {"page": "https://es.wikipedia.org/wiki/Lima"},
            "mobile": {"page": "https://es.m.wikipedia.org/wiki/Lima"},
        },
        "thumbnail": {
            "source": "https://upload.wikimedia.org/lima.jpg",
            "width": 320,
            "height": 213,
        },
    }


@pytest.fixture
def weather_payload():
    """Sample OpenWeather current weather response."""
    return {
        "weather": [
            {"id": 803, "main": "Clouds", "description": "muy nuboso", "icon": "04d"}
        ],
        "main": {
            "temp": 18.4,
            "feels_like": 18.1,
            "temp_min": 17.0,
            "temp_max": 19.2,
            "pressure": 1013,
            "humidity": 77,
        },
        "sys": {"country": "PE"},
        "name": "Lima",
        "cod": 200,
    }
