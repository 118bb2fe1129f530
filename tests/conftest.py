"""Shared pytest fixtures for weather-mcp-server tests."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from core.http import HttpClient
from core.image_gen import ImageGenerator
from core.weather import WeatherService
from tools.dispatcher import ToolDispatcher
from tools.operations import build_registry

NWS_BASE = "https://nws.test"
REPLICATE_BASE = "https://replicate.test"
MODEL_VERSION = "test-version"


def make_response(status_code: int = 200, json_data=None, invalid_json: bool = False) -> Mock:
    """Build a stand-in for requests.Response."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = status_code < 400
    if invalid_json:
        response.json.side_effect = ValueError("Expecting value")
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def session() -> Mock:
    """A requests.Session whose request() is scripted per test."""
    return Mock(spec=requests.Session)


@pytest.fixture
def http(session: Mock) -> HttpClient:
    return HttpClient(user_agent="test-agent/1.0", session=session)


@pytest.fixture
def weather(http: HttpClient) -> WeatherService:
    return WeatherService(http, NWS_BASE)


@pytest.fixture
def token() -> dict:
    """Mutable holder so tests can clear the token."""
    return {"value": "r8_test_token"}


@pytest.fixture
def images(http: HttpClient, token: dict) -> ImageGenerator:
    return ImageGenerator(http, REPLICATE_BASE, MODEL_VERSION, token_provider=lambda: token["value"])


@pytest.fixture
def opener() -> Mock:
    return Mock(return_value=True)


@pytest.fixture
def dispatcher(weather: WeatherService, images: ImageGenerator, opener: Mock) -> ToolDispatcher:
    return ToolDispatcher(build_registry(weather, images, opener=opener))
