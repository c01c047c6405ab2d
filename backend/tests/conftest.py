"""
Map Launcher Test Configuration
Pytest fixtures for points, platforms and the API client
"""

import pytest
from fastapi.testclient import TestClient

from maplauncher.main import app
from maplauncher.models.schemas import Coordinates, DirectionsPoint
from maplauncher.services.launcher import MapLauncherService
from maplauncher.services.platform import StaticPlatform


@pytest.fixture
def client():
    """Test client for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def from_point():
    """Origin with coordinates, name and address."""
    return DirectionsPoint(
        coordinates=Coordinates(lat=10.0, lon=10.0),
        name="FromName",
        address="fromAddress",
    )


@pytest.fixture
def to_point():
    """Destination with coordinates, name and address."""
    return DirectionsPoint(
        coordinates=Coordinates(lat=20.0, lon=20.0),
        name="ToName",
        address="ToAddress",
    )


@pytest.fixture
def address_points():
    """Origin and destination known only by address."""
    return (
        DirectionsPoint(address="1 Infinite Loop, Cupertino"),
        DirectionsPoint(address="Union Square, San Francisco"),
    )


@pytest.fixture
def empty_point():
    """Point with neither coordinates nor address."""
    return DirectionsPoint(name="Nowhere")


@pytest.fixture
def platform():
    """Platform where every app is installed."""
    return StaticPlatform(host_identifier="MapLauncher")


@pytest.fixture
def launcher(platform):
    return MapLauncherService(platform)


@pytest.fixture
def sample_point_json():
    """JSON bodies for API requests."""
    return {
        "origin": {"coordinates": {"lat": 10.0, "lon": 10.0}},
        "destination": {"coordinates": {"lat": 20.0, "lon": 20.0}, "name": "ToName"},
    }
