"""
Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the polymap project.
"""

import pytest
import os

# Add the project root to Python path
import sys
from pathlib import Path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from polymap.providers.base import ProviderType
from polymap.providers.manager import MapProviderManager, _register_built_in_providers
from polymap.providers.models import GeoPoint, MapConfig, MarkerConfig, PolylineConfig
from polymap.providers.settings import reset_settings


@pytest.fixture(autouse=True)
def clean_settings():
    """Make every test read settings fresh from a known environment."""
    keys = [
        'MAP_PROVIDER',
        'LAYER_STYLE_URL',
        'LAYER_BASEMAP_PROVIDER',
        'PIN_TILES',
        'POLYMAP_LOG_CONFIG',
    ]
    original_values = {key: os.environ.pop(key, None) for key in keys}
    reset_settings()

    yield

    for key, original_value in original_values.items():
        if original_value is None:
            os.environ.pop(key, None)
        else:
            os.environ[key] = original_value
    reset_settings()


@pytest.fixture
def sample_points():
    """Provide sample points for testing (Manila area)."""
    return {
        'center': GeoPoint(latitude=14.6091, longitude=121.0223),
        'moved': GeoPoint(latitude=14.61, longitude=121.02),
        'line_start': GeoPoint(latitude=14.60, longitude=121.02),
        'line_end': GeoPoint(latitude=14.61, longitude=121.03),
    }


@pytest.fixture
def map_config(sample_points):
    """Provide the reference map configuration."""
    return MapConfig(
        container_handle="map",
        center=sample_points['center'],
        zoom=12,
    )


@pytest.fixture
def marker_config(sample_points):
    """Provide a marker at the map center."""
    return MarkerConfig(position=sample_points['center'])


@pytest.fixture
def polyline_config(sample_points):
    """Provide the reference red polyline."""
    return PolylineConfig(
        path=[sample_points['line_start'], sample_points['line_end']],
        stroke_color="#ff0000",
        stroke_weight=3,
    )


@pytest.fixture
def provider_manager():
    """Provide a manager with the built-in providers registered."""
    manager = MapProviderManager()
    _register_built_in_providers(manager)
    return manager


@pytest.fixture(params=[ProviderType.PIN, ProviderType.LAYER], ids=lambda p: p.value)
def any_map(request, provider_manager, map_config):
    """Provide a fresh map from each built-in provider."""
    return provider_manager.create_map(request.param, map_config)
