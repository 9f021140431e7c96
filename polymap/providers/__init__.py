"""
Multi-provider interactive map abstraction layer.

This module provides a unified interface for creating maps, placing markers and
drawing polylines on different map SDKs, such as folium (Leaflet) and pydeck
(deck.gl with Mapbox-style documents).

The architecture follows the Strategy pattern: each provider implements the
same capability contracts, so the application can switch between providers at
runtime without changing any call site.
"""

from .base import Entity, MapContainer, PointMarker, ProviderType
from .models import GeoPoint, MapConfig, MarkerConfig, PolylineConfig
from .manager import MapProviderManager, create_map, get_manager

__all__ = [
    'Entity',
    'MapContainer',
    'PointMarker',
    'ProviderType',
    'GeoPoint',
    'MapConfig',
    'MarkerConfig',
    'PolylineConfig',
    'MapProviderManager',
    'create_map',
    'get_manager',
]
