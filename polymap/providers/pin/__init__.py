"""
Pin-style map provider.

This module provides folium (Leaflet.js) maps whose markers and polylines are
native map children.
"""

from .provider import PinMap, PinMarker, PinPolyline, new_pin_map

__all__ = ['PinMap', 'PinMarker', 'PinPolyline', 'new_pin_map']
