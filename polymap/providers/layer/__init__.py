"""
Layer-style map provider.

This module provides pydeck maps whose lines are style layers backed by
GeoJSON sources.
"""

from .provider import LayerMap, LayerMarker, LayerPolyline, new_layer_map

__all__ = ['LayerMap', 'LayerMarker', 'LayerPolyline', 'new_layer_map']
