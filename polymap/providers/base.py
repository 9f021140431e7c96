"""
Capability contracts that every map provider implements.

The contracts are structural: a provider type satisfies them by having the
right methods, not by inheriting from a common base. A polyline implements
``Entity`` only, while a marker implements both ``Entity`` and ``PointMarker``.
"""

from enum import Enum
from typing import Any, Protocol, runtime_checkable

from .models import GeoPoint, MarkerConfig, PolylineConfig


class ProviderType(Enum):
    """Supported map providers."""
    PIN = "pin"      # folium / Leaflet, first-class markers and polylines
    LAYER = "layer"  # pydeck / Mapbox style documents, layers plus sources

    @classmethod
    def parse(cls, name: str) -> "ProviderType":
        """
        Parse a provider name, case-insensitively.

        Raises:
            ValueError: If the name does not match any provider
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            available = [p.value for p in cls]
            raise ValueError(
                f"Invalid provider '{name}'. "
                f"Available providers: {', '.join(available)}"
            )


@runtime_checkable
class Entity(Protocol):
    """Anything rendered on a map."""

    def destroy(self) -> None:
        """
        Remove the entity from its map.

        The handle is invalid afterwards. Calling it again is a no-op.
        """
        ...

    def set_opacity(self, opacity: float) -> "Entity":
        """
        Set the entity opacity in [0, 1] and return the entity.

        Providers without native opacity support accept the call and do nothing.
        """
        ...


@runtime_checkable
class PointMarker(Protocol):
    """Entities that sit on a single point."""

    def set_position(self, position: GeoPoint) -> "PointMarker":
        """Move the marker and return it."""
        ...


@runtime_checkable
class MapContainer(Protocol):
    """Things that behave like a map."""

    def get_display_node(self) -> Any:
        """Return the display surface this map is bound to."""
        ...

    def add_marker(self, marker_config: MarkerConfig) -> Entity:
        """Create a marker on this map. The result also satisfies ``PointMarker``."""
        ...

    def add_polyline(self, polyline_config: PolylineConfig) -> Entity:
        """Draw a polyline on this map."""
        ...

    def save(self, outfile: Any) -> None:
        """Write the rendered map as a standalone HTML page."""
        ...


def validate_opacity(opacity: float) -> float:
    """Check that an opacity value lies in [0, 1]."""
    if not 0.0 <= opacity <= 1.0:
        raise ValueError(f"Opacity must be between 0 and 1, got {opacity}")
    return float(opacity)
