"""
Pin-style map provider backed by folium (Leaflet.js).

Leaflet treats markers and polylines as first-class map children, so this
adapter is a near 1:1 translation: the native folium types are extended with
the capability methods, and removing an entity detaches it from its map.
Coordinates are emitted latitude-first, as Leaflet expects.
"""

import logging
from typing import Any, List, Optional

import folium

from ..base import validate_opacity
from ..models import GeoPoint, MapConfig, MarkerConfig, PolylineConfig

logger = logging.getLogger(__name__)


class _MapChild:
    """Attach/detach behaviour shared by elements placed directly on a PinMap."""

    @property
    def map(self) -> Optional["PinMap"]:
        """The map this element is currently attached to, if any."""
        return self._parent

    def set_map(self, pin_map: Optional["PinMap"]):
        """
        Attach the element to ``pin_map``, or detach it when ``pin_map`` is None.

        Returns:
            The element itself, for chaining
        """
        parent = self._parent
        if parent is not None:
            parent._children.pop(self.get_name(), None)
            self._parent = None
        if pin_map is not None:
            pin_map.add_child(self)
        return self

    def destroy(self) -> None:
        if self._parent is None:
            return
        logger.debug(f"Detaching {self.get_name()} from {self._parent.get_name()}")
        self.set_map(None)


class PinMarker(_MapChild, folium.Marker):
    """A Leaflet marker satisfying the Entity and PointMarker contracts."""

    def set_opacity(self, opacity: float) -> "PinMarker":
        self.options["opacity"] = validate_opacity(opacity)
        return self

    def set_position(self, position: GeoPoint) -> "PinMarker":
        self.location = position.as_lat_lng()
        return self

    @property
    def position(self) -> Optional[GeoPoint]:
        """Rendered position, read back from the Leaflet ``[lat, lng]`` location."""
        if self.location is None:
            return None
        latitude, longitude = self.location
        return GeoPoint(latitude=latitude, longitude=longitude)


class PinPolyline(_MapChild, folium.PolyLine):
    """A Leaflet polyline satisfying the Entity contract."""

    def set_opacity(self, opacity: float) -> "PinPolyline":
        # Leaflet path "opacity" is the stroke opacity
        self.options["opacity"] = validate_opacity(opacity)
        return self

    @property
    def path(self) -> List[GeoPoint]:
        return [
            GeoPoint(latitude=latitude, longitude=longitude)
            for latitude, longitude in self.locations
        ]


class PinMap(folium.Map):
    """
    A folium map bound to a host display surface.

    The display surface is opaque to folium; it is kept only so the host can
    ask the map where it lives.
    """

    def __init__(
        self,
        container_handle: Any,
        center: GeoPoint,
        zoom: float,
        tiles: Optional[str] = "OpenStreetMap",
        **kwargs: Any
    ):
        super().__init__(
            location=center.as_lat_lng(),
            zoom_start=zoom,
            tiles=tiles,
            **kwargs
        )
        self._container_handle = container_handle

    def get_display_node(self) -> Any:
        return self._container_handle

    def add_marker(self, marker_config: MarkerConfig) -> PinMarker:
        marker = PinMarker(location=marker_config.position.as_lat_lng())
        marker.set_map(self)
        logger.debug(f"Added marker {marker.get_name()} at {marker.location}")
        return marker

    def add_polyline(self, polyline_config: PolylineConfig) -> PinPolyline:
        polyline = PinPolyline(
            locations=[point.as_lat_lng() for point in polyline_config.path],
            color=polyline_config.stroke_color,
            weight=polyline_config.stroke_weight,
        )
        polyline.set_map(self)
        logger.debug(
            f"Added polyline {polyline.get_name()} with {len(polyline.locations)} points"
        )
        return polyline

    def entity_names(self) -> List[str]:
        """Names of the markers and polylines currently attached to this map."""
        return [
            name for name, child in self._children.items()
            if isinstance(child, _MapChild)
        ]


def new_pin_map(map_config: MapConfig) -> PinMap:
    """
    Create a folium-backed map from a MapConfig.

    ``style_reference`` is ignored: Leaflet maps have no style document.
    """
    from ..settings import get_settings

    settings = get_settings()
    return PinMap(
        container_handle=map_config.container_handle,
        center=map_config.center,
        zoom=map_config.zoom,
        tiles=settings.pin_tiles,
    )
