"""
Layer-style map provider backed by pydeck (deck.gl with Mapbox-style documents).

Style-document maps have no polyline object. A line is a layer plus a GeoJSON
source registered on the map under a generated id, and the two are removed
independently. This module keeps that style registry in the Mapbox GL shape
(sources, layers with separate layout and paint) and renders it with pydeck.

Everything below the capability methods is longitude-first: GeoJSON
coordinates are ``[lng, lat]`` and marker positions are ``{"lon", "lat"}``.
"""

import logging
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import pydeck as pdk

from ..base import validate_opacity
from ..models import GeoPoint, MapConfig, MarkerConfig, PolylineConfig

logger = logging.getLogger(__name__)

MARKER_LAYER_ID = "polymap-markers"
MARKER_FILL_COLOR = [227, 74, 51, 255]
MARKER_RADIUS_PIXELS = 8

LINE_LAYOUT = {"line-join": "round", "line-cap": "round"}


def hex_to_rgba(color: str) -> List[int]:
    """Convert ``#rgb`` / ``#rrggbb`` into the ``[r, g, b, a]`` list deck.gl expects."""
    value = color.lstrip("#")
    if len(value) == 3:
        value = "".join(channel * 2 for channel in value)
    if len(value) != 6:
        raise ValueError(f"Unsupported color value: {color!r}")
    return [int(value[i:i + 2], 16) for i in (0, 2, 4)] + [255]


class LayerMarker:
    """
    A positioned marker element, in the manner of ``mapboxgl.Marker``.

    The marker must have a position before it can be added to a map.
    Opacity has no native effect on these markers; ``set_opacity`` is accepted
    and ignored.
    """

    def __init__(self):
        self.id = str(uuid.uuid4())
        self._lng_lat: Optional[Dict[str, float]] = None
        self._map: Optional["LayerMap"] = None

    def set_lng_lat(self, lng_lat: Dict[str, float]) -> "LayerMarker":
        self._lng_lat = {"lon": float(lng_lat["lon"]), "lat": float(lng_lat["lat"])}
        return self

    def get_lng_lat(self) -> Optional[Dict[str, float]]:
        return dict(self._lng_lat) if self._lng_lat is not None else None

    def add_to(self, layer_map: "LayerMap") -> "LayerMarker":
        if self._lng_lat is None:
            raise ValueError("Marker position must be set before adding it to a map")
        if self._map is not None:
            self.remove()
        layer_map.register_marker(self)
        self._map = layer_map
        return self

    def remove(self) -> "LayerMarker":
        if self._map is not None:
            self._map.unregister_marker(self.id)
            self._map = None
        return self

    @property
    def map(self) -> Optional["LayerMap"]:
        return self._map

    # Capability contracts

    def destroy(self) -> None:
        self.remove()

    def set_opacity(self, opacity: float) -> "LayerMarker":
        validate_opacity(opacity)
        return self

    def set_position(self, position: GeoPoint) -> "LayerMarker":
        return self.set_lng_lat({"lon": position.longitude, "lat": position.latitude})

    @property
    def position(self) -> Optional[GeoPoint]:
        """Rendered position, read back from the ``{"lon", "lat"}`` object."""
        if self._lng_lat is None:
            return None
        return GeoPoint(latitude=self._lng_lat["lat"], longitude=self._lng_lat["lon"])


@dataclass(frozen=True)
class LayerPolyline:
    """
    Handle for a line drawn as a style layer.

    Holds nothing but the map and the shared layer/source id; the map's own
    style registry is the only place the line exists.
    """
    layer_map: "LayerMap"
    id: str

    def destroy(self) -> None:
        # Both checks are needed: the registry raises on missing ids
        if self.layer_map.get_layer(self.id) is not None:
            self.layer_map.remove_layer(self.id)
        if self.layer_map.get_source(self.id) is not None:
            self.layer_map.remove_source(self.id)

    def set_opacity(self, opacity: float) -> "LayerPolyline":
        self.layer_map.set_paint_property(self.id, "line-opacity", validate_opacity(opacity))
        return self


class LayerMap:
    """
    A style-document map bound to a host display surface.

    Sources and layers are registered by id, exactly as in a Mapbox GL style;
    markers are kept apart from the style, like DOM markers. ``to_deck`` turns
    the current state into a ``pydeck.Deck`` for rendering.
    """

    def __init__(
        self,
        container_handle: Any,
        center: GeoPoint,
        zoom: float,
        style: str,
        basemap_provider: Optional[str] = "carto"
    ):
        self._container_handle = container_handle
        self.center = center
        self.zoom = zoom
        self.style = style
        self.basemap_provider = basemap_provider
        self._sources: Dict[str, Dict[str, Any]] = {}
        self._layers: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()
        self._markers: "OrderedDict[str, LayerMarker]" = OrderedDict()

    # Style registry

    def add_source(self, source_id: str, source: Dict[str, Any]) -> None:
        if source_id in self._sources:
            raise ValueError(f"There is already a source with id '{source_id}'")
        if source.get("type") != "geojson":
            raise ValueError(f"Unsupported source type: {source.get('type')!r}")
        self._sources[source_id] = source

    def get_source(self, source_id: str) -> Optional[Dict[str, Any]]:
        return self._sources.get(source_id)

    def remove_source(self, source_id: str) -> None:
        if source_id not in self._sources:
            raise ValueError(f"There is no source with id '{source_id}'")
        for layer_id, layer in self._layers.items():
            if layer["source"] == source_id:
                raise ValueError(
                    f"Source '{source_id}' cannot be removed while layer '{layer_id}' is using it"
                )
        del self._sources[source_id]

    def add_layer(self, layer: Dict[str, Any]) -> None:
        """
        Register a line layer.

        ``layer["source"]`` is either the id of a registered source or an inline
        source definition, which is registered under the layer id.
        """
        layer_id = layer["id"]
        if layer_id in self._layers:
            raise ValueError(f"Layer with id '{layer_id}' already exists on this map")
        if layer.get("type") != "line":
            raise ValueError(f"Unsupported layer type: {layer.get('type')!r}")

        source = layer["source"]
        if isinstance(source, dict):
            self.add_source(layer_id, source)
            source = layer_id
        elif source not in self._sources:
            raise ValueError(f"Source '{source}' does not exist")

        self._layers[layer_id] = {
            "id": layer_id,
            "type": "line",
            "source": source,
            "layout": dict(layer.get("layout", {})),
            "paint": dict(layer.get("paint", {})),
        }

    def get_layer(self, layer_id: str) -> Optional[Dict[str, Any]]:
        return self._layers.get(layer_id)

    def remove_layer(self, layer_id: str) -> None:
        if layer_id not in self._layers:
            raise ValueError(f"The layer '{layer_id}' does not exist in the map's style")
        del self._layers[layer_id]

    def set_paint_property(self, layer_id: str, name: str, value: Any) -> None:
        layer = self._layers.get(layer_id)
        if layer is None:
            raise ValueError(f"The layer '{layer_id}' does not exist in the map's style")
        layer["paint"][name] = value

    def get_paint_property(self, layer_id: str, name: str) -> Any:
        layer = self._layers.get(layer_id)
        if layer is None:
            raise ValueError(f"The layer '{layer_id}' does not exist in the map's style")
        return layer["paint"].get(name)

    @property
    def layer_ids(self) -> List[str]:
        return list(self._layers)

    @property
    def source_ids(self) -> List[str]:
        return list(self._sources)

    # Marker elements

    def register_marker(self, marker: LayerMarker) -> None:
        self._markers[marker.id] = marker

    def unregister_marker(self, marker_id: str) -> None:
        self._markers.pop(marker_id, None)

    @property
    def markers(self) -> List[LayerMarker]:
        return list(self._markers.values())

    # Capability contracts

    def get_display_node(self) -> Any:
        return self._container_handle

    def add_marker(self, marker_config: MarkerConfig) -> LayerMarker:
        # Position first: the marker refuses to attach without one
        marker = LayerMarker().set_position(marker_config.position).add_to(self)
        logger.debug(f"Added marker {marker.id} at {marker.get_lng_lat()}")
        return marker

    def add_polyline(self, polyline_config: PolylineConfig) -> LayerPolyline:
        polyline_id = str(uuid.uuid4())
        self.add_layer({
            "id": polyline_id,
            "type": "line",
            "layout": dict(LINE_LAYOUT),
            "paint": {
                "line-color": polyline_config.stroke_color,
                "line-width": polyline_config.stroke_weight,
            },
            "source": {
                "type": "geojson",
                "data": {
                    "type": "Feature",
                    "properties": {},
                    "geometry": {
                        "type": "LineString",
                        "coordinates": [point.as_lng_lat() for point in polyline_config.path],
                    },
                },
            },
        })
        logger.debug(f"Added line layer {polyline_id} with {len(polyline_config.path)} points")
        return LayerPolyline(layer_map=self, id=polyline_id)

    # Rendering

    def to_deck(self) -> pdk.Deck:
        """Build a pydeck Deck from the current style registry and markers."""
        deck_layers = [self._line_layer(layer) for layer in self._layers.values()]
        if self._markers:
            deck_layers.append(pdk.Layer(
                "ScatterplotLayer",
                data=[
                    {"position": [lng_lat["lon"], lng_lat["lat"]]}
                    for lng_lat in (marker.get_lng_lat() for marker in self._markers.values())
                ],
                id=MARKER_LAYER_ID,
                get_position="position",
                get_fill_color=MARKER_FILL_COLOR,
                get_radius=MARKER_RADIUS_PIXELS,
                radius_units="'pixels'",
                pickable=True,
            ))
        return pdk.Deck(
            layers=deck_layers,
            initial_view_state=pdk.ViewState(
                longitude=self.center.longitude,
                latitude=self.center.latitude,
                zoom=self.zoom,
            ),
            map_style=self.style,
            map_provider=self.basemap_provider,
        )

    def _line_layer(self, layer: Dict[str, Any]) -> pdk.Layer:
        layout = layer["layout"]
        paint = layer["paint"]
        return pdk.Layer(
            "GeoJsonLayer",
            data=self._sources[layer["source"]]["data"],
            id=layer["id"],
            stroked=True,
            filled=False,
            get_line_color=hex_to_rgba(paint.get("line-color", "#000000")),
            get_line_width=paint.get("line-width", 1),
            line_width_units="'pixels'",
            line_joint_rounded=layout.get("line-join") == "round",
            line_cap_rounded=layout.get("line-cap") == "round",
            opacity=paint.get("line-opacity", 1.0),
        )

    def save(self, outfile: Union[str, Path]) -> None:
        self.to_deck().to_html(
            filename=str(outfile),
            open_browser=False,
            notebook_display=False,
        )


def new_layer_map(map_config: MapConfig) -> LayerMap:
    """
    Create a pydeck-backed map from a MapConfig.

    Falls back to the configured default style when the config has none.
    """
    from ..settings import get_settings

    settings = get_settings()
    return LayerMap(
        container_handle=map_config.container_handle,
        center=map_config.center,
        zoom=map_config.zoom,
        style=map_config.style_reference or settings.layer_style_url,
        basemap_provider=settings.layer_basemap_provider,
    )
