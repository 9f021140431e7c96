"""
Unified configuration models shared by every map provider.

These models are the only shapes application code passes into a map. Each
provider translates them into its own native representation (coordinate
order, option names, style documents) so callers never see the difference.
"""

from typing import Any, List, Optional
from pydantic import BaseModel, Field, field_validator


class GeoPoint(BaseModel):
    """
    A single geographic coordinate.

    Always addressed by field name, never by position, so providers are free
    to emit (lat, lng) or (lng, lat) pairs internally.
    """
    latitude: float = Field(..., ge=-90, le=90, description="Latitude coordinate")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude coordinate")

    model_config = {"frozen": True}

    def as_lat_lng(self) -> List[float]:
        """Return the point as a ``[lat, lng]`` pair."""
        return [self.latitude, self.longitude]

    def as_lng_lat(self) -> List[float]:
        """Return the point as a ``[lng, lat]`` pair (GeoJSON order)."""
        return [self.longitude, self.latitude]


class MapConfig(BaseModel):
    """
    Configuration used once to create a map.

    The container handle is opaque to the core: it is whatever display surface
    the host environment wants the map bound to.
    """
    container_handle: Any = Field(..., description="Opaque display surface reference")
    center: GeoPoint = Field(..., description="Initial map center")
    zoom: float = Field(..., ge=0, le=24, description="Initial zoom level")
    style_reference: Optional[str] = Field(
        None,
        description="Style document URL (only used by style-based providers)"
    )

    model_config = {"frozen": True}

    @field_validator("container_handle")
    @classmethod
    def require_container(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("MapConfig requires a container handle")
        return value


class MarkerConfig(BaseModel):
    """Creation-time options for a point marker."""
    position: GeoPoint = Field(..., description="Marker position")

    model_config = {"frozen": True}


class PolylineConfig(BaseModel):
    """
    Creation-time options for a polyline.

    Path order is significant: it defines the direction and shape of the line.
    """
    path: List[GeoPoint] = Field(..., min_length=2, description="Ordered line vertices")
    stroke_color: str = Field(
        ...,
        pattern=r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$",
        description="Stroke color as #rgb or #rrggbb"
    )
    stroke_weight: float = Field(..., gt=0, description="Stroke width in pixels")

    model_config = {"frozen": True}
