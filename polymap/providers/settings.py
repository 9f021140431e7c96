"""
Configuration settings for map providers using Pydantic Settings.

This module centralizes provider defaults (selected provider, style document,
tiles, demo viewport) and loads them from environment variables or a .env file.
"""

from pydantic import Field
from pydantic_settings import BaseSettings
from typing import Optional, Dict, Any


# Published CARTO Voyager GL style, usable without an API key
DEFAULT_LAYER_STYLE_URL = "https://basemaps.cartocdn.com/gl/voyager-gl-style/style.json"


class MapSettings(BaseSettings):
    """
    Settings for map providers.

    Uses Pydantic Settings to load and validate configuration from
    environment variables with proper type checking and defaults.
    """

    # Provider selection
    map_provider: str = Field(
        default="layer",
        alias="MAP_PROVIDER",
        description="Default map provider (pin, layer)"
    )

    # Layer-style (pydeck) provider settings
    layer_style_url: str = Field(
        default=DEFAULT_LAYER_STYLE_URL,
        alias="LAYER_STYLE_URL",
        description="Style document used when a MapConfig has no style_reference"
    )
    layer_basemap_provider: str = Field(
        default="carto",
        alias="LAYER_BASEMAP_PROVIDER",
        description="pydeck basemap provider (carto, mapbox, maplibre)"
    )

    # Pin-style (folium) provider settings
    pin_tiles: str = Field(
        default="OpenStreetMap",
        alias="PIN_TILES",
        description="Tileset name or URL template for folium maps"
    )

    # Default viewport, used by hosts that don't build their own MapConfig
    map_default_latitude: float = Field(
        default=14.6091,
        alias="MAP_DEFAULT_LATITUDE",
        description="Default map center latitude"
    )
    map_default_longitude: float = Field(
        default=121.0223,
        alias="MAP_DEFAULT_LONGITUDE",
        description="Default map center longitude"
    )
    map_default_zoom: float = Field(
        default=12,
        alias="MAP_DEFAULT_ZOOM",
        description="Default zoom level"
    )

    # Logging
    log_config_path: Optional[str] = Field(
        default=None,
        alias="POLYMAP_LOG_CONFIG",
        description="Path to a YAML logging configuration"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "env_prefix": "",
        "extra": "ignore",  # Allow extra fields from .env but ignore them
    }

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump()


# Global settings instance
_settings: Optional[MapSettings] = None


def get_settings() -> MapSettings:
    """
    Get global settings instance (singleton pattern).

    Returns:
        Validated MapSettings instance
    """
    global _settings
    if _settings is None:
        _settings = MapSettings()
    return _settings


def reset_settings() -> None:
    """Reset global settings (useful for testing)."""
    global _settings
    _settings = None
