"""
Map Driver - Own the active map and switch providers at runtime.

This service handles:
- Creating the active map through the provider factory
- Switching to another provider with the same MapConfig
- Forwarding marker/polyline creation to whichever map is active

The driver never inspects which provider is active once the factory has built
the map; every call goes through the capability contracts.
"""

import logging
from typing import Any, Optional

from polymap.providers.base import Entity, MapContainer, ProviderType
from polymap.providers.manager import MapProviderManager, get_manager
from polymap.providers.models import MapConfig, MarkerConfig, PolylineConfig

logger = logging.getLogger(__name__)


class MapDriver:
    """
    Holds the active provider selector and the active map.

    Each driver owns its own state, so several drivers can live side by side
    (one per display surface, or one per test).
    """

    def __init__(
        self,
        map_config: MapConfig,
        provider_type: Optional[ProviderType] = None,
        manager: Optional[MapProviderManager] = None,
        mark_center: bool = False,
    ):
        """
        Initialize the MapDriver.

        Args:
            map_config: Configuration reused for every map this driver builds
            provider_type: Initial provider. If None, uses configured default.
            manager: Provider factory (defaults to the global manager)
            mark_center: Place a marker at the map center after each setup
        """
        self.map_config = map_config
        self.manager = manager or get_manager()
        self.provider_type = provider_type or self.manager.default_provider
        self.mark_center = mark_center
        self._map: Optional[MapContainer] = None

    @property
    def active_map(self) -> MapContainer:
        """
        The map currently in use.

        Raises:
            RuntimeError: If setup() has not been called yet
        """
        if self._map is None:
            raise RuntimeError("MapDriver has no active map; call setup() first")
        return self._map

    def setup(self) -> MapContainer:
        """Build a new map with the current provider and make it active."""
        self._map = self.manager.create_map(self.provider_type, self.map_config)
        if self.mark_center:
            self._map.add_marker(MarkerConfig(position=self.map_config.center))
        logger.info(f"Active map provider: {self.provider_type.value}")
        return self._map

    def switch_provider(self, provider_type: Optional[ProviderType] = None) -> MapContainer:
        """
        Replace the active map with one built by another provider.

        Args:
            provider_type: Provider to switch to. If None, moves to the next
                registered provider.

        Returns:
            The new active map

        The previous map is abandoned, not destroyed: entities created on it
        stay alive until the host drops its references.
        """
        previous = self.provider_type
        self.provider_type = provider_type or self.manager.next_provider(previous)
        if self._map is not None:
            logger.debug(f"Abandoning {previous.value} map without cleanup")
        logger.info(f"Switching map provider: {previous.value} -> {self.provider_type.value}")
        return self.setup()

    def get_display_node(self) -> Any:
        return self.active_map.get_display_node()

    def add_marker(self, marker_config: MarkerConfig) -> Entity:
        return self.active_map.add_marker(marker_config)

    def add_polyline(self, polyline_config: PolylineConfig) -> Entity:
        return self.active_map.add_polyline(polyline_config)
