"""
Provider management and map factory functions.

This module is the only place that knows which provider builds which map.
Callers pass a provider type and a MapConfig and get back an object that is
used exclusively through the capability contracts.
"""

import logging
from typing import Callable, Dict, List, Optional
from .base import MapContainer, ProviderType
from .models import MapConfig

logger = logging.getLogger(__name__)

MapFactory = Callable[[MapConfig], MapContainer]


class MapProviderManager:
    """
    Registry of map factories keyed by provider type.

    Unlike data providers, maps are never cached: every ``create_map`` call
    builds a fresh map bound to the configured display surface.
    """

    def __init__(self):
        self._factories: Dict[ProviderType, MapFactory] = {}

    def register_provider(self, provider_type: ProviderType, factory: MapFactory):
        """
        Register a map factory for a given provider type.

        Args:
            provider_type: The provider type identifier
            factory: Callable building a map from a MapConfig
        """
        self._factories[provider_type] = factory
        logger.info(f"Registered map provider {provider_type.value}")

    @property
    def registered_providers(self) -> List[ProviderType]:
        """Registered provider types, in registration order."""
        return list(self._factories)

    def create_map(
        self,
        provider_type: Optional[ProviderType],
        map_config: MapConfig
    ) -> MapContainer:
        """
        Create a map with the given provider.

        Args:
            provider_type: Provider to use. If None, uses configured default.
            map_config: Container, center, zoom and optional style

        Returns:
            A new map exposing the MapContainer contract

        Raises:
            ValueError: If provider type is not registered
        """
        if provider_type is None:
            provider_type = self._get_default_provider_type()

        if provider_type not in self._factories:
            available = [p.value for p in self._factories]
            raise ValueError(
                f"Provider type {provider_type.value} is not registered. "
                f"Registered providers: {', '.join(available) or 'none'}"
            )

        app_map = self._factories[provider_type](map_config)
        logger.info(f"Created new {provider_type.value} map")
        return app_map

    def next_provider(self, provider_type: ProviderType) -> ProviderType:
        """
        Provider registered after ``provider_type``, wrapping around.

        Raises:
            ValueError: If provider type is not registered
        """
        providers = self.registered_providers
        if provider_type not in providers:
            raise ValueError(f"Provider type {provider_type.value} is not registered")
        index = providers.index(provider_type)
        return providers[(index + 1) % len(providers)]

    def _get_default_provider_type(self) -> ProviderType:
        """
        Get the default provider type from settings configuration.

        Raises:
            ValueError: If no valid provider is configured
        """
        from .settings import get_settings
        settings = get_settings()
        return ProviderType.parse(settings.map_provider)

    @property
    def default_provider(self) -> ProviderType:
        """Provider selected by the MAP_PROVIDER setting."""
        return self._get_default_provider_type()


# Global provider manager instance
_global_manager: Optional[MapProviderManager] = None


def get_manager() -> MapProviderManager:
    """
    Get the global provider manager instance, with built-in providers registered.
    """
    global _global_manager
    if _global_manager is None:
        _global_manager = MapProviderManager()
        _register_built_in_providers(_global_manager)
    return _global_manager


def create_map(
    provider_type: Optional[ProviderType],
    map_config: MapConfig
) -> MapContainer:
    """
    Factory function to create a map.

    This is the main entry point for getting a map. It uses the global manager
    and, when ``provider_type`` is None, the provider from MAP_PROVIDER.

    Example:
        ```python
        config = MapConfig(
            container_handle="map",
            center=GeoPoint(latitude=14.6091, longitude=121.0223),
            zoom=12,
        )
        app_map = create_map(ProviderType.LAYER, config)
        marker = app_map.add_marker(MarkerConfig(position=config.center))
        ```
    """
    manager = get_manager()
    return manager.create_map(provider_type, map_config)


def _register_built_in_providers(manager: MapProviderManager):
    """
    Register all built-in map factories.

    Args:
        manager: Manager instance to register providers with
    """
    # Import providers here to avoid circular imports
    from .layer.provider import new_layer_map
    from .pin.provider import new_pin_map

    manager.register_provider(ProviderType.LAYER, new_layer_map)
    manager.register_provider(ProviderType.PIN, new_pin_map)

    logger.info("Finished registering built-in providers")
