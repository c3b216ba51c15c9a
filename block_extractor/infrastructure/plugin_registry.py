"""Plugin registry - discovers and loads store backends via entry points."""

from __future__ import annotations

import logging
from functools import lru_cache
from importlib.metadata import entry_points
from typing import TYPE_CHECKING

from ..exceptions import ConfigurationError

if TYPE_CHECKING:
    from ..application.ports.geometry_store import GeometryStore

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Registry for discovering and loading geometry store backends.

    Uses entry points for plugin discovery:
    - block_extractor.stores: GeometryStore implementations

    Host bindings can register their own store:

    [project.entry-points."block_extractor.stores"]
    my_cad = "my_package:MyCadStore"
    """

    STORE_GROUP = "block_extractor.stores"

    @classmethod
    @lru_cache(maxsize=1)
    def discover_stores(cls) -> dict[str, type]:
        """Discover all available store backends.

        Returns:
            Dict mapping backend names to classes
        """
        stores = {}

        for ep in entry_points(group=cls.STORE_GROUP):
            try:
                stores[ep.name] = ep.load()
                logger.debug(f"Discovered store backend: {ep.name}")
            except Exception as e:
                logger.warning(f"Failed to load store backend {ep.name}: {e}")

        # Always include built-in backends
        from ..adapters.store.memory_store import InMemoryGeometryStore
        stores["memory"] = InMemoryGeometryStore

        return stores

    @classmethod
    def create_store(cls, name: str, **kwargs) -> "GeometryStore":
        """Create store instance by name.

        Args:
            name: Backend name (e.g., 'memory')
            **kwargs: Constructor arguments

        Returns:
            GeometryStore instance

        Raises:
            ConfigurationError: If backend not found
        """
        stores = cls.discover_stores()

        if name not in stores:
            available = ", ".join(stores.keys())
            raise ConfigurationError(
                f"Unknown store backend: {name}. Available: {available}",
                config_key="store"
            )

        return stores[name](**kwargs)

    @classmethod
    def list_available_stores(cls) -> list[str]:
        """List available store backend names."""
        return list(cls.discover_stores().keys())
