#!/usr/bin/env python3
"""
Platform Registry for managing ephemeris engine adapters
Provides registration, discovery, and default selection by platform name
"""

import logging
import threading

from ..errors import UnsupportedPlatformError
from .engine_adapter import EngineAdapter

logger = logging.getLogger(__name__)


class AdapterRegistry:
    """
    Thread-safe registry for engine adapters
    One adapter per platform name ('native', 'wasm', 'react-native', ...)
    """

    def __init__(self):
        self._adapters: dict[str, EngineAdapter] = {}
        self._lock = threading.Lock()
        self._default_platform = "native"

    def register(self, adapter: EngineAdapter, force: bool = False) -> bool:
        """
        Register an engine adapter

        Args:
            adapter: EngineAdapter implementation
            force: If True, overwrite existing adapter

        Returns:
            True if registered successfully

        Raises:
            ValueError: If adapter already exists and force=False
            TypeError: If adapter does not implement EngineAdapter
        """
        if not isinstance(adapter, EngineAdapter):
            raise TypeError(
                f"{type(adapter).__name__} does not implement EngineAdapter protocol"
            )

        with self._lock:
            platform = adapter.platform

            if platform in self._adapters and not force:
                raise ValueError(
                    f"Platform '{platform}' already registered. Use force=True to override."
                )

            self._adapters[platform] = adapter
            logger.info(f"Registered engine adapter: {platform} v{adapter.version()}")
            return True

    def unregister(self, platform: str) -> bool:
        """
        Unregister an engine adapter

        Returns:
            True if unregistered, False if not found
        """
        with self._lock:
            if platform in self._adapters:
                del self._adapters[platform]
                logger.info(f"Unregistered engine adapter: {platform}")
                return True
            return False

    def get(self, platform: str) -> EngineAdapter | None:
        with self._lock:
            return self._adapters.get(platform)

    def get_or_default(self, platform: str | None = None) -> EngineAdapter:
        """
        Get an adapter by platform name, or the default one

        Raises:
            UnsupportedPlatformError: If neither is registered
        """
        name = platform or self._default_platform
        adapter = self.get(name)
        if adapter is None:
            raise UnsupportedPlatformError(
                f"No engine adapter registered for platform '{name}'. "
                f"Available: {self.list_platforms()}"
            )
        return adapter

    def list_platforms(self) -> list[str]:
        with self._lock:
            return list(self._adapters.keys())

    def set_default(self, platform: str):
        """
        Set the default platform

        Raises:
            ValueError: If platform not registered
        """
        if platform not in self._adapters:
            raise ValueError(f"Cannot set default to unregistered platform '{platform}'")
        self._default_platform = platform
        logger.info(f"Set default platform to: {platform}")

    @property
    def default_platform(self) -> str:
        return self._default_platform

    def get_all_metadata(self) -> dict[str, dict]:
        with self._lock:
            return {
                name: adapter.get_metadata() for name, adapter in self._adapters.items()
            }

    def clear(self):
        """Clear all registered adapters (use with caution)"""
        with self._lock:
            self._adapters.clear()
            self._default_platform = "native"
            logger.warning("Cleared all engine adapters from registry")


# Global registry instance
_registry = AdapterRegistry()


def register_adapter(adapter: EngineAdapter, force: bool = False) -> bool:
    """Register an adapter in the global registry"""
    return _registry.register(adapter, force)


def get_adapter(platform: str | None = None) -> EngineAdapter:
    """Get an adapter (or the default) from the global registry"""
    return _registry.get_or_default(platform)


def list_platforms() -> list[str]:
    """List all registered platforms in the global registry"""
    return _registry.list_platforms()


def get_registry() -> AdapterRegistry:
    """Get the global registry instance"""
    return _registry
