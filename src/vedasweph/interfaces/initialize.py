#!/usr/bin/env python3
"""
Initialize and register available engine adapters
Called on first facade creation and during API startup
"""

import logging

from .registry import get_registry

logger = logging.getLogger(__name__)


def initialize_platforms() -> dict[str, bool]:
    """
    Register every engine adapter that can be loaded in this process

    Already-registered platforms are left untouched.

    Returns:
        Dict of platform name to registration status
    """
    registry = get_registry()
    results = {}

    if registry.get("native") is not None:
        results["native"] = True
    else:
        try:
            from .swe_native import NativeSwissAdapter

            registry.register(NativeSwissAdapter())
            results["native"] = True
            logger.info("Native Swiss Ephemeris adapter registered successfully")
        except ImportError as e:
            logger.error(f"Failed to register native adapter: {e}")
            results["native"] = False

    if results.get("native"):
        registry.set_default("native")

    registered = [k for k, v in results.items() if v]
    logger.info(f"Platform initialization complete. Registered: {registered}")

    return results


def get_platform_status() -> dict:
    """
    Get status of all registered platforms

    Returns:
        Dict with platform information
    """
    registry = get_registry()
    platforms = registry.list_platforms()

    return {
        "registered_platforms": platforms,
        "default_platform": registry.default_platform,
        "total_platforms": len(platforms),
        "metadata": registry.get_all_metadata(),
    }
