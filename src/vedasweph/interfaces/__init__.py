#!/usr/bin/env python3
"""
Multi-platform engine architecture for vedasweph
Pluggable adapters for native, WebAssembly and mobile-bridge ephemeris engines
"""

from .engine_adapter import (
    AzAlt,
    BaseEngineAdapter,
    EngineAdapter,
    EngineFailure,
    RawPosition,
    RiseTransitResult,
)
from .registry import AdapterRegistry, get_adapter, get_registry, register_adapter

__all__ = [
    "AdapterRegistry",
    "AzAlt",
    "BaseEngineAdapter",
    "EngineAdapter",
    "EngineFailure",
    "RawPosition",
    "RiseTransitResult",
    "get_adapter",
    "get_registry",
    "register_adapter",
]
