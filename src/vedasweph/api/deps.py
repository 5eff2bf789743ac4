#!/usr/bin/env python3
"""
FastAPI dependencies
"""

from ..calc.facade import SwephInstance, get_shared_instance


async def get_sweph() -> SwephInstance:
    """Shared facade instance; initialized on first request"""
    return await get_shared_instance()
