#!/usr/bin/env python3
"""
Shared OpenAPI helpers and reusable response docs.
"""

from __future__ import annotations

from typing import Any

# Documentation-only; the exception handlers in main return RFC 7807 JSON
DEFAULT_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    422: {"description": "Validation Error"},
    500: {"description": "Server Error"},
    502: {"description": "Ephemeris engine reported an error"},
    503: {"description": "Ephemeris engine not available"},
}
