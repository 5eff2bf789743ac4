#!/usr/bin/env python3
"""
Exception taxonomy for vedasweph
Engine failures surface to the caller tagged with the operation and target
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .interfaces.engine_adapter import EngineFailure


class SwephError(Exception):
    """Base class for all vedasweph errors"""

    pass


class EngineError(SwephError):
    """An engine call reported an error; the whole computation is aborted"""

    def __init__(self, operation: str, target: str, detail: str = ""):
        self.operation = operation
        self.target = target
        self.detail = detail
        super().__init__(f"{operation} failed for {target}: {detail}")

    @classmethod
    def from_failure(cls, failure: EngineFailure) -> EngineError:
        return cls(failure.operation, failure.target, failure.message)

    def to_dict(self) -> dict[str, str]:
        return {
            "operation": self.operation,
            "target": self.target,
            "detail": self.detail,
        }


class EngineNotInitializedError(SwephError):
    """Raised when a calculation is attempted before engine initialization"""

    pass


class UnsupportedPlatformError(SwephError):
    """Raised when no adapter is registered for a platform name"""

    pass
