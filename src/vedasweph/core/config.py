#!/usr/bin/env python3
"""
Engine and service settings
Frozen configuration resolved from environment variables
"""

import logging
import os

from dataclasses import dataclass

from ..calc.constants import DEFAULT_AYANAMSA, AyanamsaType

logger = logging.getLogger(__name__)


def _env_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class SwephSettings:
    """Configuration for engine selection and calculation defaults."""

    # Engine
    platform: str = "native"
    ephe_path: str | None = None  # None -> engine's built-in ephemeris
    pre_warm: bool = False

    # Calculation defaults
    default_ayanamsa: int = int(DEFAULT_AYANAMSA)
    include_outer_planets: bool = False
    atmospheric_pressure: float = 0.0  # mbar; 0 lets the engine estimate
    atmospheric_temperature: float = 0.0  # Celsius
    sun_path_interval_minutes: int = 30

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    def __post_init__(self):
        if self.default_ayanamsa not in AyanamsaType._value2member_map_:
            raise ValueError(f"Unknown ayanamsa code: {self.default_ayanamsa}")
        if self.sun_path_interval_minutes <= 0:
            raise ValueError("sun_path_interval_minutes must be positive")

    @classmethod
    def from_env(cls, prefix: str = "SWEPH_") -> "SwephSettings":
        """Create settings from environment variables."""
        kwargs = {}

        env_mapping = {
            f"{prefix}PLATFORM": ("platform", str),
            f"{prefix}EPHE_PATH": ("ephe_path", str),
            f"{prefix}PRE_WARM": ("pre_warm", _env_bool),
            f"{prefix}DEFAULT_AYANAMSA": ("default_ayanamsa", int),
            f"{prefix}INCLUDE_OUTER": ("include_outer_planets", _env_bool),
            f"{prefix}PRESSURE": ("atmospheric_pressure", float),
            f"{prefix}TEMPERATURE": ("atmospheric_temperature", float),
            f"{prefix}SUN_PATH_INTERVAL": ("sun_path_interval_minutes", int),
            "LOG_LEVEL": ("log_level", str),
            "LOG_FORMAT": ("log_format", str),
        }

        for env_var, (field_name, field_type) in env_mapping.items():
            value = os.environ.get(env_var)
            if value is None or value == "":
                continue
            try:
                kwargs[field_name] = field_type(value)
                logger.debug(f"Set {field_name} = {kwargs[field_name]} from {env_var}")
            except (ValueError, TypeError) as e:
                logger.warning(f"Invalid value for {env_var}: {value} - {e}")

        if (
            "default_ayanamsa" in kwargs
            and kwargs["default_ayanamsa"] not in AyanamsaType._value2member_map_
        ):
            logger.warning(
                f"Unknown ayanamsa code {kwargs['default_ayanamsa']}; "
                f"falling back to {int(DEFAULT_AYANAMSA)}"
            )
            del kwargs["default_ayanamsa"]

        return cls(**kwargs)

    @classmethod
    def production(cls) -> "SwephSettings":
        """Production configuration."""
        return cls()

    @classmethod
    def testing(cls) -> "SwephSettings":
        """Testing configuration: plain-text logs at DEBUG."""
        return cls(log_level="DEBUG", log_format="text")


# Global settings instance
_settings: SwephSettings | None = None


def get_settings() -> SwephSettings:
    """Get the global settings, loading them from the environment once."""
    global _settings
    if _settings is None:
        _settings = SwephSettings.from_env()
    return _settings


def initialize_settings(settings: SwephSettings | None = None) -> SwephSettings:
    """
    Initialize the global settings.

    Args:
        settings: Optional settings to use. If None, reads the environment.

    Returns:
        The initialized settings
    """
    global _settings

    if _settings is not None:
        logger.warning("Settings already initialized")
        return _settings

    _settings = settings if settings is not None else SwephSettings.from_env()
    logger.info(f"Settings initialized: {_settings}")
    return _settings


def reset_settings():
    """Reset the global settings (for testing)."""
    global _settings
    _settings = None
    logger.debug("Settings reset")
