"""
Runtime configuration for the pilot registry: settings objects and the
logging setup built from them.
"""

from .settings import (
    Settings,
    SimulationConfig,
    LogFormat,
    get_settings
)
from .logging_config import LoggingConfig

__all__ = [
    "Settings",
    "SimulationConfig",
    "LogFormat",
    "get_settings",
    "LoggingConfig"
]
