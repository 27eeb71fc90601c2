"""Configuration for keycloak-csi."""

from .logging_config import JsonFormatter, LoggingConfig, get_logger, setup_logging
from .settings import DriverSettings, get_settings

__all__ = [
    "DriverSettings",
    "get_settings",
    "LoggingConfig",
    "JsonFormatter",
    "get_logger",
    "setup_logging",
]
