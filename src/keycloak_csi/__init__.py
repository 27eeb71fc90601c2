"""Keycloak CSI - credential-delivery driver for Keycloak client secrets.

Resolves a Keycloak client name to the client's secret and materializes it
as files in a volume target path.
"""

from .__version__ import __version__

from .config import (
    DriverSettings,
    LoggingConfig,
    get_settings,
    setup_logging,
)

from .core import ClientSecretGetter

from .core.exceptions import (
    # Base Exception
    KeycloakCSIError,

    # Common Exceptions
    ConfigurationError,
    ValidationError,
    MissingVolumeContextError,
    PreconditionFailedError,
    ClientNotFoundError,
    ClientSecretEmptyError,
    KeycloakError,
    KeycloakConfigurationError,
    KeycloakConnectionError,
    KeycloakTimeoutError,
    KeycloakRemoteError,
    KeycloakResponseError,
    KeycloakTokenError,
    VolumeError,
    VolumeFilesystemError,
)

from .features.secrets import KeycloakSecretFetcher
from .features.volumes import NodeService

__all__ = [
    "__version__",

    # Configuration
    "DriverSettings",
    "LoggingConfig",
    "get_settings",
    "setup_logging",

    # Protocols
    "ClientSecretGetter",

    # Exceptions
    "KeycloakCSIError",
    "ConfigurationError",
    "ValidationError",
    "MissingVolumeContextError",
    "PreconditionFailedError",
    "ClientNotFoundError",
    "ClientSecretEmptyError",
    "KeycloakError",
    "KeycloakConfigurationError",
    "KeycloakConnectionError",
    "KeycloakTimeoutError",
    "KeycloakRemoteError",
    "KeycloakResponseError",
    "KeycloakTokenError",
    "VolumeError",
    "VolumeFilesystemError",

    # Services
    "KeycloakSecretFetcher",
    "NodeService",
]
