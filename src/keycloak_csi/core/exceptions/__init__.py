"""Exception hierarchy for keycloak-csi."""

from .base import (
    KeycloakCSIError,
    create_error_response,
    get_http_status_code,
)
from .domain import (
    ClientNotFoundError,
    ClientSecretEmptyError,
    ConfigurationError,
    MissingVolumeContextError,
    PreconditionFailedError,
    ValidationError,
)
from .infrastructure import (
    KeycloakConfigurationError,
    KeycloakConnectionError,
    KeycloakError,
    KeycloakRemoteError,
    KeycloakResponseError,
    KeycloakTimeoutError,
    KeycloakTokenError,
    VolumeError,
    VolumeFilesystemError,
)

__all__ = [
    # Base Exception
    "KeycloakCSIError",

    # Domain Exceptions
    "ConfigurationError",
    "ValidationError",
    "MissingVolumeContextError",
    "PreconditionFailedError",
    "ClientNotFoundError",
    "ClientSecretEmptyError",

    # Infrastructure Exceptions
    "KeycloakError",
    "KeycloakConfigurationError",
    "KeycloakConnectionError",
    "KeycloakTimeoutError",
    "KeycloakRemoteError",
    "KeycloakResponseError",
    "KeycloakTokenError",
    "VolumeError",
    "VolumeFilesystemError",

    # Utility Functions
    "get_http_status_code",
    "create_error_response",
]
