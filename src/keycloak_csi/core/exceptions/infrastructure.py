"""Infrastructure-specific exceptions for keycloak-csi.

This module defines exceptions related to external systems:
the Keycloak server and the node filesystem.
"""

from typing import Optional

from .base import KeycloakCSIError
from .domain import ConfigurationError


# Keycloak Errors
class KeycloakError(KeycloakCSIError):
    """Base class for Keycloak-related errors.

    Carries the step that failed so the cause can be diagnosed
    without the response content.
    """

    def __init__(self, message: str, step: Optional[str] = None, **kwargs):
        if step:
            message = f"{step}: {message}"
        details = kwargs.pop("details", None) or {}
        details.setdefault("step", step)
        super().__init__(message, details=details, **kwargs)
        self.step = step


class KeycloakConfigurationError(ConfigurationError):
    """Raised when Keycloak configuration is invalid."""
    pass


class KeycloakConnectionError(KeycloakError):
    """Raised when Keycloak cannot be reached."""
    pass


class KeycloakTimeoutError(KeycloakConnectionError):
    """Raised when a Keycloak request exceeds its timeout."""
    pass


class KeycloakRemoteError(KeycloakError):
    """Raised when Keycloak answers with a non-success status."""

    def __init__(self, status_code: int, body: str = "", step: Optional[str] = None):
        super().__init__(
            f"server error status {status_code}: {body}",
            step=step,
            details={"status_code": status_code},
        )
        self.status_code = status_code
        self.body = body


class KeycloakResponseError(KeycloakError):
    """Raised when a Keycloak response cannot be decoded."""
    pass


class KeycloakTokenError(KeycloakError):
    """Raised when the admin access token cannot be refreshed."""
    pass


# Volume Errors
class VolumeError(KeycloakCSIError):
    """Base class for volume materialization errors."""
    pass


class VolumeFilesystemError(VolumeError):
    """Raised when creating, writing or removing volume files fails."""

    def __init__(self, message: str, volume_id: Optional[str] = None, path: Optional[str] = None):
        super().__init__(message, details={"volume_id": volume_id, "path": path})
        self.volume_id = volume_id
        self.path = path
