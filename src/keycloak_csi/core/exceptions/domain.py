"""Domain-specific exceptions for keycloak-csi.

Caller and configuration errors: problems that retrying will not fix.
"""

from typing import Optional

from .base import KeycloakCSIError


# Configuration Errors
class ConfigurationError(KeycloakCSIError):
    """Raised when driver configuration is invalid."""
    pass


# Validation Errors
class ValidationError(KeycloakCSIError):
    """Raised when request validation fails."""
    pass


class MissingVolumeContextError(ValidationError):
    """Raised when a required volume context field is missing."""

    def __init__(self, field: str, volume_id: Optional[str] = None):
        super().__init__(
            f"must specify {field} in the volume context",
            details={"field": field, "volume_id": volume_id},
        )
        self.field = field
        self.volume_id = volume_id


# Precondition Errors
class PreconditionFailedError(KeycloakCSIError):
    """Raised when the requested identity exists in a state that cannot be served.

    Signals a caller or realm misconfiguration rather than a transient fault.
    """
    pass


class ClientNotFoundError(PreconditionFailedError):
    """Raised when no client matches the requested client name."""

    def __init__(self, client_name: str, realm: Optional[str] = None):
        super().__init__(
            "clientID not found",
            details={"client_name": client_name, "realm": realm},
        )
        self.client_name = client_name
        self.realm = realm


class ClientSecretEmptyError(PreconditionFailedError):
    """Raised when the client exists but its secret is empty."""

    def __init__(self, client_uuid: str, realm: Optional[str] = None):
        super().__init__(
            "client secret is empty",
            details={"client_uuid": client_uuid, "realm": realm},
        )
        self.client_uuid = client_uuid
        self.realm = realm
