"""HTTP status code mapping for exceptions."""

from typing import Dict, Type

from .base import KeycloakCSIError
from .domain import (
    ConfigurationError,
    MissingVolumeContextError,
    PreconditionFailedError,
    ValidationError,
)
from .infrastructure import (
    KeycloakConnectionError,
    KeycloakError,
    KeycloakTimeoutError,
    VolumeError,
)


# Lookup walks the exception MRO, so a subclass entry wins over its base.
HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,
    MissingVolumeContextError: 400,

    # 412 Precondition Failed
    PreconditionFailedError: 412,

    # 500 Internal Server Error
    ConfigurationError: 500,
    VolumeError: 500,

    # 502 Bad Gateway
    KeycloakError: 502,
    KeycloakConnectionError: 502,

    # 504 Gateway Timeout
    KeycloakTimeoutError: 504,
    TimeoutError: 504,

    # Default for KeycloakCSIError
    KeycloakCSIError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for an exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code of the closest mapped class, 500 otherwise
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
