"""Base exceptions for keycloak-csi.

This module defines the base exception hierarchy for the driver.
All exceptions inherit from KeycloakCSIError and include error codes and details
used to build HTTP error responses.
"""

from typing import Any, Dict, Optional


class KeycloakCSIError(Exception):
    """Base exception for all keycloak-csi errors.

    All exceptions raised by the driver inherit from this base class
    and include structured error information for better debugging and API responses.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    from .http_mapping import get_http_status_code as get_mapped_status_code
    return get_mapped_status_code(exception)


def create_error_response(exception: KeycloakCSIError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The keycloak-csi exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }
