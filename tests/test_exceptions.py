"""Tests for the exception hierarchy and its HTTP mapping."""

import pytest

from keycloak_csi.core.exceptions import (
    ClientNotFoundError,
    ClientSecretEmptyError,
    ConfigurationError,
    KeycloakConfigurationError,
    KeycloakConnectionError,
    KeycloakCSIError,
    KeycloakRemoteError,
    KeycloakResponseError,
    KeycloakTimeoutError,
    KeycloakTokenError,
    MissingVolumeContextError,
    VolumeFilesystemError,
    create_error_response,
    get_http_status_code,
)


@pytest.mark.parametrize(
    "exception, status_code",
    [
        (MissingVolumeContextError("clientID"), 400),
        (ClientNotFoundError("name"), 412),
        (ClientSecretEmptyError("uuid"), 412),
        (KeycloakConfigurationError("keycloak URL is required"), 500),
        (VolumeFilesystemError("writing secret: denied"), 500),
        (KeycloakCSIError("unexpected"), 500),
        (KeycloakRemoteError(503, "unavailable"), 502),
        (KeycloakResponseError("bad json"), 502),
        (KeycloakTokenError("reading password file: gone"), 502),
        (KeycloakConnectionError("refused"), 502),
        (KeycloakTimeoutError("timed out"), 504),
        (TimeoutError(), 504),
        (RuntimeError("boom"), 500),
    ],
)
def test_http_status_code(exception, status_code):
    assert get_http_status_code(exception) == status_code


def test_keycloak_error_prefixes_step():
    error = KeycloakRemoteError(401, "denied", step="refreshing access token")

    assert str(error) == "refreshing access token: server error status 401: denied"
    assert error.details == {"status_code": 401, "step": "refreshing access token"}


def test_configuration_error_is_not_a_keycloak_error():
    assert isinstance(KeycloakConfigurationError("x"), ConfigurationError)
    assert get_http_status_code(KeycloakConfigurationError("x")) == 500


def test_create_error_response():
    response = create_error_response(ClientNotFoundError("my-app", realm="apps"))

    assert response == {
        "error": {
            "code": "ClientNotFoundError",
            "message": "clientID not found",
            "details": {"client_name": "my-app", "realm": "apps"},
            "type": "ClientNotFoundError",
        }
    }
