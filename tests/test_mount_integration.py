"""End-to-end publish/unpublish against a mock Keycloak server."""

import os

import pytest

from keycloak_csi.core.exceptions import ClientNotFoundError
from keycloak_csi.features.secrets import KeycloakSecretFetcher
from keycloak_csi.features.volumes import NodeService

TEST_REALM = "test-realm"
TEST_USERNAME = "test-username"


@pytest.mark.asyncio
async def test_publish_then_unpublish(http_client, mock_keycloak, password_file, tmp_path):
    mock_keycloak.expires_in = 1
    target_path = str(tmp_path / "target")

    fetcher = KeycloakSecretFetcher(
        server_url="http://keycloak.test",
        realm=TEST_REALM,
        username=TEST_USERNAME,
        password_path=str(password_file),
        http_client=http_client,
    )
    service = NodeService(fetcher, node_id="node-1")

    await service.publish("test-volume-id", target_path, {"clientID": "test-client-id"})

    with open(os.path.join(target_path, "client-id"), "rb") as f:
        assert f.read() == b"test-client-id"
    with open(os.path.join(target_path, "client-secret"), "rb") as f:
        assert f.read() == b"test-client-secret"
    assert mock_keycloak.bearer(mock_keycloak.client_requests[0]) == "Bearer test-token-1"

    await service.unpublish("test-volume-id", target_path)

    assert not os.path.exists(os.path.join(target_path, "client-id"))
    assert not os.path.exists(os.path.join(target_path, "client-secret"))


@pytest.mark.asyncio
async def test_publish_unknown_client_writes_nothing(http_client, mock_keycloak, password_file, tmp_path):
    target_path = str(tmp_path / "target")
    fetcher = KeycloakSecretFetcher(
        server_url="http://keycloak.test",
        realm=TEST_REALM,
        username=TEST_USERNAME,
        password_path=str(password_file),
        http_client=http_client,
    )
    service = NodeService(fetcher)

    with pytest.raises(ClientNotFoundError):
        await service.publish("test-volume-id", target_path, {"clientID": "missing-client"})

    assert not os.path.exists(target_path)
