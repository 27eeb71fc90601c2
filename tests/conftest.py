"""Pytest configuration and fixtures for keycloak-csi tests."""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional
from urllib.parse import parse_qs

import httpx
import pytest
import pytest_asyncio

from keycloak_csi.features.secrets import KeycloakSecretFetcher

TEST_REALM = "test-realm"
TEST_USERNAME = "test-username"
TEST_PASSWORD = "test-password"


class MockKeycloak:
    """In-memory stand-in for the Keycloak endpoints the driver calls.

    Records every request so tests can count token issuances and check
    which bearer token each admin call carried.
    """

    def __init__(
        self,
        realm: str = TEST_REALM,
        expires_in: int = 1,
        clients: Optional[Dict[str, List[str]]] = None,
        secrets: Optional[Dict[str, str]] = None,
        token_delay: float = 0.0,
    ):
        self.realm = realm
        self.expires_in = expires_in
        self.clients = clients if clients is not None else {"test-client-id": ["test-client-uuid"]}
        self.secrets = secrets if secrets is not None else {"test-client-uuid": "test-client-secret"}
        self.token_delay = token_delay

        # Overrides: (status, body) returned instead of the normal response
        self.token_failure: Optional[tuple] = None
        self.clients_failure: Optional[tuple] = None
        self.secret_failure: Optional[tuple] = None

        self.token_requests: List[httpx.Request] = []
        self.client_requests: List[httpx.Request] = []
        self.secret_requests: List[httpx.Request] = []

    @property
    def issued_tokens(self) -> int:
        return len(self.token_requests)

    def token_form(self, index: int = -1) -> Dict[str, str]:
        """Decode the form body of a recorded token request."""
        form = parse_qs(self.token_requests[index].content.decode())
        return {key: values[0] for key, values in form.items()}

    @staticmethod
    def bearer(request: httpx.Request) -> str:
        return request.headers.get("Authorization", "")

    async def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path

        if path.endswith(f"/realms/{self.realm}/protocol/openid-connect/token"):
            self.token_requests.append(request)
            if self.token_delay:
                await asyncio.sleep(self.token_delay)
            if self.token_failure:
                status, body = self.token_failure
                return httpx.Response(status, text=body)
            return httpx.Response(
                200,
                json={
                    "access_token": f"test-token-{self.issued_tokens}",
                    "expires_in": self.expires_in,
                },
            )

        if path.endswith(f"/admin/realms/{self.realm}/clients"):
            self.client_requests.append(request)
            if self.clients_failure:
                status, body = self.clients_failure
                return httpx.Response(status, text=body)
            name = request.url.params.get("clientId")
            return httpx.Response(
                200,
                json=[{"id": uuid, "clientId": name} for uuid in self.clients.get(name, [])],
            )

        if path.endswith("/client-secret") and f"/admin/realms/{self.realm}/clients/" in path:
            self.secret_requests.append(request)
            if self.secret_failure:
                status, body = self.secret_failure
                return httpx.Response(status, text=body)
            uuid = path.split("/")[-2]
            if uuid not in self.secrets:
                return httpx.Response(404, json={"error": "Could not find client"})
            return httpx.Response(200, json={"type": "secret", "value": self.secrets[uuid]})

        return httpx.Response(404, text=f"unexpected request {request.method} {request.url}")


class FakeClock:
    """Controllable UTC clock."""

    def __init__(self, start: Optional[datetime] = None):
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def password_file(tmp_path):
    """Operator password file."""
    path = tmp_path / "password"
    path.write_text(f"{TEST_PASSWORD}\n")
    return path


@pytest.fixture
def mock_keycloak():
    """Mock Keycloak server with one client and a 60 second token lifetime."""
    return MockKeycloak(expires_in=60)


@pytest.fixture
def clock():
    """Fake clock for token expiry."""
    return FakeClock()


@pytest_asyncio.fixture
async def http_client(mock_keycloak):
    """HTTP client routed to the mock Keycloak server."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(mock_keycloak.handler)) as client:
        yield client


@pytest.fixture
def fetcher(http_client, password_file, clock):
    """Secret fetcher wired to the mock Keycloak server."""
    return KeycloakSecretFetcher(
        server_url="http://keycloak.test/base",
        realm=TEST_REALM,
        username=TEST_USERNAME,
        password_path=str(password_file),
        timeout=5.0,
        http_client=http_client,
        clock=clock,
    )
