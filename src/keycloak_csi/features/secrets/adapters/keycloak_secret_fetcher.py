"""Keycloak client secret fetcher.

Resolves a client name to its confidential secret through the Keycloak
admin REST API, using a single cached admin access token.
"""

import asyncio
import logging
import os
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from ....core.exceptions import (
    ClientNotFoundError,
    ClientSecretEmptyError,
    KeycloakConfigurationError,
    KeycloakConnectionError,
    KeycloakRemoteError,
    KeycloakResponseError,
    KeycloakTimeoutError,
    KeycloakTokenError,
)
from ..entities import AccessToken
from ..models import ClientRepresentation, ClientSecretResponse, TokenResponse

logger = logging.getLogger(__name__)

STEP_REFRESH_TOKEN = "refreshing access token"
STEP_RESOLVE_CLIENT = "resolving client ID"
STEP_FETCH_SECRET = "fetching client secret"

# Maximum number of response body characters carried in error messages
MAX_ERROR_BODY_LENGTH = 256

_CLIENT_LIST_ADAPTER = TypeAdapter(List[ClientRepresentation])


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _truncate(text: str, limit: int = MAX_ERROR_BODY_LENGTH) -> str:
    if len(text) <= limit:
        return text
    return f"{text[:limit]}... ({len(text) - limit} more characters)"


class KeycloakSecretFetcher:
    """Fetches client secrets from the Keycloak admin API.

    Authenticates as an operator user with the password grant. The resulting
    admin token is cached and shared by all concurrent callers; it is refreshed
    under a lock once 75% of its reported lifetime has passed, so at most one
    refresh is ever in flight.

    The operator password is re-read from ``password_path`` on every refresh,
    which lets the file be rotated without restarting the driver.
    """

    def __init__(
        self,
        server_url: str,
        realm: str,
        username: str,
        password_path: str,
        timeout: float = 10.0,
        admin_client_id: str = "admin-cli",
        http_client: Optional[httpx.AsyncClient] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the fetcher.

        Args:
            server_url: Keycloak base URL, including any path prefix
            realm: Realm holding both the operator user and the clients
            username: Operator username used for the password grant
            password_path: File holding the operator password
            timeout: Timeout for each Keycloak request in seconds
            admin_client_id: Public client used to request admin tokens
            http_client: Optional preconfigured HTTP client (not closed by the fetcher)
            clock: Optional source of the current UTC time

        Raises:
            KeycloakConfigurationError: If a required setting is missing
        """
        if not server_url:
            raise KeycloakConfigurationError("keycloak URL is required")
        if not username:
            raise KeycloakConfigurationError("keycloak username is required")
        if not password_path or not os.path.exists(password_path):
            raise KeycloakConfigurationError(
                "keycloak password file does not exist",
                details={"password_path": password_path},
            )

        self.server_url = server_url.rstrip("/")
        self.realm = realm
        self.username = username
        self.password_path = password_path
        self.timeout = timeout
        self.admin_client_id = admin_client_id

        self._owns_http_client = http_client is None
        self._http_client = http_client or httpx.AsyncClient(timeout=timeout)
        self._clock = clock or _utcnow

        self._token_lock = asyncio.Lock()
        self._access_token: Optional[AccessToken] = None

    @property
    def token_url(self) -> str:
        """Get the token URL for the realm."""
        return f"{self.server_url}/realms/{self.realm}/protocol/openid-connect/token"

    @property
    def admin_url(self) -> str:
        """Get the admin API URL for the realm."""
        return f"{self.server_url}/admin/realms/{self.realm}"

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if the fetcher created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def fetch(self, client_name: str) -> bytes:
        """Fetch the secret of the client registered under ``client_name``.

        Args:
            client_name: Human-readable client name (Keycloak ``clientId``)

        Returns:
            Raw secret bytes

        Raises:
            ClientNotFoundError: If no client has that name
            ClientSecretEmptyError: If the client's secret is empty
            KeycloakError: If any Keycloak request fails
        """
        start = time.perf_counter()
        try:
            client_uuid = await self._find_client_uuid(client_name)
            return await self._get_client_secret(client_uuid)
        finally:
            elapsed_ms = int((time.perf_counter() - start) * 1000)
            logger.info(f"finished fetching client secret for {client_name} in {elapsed_ms}ms")

    async def _find_client_uuid(self, client_name: str) -> str:
        """Map a client name to the internal UUID needed to read its secret.

        Most callers refer to the client name as its "client ID"; Keycloak
        addresses the secret by the internal UUID instead.
        """
        token = await self._get_access_token()

        response = await self._request(
            "GET",
            f"{self.admin_url}/clients",
            step=STEP_RESOLVE_CLIENT,
            params={"clientId": client_name},
            headers=self._auth_headers(token),
        )

        try:
            clients = _CLIENT_LIST_ADAPTER.validate_json(response.content)
        except ValidationError as e:
            raise KeycloakResponseError(
                f"could not decode client list ({e.error_count()} errors)",
                step=STEP_RESOLVE_CLIENT,
            ) from e

        if not clients:
            raise ClientNotFoundError(client_name, realm=self.realm)

        if len(clients) > 1:
            logger.warning(
                f"{len(clients)} clients match {client_name} in realm {self.realm}, using {clients[0].id}"
            )

        return clients[0].id

    async def _get_client_secret(self, client_uuid: str) -> bytes:
        token = await self._get_access_token()

        response = await self._request(
            "GET",
            f"{self.admin_url}/clients/{quote(client_uuid, safe='')}/client-secret",
            step=STEP_FETCH_SECRET,
            headers=self._auth_headers(token),
            include_body=False,
        )

        try:
            body = ClientSecretResponse.model_validate_json(response.content)
        except ValidationError:
            # The validation error echoes the payload, which may hold the secret
            raise KeycloakResponseError(
                "could not decode client secret response",
                step=STEP_FETCH_SECRET,
            ) from None

        if not body.value:
            raise ClientSecretEmptyError(client_uuid, realm=self.realm)

        return body.value.encode("utf-8")

    async def _get_access_token(self) -> str:
        """Return a valid admin token, refreshing it first if it has expired.

        The lock is held across the refresh, so concurrent callers wait for
        the single in-flight refresh instead of starting their own.
        """
        async with self._token_lock:
            token = self._access_token
            if token is None or token.is_expired(self._clock()):
                token = await self._refresh_access_token_unlocked()
            return token.value

    async def _refresh_access_token_unlocked(self) -> AccessToken:
        """Request a new admin token. Caller must hold ``_token_lock``.

        The cached token is only replaced once the new one is fully decoded;
        on failure it is left as it was.
        """
        try:
            password_text = await asyncio.to_thread(Path(self.password_path).read_text, encoding="utf-8")
        except OSError as e:
            raise KeycloakTokenError(
                f"reading password file: {e.strerror or e}",
                step=STEP_REFRESH_TOKEN,
            ) from e
        password = password_text.strip()

        response = await self._request(
            "POST",
            self.token_url,
            step=STEP_REFRESH_TOKEN,
            data={
                "grant_type": "password",
                "username": self.username,
                "password": password,
                "client_id": self.admin_client_id,
            },
        )

        try:
            body = TokenResponse.model_validate_json(response.content)
        except ValidationError:
            raise KeycloakTokenError(
                "could not decode token response",
                step=STEP_REFRESH_TOKEN,
            ) from None

        token = AccessToken.issued(body.access_token, body.expires_in, self._clock())
        self._access_token = token
        logger.info(f"refreshed keycloak token (expires in {body.expires_in}s)")
        return token

    async def _request(
        self,
        method: str,
        url: str,
        *,
        step: str,
        include_body: bool = True,
        **kwargs,
    ) -> httpx.Response:
        """Send a request and reject any status of 300 or above.

        Raises:
            KeycloakTimeoutError: If the request times out
            KeycloakConnectionError: If the request cannot be sent
            KeycloakRemoteError: If Keycloak answers with status >= 300
        """
        try:
            response = await self._http_client.request(method, url, timeout=self.timeout, **kwargs)
        except httpx.TimeoutException as e:
            raise KeycloakTimeoutError(
                f"request timed out after {self.timeout}s",
                step=step,
            ) from e
        except httpx.HTTPError as e:
            raise KeycloakConnectionError(
                f"{e.__class__.__name__}: {e}",
                step=step,
            ) from e

        if response.status_code >= 300:
            body = _truncate(response.text) if include_body else "<redacted>"
            raise KeycloakRemoteError(response.status_code, body, step=step)

        return response

    @staticmethod
    def _auth_headers(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}
