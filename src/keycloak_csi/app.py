"""Keycloak CSI driver application.

FastAPI application exposing the node and identity services over HTTP.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .__version__ import __version__
from .config.settings import DriverSettings, get_settings
from .core.exceptions import (
    KeycloakCSIError,
    create_error_response,
    get_http_status_code,
)
from .core.protocols import ClientSecretGetter
from .features.secrets import KeycloakSecretFetcher
from .features.volumes import NodeService, identity_router, node_router

logger = logging.getLogger(__name__)


def create_secret_fetcher(settings: DriverSettings) -> KeycloakSecretFetcher:
    """Build the Keycloak secret fetcher from driver settings.

    Raises:
        KeycloakConfigurationError: If the Keycloak settings are incomplete
    """
    return KeycloakSecretFetcher(
        server_url=settings.keycloak_url,
        realm=settings.keycloak_realm,
        username=settings.keycloak_client_id,
        password_path=settings.keycloak_client_secret_file,
        timeout=settings.keycloak_timeout,
    )


async def handle_driver_error(request: Request, exc: KeycloakCSIError) -> JSONResponse:
    """Translate driver exceptions into structured error responses."""
    status_code = get_http_status_code(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=status_code, content=create_error_response(exc))


async def handle_timeout(request: Request, exc: TimeoutError) -> JSONResponse:
    """Report a request that ran past its deadline."""
    logger.error(f"{request.method} {request.url.path} timed out")
    return JSONResponse(
        status_code=get_http_status_code(exc),
        content={
            "error": {
                "code": "RequestTimeout",
                "message": "request deadline exceeded",
                "details": {},
                "type": exc.__class__.__name__,
            }
        },
    )


def create_app(
    settings: Optional[DriverSettings] = None,
    getter: Optional[ClientSecretGetter] = None,
) -> FastAPI:
    """Create the driver application.

    Args:
        settings: Driver settings (defaults to the environment)
        getter: Secret backend to use instead of building a Keycloak fetcher;
            the caller keeps ownership of it

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler."""
        fetcher = None
        secret_getter = getter
        if secret_getter is None:
            fetcher = create_secret_fetcher(settings)
            secret_getter = fetcher
            logger.info(f"Using Keycloak at {fetcher.server_url} (realm {fetcher.realm})")

        app.state.node_service = NodeService(
            secret_getter,
            node_id=settings.node_id,
            secret_file_mode=settings.secret_file_mode,
        )

        yield

        if fetcher is not None:
            await fetcher.aclose()

    app = FastAPI(
        title="Keycloak CSI Driver",
        version=__version__,
        description="Materializes Keycloak client secrets as volume files",
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_exception_handler(KeycloakCSIError, handle_driver_error)
    app.add_exception_handler(TimeoutError, handle_timeout)

    app.include_router(identity_router)
    app.include_router(node_router)

    return app
