"""Keycloak CSI driver entry point."""

import os

import uvicorn

from .app import create_app
from .config.logging_config import get_logger, setup_logging
from .config.settings import get_settings

logger = get_logger(__name__)


def remove_stale_socket(path: str) -> None:
    """Remove a socket file left behind by a previous run."""
    if os.path.lexists(path):
        os.remove(path)
        logger.info(f"Removed stale socket {path}")


def main() -> None:
    """Run the driver."""
    setup_logging()

    settings = get_settings()

    app = create_app(settings)

    if settings.uses_unix_socket:
        remove_stale_socket(settings.uds_path)
        logger.info(f"Starting Keycloak CSI driver on unix socket {settings.uds_path}")
        uvicorn.run(app, uds=settings.uds_path, log_config=None)
    else:
        host = settings.host or "127.0.0.1"
        logger.info(f"Starting Keycloak CSI driver on {host}:{settings.port}")
        uvicorn.run(app, host=host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
