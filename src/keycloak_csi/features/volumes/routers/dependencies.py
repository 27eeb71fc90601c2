"""Dependency helpers for the volume routers."""

from fastapi import HTTPException, Request, status

from ....config.settings import DriverSettings
from ..services import NodeService


def get_node_service(request: Request) -> NodeService:
    """Get the node service installed by the application lifespan."""
    node_service = getattr(request.app.state, "node_service", None)
    if node_service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Node service not configured"
        )
    return node_service


def get_driver_settings(request: Request) -> DriverSettings:
    """Get the settings the application was created with."""
    return request.app.state.settings
