"""Volumes feature: publish/unpublish of credential volumes.

Exports the node service and the FastAPI routers that expose it.
"""

from .routers import identity_router, node_router
from .services import NodeService

__all__ = [
    "NodeService",
    "identity_router",
    "node_router",
]
