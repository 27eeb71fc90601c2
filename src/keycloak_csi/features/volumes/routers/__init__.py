"""Volume API routers."""

from .identity_router import router as identity_router
from .node_router import router as node_router

__all__ = ["identity_router", "node_router"]
