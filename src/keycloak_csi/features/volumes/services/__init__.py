"""Volume services."""

from .node_service import (
    CLIENT_ID_CONTEXT_KEY,
    CLIENT_ID_FILE,
    CLIENT_SECRET_FILE,
    PLUGIN_NAME,
    NodeService,
)

__all__ = [
    "NodeService",
    "PLUGIN_NAME",
    "CLIENT_ID_CONTEXT_KEY",
    "CLIENT_ID_FILE",
    "CLIENT_SECRET_FILE",
]
