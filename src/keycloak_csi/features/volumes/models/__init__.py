"""Volume API models."""

from .requests import PublishVolumeRequest, UnpublishVolumeRequest
from .responses import (
    NodeCapabilitiesResponse,
    NodeInfoResponse,
    PluginCapabilitiesResponse,
    PluginCapability,
    PluginInfoResponse,
    ProbeResponse,
    VolumeOperationResponse,
)

__all__ = [
    # Requests
    "PublishVolumeRequest",
    "UnpublishVolumeRequest",

    # Responses
    "PluginCapability",
    "PluginInfoResponse",
    "PluginCapabilitiesResponse",
    "ProbeResponse",
    "NodeInfoResponse",
    "NodeCapabilitiesResponse",
    "VolumeOperationResponse",
]
