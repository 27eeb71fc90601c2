"""Volume and identity API response models."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field


class PluginCapability(str, Enum):
    """Plugin-level capabilities advertised to the orchestrator."""
    CONTROLLER_SERVICE = "CONTROLLER_SERVICE"


class PluginInfoResponse(BaseModel):
    """Plugin info response model."""

    name: str = Field(..., description="Plugin name")
    vendor_version: str = Field(..., description="Plugin version")


class PluginCapabilitiesResponse(BaseModel):
    """Plugin capabilities response model."""

    capabilities: List[PluginCapability] = Field(default_factory=list)


class ProbeResponse(BaseModel):
    """Readiness probe response model."""

    ready: bool = Field(..., description="Whether the plugin is ready to serve")


class NodeInfoResponse(BaseModel):
    """Node info response model."""

    node_id: str = Field(..., description="Identifier of the node running the driver")


class NodeCapabilitiesResponse(BaseModel):
    """Node capabilities response model."""

    capabilities: List[str] = Field(default_factory=list, description="Node capabilities; the driver advertises none")


class VolumeOperationResponse(BaseModel):
    """Publish/unpublish response model."""

    volume_id: str = Field(..., description="Volume the operation applied to")
