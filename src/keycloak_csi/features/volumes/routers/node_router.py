"""Node API router: volume publish/unpublish and node queries."""

import asyncio

from fastapi import APIRouter, Depends

from ....config.settings import DriverSettings
from ..models import (
    NodeCapabilitiesResponse,
    NodeInfoResponse,
    PublishVolumeRequest,
    UnpublishVolumeRequest,
    VolumeOperationResponse,
)
from ..services import NodeService
from .dependencies import get_driver_settings, get_node_service


router = APIRouter(prefix="/node", tags=["Node"])


@router.post("/volumes/{volume_id}/publish", response_model=VolumeOperationResponse)
async def publish_volume(
    volume_id: str,
    request: PublishVolumeRequest,
    node_service: NodeService = Depends(get_node_service),
    settings: DriverSettings = Depends(get_driver_settings),
):
    """Fetch the client secret named in the volume context and write it to the target path."""
    async with asyncio.timeout(settings.request_timeout):
        await node_service.publish(volume_id, request.target_path, request.volume_context)
    return VolumeOperationResponse(volume_id=volume_id)


@router.post("/volumes/{volume_id}/unpublish", response_model=VolumeOperationResponse)
async def unpublish_volume(
    volume_id: str,
    request: UnpublishVolumeRequest,
    node_service: NodeService = Depends(get_node_service),
    settings: DriverSettings = Depends(get_driver_settings),
):
    """Remove the credential files from the target path."""
    async with asyncio.timeout(settings.request_timeout):
        await node_service.unpublish(volume_id, request.target_path)
    return VolumeOperationResponse(volume_id=volume_id)


@router.get("/info", response_model=NodeInfoResponse)
async def get_node_info(node_service: NodeService = Depends(get_node_service)):
    return node_service.get_node_info()


@router.get("/capabilities", response_model=NodeCapabilitiesResponse)
async def get_node_capabilities(node_service: NodeService = Depends(get_node_service)):
    return node_service.get_node_capabilities()
