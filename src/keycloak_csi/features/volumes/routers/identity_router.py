"""Identity API router: plugin info, capabilities and readiness."""

from fastapi import APIRouter, Depends

from ..models import PluginCapabilitiesResponse, PluginInfoResponse, ProbeResponse
from ..services import NodeService
from .dependencies import get_node_service

router = APIRouter(prefix="/identity", tags=["Identity"])


@router.get("/plugin-info", response_model=PluginInfoResponse)
async def get_plugin_info(node_service: NodeService = Depends(get_node_service)):
    return node_service.get_plugin_info()


@router.get("/plugin-capabilities", response_model=PluginCapabilitiesResponse)
async def get_plugin_capabilities(node_service: NodeService = Depends(get_node_service)):
    return node_service.get_plugin_capabilities()


@router.get("/probe", response_model=ProbeResponse)
async def probe(node_service: NodeService = Depends(get_node_service)):
    return node_service.probe()
