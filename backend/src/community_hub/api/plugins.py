"""Plugin API endpoints.

Plugins are listed best-rated first; creating one also creates any tags it
names that do not exist yet and links them to the plugin.
"""

import logging

from fastapi import APIRouter, Depends

from ..core.exceptions import HubException
from ..core.response import HubResponse
from ..schemas.plugin import PluginCreate, PluginCreated, PluginResponse
from ..services.plugin_service import PluginService
from .dependencies import get_plugin_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/plugins", tags=["plugins"])


@router.get(
    "",
    response_model=list[PluginResponse],
    summary="List plugins",
    description="List all plugins ordered by rating (highest first), then name.",
)
async def list_plugins(service: PluginService = Depends(get_plugin_service)):
    try:
        plugins = await service.list_plugins()
        logger.debug(f"Listed {len(plugins)} plugins")
        return HubResponse.success(plugins)
    except HubException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing plugins: {e}")
        return HubResponse.error("Failed to fetch plugins", status_code=500)


@router.post(
    "",
    response_model=PluginCreated,
    status_code=201,
    summary="Create a plugin",
    description="Create a plugin and attach the given tags, creating tags that do not exist yet.",
)
async def create_plugin(plugin_data: PluginCreate, service: PluginService = Depends(get_plugin_service)):
    try:
        created = await service.create_plugin(plugin_data)
        return HubResponse.created(created)
    except HubException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error creating plugin: {e}")
        return HubResponse.error("Failed to add plugin", status_code=500)
