"""API v1 Router Aggregator.

Aggregates all v1 API endpoints into a single router.
"""

from fastapi import APIRouter

from portal.api.v1.endpoints import assets, content, content_types, folders, health, runtime_config

api_router = APIRouter()

# Mount endpoint routers
api_router.include_router(health.router, prefix="/health", tags=["Health"])
api_router.include_router(runtime_config.router, prefix="/runtime-config", tags=["Runtime config"])
api_router.include_router(folders.router, prefix="/space/{space_id}/folder", tags=["Content folder"])
api_router.include_router(content.router, prefix="/space/{space_id}/content", tags=["Content"])
api_router.include_router(content_types.router, prefix="/space/{space_id}/contenttype", tags=["Content type"])
api_router.include_router(assets.router, prefix="/space/{space_id}/asset", tags=["Asset"])
