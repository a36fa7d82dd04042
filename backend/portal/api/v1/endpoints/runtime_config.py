"""Runtime configuration API endpoint."""

from fastapi import APIRouter, Depends

from portal.api.deps import get_app_context
from portal.context import AppContext
from portal.models.schemas import RuntimeConfigResponse

router = APIRouter()


@router.get("", response_model=RuntimeConfigResponse)
async def get_runtime_config(context: AppContext = Depends(get_app_context)) -> RuntimeConfigResponse:
    """Deployment settings the frontend reads at runtime.

    FOLDER_DELETE_MODE comes from the environment variable of the same
    name and defaults to DETACH.
    """
    return RuntimeConfigResponse(**context.runtime_config.to_wire())
