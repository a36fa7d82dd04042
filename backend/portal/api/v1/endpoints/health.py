"""Health check API endpoint."""

from fastapi import APIRouter, Depends

from portal.api.deps import get_app_context
from portal.context import AppContext
from portal.db.session import check_connection

router = APIRouter(tags=["Health"])


@router.get("")
async def health_check(context: AppContext = Depends(get_app_context)):
    """Health check endpoint."""
    database = "ok" if check_connection(context.engine) else "unavailable"
    return {"status": "healthy", "database": database}
