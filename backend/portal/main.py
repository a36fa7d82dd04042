"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.v1.api import api_router
from .context import create_app_context
from .settings import Settings, settings as default_settings
from .utils import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Args:
        settings: Settings to run with (defaults to the environment's)

    Returns:
        The FastAPI app; its context is created on startup
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings)
        settings.validate_configuration()
        app.state.context = create_app_context(settings)
        logger.info(f"Portal API started on {settings.host}:{settings.port}")
        try:
            yield
        finally:
            app.state.context.close()
            logger.info("Portal API stopped")

    app = FastAPI(
        title="Content Portal API",
        description="Python backend for the content management portal",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(api_router, prefix="/api")

    @app.get("/")
    async def root():
        return {"status": "ok", "service": "Content Portal API", "version": "0.1.0"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "portal.main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
    )
