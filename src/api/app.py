"""FastAPI host for the chat page.

NiceGUI mounts its page on this app (see ``src.main``). The only route of
our own is the health check; schema and docs routes are switched off.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src import __version__
from src.tutor.config import get_tutor_settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Validate tutor settings on startup and log the lifecycle.

    Raises:
        ValidationError: If tutor settings in the environment are malformed.
    """
    settings = get_tutor_settings()
    logger.info(f"Starting Socratica with model {settings.model_name}")
    if not settings.api_key:
        logger.warning("GEMINI_API_KEY is not set; tutor calls will fail")
    yield
    logger.info("Shutting down Socratica")


def create_app() -> FastAPI:
    """Create the host application.

    Returns:
        FastAPI app exposing only ``/health``.
    """
    application = FastAPI(
        title="Socratica",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "socratica"}

    return application


app = create_app()
