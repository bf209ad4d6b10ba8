# Standard library imports
from contextlib import asynccontextmanager
from pathlib import Path
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

# Local application imports
from .api.v1 import item_router
from .core.config import get_settings
from .core.logging_config import configure_logging
from .infrastructure.db.mongo_connection import close_database
from .infrastructure.http_client_factory import close_shared_http_client
from .utils.datetime_utils import to_iso, utc_now

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Connections are opened lazily on first use; shutdown closes the shared
    HTTP client and the MongoDB client.
    """
    logger.info("Gift registry API started")

    yield

    await close_shared_http_client()
    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS middleware configuration
    - API route registration and the uploaded photo mount

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    configure_logging()
    settings = get_settings()

    application = FastAPI(
        title="Gift Registry API",
        version="1.0.0",
        description="Photo-tagged gift inventory with conversational search",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(item_router, prefix="/api/v1/items")

    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    application.mount("/uploads", StaticFiles(directory=str(upload_dir)), name="uploads")

    @application.get("/health")
    async def health_check():
        """Liveness probe"""
        return {"status": "ok", "message": "Gift registry API is running", "time": to_iso(utc_now())}

    return application


app = create_application()
