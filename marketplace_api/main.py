# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

# Local application imports
from .api.error_handlers import register_error_handlers
from .api.v1 import users_router
from .core.config import get_settings
from .core.logging_config import configure_logging
from .di.container import reset_container
from .infrastructure.db.mongo_connection import close_database
from .infrastructure.http_client_factory import close_shared_http_client

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.
    
    Connections are opened lazily on first use; shutdown closes the shared
    HTTP client and the MongoDB client.
    """
    logger.info("Marketplace API started")
    
    yield
    
    try:
        await close_shared_http_client()
    except Exception as e:
        logger.error(f"Error closing shared HTTP client: {e}", exc_info=True)
    
    close_database()
    reset_container()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.
    
    This function sets up the FastAPI application with:
    - Environment variable loading and logging
    - CORS middleware configuration
    - JSON error handlers
    - Static serving of uploaded product images
    - API route registration
    
    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    
    settings = get_settings()
    configure_logging(settings.log_level)
    
    application = FastAPI(
        title="Marketplace API",
        version="1.0.0",
        description="Users, authentication and favorites for the donation marketplace",
        lifespan=lifespan
    )
    
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    
    register_error_handlers(application)
    
    uploads_dir = Path(settings.uploads_dir)
    if uploads_dir.is_dir():
        application.mount("/uploads", StaticFiles(directory=str(uploads_dir)), name="uploads")
    else:
        logger.info(f"Uploads directory '{uploads_dir}' not found, static uploads disabled")
    
    @application.get("/api/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}
    
    application.include_router(users_router, prefix="/api/users")
    
    return application


# Create application instance
app = create_application()
