"""
User Tasks API - Main Application

User registration, login and per-user task management over MongoDB.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from usertasks.config import Settings, settings
from usertasks.database import Database
from usertasks.errors import register_exception_handlers
from usertasks.auth import auth_router
from usertasks.tasks import tasks_router
from usertasks.security import validate_security_config

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    validate_security_config(app.state.settings)

    database: Database = app.state.database
    await database.connect()
    await database.ensure_indexes()

    yield

    await database.disconnect()
    logger.info("Disconnected from MongoDB")


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the application with its own database handle."""
    app = FastAPI(
        title=app_settings.APP_NAME,
        version=app_settings.APP_VERSION,
        description="API documentation for user management",
        docs_url="/api-docs",
        redoc_url="/redoc",
        openapi_tags=[
            {"name": "Users", "description": "Operations related to users management"},
            {"name": "Users Operations", "description": "Login and task operations"},
        ],
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.database = Database(app_settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    register_exception_handlers(app)

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict:
        """
        Health check endpoint.

        Returns the service status and version information.
        """
        return {
            "status": "healthy",
            "service": app_settings.APP_NAME,
            "version": app_settings.APP_VERSION,
        }

    @app.get("/", tags=["Root"])
    async def root() -> dict:
        """Root endpoint with service information."""
        return {
            "service": app_settings.APP_NAME,
            "version": app_settings.APP_VERSION,
            "docs": "/api-docs",
        }

    app.include_router(auth_router)
    app.include_router(tasks_router)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    logger.info(f"Server is running on port {settings.PORT}")
    uvicorn.run(
        "usertasks.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
