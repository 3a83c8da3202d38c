import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from event_planner.config.settings import Settings, get_settings
from event_planner.database import Database
from event_planner.errors import register_exception_handlers
from event_planner.logging_config import setup_logging
from event_planner.routers import auth, events, tasks, task_updates
from event_planner.utils.security import CredentialService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Event Planner API...")
    app.state.database.create_all()
    yield
    logger.info("Shutting down Event Planner API...")
    app.state.database.dispose()


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """Build the API with its own store handle and credential service.

    The ``Database`` lives for as long as the app: tables are created on
    startup and the engine is disposed on shutdown.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database or Database(settings.database_url, echo=settings.sql_echo)
    app.state.credentials = CredentialService(settings)

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Route registration
    app.include_router(auth.router, prefix="/auth", tags=["Authentication"])
    app.include_router(events.router, prefix="/events", tags=["Events"])
    app.include_router(tasks.router, prefix="/tasks", tags=["Tasks"])
    app.include_router(task_updates.router, prefix="/task-updates", tags=["Task Updates"])

    # Root route
    @app.get("/")
    def read_root():
        return {"message": "Event Planner API"}

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()
