"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from garage_api.config import get_settings
from garage_api.infrastructure.database import engine, Base
from garage_api.core.logging import configure_logging
from garage_api.core.middleware import setup_middleware
from garage_api.core.exceptions import AppError, app_error_handler, global_exception_handler

# Import all models so SQLAlchemy knows about them
from garage_api.domain.models.user import User
from garage_api.domain.models.garage_auth import GarageAuth

# Import routers
from garage_api.interfaces.api.employees import router as employees_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown events."""
    logger.info("Starting Garage API...", env=settings.ENVIRONMENT)

    # Create DB tables (dev only; use migrations in production)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")

    if settings.SEED_OWNER:
        from garage_api.infrastructure.database import SessionLocal
        from garage_api.infrastructure.repositories.user_repository import SQLAlchemyUserRepository
        from garage_api.infrastructure.repositories.garage_auth_repository import SQLAlchemyGarageAuthRepository
        from garage_api.application.services.employee_service import ensure_garage_owner
        db = SessionLocal()
        try:
            ensure_garage_owner(SQLAlchemyUserRepository(db, User), SQLAlchemyGarageAuthRepository(db, GarageAuth))
        finally:
            db.close()

    if settings.ORPHAN_SWEEP_ENABLED:
        from garage_api.scheduler.jobs import start_scheduler
        start_scheduler()

    yield

    if settings.ORPHAN_SWEEP_ENABLED:
        from garage_api.scheduler.jobs import stop_scheduler
        stop_scheduler()
    logger.info("Garage API stopped")


app = FastAPI(
    title="Garage API",
    description="Garage workshop back end — employee provisioning",
    version="1.0.0",
    lifespan=lifespan,
)

# Setup Middleware (Correlation ID, Logging)
setup_middleware(app)

# Global Exception Handling
app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(employees_router)


@app.get("/")
def root():
    return {
        "name": "Garage API",
        "version": "1.0.0",
        "status": "running",
        "docs": "/docs",
    }


@app.get("/health")
def health():
    return {"status": "healthy"}
