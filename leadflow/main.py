"""
LeadFlow Backend - FastAPI Application
Main entry point with all routes configured.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from sqlalchemy.exc import SQLAlchemyError

from leadflow.config import settings
from leadflow.database import init_db, async_session
from leadflow.core.exceptions import LeadFlowException, ValidationError
from leadflow.core.logging_config import configure_logging
from leadflow.schemas.common import HealthResponse
from leadflow.middleware.request_logging import RequestLoggingMiddleware
from leadflow.services.seed_service import seed_demo_data

# Import all API routers
from leadflow.api import auth, leads, opportunities, dashboard

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    # Startup
    await init_db()
    if settings.SEED_DEMO_DATA:
        async with async_session() as session:
            await seed_demo_data(session)
    logger.info("LeadFlow API started")
    yield
    # Shutdown


async def leadflow_exception_handler(request: Request, exc: LeadFlowException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=exc.headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Report the first failing field the way ValidationError formats it
    errors = exc.errors()
    field = None
    message = "Validation failed"
    if errors:
        loc = [str(part) for part in errors[0].get("loc", ()) if part != "body"]
        field = ".".join(loc) or None
        message = errors[0].get("msg", message)
    return await leadflow_exception_handler(request, ValidationError(message, field))


async def storage_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("Storage failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Server error"})


app = FastAPI(
    title="LeadFlow API",
    description="Role-scoped sales pipeline: leads, opportunities and conversion",
    version=VERSION,
    lifespan=lifespan
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

# Error handlers
app.add_exception_handler(LeadFlowException, leadflow_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(SQLAlchemyError, storage_exception_handler)

# Include all routers
app.include_router(auth.router)
app.include_router(leads.router)
app.include_router(opportunities.router)
app.include_router(dashboard.router)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "message": "LeadFlow API is running",
        "version": VERSION,
        "docs": "/docs"
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Detailed health check."""
    return HealthResponse(version=VERSION)
