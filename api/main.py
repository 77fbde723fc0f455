"""
BMS Mock Data API - FastAPI Application

This is the main entry point for the mock data service behind the
building-management dashboard. It combines all route modules and
provides the system-wide endpoints.

Every data endpoint synthesizes its payload on the fly; nothing is
stored and no real sensors are read.

Access Points:
- API Root: http://localhost:3000
- Swagger Docs: http://localhost:3000/docs
- ReDoc: http://localhost:3000/redoc
- OpenAPI JSON: http://localhost:3000/openapi.json
"""

import os
import logging
from datetime import datetime
from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api import __version__
from api.models import ErrorResponse, SystemHealth
from api.routes import (
    analytics_router,
    efficiency_router,
    management_router,
    notifications_router,
)
from core.errors import InternalError, MockDataError

# =========================================
# Logging Configuration
# =========================================

logging.basicConfig(
    level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000


# =========================================
# Application Lifespan
# =========================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown."""
    logger.info("Starting BMS Mock Data API...")
    logger.info(f"API Documentation: http://localhost:{os.getenv('PORT', DEFAULT_PORT)}/docs")

    yield  # Application runs here

    logger.info("Shutting down BMS Mock Data API...")


# =========================================
# FastAPI Application
# =========================================

app = FastAPI(
    title="BMS Mock Data API",
    description="""
## Mock Telemetry for the Building-Management Dashboard

Read-only endpoints that synthesize plausible chiller plant data from
request parameters. Values are bounded random draws; nothing is persisted.

### Response Envelope

Every data endpoint answers with `{status, messages, <payload>}` where
`status` is `success` or `error`. Missing or invalid parameters yield
HTTP 400; unexpected failures yield HTTP 500.

### Endpoints

- `GET /efficiency/data`: chiller/pump efficiency curves
- `GET /analytics/data`: per-equipment metric series
- `GET /notifications/data`: notification feed
- `GET /management/tonnage/data`: tonnage history
- `GET /management/energy/cost/data`: energy summary cards
- `GET /management/report/dashboard/data`: energy report series
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)


# =========================================
# CORS Middleware
# =========================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =========================================
# Exception Handlers
# =========================================

def error_response(status_code: int, message: str) -> JSONResponse:
    """Build an error envelope response."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(messages=message).model_dump(mode="json")
    )


@app.exception_handler(MockDataError)
async def mock_data_exception_handler(request, exc: MockDataError):
    """Handle validation and internal errors raised by the service."""
    if exc.status_code >= 500:
        logger.error(f"{request.url.path}: {exc.message}")
    else:
        logger.info(f"Rejected {request.url.path}: {exc.message}")
    return error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request, exc: RequestValidationError):
    """Report malformed requests as client errors."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    )
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        f"Invalid request parameters: {details}"
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc: StarletteHTTPException):
    """Handle HTTP exceptions with consistent format."""
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    """Handle unexpected exceptions."""
    logger.exception(f"Unhandled exception: {exc}")
    error = InternalError()
    message = error.message
    if os.getenv("DEBUG", "false").lower() == "true":
        message = f"{message}: {exc}"
    return error_response(error.status_code, message)


# =========================================
# Include Routers
# =========================================

app.include_router(efficiency_router)
app.include_router(analytics_router)
app.include_router(notifications_router)
app.include_router(management_router)


# =========================================
# Root Endpoints
# =========================================

@app.get(
    "/",
    response_class=PlainTextResponse,
    tags=["System"],
    summary="API Root",
    description="Plain-text greeting"
)
async def root():
    """API root endpoint."""
    return "Hello from the BMS Mock Data API!"


@app.get(
    "/health",
    response_model=SystemHealth,
    tags=["System"],
    summary="Liveness Check",
    description="Check if the API process is alive"
)
async def health_check():
    """Liveness probe."""
    return SystemHealth(
        status="ok",
        version=__version__,
        timestamp=datetime.utcnow()
    )


# =========================================
# Run with Uvicorn
# =========================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", DEFAULT_PORT)),
        reload=os.getenv("API_RELOAD", "false").lower() == "true",
        log_level=os.getenv("LOG_LEVEL", "info").lower()
    )
