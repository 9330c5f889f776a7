"""
Main FastAPI application entry point.
"""

import time
from contextlib import asynccontextmanager
from typing import Dict, Union

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logfire

from config import settings
from database import get_store
from observability.logfire_config import LogfireConfig
from api.routes import prompt_router, seo_router, template_router


SERVICE_VERSION = "1.0.0"
_started_at = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.
    Handles startup and shutdown events.
    """
    # Initialize Logfire first so we can use structured logging
    LogfireConfig.initialize(token=settings.logfire_token, environment=settings.environment)

    logfire.info(
        "Starting Prompt Stumble API Server",
        environment=settings.environment,
        debug=settings.debug,
    )

    store = get_store()
    logfire.info("Prompt store ready", prompt_count=len(store))

    logfire.info("Prompt Stumble API Server startup complete")

    yield

    # Shutdown
    logfire.info("Shutting down Prompt Stumble API Server")


# Initialize FastAPI app
app = FastAPI(
    title="Prompt Stumble API",
    description="Backend API for browsing, filling and submitting AI prompts",
    version=SERVICE_VERSION,
    lifespan=lifespan,
    debug=settings.debug,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_api_requests(request: Request, call_next):
    """Log method, path, status and duration of every /api request."""
    start = time.perf_counter()
    response = await call_next(request)

    if request.url.path.startswith("/api"):
        logfire.info(
            "{method} {path} {status_code}",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )

    return response


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log unexpected errors and return a generic 500 body."""
    logfire.error(
        "Unhandled error",
        method=request.method,
        path=request.url.path,
        error=str(exc),
        error_type=type(exc).__name__,
        _exc_info=exc,
    )
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


# ============================================================================
# Health Check Endpoints
# ============================================================================

@app.get("/health", tags=["Health"])
async def health_check() -> Dict[str, Union[str, float]]:
    """
    Health check endpoint for load balancers and monitoring.

    Returns:
        dict: Health status of the application
    """
    return {
        "status": "healthy",
        "service": "prompt-stumble-api",
        "version": SERVICE_VERSION,
        "uptime": round(time.monotonic() - _started_at, 3),
        "environment": settings.environment,
    }


@app.get("/", tags=["Root"])
async def root() -> Dict[str, str]:
    """
    Root endpoint - API information.

    Returns:
        dict: Basic API information
    """
    return {
        "name": "Prompt Stumble API",
        "version": SERVICE_VERSION,
        "description": "Backend API for discovering and filling AI prompts",
        "docs": "/docs",
        "health": "/health",
    }


# ============================================================================
# API Routers
# ============================================================================

# Prompt browsing, stumbling, rendering and submission
app.include_router(prompt_router)

# Template validation for the submission form
app.include_router(template_router)

# Prompt page metadata and sitemap
app.include_router(seo_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
