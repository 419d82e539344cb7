"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from newstime import __version__
from newstime.auth.router import router as auth_router
from newstime.auth.secret_store import get_secret_store
from newstime.categories.router import router as categories_router
from newstime.config import get_settings
from newstime.db.database import check_connection, init_db
from newstime.dependencies import DbSession
from newstime.live.router import router as live_router
from newstime.posts.router import router as posts_router
from newstime.youtube.router import router as youtube_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown events.

    Refuses to start when no signing secret is configured.

    Args:
        app: FastAPI application instance.
    """
    # Startup
    get_secret_store()
    init_db()
    logger.info(f"{settings.app_name} ready ({settings.environment})")
    yield
    # Shutdown (cleanup if needed)


app = FastAPI(
    title=settings.app_name,
    description="REST backend for the 24x7 News Time portal",
    version=__version__,
    lifespan=lifespan,
    debug=settings.debug,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request's method and path."""
    logger.info(f"{request.method} {request.url.path}")
    return await call_next(request)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Render HTTP errors as ``{"error": message}``."""
    message = exc.detail
    if exc.status_code == 404 and message == "Not Found":
        message = "Endpoint not found"
    return JSONResponse(
        {"error": message},
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Render request validation errors with the offending fields."""
    return JSONResponse(
        {"error": "Invalid request", "details": jsonable_encoder(exc.errors())},
        status_code=422,
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Log unexpected errors without leaking them to the client."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse({"error": "Internal server error"}, status_code=500)


# API routes
app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
app.include_router(posts_router, prefix="/api/posts", tags=["posts"])
app.include_router(categories_router, prefix="/api/categories", tags=["categories"])
app.include_router(youtube_router, prefix="/api/youtube", tags=["youtube"])
app.include_router(live_router, prefix="/api/live", tags=["live"])


@app.get("/api/health")
async def health(db: DbSession):
    """Report service and database status.

    Args:
        db: Database session.

    Returns:
        dict: Status, timestamp and database connectivity.
    """
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "database": "connected" if check_connection(db) else "disconnected",
    }


@app.get("/")
async def root():
    """Describe the API."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "documentation": "/api/health",
    }


def run() -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
