"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from linkshare.api import auth, shared_links
from linkshare.api.errors import register_error_handlers
from linkshare.config import get_settings
from linkshare.database import dispose_engine

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting Resource Share API ({settings.environment})")
    yield
    # Shutdown: release pooled database connections
    dispose_engine()


app = FastAPI(
    title="Resource Share API",
    description="Seniors publish drive links by subject, juniors search them",
    version="0.1.0",
    lifespan=lifespan,
)

register_error_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every request.

    The request timeout is enforced per database statement (see
    ``linkshare.database.connect_args_for``) so a 504 always means the work
    was rolled back.
    """
    logger.info(f"Received {request.method} request at {request.url.path}")
    return await call_next(request)


# Added after the logging middleware so it wraps it and every response
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(auth.router)
app.include_router(shared_links.router)


def mount_uploads(target: FastAPI, directory: str) -> bool:
    """Serve ``directory`` read-only under /uploads when it exists."""
    if not Path(directory).is_dir():
        return False
    target.mount("/uploads", StaticFiles(directory=directory), name="uploads")
    return True


mount_uploads(app, settings.uploads_dir)


@app.get("/")
async def root():
    """Liveness message."""
    return {"message": "Backend is running"}


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
