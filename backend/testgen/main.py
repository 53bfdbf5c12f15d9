"""ASGI entry point: logging setup, middleware, exception handlers and routers."""

import logging
import os

# dev: INFO with timestamps and logger names; staging/prod: WARNING only
_is_dev = os.getenv("ENV", "dev").lower() == "dev"

logging.basicConfig(
    level=logging.INFO if _is_dev else logging.WARNING,
    format=(
        "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        if _is_dev
        else "%(levelname)s | %(name)s | %(message)s"
    ),
    datefmt="%H:%M:%S",
)

for _name in ("app.request", "app.exception"):
    logging.getLogger(_name).setLevel(logging.INFO if _is_dev else logging.WARNING)

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from testgen.api import auth, generation, health, pulls, repos
from testgen.config import settings
from testgen.middleware.exception_handlers import register_exception_handlers
from testgen.middleware.request_logging import RequestLoggingMiddleware

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Repository Test Generator API",
    description="Suggest and render test cases for GitHub repositories and open pull requests with them",
    version=settings.APP_VERSION,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Trace middleware for request logging and correlation
app.add_middleware(RequestLoggingMiddleware)

# Register global exception handlers
register_exception_handlers(app)


app.include_router(health.router, prefix="/api", tags=["Health"])
app.include_router(auth.router, prefix="/api", tags=["Auth"])
app.include_router(repos.router, prefix="/api", tags=["Repositories"])
app.include_router(generation.router, prefix="/api", tags=["Test Generation"])
app.include_router(pulls.router, prefix="/api", tags=["Pull Requests"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/api/docs",
    }


@app.on_event("startup")
async def startup_event():
    """Application startup tasks."""
    if not settings.GITHUB_CLIENT_ID or not settings.GITHUB_CLIENT_SECRET:
        logger.warning("GitHub OAuth is not configured. Set GITHUB_CLIENT_ID/SECRET.")
    if settings.secure_cookies and settings.SECRET_KEY == "your-secret-key-change-in-production":
        logger.warning("SECRET_KEY is the default value; session cookies are forgeable.")
