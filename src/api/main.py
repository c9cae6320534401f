"""FastAPI application entry point."""

import os
import sys
import logging
import tomllib
from contextlib import asynccontextmanager
from pathlib import Path
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv

# Load environment variables from .env file
# Must be called before importing modules that read env vars (security, database connection)
load_dotenv()

# main.py is at <root>/src/api/main.py, src is two levels up
_src_path = Path(__file__).parent.parent
sys.path.insert(0, str(_src_path))

from api.errors import register_exception_handlers
from api.middleware.security_headers import SecurityHeadersMiddleware
from api.routes import auth, health, products
from utils.logging import setup_structured_logging
from adapter.sql.connection import get_engine
from adapter.sql.schema import ensure_schema

# Set up structured JSON logging
setup_structured_logging()

logger = logging.getLogger(__name__)

# Read version from pyproject.toml (single source of truth)
_project_root = _src_path.parent
with open(_project_root / "pyproject.toml", "rb") as f:
    VERSION = tomllib.load(f)["project"]["version"]

SERVICE_NAME = "SyntaxWear E-commerce API"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown logic."""
    engine = get_engine()
    if engine:
        if ensure_schema(engine):
            logger.info("Database schema verified/created successfully")
        else:
            logger.warning("Failed to create database schema")
    else:
        logger.warning("Database unavailable, skipping schema creation")

    yield  # App runs here

    if engine:
        engine.dispose()


app = FastAPI(
    title=SERVICE_NAME,
    description="API for the SyntaxWear store - product catalog and customer accounts",
    version=VERSION,
    lifespan=lifespan,
)

# With JWT in the Authorization header:
# - CORS_ORIGINS="*": allow_credentials must be False (browsers reject credentials with wildcard)
# - explicit comma-separated list: allow_credentials can be True
cors_origins_env = os.getenv("CORS_ORIGINS", "*")

if cors_origins_env == "*":
    cors_origins = ["*"]
    allow_credentials = False
    logger.warning(
        "CORS configured with wildcard origin ('*'). "
        "For production, set CORS_ORIGINS to specific domains (e.g., 'https://shop.example.com')"
    )
else:
    cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]
    allow_credentials = True
    logger.info(f"CORS configured with specific origins: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(SecurityHeadersMiddleware)

register_exception_handlers(app)

# Register routes
app.include_router(products.router)
app.include_router(auth.router)
app.include_router(health.router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": SERVICE_NAME,
        "version": VERSION,
        "status": "running"
    }


if __name__ == "__main__":
    import uvicorn
    port = int(os.getenv("PORT", 8000))
    # Application logs go through structured logging; skip uvicorn's access log
    uvicorn.run(
        app,
        host="0.0.0.0",
        port=port,
        access_log=False
    )
