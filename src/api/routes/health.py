"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text

from adapter.sql.connection import get_engine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health():
    """Health check endpoint with dependency status."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    overall_healthy = True

    try:
        engine = get_engine()
        if engine:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            health_status["services"]["database"] = {
                "status": "healthy",
                "message": "Connection successful"
            }
        else:
            health_status["services"]["database"] = {
                "status": "unhealthy",
                "message": "Connection failed or not configured"
            }
            overall_healthy = False
    except Exception as e:
        health_status["services"]["database"] = {
            "status": "unhealthy",
            "message": f"Connection error: {str(e)[:200]}"
        }
        overall_healthy = False

    if not overall_healthy:
        health_status["status"] = "degraded"

    status_code = status.HTTP_200_OK if overall_healthy else status.HTTP_503_SERVICE_UNAVAILABLE

    return JSONResponse(
        content=health_status,
        status_code=status_code
    )
