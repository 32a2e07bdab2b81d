"""Health check endpoint."""

import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from adapter.sql.connection import get_db_session, ping

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health(session: Session = Depends(get_db_session)):
    """Health check endpoint with dependency status."""
    health_status = {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {}
    }

    if ping(session):
        health_status["services"]["database"] = {
            "status": "healthy",
            "message": "Connection successful"
        }
        status_code = status.HTTP_200_OK
    else:
        health_status["services"]["database"] = {
            "status": "unhealthy",
            "message": "Connection failed"
        }
        health_status["status"] = "unhealthy"
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("Health check failed: database unavailable")

    return JSONResponse(
        content=health_status,
        status_code=status_code
    )
