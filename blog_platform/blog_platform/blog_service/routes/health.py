"""
Liveness and readiness probes for the blog service
"""
from datetime import datetime

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from ..db import check_db_connection

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    return {"message": "Service is up", "status": "healthy", "timestamp": datetime.utcnow().isoformat()}


@router.get("/ready")
def readiness_check():
    """Report whether the database answers; 503 when it does not."""
    if check_db_connection():
        return {
            "message": "Service ready",
            "status": "ready",
            "database": "connected",
            "timestamp": datetime.utcnow().isoformat(),
        }

    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "message": "Service not ready",
            "status": "not_ready",
            "database": "disconnected",
            "timestamp": datetime.utcnow().isoformat(),
        },
    )
