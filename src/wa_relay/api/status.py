import time
from typing import Annotated, Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from ..store import MessageStore
from .deps import get_store

router = APIRouter(tags=["status"])


@router.get("/readiness")
async def readiness() -> Dict[str, str]:
    """Simple readiness check that returns immediately."""
    return {"status": "ok"}


@router.get("/status")
async def status(
    store: Annotated[MessageStore, Depends(get_store)],
) -> Dict[str, Any]:
    """
    Health check of the message store.

    Returns 200 when a test query succeeds, 503 with the check details otherwise.
    """
    health_data = {"status": "healthy", "checks": {}, "timestamp": time.time()}

    db_start_time = time.time()
    try:
        healthy = await store.ping()
        db_duration = time.time() - db_start_time
        if healthy:
            health_data["checks"]["database"] = {
                "status": "healthy",
                "duration_seconds": db_duration,
            }
        else:
            health_data["checks"]["database"] = {
                "status": "unhealthy",
                "error": "Query result validation failed",
                "duration_seconds": db_duration,
            }
    except Exception as e:
        healthy = False
        health_data["checks"]["database"] = {
            "status": "unhealthy",
            "error": str(e),
            "duration_seconds": time.time() - db_start_time,
        }

    health_data["total_duration_seconds"] = time.time() - health_data["timestamp"]

    if healthy:
        return health_data

    health_data["status"] = "unhealthy"
    raise HTTPException(status_code=503, detail=health_data)
