"""Health check endpoints."""

from __future__ import annotations

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from skilifts import __version__
from skilifts.core.exceptions import StorageError

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


@router.get("/")
async def root() -> dict:
    return {
        "name": "SkiLifts API",
        "version": __version__,
        "description": "Ski Lift CRUD API with DynamoDB",
        "endpoints": {"health": "/health", "ready": "/ready", "api": "/api/skilifts"},
    }


@router.get("/health")
async def health() -> dict:
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": time.monotonic() - _STARTED_AT,
    }


@router.get("/ready", response_model=None)
def ready(request: Request) -> JSONResponse | dict:
    store = request.app.state.store
    try:
        table_status = store.check_ready()
    except StorageError as exc:
        return JSONResponse(
            status_code=503,
            content={"status": "unavailable", "table": store.table_name, "reason": exc.message},
        )
    return {"status": "ready", "table": store.table_name, "tableStatus": table_status}
