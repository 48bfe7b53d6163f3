"""Liveness and readiness endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(req: Request) -> dict[str, str]:
    """200 whenever the process is serving."""
    return {"status": "ok", "service": req.app.state.settings.observability.service_name}


@router.get("/ready", response_model=None)
async def ready(req: Request) -> dict[str, Any] | JSONResponse:
    """200 once the lifespan has created the summary store, 503 before."""
    store = getattr(req.app.state, "store", None)
    if store is None:
        return JSONResponse(status_code=503, content={"status": "starting"})
    return {"status": "ready", "storedSummaries": len(store)}
