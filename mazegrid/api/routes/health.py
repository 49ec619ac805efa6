from __future__ import annotations

import time
from typing import Literal

import structlog
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from mazegrid.api.deps import get_grid_store
from mazegrid.core.config import get_settings
from mazegrid.core.constants import APP_VERSION
from mazegrid.store.errors import LoadError
from mazegrid.store.grid_store import GridStore

logger = structlog.get_logger(__name__)
router = APIRouter(tags=["health"])


class HealthDataStatus(BaseModel):
    checked: bool
    ok: bool | None
    difficulties: list[str] | None = None
    error: Literal["grid_data_unavailable"] | None = None


class HealthResponse(BaseModel):
    status: Literal["ok", "degraded"]
    service: str
    env: str
    version: str
    uptime_s: float
    data: HealthDataStatus


class RootResponse(BaseModel):
    message: str


@router.get("/", response_model=RootResponse)
async def root() -> RootResponse:
    return RootResponse(message="Maze grid API is running")


@router.get("/health", response_model=HealthResponse)
async def health_check(
    request: Request,
    data: bool = Query(False, description="When true, load the grid document and report its difficulties."),
    store: GridStore = Depends(get_grid_store),
) -> HealthResponse | JSONResponse:
    settings = get_settings()
    process_started_at = getattr(request.app.state, "process_started_at", time.monotonic())

    payload = {
        "status": "ok",
        "service": settings.service_name,
        "env": settings.env,
        "version": APP_VERSION,
        "uptime_s": round(time.monotonic() - process_started_at, 2),
        "data": {"checked": data, "ok": True if data else None},
    }

    if not data:
        return HealthResponse.model_validate(payload)

    try:
        difficulties = await run_in_threadpool(store.difficulties)
    except LoadError as exc:
        logger.warning("health_grid_data_failed", source=store.source_description, reason=str(exc))
        payload["status"] = "degraded"
        payload["data"] = {"checked": True, "ok": False, "error": "grid_data_unavailable"}
        return JSONResponse(status_code=503, content=payload)

    payload["data"] = {"checked": True, "ok": True, "difficulties": difficulties}
    return HealthResponse.model_validate(payload)
