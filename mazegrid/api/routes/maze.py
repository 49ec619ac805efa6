from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import structlog
from fastapi import APIRouter, Depends
from starlette.concurrency import run_in_threadpool

from mazegrid.api.deps import get_grid_store
from mazegrid.api.errors import ApiErrorCode, ApiException
from mazegrid.schemas.maze import DifficultySettings, GridDocument, GridsByDifficulty, GridWithSettings
from mazegrid.store.errors import GridNotFoundError, LoadError, NotFoundError
from mazegrid.store.grid_store import GridStore

logger = structlog.get_logger(__name__)
router = APIRouter(prefix="/maze", tags=["maze"])

T = TypeVar("T")


async def _query(operation: Callable[..., T], *args: str, failure_message: str) -> T:
    try:
        return await run_in_threadpool(operation, *args)
    except NotFoundError as exc:
        code = ApiErrorCode.GRID_NOT_FOUND if isinstance(exc, GridNotFoundError) else ApiErrorCode.DIFFICULTY_NOT_FOUND
        raise ApiException(status_code=404, code=code, message=exc.message) from exc
    except LoadError as exc:
        logger.error("grid_data_load_failed", operation=operation.__name__, reason=str(exc))
        raise ApiException(
            status_code=500,
            code=ApiErrorCode.GRID_DATA_UNAVAILABLE,
            message=failure_message,
        ) from exc


@router.get("/grids", response_model=GridDocument, response_model_exclude_unset=True)
async def get_all_grids(store: GridStore = Depends(get_grid_store)) -> GridDocument:
    return await _query(store.get_all, failure_message="Failed to retrieve maze grids")


@router.get(
    "/grids/difficulty/{difficulty}",
    response_model=GridsByDifficulty,
    response_model_exclude_unset=True,
)
async def get_grids_by_difficulty(difficulty: str, store: GridStore = Depends(get_grid_store)) -> GridsByDifficulty:
    return await _query(store.get_by_difficulty, difficulty, failure_message="Failed to retrieve maze grids")


@router.get("/grids/id/{grid_id}", response_model=GridWithSettings, response_model_exclude_unset=True)
async def get_grid_by_id(grid_id: str, store: GridStore = Depends(get_grid_store)) -> GridWithSettings:
    return await _query(store.get_by_id, grid_id, failure_message="Failed to retrieve maze grid")


@router.get("/settings/{difficulty}", response_model=DifficultySettings, response_model_exclude_unset=True)
async def get_difficulty_settings(
    difficulty: str,
    store: GridStore = Depends(get_grid_store),
) -> DifficultySettings:
    return await _query(store.get_settings, difficulty, failure_message="Failed to retrieve difficulty settings")
