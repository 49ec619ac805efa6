from __future__ import annotations

from fastapi import APIRouter

from mazegrid.api.routes import health, maze


def build_api_router(api_prefix: str = "") -> APIRouter:
    api_router = APIRouter()
    api_router.include_router(health.router)
    api_router.include_router(maze.router, prefix=api_prefix)
    return api_router
