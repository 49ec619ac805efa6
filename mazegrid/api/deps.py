from __future__ import annotations

from functools import lru_cache

from mazegrid.core.config import get_settings
from mazegrid.store.grid_store import GridStore


@lru_cache(maxsize=1)
def get_grid_store() -> GridStore:
    settings = get_settings()
    return GridStore.from_path(settings.grid_data_path, cache_enabled=settings.grid_cache_enabled)
