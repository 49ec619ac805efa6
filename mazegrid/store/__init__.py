from mazegrid.store.errors import (
    DifficultyNotFoundError,
    GridNotFoundError,
    GridStoreError,
    LoadError,
    NotFoundError,
)
from mazegrid.store.grid_store import GridStore
from mazegrid.store.sources import BytesGridSource, FileGridSource, GridSource

__all__ = [
    "BytesGridSource",
    "DifficultyNotFoundError",
    "FileGridSource",
    "GridNotFoundError",
    "GridSource",
    "GridStore",
    "GridStoreError",
    "LoadError",
    "NotFoundError",
]
