from __future__ import annotations


class GridStoreError(Exception):
    pass


class LoadError(GridStoreError):
    """The grid document could not be read, parsed or validated."""


class NotFoundError(GridStoreError):
    def __init__(self, message: str, *, key: str) -> None:
        super().__init__(message)
        self.message = message
        self.key = key


class DifficultyNotFoundError(NotFoundError):
    pass


class GridNotFoundError(NotFoundError):
    pass


__all__ = [
    "DifficultyNotFoundError",
    "GridNotFoundError",
    "GridStoreError",
    "LoadError",
    "NotFoundError",
]
