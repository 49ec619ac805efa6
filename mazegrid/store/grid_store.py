from __future__ import annotations

import threading
from collections.abc import Hashable
from pathlib import Path

import structlog
from pydantic import ValidationError

from mazegrid.schemas.maze import DifficultySettings, GridDocument, GridsByDifficulty, GridWithSettings
from mazegrid.store.errors import DifficultyNotFoundError, GridNotFoundError, LoadError
from mazegrid.store.sources import BytesGridSource, FileGridSource, GridSource

logger = structlog.get_logger(__name__)


class GridStore:
    """Read-only queries over a maze grid document.

    With ``cache_enabled`` the parsed document is kept alongside the source
    fingerprint and reparsed only when the fingerprint changes. For files the
    fingerprint is ``(inode, mtime_ns, size)``: a replace by rename is always
    seen on the next query, while an in-place rewrite that keeps the size is
    seen once the filesystem's mtime granularity has elapsed. Set
    ``cache_enabled=False`` to read and parse the source on every query.
    Results are always deep copies.
    """

    def __init__(self, source: GridSource, *, cache_enabled: bool = True) -> None:
        self._source = source
        self._cache_enabled = cache_enabled
        self._cached: tuple[Hashable, GridDocument] | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_path(cls, path: str | Path, *, cache_enabled: bool = True) -> "GridStore":
        return cls(FileGridSource(path), cache_enabled=cache_enabled)

    @classmethod
    def from_bytes(cls, data: bytes | str, *, cache_enabled: bool = True) -> "GridStore":
        return cls(BytesGridSource(data), cache_enabled=cache_enabled)

    @property
    def source_description(self) -> str:
        return self._source.description

    def get_all(self) -> GridDocument:
        return self._document().model_copy(deep=True)

    def get_by_difficulty(self, difficulty: str) -> GridsByDifficulty:
        document = self._document()
        bucket = document.grids.get(difficulty)
        if bucket is None:
            raise DifficultyNotFoundError(f"No grids found for difficulty: {difficulty}", key=difficulty)

        return GridsByDifficulty(
            grids=[grid.model_copy(deep=True) for grid in bucket],
            settings=document.difficulty_settings[difficulty].model_copy(deep=True),
        )

    def get_by_id(self, grid_id: str) -> GridWithSettings:
        document = self._document()
        for difficulty, bucket in document.grids.items():
            for grid in bucket:
                if grid.id == grid_id:
                    return GridWithSettings(
                        grid=grid.model_copy(deep=True),
                        settings=document.difficulty_settings[difficulty].model_copy(deep=True),
                    )

        raise GridNotFoundError(f"Grid with ID {grid_id} not found", key=grid_id)

    def get_settings(self, difficulty: str) -> DifficultySettings:
        settings = self._document().difficulty_settings.get(difficulty)
        if settings is None:
            raise DifficultyNotFoundError(f"No settings found for difficulty: {difficulty}", key=difficulty)
        return settings.model_copy(deep=True)

    def difficulties(self) -> list[str]:
        return list(self._document().grids)

    def _document(self) -> GridDocument:
        if not self._cache_enabled:
            return self._read_document()

        fingerprint = self._fingerprint()
        cached = self._cached
        if cached is not None and cached[0] == fingerprint:
            return cached[1]

        with self._lock:
            # Another thread may have loaded the same revision while we waited.
            cached = self._cached
            if cached is not None and cached[0] == fingerprint:
                return cached[1]

            document = self._read_document()
            self._cached = (fingerprint, document)
            logger.info(
                "grid_document_loaded",
                source=self._source.description,
                difficulties=list(document.grids),
                grid_count=document.grid_count(),
            )
            return document

    def _fingerprint(self) -> Hashable:
        try:
            return self._source.fingerprint()
        except OSError as exc:
            raise LoadError(f"Unable to read grid data from {self._source.description}: {_os_reason(exc)}") from exc

    def _read_document(self) -> GridDocument:
        try:
            raw = self._source.read_bytes()
        except OSError as exc:
            raise LoadError(f"Unable to read grid data from {self._source.description}: {_os_reason(exc)}") from exc

        try:
            return GridDocument.model_validate_json(raw)
        except ValidationError as exc:
            if any(error["type"] == "json_invalid" for error in exc.errors()):
                raise LoadError(f"Grid data in {self._source.description} is not valid JSON") from exc
            raise LoadError(
                f"Grid data in {self._source.description} is malformed: {_summarize_validation(exc)}"
            ) from exc


def _os_reason(exc: OSError) -> str:
    return exc.strerror or exc.__class__.__name__


def _summarize_validation(exc: ValidationError, limit: int = 3) -> str:
    parts = []
    for error in exc.errors()[:limit]:
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    if exc.error_count() > limit:
        parts.append(f"(+{exc.error_count() - limit} more)")
    return "; ".join(parts)


__all__ = ["GridStore"]
