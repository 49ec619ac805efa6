from __future__ import annotations

from collections.abc import Hashable
from pathlib import Path
from typing import Protocol


class GridSource(Protocol):
    """Where the raw grid document comes from."""

    description: str

    def fingerprint(self) -> Hashable:
        """Value that changes whenever the content may have changed."""

    def read_bytes(self) -> bytes: ...


class FileGridSource:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.description = str(self.path)

    def fingerprint(self) -> Hashable:
        stat = self.path.stat()
        return (stat.st_ino, stat.st_mtime_ns, stat.st_size)

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()


class BytesGridSource:
    def __init__(self, data: bytes | str, description: str = "<memory>") -> None:
        self.data = data.encode("utf-8") if isinstance(data, str) else data
        self.description = description

    def fingerprint(self) -> Hashable:
        return hash(self.data)

    def read_bytes(self) -> bytes:
        return self.data


__all__ = ["BytesGridSource", "FileGridSource", "GridSource"]
