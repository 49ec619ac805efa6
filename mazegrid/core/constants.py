from __future__ import annotations

from pathlib import Path

SERVICE_NAME = "maze-grid-backend"
APP_VERSION = "0.1.0"

DEFAULT_GRID_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "maze2d_grids.json"

__all__ = ["APP_VERSION", "DEFAULT_GRID_DATA_PATH", "SERVICE_NAME"]
