from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from fastapi.testclient import TestClient

from mazegrid.api.deps import get_grid_store
from mazegrid.core.config import get_settings
from mazegrid.main import create_app
from mazegrid.store.grid_store import GridStore


def _build_client(store: GridStore) -> TestClient:
    get_settings.cache_clear()
    app = create_app()
    app.dependency_overrides[get_grid_store] = lambda: store
    return TestClient(app)


def test_health_returns_ok_without_loading_data(tmp_path: Path) -> None:
    with _build_client(GridStore.from_path(tmp_path / "missing.json")) as client:
        response = client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["service"] == "maze-grid-backend"
    assert payload["data"] == {"checked": False, "ok": None, "difficulties": None, "error": None}
    assert "X-Request-ID" in response.headers


def test_health_with_data_reports_difficulties(document_payload: dict[str, Any]) -> None:
    with _build_client(GridStore.from_bytes(json.dumps(document_payload))) as client:
        response = client.get("/health?data=1")

    assert response.status_code == 200
    assert response.json()["data"]["difficulties"] == ["easy", "medium"]


def test_health_with_data_degrades_when_grid_file_is_missing(tmp_path: Path) -> None:
    with _build_client(GridStore.from_path(tmp_path / "missing.json")) as client:
        response = client.get("/health?data=1")

    assert response.status_code == 503
    payload = response.json()
    assert payload["status"] == "degraded"
    assert payload["data"] == {"checked": True, "ok": False, "error": "grid_data_unavailable"}


def test_root_reports_running() -> None:
    with _build_client(GridStore.from_bytes("{}")) as client:
        response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"message": "Maze grid API is running"}
