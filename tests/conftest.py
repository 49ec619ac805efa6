from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

SAMPLE_DOCUMENT: dict[str, Any] = {
    "grids": {
        "easy": [
            {
                "id": "e1",
                "size": {"width": 3, "height": 3},
                "start": {"x": 0, "y": 0},
                "end": {"x": 2, "y": 2},
                "walls": [{"x": 1, "y": 1}],
                "optimalPathLength": 4,
                "algorithm": "handcrafted",
            },
            {
                "id": "e2",
                "size": {"width": 3, "height": 3},
                "start": {"x": 0, "y": 0},
                "end": {"x": 2, "y": 0},
                "walls": [{"x": 1, "y": 0}],
                "optimalPathLength": 4,
            },
        ],
        "medium": [
            {
                "id": "m1",
                "size": {"width": 4, "height": 4},
                "start": {"x": 0, "y": 0},
                "end": {"x": 3, "y": 3},
                "walls": [],
                "optimalPathLength": 6,
                "algorithm": "prim",
                "algorithmParams": {"seed": 42, "complexity": 2},
            }
        ],
    },
    "difficultySettings": {
        "easy": {"timeLimit": 60, "hintsAllowed": 3, "fogOfWar": False},
        "medium": {"timeLimit": 90.5, "hintsAllowed": 1, "fogOfWar": True, "visibilityRadius": 2},
    },
}


@pytest.fixture
def document_payload() -> dict[str, Any]:
    return copy.deepcopy(SAMPLE_DOCUMENT)


@pytest.fixture
def grid_file(tmp_path: Path, document_payload: dict[str, Any]) -> Path:
    path = tmp_path / "grids.json"
    path.write_text(json.dumps(document_payload), encoding="utf-8")
    return path
