from __future__ import annotations

from collections import Counter
from typing import Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, confloat, conint, model_validator
from pydantic.alias_generators import to_camel

# Strict types: a bool or 2.0 in an integer field is a malformed document, not a value to coerce.
Count = conint(strict=True, ge=0)
# Ints stay ints so 60 is not served back as 60.0. Infinity, NaN and overflowing
# literals such as 1e400 are rejected.
NonNegativeNumber = Union[conint(strict=True, ge=0), confloat(strict=True, ge=0, allow_inf_nan=False)]


class WireModel(BaseModel):
    """Base for models read from the grid file and written back to clients.

    Attributes are snake_case, the wire is camelCase. Unknown keys are kept so
    a document is served exactly as it was authored.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class GridPoint(WireModel):
    x: StrictInt
    y: StrictInt

    def as_cell(self) -> tuple[int, int]:
        return (self.x, self.y)


class GridSize(WireModel):
    width: StrictInt = Field(gt=0)
    height: StrictInt = Field(gt=0)


class AlgorithmParams(WireModel):
    seed: StrictInt
    complexity: StrictInt


class MazeGrid(WireModel):
    id: StrictStr = Field(min_length=1)
    size: GridSize
    start: GridPoint
    end: GridPoint
    walls: list[GridPoint]
    optimal_path_length: Count
    algorithm: StrictStr | None = None
    algorithm_params: AlgorithmParams | None = None


class DifficultySettings(WireModel):
    time_limit: NonNegativeNumber
    hints_allowed: Count
    fog_of_war: StrictBool
    visibility_radius: NonNegativeNumber | None = None
    moving_obstacles: StrictBool | None = None


class GridDocument(WireModel):
    grids: dict[str, list[MazeGrid]]
    difficulty_settings: dict[str, DifficultySettings]

    @model_validator(mode="after")
    def validate_buckets(self) -> "GridDocument":
        grid_labels = set(self.grids)
        settings_labels = set(self.difficulty_settings)

        missing_settings = sorted(grid_labels - settings_labels)
        if missing_settings:
            raise ValueError(f"difficultySettings is missing entries for: {missing_settings}")

        orphan_settings = sorted(settings_labels - grid_labels)
        if orphan_settings:
            raise ValueError(f"difficultySettings has entries without grids: {orphan_settings}")

        empty_buckets = [label for label, bucket in self.grids.items() if not bucket]
        if empty_buckets:
            raise ValueError(f"grids has empty difficulty buckets: {empty_buckets}")

        id_counts = Counter(grid.id for bucket in self.grids.values() for grid in bucket)
        duplicate_ids = sorted(grid_id for grid_id, count in id_counts.items() if count > 1)
        if duplicate_ids:
            raise ValueError(f"grid ids must be unique across difficulties, duplicates: {duplicate_ids}")

        return self

    def grid_count(self) -> int:
        return sum(len(bucket) for bucket in self.grids.values())


class GridsByDifficulty(BaseModel):
    grids: list[MazeGrid]
    settings: DifficultySettings


class GridWithSettings(BaseModel):
    grid: MazeGrid
    settings: DifficultySettings


__all__ = [
    "AlgorithmParams",
    "DifficultySettings",
    "GridDocument",
    "GridPoint",
    "GridSize",
    "GridWithSettings",
    "GridsByDifficulty",
    "MazeGrid",
    "WireModel",
]
