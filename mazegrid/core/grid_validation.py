from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from mazegrid.core.grid_geometry import in_bounds, shortest_path_length
from mazegrid.schemas.maze import GridDocument, MazeGrid


@dataclass(frozen=True)
class ValidationIssue:
    difficulty: str
    grid_id: str
    reason: str
    value: str | None = None


@dataclass(frozen=True)
class GridValidationResult:
    grid_count: int
    issues: list[ValidationIssue]

    @property
    def invalid_count(self) -> int:
        return len({(issue.difficulty, issue.grid_id) for issue in self.issues})

    @property
    def ok(self) -> bool:
        return not self.issues


def validate_grid_document(document: GridDocument) -> GridValidationResult:
    """Check every grid's geometry against its declared size and path length.

    Structural rules (shape, label pairing, unique ids) are enforced when the
    document is loaded; this pass covers what the schema cannot express.
    """
    issues: list[ValidationIssue] = []
    for difficulty, bucket in document.grids.items():
        for grid in bucket:
            issues.extend(_validate_grid(grid, difficulty))

    return GridValidationResult(grid_count=document.grid_count(), issues=issues)


def _validate_grid(grid: MazeGrid, difficulty: str) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    def issue(reason: str, value: object | None = None) -> None:
        issues.append(
            ValidationIssue(
                difficulty=difficulty,
                grid_id=grid.id,
                reason=reason,
                value=None if value is None else _truncate(str(value)),
            )
        )

    width = grid.size.width
    height = grid.size.height
    start = grid.start.as_cell()
    end = grid.end.as_cell()
    walls = [wall.as_cell() for wall in grid.walls]
    wall_set = set(walls)

    if not in_bounds(start, width, height):
        issue("start_out_of_bounds", start)
    if not in_bounds(end, width, height):
        issue("end_out_of_bounds", end)
    if start == end:
        issue("start_equals_end", start)

    outside = [wall for wall in walls if not in_bounds(wall, width, height)]
    if outside:
        issue("walls_out_of_bounds", outside)

    duplicates = sorted(wall for wall, count in Counter(walls).items() if count > 1)
    if duplicates:
        issue("duplicate_walls", duplicates)

    if start in wall_set:
        issue("start_on_wall", start)
    if end in wall_set:
        issue("end_on_wall", end)

    if issues:
        return issues

    distance = shortest_path_length(width, height, start, end, wall_set)
    if distance is None:
        issue("end_unreachable", end)
    elif distance != grid.optimal_path_length:
        issue("optimal_path_mismatch", f"declared={grid.optimal_path_length} computed={distance}")

    return issues


def _truncate(value: str, max_length: int = 80) -> str:
    if len(value) <= max_length:
        return value

    return f"{value[: max_length - 3]}..."


__all__ = [
    "GridValidationResult",
    "ValidationIssue",
    "validate_grid_document",
]
