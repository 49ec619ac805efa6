from __future__ import annotations

from collections import deque
from collections.abc import Iterable

Cell = tuple[int, int]

# North, east, south, west. Mazes are walked one orthogonal step at a time.
STEPS: tuple[Cell, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))


def in_bounds(cell: Cell, width: int, height: int) -> bool:
    x, y = cell
    return 0 <= x < width and 0 <= y < height


def open_neighbours(cell: Cell, width: int, height: int, walls: set[Cell]) -> list[Cell]:
    x, y = cell
    candidates = ((x + dx, y + dy) for dx, dy in STEPS)
    return [candidate for candidate in candidates if in_bounds(candidate, width, height) and candidate not in walls]


def shortest_path_length(
    width: int,
    height: int,
    start: Cell,
    end: Cell,
    walls: Iterable[Cell],
) -> int | None:
    """Number of moves on the shortest start-to-end route, or None if unreachable."""
    blocked = set(walls)
    if not in_bounds(start, width, height) or not in_bounds(end, width, height):
        return None
    if start in blocked or end in blocked:
        return None

    distances: dict[Cell, int] = {start: 0}
    queue: deque[Cell] = deque([start])
    while queue:
        current = queue.popleft()
        if current == end:
            return distances[current]
        for neighbour in open_neighbours(current, width, height, blocked):
            if neighbour not in distances:
                distances[neighbour] = distances[current] + 1
                queue.append(neighbour)

    return None


__all__ = ["Cell", "STEPS", "in_bounds", "open_neighbours", "shortest_path_length"]
