from mazegrid.schemas.maze import (
    AlgorithmParams,
    DifficultySettings,
    GridDocument,
    GridPoint,
    GridSize,
    GridsByDifficulty,
    GridWithSettings,
    MazeGrid,
)

__all__ = [
    "AlgorithmParams",
    "DifficultySettings",
    "GridDocument",
    "GridPoint",
    "GridSize",
    "GridWithSettings",
    "GridsByDifficulty",
    "MazeGrid",
]
