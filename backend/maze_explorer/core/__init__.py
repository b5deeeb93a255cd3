# Core module
from .exceptions import (
    DuplicateLocationError,
    InputMissingError,
    InvalidCharacterError,
    MazeError,
    MazeLoadError,
    MazeNotInitializedError,
    MazeParseError,
    MultipleStartPointsError,
    PreconditionViolatedError,
    StartPointMissingError,
)
from .grid import (
    Explorer,
    FaceDirection,
    Location,
    Maze,
    MazeCell,
    MazeObjectType,
    MoveHistory,
    Step,
    TurnDirection,
)
from .maze_engine import MazeEngine
from .maze_parser import (
    list_maze_files,
    load_maze_file,
    parse_maze_text,
    validate_maze_text,
)

__all__ = [
    "MazeEngine",
    "Maze",
    "MazeCell",
    "MazeObjectType",
    "Explorer",
    "FaceDirection",
    "TurnDirection",
    "Location",
    "MoveHistory",
    "Step",
    "MazeError",
    "MazeParseError",
    "InputMissingError",
    "InvalidCharacterError",
    "StartPointMissingError",
    "MultipleStartPointsError",
    "MazeLoadError",
    "MazeNotInitializedError",
    "PreconditionViolatedError",
    "DuplicateLocationError",
    "parse_maze_text",
    "validate_maze_text",
    "load_maze_file",
    "list_maze_files",
]
