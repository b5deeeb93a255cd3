"""Exceptions raised by the maze parser and engine."""

from typing import Optional


class MazeError(Exception):
    """Base class for all maze errors.

    ``code`` is a stable identifier the HTTP layer returns to clients.
    """

    code = "maze_error"


class MazeParseError(MazeError):
    """Raised when maze text cannot be turned into a maze."""

    code = "maze_parse_error"


class InputMissingError(MazeParseError):
    """Raised when no maze text was supplied."""

    code = "input_missing"

    def __init__(self, message: str = "Maze input is missing"):
        super().__init__(message)


class InvalidCharacterError(MazeParseError):
    """Raised when maze text holds no usable maze characters.

    In strict mode also raised for the first unrecognized character, in
    which case ``char`` and ``location`` are set.
    """

    code = "invalid_character"

    def __init__(
        self,
        message: str = "Maze input contains no recognized maze characters",
        char: Optional[str] = None,
        location: Optional[tuple[int, int]] = None,
    ):
        super().__init__(message)
        self.char = char
        self.location = location


class StartPointMissingError(MazeParseError):
    """Raised when the maze has no start point (S)."""

    code = "start_point_missing"

    def __init__(self, message: str = "Maze must have a start point (S)"):
        super().__init__(message)


class MultipleStartPointsError(MazeParseError):
    """Raised when the maze has more than one start point."""

    code = "multiple_start_points"


class MazeLoadError(MazeError):
    """Raised when a maze file cannot be read."""

    code = "maze_load_error"


class MazeNotInitializedError(MazeError):
    """Raised by engine queries and commands before a maze was created."""

    code = "maze_not_initialized"

    def __init__(self, message: str = "No maze has been created yet"):
        super().__init__(message)


class PreconditionViolatedError(MazeError):
    """Raised when the explorer is moved onto nothing or into a wall."""

    code = "precondition_violated"


class DuplicateLocationError(MazeError):
    """Raised when two cells are placed on the same location."""

    code = "duplicate_location"
