"""
Maze parser.

Turns maze text into a Maze and loads maze text files from the filesystem.

Maze Format:
    S = Start point (exactly one)
    F = Exit
    X = Wall
      = Empty space
Rows are separated by "\\n" or "\\r\\n". Any other character produces no cell
unless strict parsing is requested.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from .exceptions import (
    InputMissingError,
    InvalidCharacterError,
    MazeLoadError,
    MazeParseError,
    MultipleStartPointsError,
    StartPointMissingError,
)
from .grid import MAZE_CHARS, Location, Maze, MazeCell, MazeObjectType

logger = logging.getLogger(__name__)

LINE_SEPARATOR = re.compile(r"\r\n|\n")


def split_lines(maze_text: str) -> list[str]:
    """Split maze text into rows on paired or bare line terminators."""
    return LINE_SEPARATOR.split(maze_text)


def parse_maze_text(maze_text: Optional[str], strict: bool = False) -> Maze:
    """
    Parse maze text into a Maze with its explorer placed.

    Args:
        maze_text: Multi-line string representing the maze grid.
        strict: Reject characters other than X, F, S and blank instead of
            skipping them.

    Returns:
        Maze with one cell per recognized character and the explorer at the
        start point, facing right.

    Raises:
        InputMissingError: If maze_text is None or empty.
        InvalidCharacterError: If no recognized character exists, or in strict
            mode when any unrecognized character exists.
        StartPointMissingError: If there is no start point.
        MultipleStartPointsError: If there is more than one start point.
    """
    if not maze_text:
        raise InputMissingError()

    if not MAZE_CHARS.intersection(maze_text):
        raise InvalidCharacterError()

    maze = Maze()
    for y, line in enumerate(split_lines(maze_text)):
        for x, char in enumerate(line):
            kind = MazeObjectType.from_char(char)
            if kind is None:
                if strict:
                    raise InvalidCharacterError(
                        f"Invalid character {char!r} at position ({x}, {y}). "
                        f"Valid characters: {', '.join(repr(c) for c in sorted(MAZE_CHARS))}",
                        char=char,
                        location=(x, y),
                    )
                continue
            maze.add(MazeCell(kind=kind, location=Location(x, y)))

    start_points = maze.cells_of(MazeObjectType.START_POINT)
    if not start_points:
        raise StartPointMissingError()
    if len(start_points) > 1:
        first, second = start_points[0].location, start_points[1].location
        raise MultipleStartPointsError(
            f"Multiple start points found: "
            f"first at ({first.x}, {first.y}), second at ({second.x}, {second.y})"
        )

    maze.place_explorer(start_points[0].location)
    return maze


def validate_maze_text(
    maze_text: Optional[str], strict: bool = False
) -> tuple[bool, Optional[str]]:
    """
    Validate maze text without raising exceptions.

    Returns:
        Tuple of (is_valid, error_message).
        error_message is None if valid.
    """
    try:
        parse_maze_text(maze_text, strict=strict)
        return True, None
    except MazeParseError as e:
        return False, str(e)


def load_maze_file(file_path: Path | str) -> str:
    """
    Read maze text from a file.

    Line endings are passed through untouched so the parser sees the
    original terminators.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        MazeLoadError: If the path is not a readable file.
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    if not file_path.is_file():
        raise MazeLoadError(f"Path is not a file: {file_path}")

    try:
        with file_path.open(encoding="utf-8", newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise MazeLoadError(f"Failed to read maze file: {e}") from e


def list_maze_files(mazes_dir: Path | str) -> list[Path]:
    """
    List maze files (*.txt) in a directory, sorted by name.

    Raises:
        FileNotFoundError: If the directory doesn't exist.
        MazeLoadError: If the path is not a directory.
    """
    mazes_dir = Path(mazes_dir)

    if not mazes_dir.exists():
        raise FileNotFoundError(f"Mazes directory not found: {mazes_dir}")

    if not mazes_dir.is_dir():
        raise MazeLoadError(f"Path is not a directory: {mazes_dir}")

    files = sorted(p for p in mazes_dir.glob("*.txt") if p.is_file())
    if not files:
        logger.warning(f"No maze files found in {mazes_dir}")
    return files
