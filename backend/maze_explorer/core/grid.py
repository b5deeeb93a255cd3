"""
Grid model for the maze.

Holds the located cells parsed from maze text, the single explorer placed
on them and the explorer's move history.

Maze Format:
    S = Start point
    F = Exit
    X = Wall
      = Empty space (a single blank)
"""

from enum import Enum
from dataclasses import dataclass
from typing import Iterator, Optional

from .exceptions import DuplicateLocationError


class MazeObjectType(Enum):
    """Kinds of objects that can be placed in a maze."""
    WALL = "wall"
    EMPTY_SPACE = "empty_space"
    START_POINT = "start_point"
    EXIT = "exit"
    EXPLORER = "explorer"

    @classmethod
    def from_char(cls, char: str) -> Optional["MazeObjectType"]:
        """Convert a maze character to a cell kind, None if unrecognized."""
        return _CHAR_TO_TYPE.get(char)

    @property
    def symbol(self) -> Optional[str]:
        """Maze character for this kind. The explorer has none."""
        return _TYPE_TO_CHAR.get(self)


_CHAR_TO_TYPE = {
    "X": MazeObjectType.WALL,
    "F": MazeObjectType.EXIT,
    "S": MazeObjectType.START_POINT,
    " ": MazeObjectType.EMPTY_SPACE,
}
_TYPE_TO_CHAR = {kind: char for char, kind in _CHAR_TO_TYPE.items()}

MAZE_CHARS = frozenset(_CHAR_TO_TYPE)


class TurnDirection(Enum):
    """Rotational sense of a turn."""
    LEFT = "left"
    RIGHT = "right"


class FaceDirection(Enum):
    """Directions the explorer can face."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        """Get (dx, dy) for this direction."""
        deltas = {
            FaceDirection.UP: (0, -1),
            FaceDirection.DOWN: (0, 1),
            FaceDirection.LEFT: (-1, 0),
            FaceDirection.RIGHT: (1, 0),
        }
        return deltas[self]

    def turn(self, direction: TurnDirection) -> "FaceDirection":
        """Return the direction faced after a 90 degree turn."""
        index = _CLOCKWISE.index(self)
        if direction is TurnDirection.RIGHT:
            return _CLOCKWISE[(index + 1) % 4]
        return _CLOCKWISE[(index - 1) % 4]


_CLOCKWISE = (FaceDirection.UP, FaceDirection.RIGHT, FaceDirection.DOWN, FaceDirection.LEFT)

# Order in which available movement options are reported
MOVEMENT_OPTION_ORDER = (
    FaceDirection.UP,
    FaceDirection.LEFT,
    FaceDirection.DOWN,
    FaceDirection.RIGHT,
)

DEFAULT_FACE_DIRECTION = FaceDirection.RIGHT


@dataclass(frozen=True)
class Location:
    """Zero-based grid location, x = column, y = row."""
    x: int
    y: int

    def neighbour(self, direction: FaceDirection) -> "Location":
        """Return the adjacent location in direction."""
        dx, dy = direction.delta
        return Location(self.x + dx, self.y + dy)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True)
class MazeCell:
    """A parsed cell. Cells never move or change kind."""
    kind: MazeObjectType
    location: Location

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"kind": self.kind.value, "location": self.location.to_dict()}


@dataclass
class Explorer:
    """The single mobile agent of a maze."""
    location: Location
    face_direction: FaceDirection = DEFAULT_FACE_DIRECTION

    @property
    def kind(self) -> MazeObjectType:
        return MazeObjectType.EXPLORER

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "kind": self.kind.value,
            "location": self.location.to_dict(),
            "face_direction": self.face_direction.value,
        }


@dataclass(frozen=True)
class Step:
    """One recorded explorer position."""
    step_no: int
    location: Location

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"step_no": self.step_no, "location": self.location.to_dict()}


class MoveHistory:
    """Append-only, ordered record of explorer steps."""

    def __init__(self) -> None:
        self._steps: list[Step] = []

    @property
    def steps(self) -> tuple[Step, ...]:
        return tuple(self._steps)

    @property
    def last_step_no(self) -> int:
        """Highest step number recorded so far, 0 when empty."""
        return max((step.step_no for step in self._steps), default=0)

    def record(self, location: Location) -> Step:
        """Append a step at location and return it."""
        step = Step(step_no=self.last_step_no + 1, location=location)
        self._steps.append(step)
        return step

    def __len__(self) -> int:
        return len(self._steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self._steps)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"steps": [step.to_dict() for step in self._steps]}


class Maze:
    """
    Located cells of a maze plus its explorer and move history.

    Cells are keyed by exact location. The explorer is kept beside the cell
    map, so a lookup by location always returns the cell under it.
    """

    def __init__(self) -> None:
        self._cells: dict[Location, MazeCell] = {}
        self.explorer: Optional[Explorer] = None
        self.move_history = MoveHistory()

    def add(self, cell: MazeCell) -> None:
        """Place a cell. Each location holds at most one cell."""
        if cell.location in self._cells:
            existing = self._cells[cell.location]
            raise DuplicateLocationError(
                f"Location ({cell.location.x}, {cell.location.y}) already holds "
                f"{existing.kind.value}, cannot add {cell.kind.value}"
            )
        self._cells[cell.location] = cell

    def place_explorer(self, location: Location) -> Explorer:
        """Create the explorer at location facing the default direction."""
        self.explorer = Explorer(location=location)
        return self.explorer

    def object_at(self, location: Location) -> Optional[MazeCell]:
        """Get the cell at location, None when off-grid."""
        return self._cells.get(location)

    def cells_of(self, kind: MazeObjectType) -> list[MazeCell]:
        """All cells of exactly kind, in parse order."""
        return [cell for cell in self._cells.values() if cell.kind is kind]

    def count(self, kind: MazeObjectType) -> int:
        """Number of maze objects of exactly kind."""
        if kind is MazeObjectType.EXPLORER:
            return 0 if self.explorer is None else 1
        return len(self.cells_of(kind))

    @property
    def width(self) -> int:
        return max((loc.x for loc in self._cells), default=-1) + 1

    @property
    def height(self) -> int:
        return max((loc.y for loc in self._cells), default=-1) + 1

    def __len__(self) -> int:
        return len(self._cells)
