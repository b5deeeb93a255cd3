"""
Maze Explorer Engine

Core maze navigation logic including:
- Maze creation from text
- Spatial lookups relative to the explorer
- Turn and move transitions
- Move history recording
- Exit detection

The engine holds a single maze session. Creating a maze replaces the
previous one. Callers sharing an engine must serialize access to it.
"""

import logging
from typing import Optional, Union

from .exceptions import MazeNotInitializedError, PreconditionViolatedError
from .grid import (
    MOVEMENT_OPTION_ORDER,
    Explorer,
    FaceDirection,
    Location,
    Maze,
    MazeCell,
    MazeObjectType,
    MoveHistory,
    TurnDirection,
)
from .maze_parser import parse_maze_text

logger = logging.getLogger(__name__)

MazeObject = Union[MazeCell, Explorer]


class MazeEngine:
    """
    Core maze engine.

    Example usage:
        engine = MazeEngine()
        engine.create_maze("XS F")

        engine.turn_explorer(TurnDirection.LEFT)
        if engine.can_move():
            engine.move()
        done = engine.finished()
    """

    def __init__(self, strict: bool = False):
        """
        Initialize an engine without a maze.

        Args:
            strict: Reject unrecognized characters when parsing maze text.
        """
        self.strict = strict
        self.maze: Optional[Maze] = None

    def _require_maze(self) -> Maze:
        if self.maze is None:
            raise MazeNotInitializedError()
        return self.maze

    def create_maze(self, maze_text: Optional[str]) -> Maze:
        """
        Parse maze text and make it the current maze.

        The previous maze and its history are discarded only once parsing
        succeeds.

        Raises:
            MazeParseError: If the text is not a valid maze.
        """
        maze = parse_maze_text(maze_text, strict=self.strict)
        self.maze = maze
        logger.info(
            f"Maze created: {maze.width}x{maze.height}, "
            f"explorer at {maze.explorer.location.to_dict()}"
        )
        return maze

    def get_maze_object_by_location(self, location: Location) -> Optional[MazeCell]:
        """Get the cell at location, None when off-grid."""
        return self._require_maze().object_at(location)

    def get_obj_count(self, kind: MazeObjectType) -> int:
        """Count maze objects of exactly kind."""
        return self._require_maze().count(kind)

    def get_explorer(self) -> Optional[Explorer]:
        return self._require_maze().explorer

    def get_current_explorer(self) -> Optional[Explorer]:
        """Get the explorer, None if the maze has none."""
        return self.get_explorer()

    def turn_explorer(self, direction: TurnDirection) -> Optional[Explorer]:
        """
        Rotate the explorer 90 degrees.

        Returns:
            The turned explorer, or None if the maze has no explorer.
        """
        explorer = self.get_explorer()
        if explorer is None:
            return None

        explorer.face_direction = explorer.face_direction.turn(direction)
        logger.debug(f"Explorer turned {direction.value}, now facing {explorer.face_direction.value}")
        return explorer

    def get_direction_movement_object(
        self, obj: MazeObject, direction: FaceDirection
    ) -> Optional[MazeCell]:
        """Get the cell adjacent to obj in direction, None when off-grid."""
        return self._require_maze().object_at(obj.location.neighbour(direction))

    def get_face_direction_movement_object(
        self, explorer: Optional[Explorer] = None
    ) -> Optional[MazeCell]:
        """Get the cell the explorer faces, None if off-grid or no explorer."""
        if explorer is None:
            explorer = self.get_explorer()
        if explorer is None:
            return None
        return self.get_direction_movement_object(explorer, explorer.face_direction)

    def can_move(self) -> bool:
        """True if the faced cell exists and is not a wall."""
        return _is_passable(self.get_face_direction_movement_object())

    def move(self) -> None:
        """
        Move the explorer one cell forward and record the step.

        Raises:
            PreconditionViolatedError: If the explorer cannot move.
        """
        self.move_explorer()
        self.save_step_history()

    def move_explorer(self) -> None:
        """Relocate the explorer onto the faced cell."""
        explorer = self.get_explorer()
        if explorer is None:
            raise PreconditionViolatedError("Maze has no explorer to move")

        target = self.get_face_direction_movement_object(explorer)
        if target is None:
            raise PreconditionViolatedError(
                f"Cannot move {explorer.face_direction.value} from "
                f"{explorer.location.to_dict()} - nothing there"
            )
        if target.kind is MazeObjectType.WALL:
            raise PreconditionViolatedError(
                f"Cannot move {explorer.face_direction.value} from "
                f"{explorer.location.to_dict()} - wall blocking"
            )

        explorer.location = target.location

    def save_step_history(self) -> None:
        """Append the explorer's current location to the move history."""
        maze = self._require_maze()
        if maze.explorer is None:
            raise PreconditionViolatedError("Maze has no explorer to record")

        step = maze.move_history.record(maze.explorer.location)
        logger.debug(f"Step {step.step_no} recorded at {step.location.to_dict()}")

    def finished(self) -> bool:
        """True if the explorer faces the exit. Its own cell is not checked."""
        target = self.get_face_direction_movement_object()
        return target is not None and target.kind is MazeObjectType.EXIT

    def get_move_history(self) -> MoveHistory:
        return self._require_maze().move_history

    def get_available_movement_options(self) -> list[FaceDirection]:
        """Directions the explorer could move in, ordered up, left, down, right."""
        explorer = self.get_explorer()
        if explorer is None:
            return []

        return [
            direction
            for direction in MOVEMENT_OPTION_ORDER
            if _is_passable(self.get_direction_movement_object(explorer, direction))
        ]


def _is_passable(cell: Optional[MazeCell]) -> bool:
    return cell is not None and cell.kind is not MazeObjectType.WALL
