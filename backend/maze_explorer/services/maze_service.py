"""Maze service packaging engine results for callers."""

from dataclasses import dataclass, field
from typing import Optional

from maze_explorer.core.grid import (
    Explorer,
    FaceDirection,
    Location,
    Maze,
    MazeCell,
    MazeObjectType,
    MoveHistory,
    TurnDirection,
)
from maze_explorer.core.maze_engine import MazeEngine


@dataclass
class CreateMazeResult:
    """Result of creating a maze."""

    maze: Maze
    number_of_empty_spaces: int
    number_of_walls: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        explorer = self.maze.explorer
        return {
            "width": self.maze.width,
            "height": self.maze.height,
            "number_of_empty_spaces": self.number_of_empty_spaces,
            "number_of_walls": self.number_of_walls,
            "explorer": explorer.to_dict() if explorer else None,
        }


@dataclass
class TurnResult:
    """Result of a turn. Explorer is None when the maze has none."""

    explorer: Optional[Explorer]
    front_object: Optional[MazeCell]

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "explorer": self.explorer.to_dict() if self.explorer else None,
            "front_object": self.front_object.to_dict() if self.front_object else None,
        }


@dataclass
class MoveResult:
    """Result of a move. Only success is set when the explorer could not move."""

    success: bool
    history: Optional[MoveHistory] = None
    current_explorer: Optional[Explorer] = None
    front_object: Optional[MazeCell] = None
    available_movement_options: list[FaceDirection] = field(default_factory=list)
    finished: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        if not self.success:
            return {"success": False}
        return {
            "success": True,
            "history": [step.to_dict() for step in self.history] if self.history else [],
            "current_explorer": (
                self.current_explorer.to_dict() if self.current_explorer else None
            ),
            "front_object": self.front_object.to_dict() if self.front_object else None,
            "available_movement_options": [d.value for d in self.available_movement_options],
            "finished": self.finished,
        }


class MazeService:
    """
    Front door to a MazeEngine.

    Engine errors are not caught here; they reach the caller unchanged.
    """

    def __init__(self, engine: Optional[MazeEngine] = None, strict: bool = False):
        self.engine = engine if engine is not None else MazeEngine(strict=strict)

    def create_maze(self, maze_text: Optional[str]) -> CreateMazeResult:
        """Create a maze and count its empty spaces and walls."""
        maze = self.engine.create_maze(maze_text)
        return CreateMazeResult(
            maze=maze,
            number_of_empty_spaces=self.engine.get_obj_count(MazeObjectType.EMPTY_SPACE),
            number_of_walls=self.engine.get_obj_count(MazeObjectType.WALL),
        )

    def get_maze_object_by_location(self, location: Location) -> Optional[MazeCell]:
        return self.engine.get_maze_object_by_location(location)

    def turn(self, direction: TurnDirection) -> TurnResult:
        """Turn the explorer and report what it now faces."""
        explorer = self.engine.turn_explorer(direction)
        return TurnResult(
            explorer=explorer,
            front_object=self.engine.get_face_direction_movement_object(),
        )

    def move(self) -> MoveResult:
        """Move the explorer forward if it can, and report the new state."""
        if not self.engine.can_move():
            return MoveResult(success=False)

        self.engine.move()

        return MoveResult(
            success=True,
            history=self.engine.get_move_history(),
            current_explorer=self.engine.get_current_explorer(),
            front_object=self.engine.get_face_direction_movement_object(),
            available_movement_options=self.engine.get_available_movement_options(),
            finished=self.engine.finished(),
        )

    def current_explorer(self) -> Optional[Explorer]:
        return self.engine.get_current_explorer()

    def move_history(self) -> MoveHistory:
        return self.engine.get_move_history()

    def available_movement_options(self) -> list[FaceDirection]:
        return self.engine.get_available_movement_options()

    def finished(self) -> bool:
        return self.engine.finished()
