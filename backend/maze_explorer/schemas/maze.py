"""Maze schemas for request/response validation."""

from typing import Optional

from pydantic import BaseModel, Field


class MazePosition(BaseModel):
    """Schema for a location in the maze."""

    x: int
    y: int


class MazeObjectResponse(BaseModel):
    """Schema for a maze cell."""

    kind: str  # wall, empty_space, start_point, exit
    location: MazePosition


class ExplorerResponse(BaseModel):
    """Schema for the explorer."""

    location: MazePosition
    face_direction: str  # up, down, left, right


class StepResponse(BaseModel):
    """Schema for one move history step."""

    step_no: int
    location: MazePosition


class MazeCreateRequest(BaseModel):
    """Schema for creating a maze from text."""

    maze_text: Optional[str] = None


class MazeLoadRequest(BaseModel):
    """Schema for creating a maze from a bundled maze file."""

    name: str = Field(..., min_length=1, max_length=100, pattern="^[A-Za-z0-9_-]+$")


class MazeCreateResponse(BaseModel):
    """Schema for maze creation response."""

    width: int
    height: int
    number_of_empty_spaces: int
    number_of_walls: int
    explorer: Optional[ExplorerResponse] = None


class MazeFileListResponse(BaseModel):
    """Schema for listing bundled maze files."""

    mazes: list[str]
    total: int


class MazeObjectLookupResponse(BaseModel):
    """Schema for a lookup by location. Object is null when off-grid."""

    object: Optional[MazeObjectResponse] = None


class TurnRequest(BaseModel):
    """Schema for turn request."""

    direction: str = Field(..., pattern="^(left|right)$")


class TurnResponse(BaseModel):
    """Schema for turn response."""

    explorer: Optional[ExplorerResponse] = None
    front_object: Optional[MazeObjectResponse] = None


class MoveResponse(BaseModel):
    """Schema for move response. Only success is set on a blocked move."""

    success: bool
    history: Optional[list[StepResponse]] = None
    current_explorer: Optional[ExplorerResponse] = None
    front_object: Optional[MazeObjectResponse] = None
    available_movement_options: Optional[list[str]] = None
    finished: Optional[bool] = None


class ExplorerStateResponse(BaseModel):
    """Schema for the current explorer query."""

    explorer: Optional[ExplorerResponse] = None


class MoveHistoryResponse(BaseModel):
    """Schema for move history."""

    steps: list[StepResponse]
    total: int


class MovementOptionsResponse(BaseModel):
    """Schema for available movement options."""

    options: list[str]


class FinishedResponse(BaseModel):
    """Schema for finished query."""

    finished: bool
