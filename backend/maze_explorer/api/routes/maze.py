"""Maze routes for creating a maze and steering its explorer."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request, status
from slowapi import Limiter
from slowapi.util import get_remote_address

from maze_explorer.api.deps import MazeServiceDep
from maze_explorer.config import get_settings
from maze_explorer.core.grid import Explorer, Location, MazeCell, Step, TurnDirection
from maze_explorer.core.maze_parser import list_maze_files, load_maze_file
from maze_explorer.schemas.maze import (
    ExplorerResponse,
    ExplorerStateResponse,
    FinishedResponse,
    MazeCreateRequest,
    MazeCreateResponse,
    MazeFileListResponse,
    MazeLoadRequest,
    MazeObjectLookupResponse,
    MazeObjectResponse,
    MazePosition,
    MoveHistoryResponse,
    MoveResponse,
    MovementOptionsResponse,
    StepResponse,
    TurnRequest,
    TurnResponse,
)
from maze_explorer.services.maze_service import CreateMazeResult

logger = logging.getLogger(__name__)
settings = get_settings()
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

router = APIRouter(prefix="/maze", tags=["Maze"])


def _position(location: Location) -> MazePosition:
    return MazePosition(x=location.x, y=location.y)


def _explorer(explorer: Optional[Explorer]) -> Optional[ExplorerResponse]:
    if explorer is None:
        return None
    return ExplorerResponse(
        location=_position(explorer.location),
        face_direction=explorer.face_direction.value,
    )


def _object(cell: Optional[MazeCell]) -> Optional[MazeObjectResponse]:
    if cell is None:
        return None
    return MazeObjectResponse(kind=cell.kind.value, location=_position(cell.location))


def _step(step: Step) -> StepResponse:
    return StepResponse(step_no=step.step_no, location=_position(step.location))


def _created(result: CreateMazeResult) -> MazeCreateResponse:
    return MazeCreateResponse(
        width=result.maze.width,
        height=result.maze.height,
        number_of_empty_spaces=result.number_of_empty_spaces,
        number_of_walls=result.number_of_walls,
        explorer=_explorer(result.maze.explorer),
    )


@router.post(
    "",
    response_model=MazeCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def create_maze(
    request: Request,
    maze_data: MazeCreateRequest,
    service: MazeServiceDep,
) -> MazeCreateResponse:
    """Create a maze from text.

    Replaces the current maze. The explorer starts on the start point (S)
    facing right.
    """
    return _created(service.create_maze(maze_data.maze_text))


@router.post(
    "/load",
    response_model=MazeCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(f"{settings.rate_limit_requests}/minute")
async def load_maze(
    request: Request,
    load_data: MazeLoadRequest,
    service: MazeServiceDep,
) -> MazeCreateResponse:
    """Create a maze from one of the bundled maze files."""
    path = settings.mazes_dir / f"{load_data.name}.txt"
    try:
        maze_text = load_maze_file(path)
    except FileNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Maze not found: {load_data.name}",
        )

    logger.info(f"Loading maze file {path.name}")
    return _created(service.create_maze(maze_text))


@router.get(
    "/files",
    response_model=MazeFileListResponse,
)
async def list_mazes() -> MazeFileListResponse:
    """List the bundled maze files that can be loaded by name."""
    try:
        names = [path.stem for path in list_maze_files(settings.mazes_dir)]
    except FileNotFoundError:
        names = []
    return MazeFileListResponse(mazes=names, total=len(names))


@router.get(
    "/object",
    response_model=MazeObjectLookupResponse,
)
async def get_object(
    service: MazeServiceDep,
    x: int = Query(..., description="Column, zero-based"),
    y: int = Query(..., description="Row, zero-based"),
) -> MazeObjectLookupResponse:
    """Get the cell at a location. Object is null for off-grid locations."""
    cell = service.get_maze_object_by_location(Location(x, y))
    return MazeObjectLookupResponse(object=_object(cell))


@router.post(
    "/turn",
    response_model=TurnResponse,
)
async def turn(
    turn_data: TurnRequest,
    service: MazeServiceDep,
) -> TurnResponse:
    """Turn the explorer 90 degrees left or right."""
    result = service.turn(TurnDirection(turn_data.direction))
    return TurnResponse(
        explorer=_explorer(result.explorer),
        front_object=_object(result.front_object),
    )


@router.post(
    "/move",
    response_model=MoveResponse,
    response_model_exclude_unset=True,
)
async def move(service: MazeServiceDep) -> MoveResponse:
    """Move the explorer one cell forward.

    A blocked move is not an error: the response only carries success=false.
    """
    result = service.move()
    if not result.success:
        return MoveResponse(success=False)

    return MoveResponse(
        success=True,
        history=[_step(step) for step in result.history],
        current_explorer=_explorer(result.current_explorer),
        front_object=_object(result.front_object),
        available_movement_options=[d.value for d in result.available_movement_options],
        finished=result.finished,
    )


@router.get(
    "/explorer",
    response_model=ExplorerStateResponse,
)
async def get_explorer(service: MazeServiceDep) -> ExplorerStateResponse:
    """Get the explorer's location and facing direction."""
    return ExplorerStateResponse(explorer=_explorer(service.current_explorer()))


@router.get(
    "/history",
    response_model=MoveHistoryResponse,
)
async def get_history(service: MazeServiceDep) -> MoveHistoryResponse:
    """Get every step the explorer has taken, oldest first."""
    steps = [_step(step) for step in service.move_history()]
    return MoveHistoryResponse(steps=steps, total=len(steps))


@router.get(
    "/options",
    response_model=MovementOptionsResponse,
)
async def get_options(service: MazeServiceDep) -> MovementOptionsResponse:
    """Get the directions the explorer could move in."""
    return MovementOptionsResponse(
        options=[d.value for d in service.available_movement_options()]
    )


@router.get(
    "/finished",
    response_model=FinishedResponse,
)
async def get_finished(service: MazeServiceDep) -> FinishedResponse:
    """Whether the explorer faces the exit."""
    return FinishedResponse(finished=service.finished())
