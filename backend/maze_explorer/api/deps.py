"""API dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends, Request

from maze_explorer.services.maze_service import MazeService


def get_maze_service(request: Request) -> MazeService:
    """Get the maze service shared by the application."""
    return request.app.state.maze_service


# Type alias for cleaner route signatures
MazeServiceDep = Annotated[MazeService, Depends(get_maze_service)]
