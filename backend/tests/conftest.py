"""Pytest configuration and fixtures."""

import os
from typing import AsyncGenerator

# Tests create many mazes from one client address
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from maze_explorer.api.deps import get_maze_service
from maze_explorer.core.maze_engine import MazeEngine
from maze_explorer.main import app
from maze_explorer.services.maze_service import MazeService


# Sample maze for testing
SIMPLE_MAZE = """XXXXX
XS  X
X X X
X  FX
XXXXX"""


@pytest.fixture
def engine() -> MazeEngine:
    """Engine without a maze."""
    return MazeEngine()


@pytest.fixture
def simple_engine(engine) -> MazeEngine:
    """Engine holding SIMPLE_MAZE."""
    engine.create_maze(SIMPLE_MAZE)
    return engine


@pytest.fixture
def maze_service() -> MazeService:
    """Fresh maze service."""
    return MazeService()


@pytest_asyncio.fixture(scope="function")
async def client(maze_service) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client bound to a fresh maze service."""

    def override_get_maze_service():
        return maze_service

    app.dependency_overrides[get_maze_service] = override_get_maze_service

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()
