"""Tests for maze parser and maze file loading."""

import pytest
from pathlib import Path

from maze_explorer.core.exceptions import (
    InputMissingError,
    InvalidCharacterError,
    MazeLoadError,
    MultipleStartPointsError,
    StartPointMissingError,
)
from maze_explorer.core.grid import FaceDirection, Location, MazeObjectType
from maze_explorer.core.maze_parser import (
    list_maze_files,
    load_maze_file,
    parse_maze_text,
    split_lines,
    validate_maze_text,
)


# Sample maze for testing
SIMPLE_MAZE = """XXXXX
XS  X
X X X
X  FX
XXXXX"""


class TestParseMazeText:
    """Tests for parsing maze text."""

    def test_parse_simple_maze(self):
        """Test parsing a simple valid maze."""
        maze = parse_maze_text(SIMPLE_MAZE)

        assert maze.width == 5
        assert maze.height == 5
        assert maze.count(MazeObjectType.WALL) == 17
        assert maze.count(MazeObjectType.EMPTY_SPACE) == 6
        assert maze.count(MazeObjectType.START_POINT) == 1
        assert maze.count(MazeObjectType.EXIT) == 1
        assert maze.object_at(Location(3, 3)).kind is MazeObjectType.EXIT

    def test_explorer_placed_on_start_facing_right(self):
        maze = parse_maze_text(SIMPLE_MAZE)

        assert maze.explorer is not None
        assert maze.explorer.location == Location(1, 1)
        assert maze.explorer.face_direction is FaceDirection.RIGHT
        assert len(maze.move_history) == 0

    def test_counts_match_characters(self):
        text = "XX S\nX  F\n X X"
        maze = parse_maze_text(text)
        assert maze.count(MazeObjectType.WALL) == text.count("X")
        assert maze.count(MazeObjectType.EMPTY_SPACE) == text.count(" ")

    def test_single_row(self):
        maze = parse_maze_text("XS F")
        assert maze.explorer.location == Location(1, 0)
        assert maze.object_at(Location(2, 0)).kind is MazeObjectType.EMPTY_SPACE
        assert maze.object_at(Location(4, 0)) is None

    def test_crlf_and_lf_line_endings(self):
        lf = parse_maze_text("XXX\nXSF\nXXX")
        crlf = parse_maze_text("XXX\r\nXSF\r\nXXX")
        mixed = parse_maze_text("XXX\r\nXSF\nXXX")

        for maze in (lf, crlf, mixed):
            assert maze.height == 3
            assert maze.explorer.location == Location(1, 1)
            assert maze.count(MazeObjectType.WALL) == 7

    def test_split_lines(self):
        assert split_lines("a\r\nb\nc") == ["a", "b", "c"]
        assert split_lines("ab") == ["ab"]

    def test_unrecognized_characters_are_skipped(self):
        maze = parse_maze_text("XS.F")
        assert maze.object_at(Location(2, 0)) is None
        assert maze.object_at(Location(3, 0)).kind is MazeObjectType.EXIT
        assert len(maze) == 3

    def test_none_input_raises_input_missing(self):
        with pytest.raises(InputMissingError):
            parse_maze_text(None)

    def test_empty_input_raises_input_missing(self):
        with pytest.raises(InputMissingError):
            parse_maze_text("")

    def test_no_recognized_characters_raises_invalid_character(self):
        with pytest.raises(InvalidCharacterError):
            parse_maze_text("I")
        with pytest.raises(InvalidCharacterError):
            parse_maze_text("\n\r\n")

    def test_missing_start_point(self):
        with pytest.raises(StartPointMissingError, match="start point"):
            parse_maze_text("X")
        with pytest.raises(StartPointMissingError):
            parse_maze_text("XXXXX\nX  FX\nXXXXX")

    def test_whitespace_only_has_no_start_point(self):
        with pytest.raises(StartPointMissingError):
            parse_maze_text("   \n   ")

    def test_multiple_start_points(self):
        with pytest.raises(MultipleStartPointsError, match=r"first at \(1, 1\), second at \(3, 1\)"):
            parse_maze_text("XXXXX\nXS SX\nXXXXX")

    def test_strict_rejects_unrecognized_characters(self):
        with pytest.raises(InvalidCharacterError, match="Invalid character") as exc_info:
            parse_maze_text("XS\nX?F", strict=True)
        assert exc_info.value.char == "?"
        assert exc_info.value.location == (1, 1)

    def test_strict_accepts_clean_maze(self):
        maze = parse_maze_text("XXX\r\nXSF\r\nXXX", strict=True)
        assert maze.explorer.location == Location(1, 1)


class TestValidateMazeText:
    """Tests for maze validation helper."""

    def test_validate_valid_maze(self):
        is_valid, error = validate_maze_text(SIMPLE_MAZE)
        assert is_valid is True
        assert error is None

    def test_validate_missing_start(self):
        is_valid, error = validate_maze_text("XXX\nX FX")
        assert is_valid is False
        assert "start point" in error

    def test_validate_strict(self):
        assert validate_maze_text("XS.F")[0] is True
        is_valid, error = validate_maze_text("XS.F", strict=True)
        assert is_valid is False
        assert "Invalid character" in error


class TestLoadMazeFile:
    """Tests for loading maze files from filesystem."""

    def test_load_maze_file(self, tmp_path):
        path = tmp_path / "maze.txt"
        path.write_text(SIMPLE_MAZE)

        assert load_maze_file(path) == SIMPLE_MAZE
        assert load_maze_file(str(path)) == SIMPLE_MAZE

    def test_load_keeps_crlf(self, tmp_path):
        path = tmp_path / "maze.txt"
        path.write_bytes(b"XXX\r\nXSF\r\nXXX")

        text = load_maze_file(path)
        assert text == "XXX\r\nXSF\r\nXXX"
        assert parse_maze_text(text).height == 3

    def test_load_maze_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            load_maze_file("/nonexistent/path/maze.txt")

    def test_load_directory_raises(self, tmp_path):
        with pytest.raises(MazeLoadError, match="not a file"):
            load_maze_file(tmp_path)

    def test_load_undecodable_file_raises(self, tmp_path):
        path = tmp_path / "maze.txt"
        path.write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(MazeLoadError, match="Failed to read"):
            load_maze_file(path)


class TestListMazeFiles:
    """Tests for listing maze files in a directory."""

    def test_list_maze_files(self, tmp_path):
        (tmp_path / "b.txt").write_text(SIMPLE_MAZE)
        (tmp_path / "a.txt").write_text(SIMPLE_MAZE)
        (tmp_path / "notes.md").write_text("ignored")

        assert [p.name for p in list_maze_files(tmp_path)] == ["a.txt", "b.txt"]

    def test_list_empty_directory(self, tmp_path):
        assert list_maze_files(tmp_path) == []

    def test_list_nonexistent_directory(self):
        with pytest.raises(FileNotFoundError):
            list_maze_files("/nonexistent/path")

    def test_bundled_mazes_are_valid(self):
        mazes_dir = Path(__file__).parent.parent / "mazes"
        files = list_maze_files(mazes_dir)
        assert len(files) >= 1
        for maze_file in files:
            is_valid, error = validate_maze_text(load_maze_file(maze_file), strict=True)
            assert is_valid is True, f"Maze {maze_file.name} failed: {error}"
