"""Maze Explorer - grid maze engine with a single explorer."""

__version__ = "1.0.0"
