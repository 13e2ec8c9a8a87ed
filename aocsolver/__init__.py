"""Advent of Code puzzle solutions with vectors, a grid, an IntCode computer and an input downloader."""

__version__ = "0.1.0"