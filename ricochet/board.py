"""Board generation: grid layout, outer walls, robots and targets."""

from __future__ import annotations

import random
from dataclasses import dataclass

EMPTY = "0"
GAP = "I"
WALL = "M"

ROBOT_COUNT = 4
TARGET_COUNT = 18
FIRST_ROBOT = "1"
FIRST_TARGET = "a"

MIN_SIDE = 15
SIDE_SPREAD = 6

# Wall corners placed around a target: (row offset, column offset).
_CORNERS = ((-1, -1), (-1, 1), (1, 1), (1, -1))
_TARGET_NEIGHBOURS = (
    (2, 2), (2, 0), (2, -2), (-2, -2), (0, -2), (-2, 0), (-2, 2), (0, 2),
)

Grid = list[list[str]]


@dataclass(frozen=True)
class Coord:
    """A cell position: row first, then column."""

    row: int
    col: int


@dataclass
class Robot:
    """A robot, identified by its digit symbol, and where it stands."""

    symbol: str
    coord: Coord


@dataclass
class Target:
    """A target, identified by its letter symbol, and where it lies."""

    symbol: str
    coord: Coord


def _is_robot(cell: str) -> bool:
    return "1" <= cell <= "4"


def _is_target(cell: str) -> bool:
    return "a" <= cell <= "z"


def random_dimensions(rng: random.Random) -> tuple[int, int]:
    """Pick a grid size: 15 to 20 playable cells per side, walls in between."""
    rows = rng.randrange(SIDE_SPREAD) + MIN_SIDE
    cols = rng.randrange(SIDE_SPREAD) + MIN_SIDE
    return rows * 2 + 1, cols * 2 + 1


def create_grid(rows: int, cols: int) -> Grid:
    """Return a rows x cols grid filled with empty cells."""
    if rows <= 0 or cols <= 0:
        raise ValueError(f"grid dimensions must be positive, got {rows}x{cols}")
    return [[EMPTY] * cols for _ in range(rows)]


def pick_wall_pair(rng: random.Random, start: int, end: int) -> tuple[int, int]:
    """Pick two distinct even positions in [start, end]."""
    evens = sum(1 for n in range(start, end + 1) if n % 2 == 0)
    if evens < 2:
        raise ValueError(f"no two distinct even positions in [{start}, {end}]")
    span = end - start + 1
    while True:
        first = rng.randrange(span) + start
        second = rng.randrange(span) + start
        if first % 2 == 0 and second % 2 == 0 and first != second:
            return first, second


def pick_robot_cell(rng: random.Random, length: int, width: int) -> Coord:
    """Pick an odd-indexed cell with row in [1, length] and column in [1, width]."""
    if length < 1 or width < 1:
        raise ValueError("robot area must be at least one cell each way")
    while True:
        row = rng.randrange(length) + 1
        col = rng.randrange(width) + 1
        if row % 2 == 1 and col % 2 == 1:
            return Coord(row, col)


def pick_target_cell(rng: random.Random, length: int, width: int) -> Coord:
    """Pick an odd-indexed cell with row in [3, length+2] and column in [3, width+2]."""
    if length < 1 or width < 1:
        raise ValueError("target area must be at least one cell each way")
    while True:
        row = rng.randrange(length) + 3
        col = rng.randrange(width) + 3
        if row % 2 == 1 and col % 2 == 1:
            return Coord(row, col)


def _draw_frame(grid: Grid) -> None:
    rows, cols = len(grid), len(grid[0])
    for i, line in enumerate(grid):
        for j in range(cols):
            if i % 2 == 0 or j % 2 == 0:
                line[j] = GAP
            if i in (0, rows - 1) or j in (0, cols - 1):
                line[j] = WALL


def _place_side_walls(grid: Grid, rng: random.Random) -> None:
    rows, cols = len(grid), len(grid[0])
    for col in pick_wall_pair(rng, 1, cols - 2):
        grid[1][col] = WALL
    for col in pick_wall_pair(rng, 1, cols - 2):
        grid[rows - 2][col] = WALL
    for row in pick_wall_pair(rng, 1, rows - 2):
        grid[row][1] = WALL
    for row in pick_wall_pair(rng, 1, rows - 2):
        grid[row][cols - 2] = WALL


def _place_robots(grid: Grid, rng: random.Random) -> list[Robot]:
    rows, cols = len(grid), len(grid[0])
    robots = []
    for n in range(ROBOT_COUNT):
        cell = pick_robot_cell(rng, rows - 2, cols - 2)
        while _is_robot(grid[cell.row][cell.col]):
            cell = pick_robot_cell(rng, rows - 2, cols - 2)
        symbol = chr(ord(FIRST_ROBOT) + n)
        grid[cell.row][cell.col] = symbol
        robots.append(Robot(symbol, cell))
    return robots


def _target_blocked(grid: Grid, cell: Coord) -> bool:
    here = grid[cell.row][cell.col]
    if _is_target(here) or _is_robot(here):
        return True
    return any(
        _is_target(grid[cell.row + dr][cell.col + dc])
        for dr, dc in _TARGET_NEIGHBOURS
    )


def _place_targets(grid: Grid, rng: random.Random) -> list[Target]:
    rows, cols = len(grid), len(grid[0])
    targets = []
    for n in range(TARGET_COUNT):
        cell = pick_target_cell(rng, rows - 5, cols - 5)
        while _target_blocked(grid, cell):
            cell = pick_target_cell(rng, rows - 5, cols - 5)
        symbol = chr(ord(FIRST_TARGET) + n)
        grid[cell.row][cell.col] = symbol
        targets.append(Target(symbol, cell))

        dr, dc = _CORNERS[rng.randrange(len(_CORNERS))]
        grid[cell.row + dr][cell.col] = WALL
        grid[cell.row][cell.col + dc] = WALL
        grid[cell.row + dr][cell.col + dc] = WALL
    return targets


def fill_board(grid: Grid, rng: random.Random) -> tuple[list[Robot], list[Target]]:
    """Lay out walls, four robots and eighteen targets on a fresh grid.

    The grid is modified in place; the placed robots and targets are returned.
    """
    if not grid or not grid[0]:
        raise ValueError("grid must not be empty")
    _draw_frame(grid)
    _place_side_walls(grid, rng)
    robots = _place_robots(grid, rng)
    targets = _place_targets(grid, rng)
    return robots, targets