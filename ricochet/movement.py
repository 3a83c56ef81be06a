"""Sliding robots across the board and drawing the board for a round."""

from __future__ import annotations

from enum import Enum

from ricochet.board import EMPTY, GAP, WALL, Coord, Grid, Robot, Target

RED = "\x1b[31m"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"


class Direction(Enum):
    """A move direction, keyed by the letter the player types."""

    UP = "z"
    DOWN = "s"
    LEFT = "q"
    RIGHT = "d"

    @property
    def delta(self) -> tuple[int, int]:
        """Row and column step for one cell in this direction."""
        return {
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }[self]


class BlockedMove(Exception):
    """Raised when a wall or another robot sits right next to the robot."""


def _is_robot(cell: str) -> bool:
    return "1" <= cell <= "4"


class RobotMover:
    """Moves one robot around the grid and counts the moves it has left.

    ``under`` holds the symbol of the target the robot is standing on, so
    that the target reappears once the robot leaves it.
    """

    def __init__(
        self,
        grid: Grid,
        robots: list[Robot],
        targets: list[Target],
        robot_index: int,
        moves_left: int,
    ) -> None:
        self.grid = grid
        self.robots = robots
        self.targets = targets
        self.robot_index = robot_index
        self.moves_left = moves_left
        self.under: str | None = None

    @property
    def robot(self) -> Robot:
        return self.robots[self.robot_index]

    def move(self, direction: Direction | str) -> Coord:
        """Slide the robot until it hits a wall or another robot.

        Returns the robot's new position. Raises BlockedMove when the robot
        cannot leave its cell that way, and ValueError when it has already
        used more moves than it announced.
        """
        direction = Direction(direction)
        dr, dc = direction.delta
        robot = self.robot
        row, col = robot.coord.row, robot.coord.col
        grid = self.grid

        if grid[row + dr][col + dc] == WALL or _is_robot(
            grid[row + 2 * dr][col + 2 * dc]
        ):
            raise BlockedMove(f"robot {robot.symbol} cannot move {direction.name.lower()}")
        if self.moves_left < 0:
            raise ValueError("too many moves made")

        stop = self._find_stop(row, col, dr, dc)

        grid[row][col] = self.under or EMPTY
        self.under = None
        self.moves_left -= 1

        stop_row, stop_col = stop
        landing = grid[stop_row][stop_col]
        if landing != EMPTY:
            self.under = landing
        grid[stop_row][stop_col] = robot.symbol
        robot.coord = Coord(stop_row, stop_col)
        return robot.coord

    def _find_stop(self, row: int, col: int, dr: int, dc: int) -> tuple[int, int]:
        rows, cols = len(self.grid), len(self.grid[0])
        r, c = row + dr, col + dc
        while 0 <= r < rows and 0 <= c < cols:
            cell = self.grid[r][c]
            if cell == WALL:
                return r - dr, c - dc
            if _is_robot(cell):
                return r - 2 * dr, c - 2 * dc
            r, c = r + dr, c + dc
        raise ValueError("no wall found in that direction")

    def on_target(self, target: Target) -> bool:
        """Whether the robot is standing on the given target."""
        return self.under == target.symbol


def render_grid(
    grid: Grid,
    robot_char: str,
    target_char: str,
    round_number: int,
    total_rounds: int,
) -> str:
    """Draw the board, the round's robot in red and its target in green."""
    lines = [f"TOUR {round_number}/{total_rounds}\n\n"]
    for row in grid:
        parts = []
        for cell in row:
            if cell == EMPTY:
                parts.append("* ")
            elif cell == GAP:
                parts.append("  ")
            elif cell == robot_char:
                parts.append(f"{RED}{cell} {RESET}")
            elif cell == target_char:
                parts.append(f"{GREEN}{cell} {RESET}")
            else:
                parts.append(f"{cell} ")
        lines.append("".join(parts) + "\n")
    return "".join(lines)