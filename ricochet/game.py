"""Running a game: setup prompts, rounds, bids, scoring and the winner."""

from __future__ import annotations

import argparse
import random
import re
import sys
import time
from enum import Enum
from typing import Callable, Sequence

from ricochet.board import (
    Grid,
    Robot,
    Target,
    create_grid,
    fill_board,
    random_dimensions,
)
from ricochet.movement import BlockedMove, Direction, RobotMover, render_grid

try:
    import termios
except ImportError:  # not available on every platform
    termios = None  # type: ignore[assignment]

ROUNDS = 5
PAUSE_BETWEEN_ROUNDS = 5
CLEAR = "\x1b[H\x1b[2J"

Reader = Callable[[], str]
Writer = Callable[[str], object]

RULES = (
    "Les robots doivent rejoindre une cible définie aléatoirement en un minimum "
    "de mouvements. Un mouvement est un déplacement en ligne droite jusqu’à ce que "
    "le robot rencontre un obstacle (un autre robot ou un mur). Les robots « glissent » "
    "donc dans une direction donnée à chaque mouvement. A chaque tour, un robot est "
    "choisi aléatoirement, et une cible aléatoire également. Chaque joueur doit "
    "réfléchir au nombre de mouvements nécessaires pour que le robot atteigne sa "
    "cible, uniquement en regardant la grille de jeu. Une fois que tous les joueurs "
    "ont déterminé dans leur tête le nombre de mouvements, ils doivent saisir ces "
    "nombres, et c’est le joueur avec le nombre de mouvements le plus faible qui doit "
    "jouer : il doit déplacer son robot en indiquant à chaque fois la direction dans "
    "la grille orthogonale (4 directions). Le programme compte le nombre de "
    "mouvements au fur et à mesure, et quand le robot atteint sa cible, si le nombre "
    "de mouvements est correct, le joueur marque 1 point, sinon tous les autres "
    "joueurs marquent 1 point. Le gagnant de la partie est celui qui obtient le plus "
    "grand score à la fin d’un nombre de manches fixé à l’avance."
)

_DIFFICULTY_HELP = "(1 : 2 mintues, 2 : 1 minutes, 3 : 30 secondes , 4 : 15 secondes)"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Difficulty(Enum):
    """How long the board is shown before the players bid."""

    EASY = 1
    MEDIUM = 2
    HARD = 3
    EXPERT = 4

    @property
    def seconds(self) -> int:
        return {
            Difficulty.EASY: 120,
            Difficulty.MEDIUM: 60,
            Difficulty.HARD: 30,
            Difficulty.EXPERT: 15,
        }[self]


class RoundOutcome(Enum):
    """How a round ended for the player with the lowest bid."""

    EXACT = "exact"
    EARLY = "early"
    MISSED = "missed"


def _parse_int(line: str) -> int | None:
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else None


def prompt_int(
    read: Reader,
    write: Writer,
    prompt: str,
    accept: Callable[[int], bool],
    complaint: str,
) -> int:
    """Ask until a line starting with an accepted integer is entered."""
    while True:
        write(prompt)
        value = _parse_int(read())
        if value is not None and accept(value):
            return value
        write(complaint + "\n")


def setup_game(read: Reader, write: Writer) -> tuple[int, Difficulty]:
    """Show the rules, then ask for the number of players and the difficulty."""
    write(RULES + "\n")
    players = prompt_int(
        read,
        write,
        "Entrez le nombre de joueurs: ",
        lambda n: n > 1,
        "entrer un nombre supérieur à 1",
    )
    level = prompt_int(
        read,
        write,
        f"Entrez difficulté entre 1 et 4 {_DIFFICULTY_HELP}: ",
        lambda n: 1 <= n <= 4,
        f"entrez un nombre supérieur à 1 et inférieur à 4 {_DIFFICULTY_HELP}",
    )
    return players, Difficulty(level)


def choose_round(
    rng: random.Random,
    grid: Grid,
    robots: Sequence[Robot],
    targets: Sequence[Target],
) -> tuple[int, int]:
    """Pick a robot and a target that no robot is standing on.

    Returns the robot index and the target index.
    """
    while True:
        robot_index = rng.randrange(len(robots))
        target_index = rng.randrange(len(targets))
        coord = targets[target_index].coord
        if not "1" <= grid[coord.row][coord.col] <= "4":
            return robot_index, target_index


def lowest_bid(bids: Sequence[int]) -> tuple[int, int]:
    """Return the index and value of the first lowest bid."""
    if not bids:
        raise ValueError("no bids")
    index = min(range(len(bids)), key=bids.__getitem__)
    return index, bids[index]


def settle_round(
    scores: list[int], bidder: int, moves_left: int, reached: bool
) -> RoundOutcome | None:
    """Update scores if the round is over; return None while it goes on."""
    if reached:
        if moves_left == 0:
            scores[bidder] += 2
            return RoundOutcome.EXACT
        if moves_left > 0:
            scores[bidder] -= 1
            return RoundOutcome.EARLY
        return None
    if moves_left <= 0:
        for player in range(len(scores)):
            if player != bidder:
                scores[player] += 1
        return RoundOutcome.MISSED
    return None


def format_scores(scores: Sequence[int]) -> str:
    """One line per player with their points."""
    return "".join(
        f" Joueur {number} : {points} point\n"
        for number, points in enumerate(scores, start=1)
    )


def winners(scores: Sequence[int]) -> list[int]:
    """Player numbers (from 1) holding the highest score."""
    if not scores:
        raise ValueError("no scores")
    best = max(scores)
    return [number for number, points in enumerate(scores, start=1) if points == best]


def _prompt_direction(read: Reader, write: Writer) -> Direction:
    valid = {d.value for d in Direction}
    while True:
        write("Entrez votre déplacement :\n")
        letter = read()[:1]
        if letter in valid:
            return Direction(letter)
        write("Mauvais déplacment\n")


def play_round(
    game_rng: random.Random,
    grid: Grid,
    robots: list[Robot],
    targets: list[Target],
    player_count: int,
    difficulty: Difficulty,
    scores: list[int],
    round_number: int,
    read: Reader,
    write: Writer,
    wait: Callable[[int], object],
) -> RoundOutcome:
    """Play one round: show the board, collect bids, then let the lowest bidder move."""
    robot_index, target_index = choose_round(game_rng, grid, robots, targets)
    robot = robots[robot_index]
    target = targets[target_index]

    def show() -> None:
        write(render_grid(grid, robot.symbol, target.symbol, round_number, ROUNDS))

    write(f"Le robot est : {robot.symbol}\nLa cible est {target.symbol}\n")
    write(f"Vous avez {difficulty.seconds} secondes ( difficulté {difficulty.value})\n")
    show()
    wait(difficulty.seconds)
    write(CLEAR)

    bids = [
        prompt_int(
            read,
            write,
            CLEAR + f"joueur N°{player}, entrez le nombre de déplacements "
            "necessaire pour arriver au robot:\n",
            lambda n: n > 0,
            "Nombre de déplacement invalide, recommencez",
        )
        for player in range(1, player_count + 1)
    ]

    bidder, bid = lowest_bid(bids)
    write(f"plus petit chemin est en {bid} deplacement\n")
    show()
    write(
        f"Joueur N°{bidder + 1}, tracer le chemin que vous avez trouvé pour atteindre "
        "la cible (haut : z, droite : d, bas : s, gauche : q) \n"
    )

    mover = RobotMover(grid, robots, targets, robot_index, bid)
    while True:
        direction = _prompt_direction(read, write)
        try:
            mover.move(direction)
        except BlockedMove:
            write("Vous ne pouvez pas aller dans cette direction\n")
        except ValueError:
            write("vous avez fais trop de déplacment\n")

        outcome = settle_round(scores, bidder, mover.moves_left, mover.on_target(target))
        if outcome is RoundOutcome.EXACT:
            write(
                "Vous avez atteint la cible avec le nombre de mouvement que vous "
                "avez indiquez, vous gagnez 2 points !\n"
            )
            write(format_scores(scores))
            return outcome
        if outcome is RoundOutcome.EARLY:
            write(
                "Vous avez atteint la cible mais il vous reste des mouvements non "
                "utilisé ! Vous perdez 1 point !\n"
            )
            write(format_scores(scores))
            return outcome
        if outcome is RoundOutcome.MISSED:
            write(
                "Vous n'avez pas atteint la cible ! Tout les autres joueurs "
                "gagnent 1 point !\n"
            )
            return outcome

        show()
        write(f"DEPLACEMENT RESTANT : {mover.moves_left}\n")


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _wait(seconds: int) -> None:
    """Sleep, then drop whatever was typed in the meantime."""
    time.sleep(seconds)
    if termios is not None and sys.stdin.isatty():
        termios.tcflush(sys.stdin.fileno(), termios.TCIFLUSH)


def main(argv: Sequence[str] | None = None) -> int:
    """Play a full game on the terminal."""
    parser = argparse.ArgumentParser(
        prog="ricochet", description="Sliding robots puzzle game for several players."
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the board and rounds")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    rows, cols = random_dimensions(rng)
    grid = create_grid(rows, cols)
    robots, targets = fill_board(grid, rng)

    write = _write_stdout
    try:
        player_count, difficulty = setup_game(input, write)
        scores = [0] * player_count
        for round_number in range(1, ROUNDS + 1):
            play_round(
                rng, grid, robots, targets, player_count, difficulty,
                scores, round_number, input, write, _wait,
            )
            write(f"Prochain tour dans {PAUSE_BETWEEN_ROUNDS} seconde\n")
            _wait(PAUSE_BETWEEN_ROUNDS)
            write(CLEAR)
    except (EOFError, KeyboardInterrupt):
        write("\n")
        return 1

    write(format_scores(scores))
    names = ", ".join(str(number) for number in winners(scores))
    write(f"Le(s) gagnant(s) est/sont le(s) joueur(s) {names} avec {max(scores)} points\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())