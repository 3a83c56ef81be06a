# ricochet

A party puzzle for the terminal, with its prompts in French. Four numbered
robots (`1` to `4`) and eighteen lettered targets (`a` to `r`) are scattered
over a randomly sized grid (15 to 20 playable cells per side) with walls on
its edges and around every target. Each round one robot and one target are
drawn at random and the board is shown for a limited time. Every player then
works out how many moves the robot needs to reach the target.

A move sends the robot sliding in a straight line until it hits a wall or
another robot.

## Installing

```
pip install .
```

## Playing

```
ricochet
```

Use `ricochet --seed N` to get the same board and the same draws of robots
and targets from one game to the next.

The game first prints the rules, then asks for:

1. the number of players (at least 2);
2. a difficulty from 1 to 4, which sets how long the board stays visible:
   1 — 2 minutes, 2 — 1 minute, 3 — 30 seconds, 4 — 15 seconds.

After the board is hidden, each player types a bid: the number of moves they
think is needed (a positive number). The lowest bidder (the first one entered,
on a tie) then drives the robot with:

| key | direction |
|-----|-----------|
| `z` | up        |
| `d` | right     |
| `s` | down      |
| `q` | left      |

The robot of the round is shown in red and its target in green. A move that
is blocked straight away by a wall or a robot is refused and does not count.
Pressing Ctrl-C or ending the input stops the game.

## Scoring

- Reaching the target using exactly the number of moves bid: **+2** to the bidder.
- Reaching the target with moves left over: **−1** to the bidder.
- Running out of moves before reaching the target: **+1** to every other player.

After five rounds the scores are shown and the player or players with the
highest score win.

## Using the modules

- `ricochet.board`: `random_dimensions`, `create_grid` and `fill_board` build a
  board, returning the placed `Robot` and `Target` objects; each has a
  `symbol` and a `Coord` (`row`, `col`).
- `ricochet.movement`: `RobotMover` slides one robot (`move` takes a
  `Direction` or its key letter and raises `BlockedMove` when the robot cannot
  leave its cell), and `render_grid` draws the board as text.
- `ricochet.game`: the prompts, round logic (`choose_round`, `lowest_bid`,
  `settle_round`, `play_round`), `winners`, `format_scores` and `main`.

## What it does not do

All players share one terminal and one keyboard; there is no network play.
The number of rounds is fixed at five, and games and scores are not saved.

## Running the tests

```
pip install .[test]
pytest
```