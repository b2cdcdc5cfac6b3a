# rpsgame

Rock, paper, scissor against the computer, played in your terminal.

## Install

    pip install .

## Play

    rpsgame

or, without installing the command:

    python -m rpsgame.engine

Each round you pick a number:

    0. ROCK - 1. PAPER - 2. SCISSOR

Only the first word on the line counts. A line that is not a number prints
`Incorrect input`; a number other than 0, 1 or 2 asks you to try again.
Empty lines are ignored.

The computer draws a number from 1 to 3000 at random: 1 to 1000 is Rock,
1001 to 1999 is Paper and 2000 to 3000 is Scissor. Both picks are shown and
the round is scored: a win adds a point to you, a loss adds a point to the
computer and a draw leaves the scores alone.

After every round you are asked `Do you want to continue? [y/n]`. Answer
`y`, `yes`, `Y` or `YES` to keep playing, or `n`, `no`, `N` or `NO` to stop;
anything else asks again. When you stop, the final scores are printed and
the command exits with status 0. If input ends or you press Ctrl-C, the
game stops without printing scores and exits with status 1.

## Use from Python

```python
import io
import random

from rpsgame.choices import Choice, Decision
from rpsgame.engine import GameEngine
from rpsgame.state import GameState

engine = GameEngine(stdin=io.StringIO("0\nn\n"), stdout=io.StringIO(), rng=random.Random(1))
final = engine.start()          # returns the final GameState
assert final.started is False

assert engine.decide(Choice.ROCK, Choice.SCISSOR) is Decision.WIN
assert str(Choice.PAPER) == "Paper"
assert Choice.PAPER.beats is Choice.ROCK

state = GameState()
state.add_player_score()
assert state.player_score == 1
```

- `rpsgame.choices`: `Choice` (`ROCK`, `PAPER`, `SCISSOR`, numbered 0 to 2,
  with a `beats` property) and `Decision` (`WIN`, `LOSE`, `DRAW`).
- `rpsgame.state`: `GameState`, a dataclass with `started`, `player_score`
  and `computer_score`, plus `add_player_score()` and `add_computer_score()`.
- `rpsgame.engine`: `GameEngine`, which reads from `stdin` and writes to
  `stdout` (the process streams by default) and draws with `rng`
  (a `random.Random`). Its methods are `start()`, `read_choice()`,
  `random_number()`, `choice_from_number(value)`, `decide(user, opponent)`
  and `should_continue()`. `decide` also writes both choices to the output.
  `read_choice` and `should_continue` raise `EOFError` when input ends.

`GameEngine.choice_from_number` raises `ValueError` for a number above 3000.

## What it does not do

Output is plain text: results are not coloured.

## Tests

    pip install ".[test]"
    pytest