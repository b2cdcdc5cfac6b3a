"""Interactive rock-paper-scissor game against the computer."""

from __future__ import annotations

import random
import sys
from typing import TextIO

from .choices import Choice, Decision
from .state import GameState

RANDOM_LOW = 1
RANDOM_HIGH = 3000

_YES = frozenset({"y", "yes", "Y", "YES"})
_NO = frozenset({"n", "no", "N", "NO"})


class GameEngine:
    """Runs rounds, reading the player's moves and printing the results."""

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._rng = rng if rng is not None else random.Random()

    def _write(self, text: str) -> None:
        self._stdout.write(text)
        self._stdout.flush()

    def _readline(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise EOFError("input ended")
        return line

    def start(self) -> GameState:
        """Play rounds until the player stops; return the final state."""
        self._write("Welcome to rock paper scissor\n")
        state = GameState(started=True)

        while state.started:
            self._write("Chose one of the following: 0. ROCK - 1. PAPER - 2. SCISSOR\n")
            user = self.read_choice()
            opponent = self.choice_from_number(self.random_number())
            decision = self.decide(user, opponent)

            if decision is Decision.LOSE:
                state.add_computer_score()
                self._write(f"You lost | Your score: {state.player_score}\n")
                self._write(f"Computer's score: {state.computer_score}\n")
            elif decision is Decision.WIN:
                state.add_player_score()
                self._write(f"You win | Your score: {state.player_score}\n")
                self._write(f"Computer's score: {state.computer_score}\n")
            else:
                self._write("You draw\n")

            state.started = self.should_continue()

        self._write(f"You scored: {state.player_score}\n")
        self._write(f"Computer scored: {state.computer_score}\n")
        self._write("Goodbye!!\n")
        return state

    def read_choice(self) -> Choice:
        """Read numbers until one names a valid choice."""
        while True:
            line = self._readline()
            tokens = line.split()
            if not tokens:
                continue
            try:
                number = int(tokens[0])
            except ValueError:
                self._write("Incorrect input\n")
                continue
            try:
                return Choice(number)
            except ValueError:
                self._write("Incorrect input - Please try again: ")

    def random_number(self) -> int:
        """A uniformly drawn number from 1 to 3000 inclusive."""
        return self._rng.randint(RANDOM_LOW, RANDOM_HIGH)

    def choice_from_number(self, value: int) -> Choice:
        """Map a drawn number onto a choice."""
        if value <= 1000:
            return Choice.ROCK
        if value < 2000:
            return Choice.PAPER
        if value <= 3000:
            return Choice.SCISSOR
        raise ValueError(f"random value out of expected range: {value}")

    def decide(self, user: Choice, opponent: Choice) -> Decision:
        """Announce both choices and return the outcome for the player."""
        self._write(f"You chose: {user}\n")
        self._write(f"Computer chose: {opponent}\n")
        if user is opponent:
            return Decision.DRAW
        if user.beats is opponent:
            return Decision.WIN
        return Decision.LOSE

    def should_continue(self) -> bool:
        """Ask whether to play another round until a yes or no is given."""
        while True:
            self._write("Do you want to continue? [y/n] ")
            answer = self._readline().rstrip("\r\n")
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            self._write("Invalid input. Please enter 'y' or 'n'.\n\n")


def main(argv: list[str] | None = None) -> int:
    """Start an interactive game on the terminal."""
    try:
        GameEngine().start()
    except (EOFError, KeyboardInterrupt):
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())