"""Hand choices and round outcomes."""

from __future__ import annotations

import enum


class Choice(enum.IntEnum):
    """A hand a player can show. The numbers are the ones the player types."""

    ROCK = 0
    PAPER = 1
    SCISSOR = 2

    def __str__(self) -> str:
        return self.name.capitalize()

    @property
    def beats(self) -> "Choice":
        """The choice this one defeats."""
        return _BEATS[self]


_BEATS = {
    Choice.ROCK: Choice.SCISSOR,
    Choice.PAPER: Choice.ROCK,
    Choice.SCISSOR: Choice.PAPER,
}


class Decision(enum.Enum):
    """Outcome of a round, seen from the player's side."""

    WIN = enum.auto()
    LOSE = enum.auto()
    DRAW = enum.auto()