"""Running state of a game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GameState:
    """Whether a game is running and the scores so far."""

    started: bool = False
    player_score: int = 0
    computer_score: int = 0

    def add_player_score(self) -> None:
        """Give the player one point."""
        self.player_score += 1

    def add_computer_score(self) -> None:
        """Give the computer one point."""
        self.computer_score += 1