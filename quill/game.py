"""Two-player game scaffolding. Holds names and the turn counter only."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Player:
    name: str


@dataclass
class Game:
    player1: Player
    player2: Player
    current_turn: int = 1

    @classmethod
    def start(cls, player1_name: str, player2_name: str) -> "Game":
        return cls(player1=Player(player1_name), player2=Player(player2_name))
