from dataclasses import dataclass
from typing import Tuple
from tictactoe.core.board import Board
from tictactoe.core.move import MoveDescriptor
from tictactoe.core.rules import GameStatus

@dataclass(frozen=True)
class GameState:
    """Everything a renderer needs after an operation completes."""
    board: Board
    status: GameStatus
    pointer: int
    history_length: int
    reversed: bool = False
    moves: Tuple[MoveDescriptor, ...] = ()

    @property
    def is_latest(self) -> bool:
        return self.pointer == self.history_length - 1
