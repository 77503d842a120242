from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from tictactoe.core.gamestate import GameState


class ErrorKind(Enum):
    REJECTED = "rejected"            # occupied cell, bad cell, or finished game
    INVALID_INDEX = "invalid_index"  # jump outside the history


@dataclass(frozen=True)
class MoveDescriptor:
    """One entry of the navigable move list."""
    move_number: int
    is_current: bool

    @property
    def is_jumpable(self) -> bool:
        # the start entry stays a control even when current
        return not (self.is_current and self.move_number > 0)

    def describe(self) -> str:
        if not self.is_jumpable:
            return f"You are at move # {self.move_number}"
        if self.move_number > 0:
            return f"Go to move #{self.move_number}"
        return "Go to game start"

    def __str__(self) -> str:
        return self.describe()


@dataclass
class MoveResult:
    """Result of a session operation (move or jump)."""
    success: bool
    error: Optional[ErrorKind] = None
    error_message: str = ""
    state: Optional["GameState"] = None

    @staticmethod
    def ok(state: "GameState") -> "MoveResult":
        return MoveResult(success=True, state=state)

    @staticmethod
    def fail(kind: ErrorKind, msg: str) -> "MoveResult":
        return MoveResult(
            success=False,
            error=kind,
            error_message=msg,
        )
