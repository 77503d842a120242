from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np

from tictactoe.core.board import Board, Marker

# Fixed scan order: rows, columns, diagonals.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

_LINES = np.array(WIN_LINES, dtype=np.intp)


class StatusKind(Enum):
    ONGOING = "ongoing"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class GameStatus:
    """Won(marker) | Draw | Ongoing(marker to move)."""
    kind: StatusKind
    marker: Marker = Marker.EMPTY

    @staticmethod
    def won(marker: Marker) -> "GameStatus":
        return GameStatus(StatusKind.WON, marker)

    @staticmethod
    def draw() -> "GameStatus":
        return GameStatus(StatusKind.DRAW)

    @staticmethod
    def ongoing(marker: Marker) -> "GameStatus":
        return GameStatus(StatusKind.ONGOING, marker)

    @property
    def is_terminal(self) -> bool:
        return self.kind != StatusKind.ONGOING

    def describe(self) -> str:
        if self.kind == StatusKind.WON:
            return f"Winner: {self.marker.symbol()}"
        if self.kind == StatusKind.DRAW:
            return "Cats Game"
        return f"Next player: {self.marker.symbol()}"


def winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """First triple (in scan order) holding three equal non-empty cells."""
    triples = board.cells[_LINES]
    hits = (triples[:, 0] != Marker.EMPTY.value) & (triples[:, 0] == triples[:, 1]) & (
        triples[:, 0] == triples[:, 2]
    )
    found = np.flatnonzero(hits)
    if found.size == 0:
        return None
    return WIN_LINES[int(found[0])]


def compute_winner(board: Board) -> Optional[Marker]:
    line = winning_line(board)
    if line is None:
        return None
    return board.get(line[0])


def is_full(board: Board) -> bool:
    return board.filled_count() == len(board)


def next_marker(pointer: int) -> Marker:
    """Even history index means X to move (index 0 is the empty board)."""
    return Marker.X if pointer % 2 == 0 else Marker.O


def status(board: Board, to_move: Marker) -> GameStatus:
    winner = compute_winner(board)
    if winner is not None:
        return GameStatus.won(winner)
    if is_full(board):
        return GameStatus.draw()
    return GameStatus.ongoing(to_move)


def can_play(board: Board, index: int) -> bool:
    """A cell is playable when it exists, is empty, and the game is still open."""
    if not board.in_bounds(index) or isinstance(index, bool):
        return False
    if not board.is_empty(index):
        return False
    return compute_winner(board) is None and not is_full(board)
