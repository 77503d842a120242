# game.py
from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from tictactoe.core.board import Board, Marker
from tictactoe.core.gamestate import GameState
from tictactoe.core.move import ErrorKind, MoveDescriptor, MoveResult
from tictactoe.core import rules
from tictactoe.core.rules import GameStatus

logger = logging.getLogger(__name__)


class GameSession:
    """
    Main game controller.

    Owns:
      - history: list of Board snapshots, index 0 is the empty board
      - pointer: index of the displayed snapshot (also decides whose turn it is)
      - reversed: move list presentation order

    Mutations only happen through attempt_move / jump_to / toggle_display_order.
    Rejections are reported through MoveResult, never raised.
    """

    def __init__(self, *, reversed_order: bool = False) -> None:
        self._history: List[Board] = [Board.empty()]
        self._pointer: int = 0
        self._reversed: bool = reversed_order

    # -------------------------
    # Queries
    # -------------------------

    @property
    def history(self) -> Tuple[Board, ...]:
        return tuple(self._history)

    @property
    def pointer(self) -> int:
        return self._pointer

    @property
    def is_reversed(self) -> bool:
        return self._reversed

    def current_snapshot(self) -> Board:
        return self._history[self._pointer]

    def next_marker(self) -> Marker:
        return rules.next_marker(self._pointer)

    def current_status(self) -> GameStatus:
        return rules.status(self.current_snapshot(), self.next_marker())

    def move_list(self) -> Iterator[MoveDescriptor]:
        """Lazily yield one descriptor per history entry in display order."""
        numbers = range(len(self._history))
        if self._reversed:
            numbers = reversed(numbers)
        for n in numbers:
            yield MoveDescriptor(move_number=n, is_current=(n == self._pointer))

    def get_state(self) -> GameState:
        """Get current game state."""
        return GameState(
            board=self.current_snapshot(),
            status=self.current_status(),
            pointer=self._pointer,
            history_length=len(self._history),
            reversed=self._reversed,
            moves=tuple(self.move_list()),
        )

    def is_game_over(self) -> bool:
        return self.current_status().is_terminal

    # -------------------------
    # Operations
    # -------------------------

    def attempt_move(self, cell_index: int) -> MoveResult:
        """
        Place the next marker at cell_index on the current snapshot.

        Any redo future beyond the pointer is discarded before the new
        snapshot is appended.
        """
        board = self.current_snapshot()

        if not rules.can_play(board, cell_index):
            return self._reject_move(board, cell_index)

        marker = self.next_marker()
        next_board = board.with_marker(cell_index, marker)

        dropped = len(self._history) - (self._pointer + 1)
        del self._history[self._pointer + 1:]
        self._history.append(next_board)
        self._pointer = len(self._history) - 1

        logger.debug(
            "move %d: %s at %d (discarded %d future snapshot(s))",
            self._pointer, marker.symbol(), cell_index, dropped,
        )
        return MoveResult.ok(self.get_state())

    def _reject_move(self, board: Board, cell_index: int) -> MoveResult:
        """Explain why rules.can_play refused cell_index."""
        if isinstance(cell_index, bool) or not board.in_bounds(cell_index):
            logger.info("move rejected: cell %r out of range", cell_index)
            return MoveResult.fail(ErrorKind.REJECTED, "Cell is out of range.")

        if self.is_game_over():
            logger.info(
                "move rejected: cell %d, game is over (%s)",
                cell_index, self.current_status().describe(),
            )
            return MoveResult.fail(ErrorKind.REJECTED, "Game is already over.")

        logger.info("move rejected: cell %d occupied", cell_index)
        return MoveResult.fail(ErrorKind.REJECTED, "Cell is already occupied.")

    def jump_to(self, move_index: int) -> MoveResult:
        """Move the pointer; history is left as is."""
        if (
            not isinstance(move_index, int)
            or isinstance(move_index, bool)
            or not 0 <= move_index < len(self._history)
        ):
            logger.info("jump rejected: %r not in [0, %d)", move_index, len(self._history))
            return MoveResult.fail(
                ErrorKind.INVALID_INDEX,
                f"No such move: {move_index} (must be 0..{len(self._history) - 1}).",
            )

        self._pointer = move_index
        logger.debug("jumped to move %d", move_index)
        return MoveResult.ok(self.get_state())

    def toggle_display_order(self) -> bool:
        """Flip the move list order. Returns the new reversed flag."""
        self._reversed = not self._reversed
        logger.debug("move list order reversed=%s", self._reversed)
        return self._reversed

    # -------------------------
    # Reset
    # -------------------------

    def reset(self) -> None:
        """Reset session to initial state."""
        self._history = [Board.empty()]
        self._pointer = 0
        self._reversed = False
        logger.debug("session reset")
