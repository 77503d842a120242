from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from tictactoe.core.gamestate import GameState
from tictactoe.core.rules import StatusKind, winning_line


# =========================
# Message types
# =========================

class MessageType(Enum):
    ERR = "ERR"
    INFO = "INFO"
    MOVE = "MOVE"
    JUMP = "JUMP"
    RESTART = "RESTART"
    QUIT = "QUIT"


@dataclass(frozen=True)
class Message:
    """
    A UI message shown between board and status.
    Examples:
      [ERR] Cell is already occupied.
      [JUMP] Move #3
    """
    type: MessageType
    text: str = ""

    def render(self) -> str:
        if self.text:
            return f"[{self.type.value}] {self.text}"
        return f"[{self.type.value}]"


# =========================
# Screen utils
# =========================

def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


# =========================
# View (board + message + status + moves)
# =========================

class CliView:
    """
    Responsible ONLY for rendering:
      1) board
      2) message
      3) status line
      4) move list

    It does NOT parse input or touch the session.
    """

    def __init__(
        self,
        *,
        prompt: str = "> ",
        clear: bool = True,
        out: Callable[[str], None] = print,
    ) -> None:
        self.prompt = prompt
        self.clear = clear
        self._out = out
        self._message: Optional[Message] = None

    # ---------- Message API ----------

    @property
    def message(self) -> Optional[Message]:
        return self._message

    def set_message(self, msg: Optional[Message]) -> None:
        self._message = msg

    # ---------- Render ----------

    def render(self, state: GameState) -> None:
        if self.clear:
            clear_screen()
        self._out(self.build_screen(state))

    def build_screen(self, state: GameState) -> str:
        lines: List[str] = [state.board.to_cli(), ""]
        lines.append(self._message.render() if self._message is not None else "")
        lines.append(self._status_line(state))
        lines.append("")
        lines.extend(self._move_lines(state))
        return "\n".join(lines)

    def _status_line(self, state: GameState) -> str:
        text = state.status.describe()
        if state.status.kind == StatusKind.WON:
            line = winning_line(state.board)
            if line is not None:
                cells = ", ".join(str(i + 1) for i in line)
                text = f"{text}   (cells {cells})"
        if not state.is_latest:
            text = f"{text}   [viewing move {state.pointer} of {state.history_length - 1}]"
        return text

    def _move_lines(self, state: GameState) -> List[str]:
        order = "newest first" if state.reversed else "oldest first"
        lines = [f"Moves ({order}):"]
        for d in state.moves:
            marker = "*" if d.is_current else " "
            lines.append(f" {marker} {str(d.move_number).rjust(2)}. {d.describe()}")
        return lines
