from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from tictactoe.core.board import BOARD_SIZE


class CommandType(Enum):
    QUIT = "quit"
    JUMP = "jump"
    REVERSE = "reverse"
    RESTART = "restart"
    HELP = "help"


@dataclass(frozen=True)
class Command:
    """Parsed command from user input."""
    type: CommandType
    raw: str
    arg: Optional[int] = None


@dataclass(frozen=True)
class ParseResult:
    """
    Result of parsing one line input.
    Exactly one of (command, cell) should be set on success.
    """
    command: Optional[Command] = None
    cell: Optional[int] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.error == "" and (self.command is not None or self.cell is not None)


class CommandProcessor:
    """
    Parses user input line into:
      - Command (e.g. /jump 3, /reverse)
      - Cell index 0..8, from 'x y' (e.g. 2 3), 'B3', or a keypad digit 1..9

    This class does NOT execute anything. The controller decides what to do.
    """

    _ALIASES = {
        "quit": CommandType.QUIT,
        "q": CommandType.QUIT,
        "jump": CommandType.JUMP,
        "goto": CommandType.JUMP,
        "reverse": CommandType.REVERSE,
        "restart": CommandType.RESTART,
        "help": CommandType.HELP,
    }

    @property
    def help_cmds(self) -> str:
        cmds = ["/help", "/quit", "/jump N", "/reverse", "/restart"]
        return ", ".join(cmds)

    def help_text(self) -> str:
        col_end = chr(ord("A") + BOARD_SIZE - 1)
        return (
            f"Input: 'x y' (e.g. 2 2), 'B2' (A-{col_end} + 1-{BOARD_SIZE}) or 1-9.\n"
            f"Commands: {self.help_cmds}"
        )

    # ---------- Public parse API ----------

    def parse(self, text: str) -> ParseResult:
        """
        Parse a raw input line.
        Returns ParseResult with either command or cell on success.
        """
        raw = (text or "").strip()
        if not raw:
            return ParseResult(error="")  # treat as no-op line

        if raw.startswith("/"):
            return self._parse_command(raw)

        parts = raw.split()

        # move: "x y" (column, row), both 1..3
        if len(parts) == 2 and parts[0].isdecimal() and parts[1].isdecimal():
            x, y = int(parts[0]), int(parts[1])
            if not self._is_in_bounds(x, y):
                return ParseResult(error=self._oob_msg(x, y))
            return ParseResult(cell=self._to_index(x, y))

        # move: single keypad digit, 1 is top-left, 9 bottom-right
        if len(parts) == 1 and raw.isdecimal():
            n = int(raw)
            if not 1 <= n <= BOARD_SIZE * BOARD_SIZE:
                return ParseResult(error=f"Out of range: {n} (must be 1..{BOARD_SIZE * BOARD_SIZE})")
            return ParseResult(cell=n - 1)

        # move: "B2"
        if len(raw) >= 2 and raw[0].isalpha():
            col = raw[0].upper()
            rest = raw[1:].strip()
            if rest.isdecimal():
                x = ord(col) - ord("A") + 1
                y = int(rest)
                if not self._is_in_bounds(x, y):
                    return ParseResult(error=self._oob_msg(x, y))
                return ParseResult(cell=self._to_index(x, y))

        return ParseResult(error="Invalid input. Use 'x y', 'B2', 1-9 or /help")

    # ---------- Helpers ----------

    def _parse_command(self, raw: str) -> ParseResult:
        parts = raw[1:].split()
        if not parts:
            return ParseResult(error=f"Unknown command: {raw}")
        ctype = self._ALIASES.get(parts[0].lower())
        if ctype is None:
            return ParseResult(error=f"Unknown command: {raw}")

        if ctype == CommandType.JUMP:
            if len(parts) != 2 or not parts[1].isdecimal():
                return ParseResult(error="Usage: /jump N (0 = game start)")
            return ParseResult(command=Command(ctype, raw, int(parts[1])))

        if len(parts) > 1:
            return ParseResult(error=f"/{parts[0].lower()} takes no arguments")
        return ParseResult(command=Command(ctype, raw))

    def _is_in_bounds(self, x: int, y: int) -> bool:
        return 1 <= x <= BOARD_SIZE and 1 <= y <= BOARD_SIZE

    def _to_index(self, x: int, y: int) -> int:
        return (y - 1) * BOARD_SIZE + (x - 1)

    def _oob_msg(self, x: int, y: int) -> str:
        return f"Out of bounds: {x}, {y} (must be 1..{BOARD_SIZE})"
