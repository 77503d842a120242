from __future__ import annotations

import logging
from typing import Callable, Optional

from tictactoe.app.config import AppConfig
from tictactoe.cli.commands import Command, CommandProcessor, CommandType
from tictactoe.cli.view import CliView, Message, MessageType
from tictactoe.core.game import GameSession

logger = logging.getLogger(__name__)


def read_stdin(prompt: str) -> Optional[str]:
    """Blocking line input. None on EOF / Ctrl-C."""
    try:
        return input(prompt)
    except (EOFError, KeyboardInterrupt):
        return None


class GameController:
    """
    Controller loop:
      - render(board + message + status + moves) when dirty
      - read one line of user input
      - parse input into Command/cell
      - dispatch to the session

    OOP rule:
      - Controller orchestrates.
      - GameSession handles gameplay and history.
      - View renders only.
      - CommandProcessor parses only.
    """

    def __init__(
        self,
        *,
        config: AppConfig = AppConfig(),
        session: Optional[GameSession] = None,
        view: Optional[CliView] = None,
        read_line: Callable[[str], Optional[str]] = read_stdin,
    ) -> None:
        self.cfg = config
        self.session = session if session is not None else GameSession(reversed_order=config.reversed)
        self.view = view if view is not None else CliView(prompt=config.prompt, clear=config.clear_screen)
        self.cmd = CommandProcessor()
        self._read_line = read_line

        self._running = True
        self._dirty = True

    @property
    def running(self) -> bool:
        return self._running

    # ---------- Main loop ----------

    def run(self) -> None:
        logger.info("session started")
        while self._running:
            self._render()

            line = self._read_line(self.view.prompt)
            if line is None:
                self.stop()
                break
            self.handle_line(line)

        logger.info("session finished at move %d", self.session.pointer)

    def handle_line(self, line: str) -> None:
        parsed = self.cmd.parse(line)
        if not parsed.ok:
            # empty input is ok-noop
            if parsed.error:
                self.view.set_message(Message(MessageType.ERR, parsed.error))
                self._dirty = True
            return

        if parsed.command is not None:
            self.handle_command(parsed.command)
        elif parsed.cell is not None:
            self.handle_move(parsed.cell)

    def stop(self) -> None:
        self._running = False

    # ---------- Rendering ----------

    def _render(self) -> None:
        if not self._dirty:
            return
        self.view.render(self.session.get_state())
        self._dirty = False

    # ---------- Input dispatch ----------

    def handle_move(self, cell: int) -> None:
        marker = self.session.next_marker()
        result = self.session.attempt_move(cell)
        if result.success:
            self.view.set_message(
                Message(MessageType.MOVE, f"{marker.symbol()} at {cell + 1}")
            )
        else:
            self.view.set_message(Message(MessageType.ERR, result.error_message))
        self._dirty = True

    def handle_command(self, command: Command) -> None:
        if command.type == CommandType.HELP:
            self.view.set_message(Message(MessageType.INFO, self.cmd.help_text()))

        elif command.type == CommandType.QUIT:
            self.view.set_message(Message(MessageType.QUIT, "Exiting..."))
            self.stop()

        elif command.type == CommandType.JUMP:
            result = self.session.jump_to(command.arg)
            if result.success:
                self.view.set_message(Message(MessageType.JUMP, self._jump_text(command.arg)))
            else:
                self.view.set_message(Message(MessageType.ERR, result.error_message))

        elif command.type == CommandType.REVERSE:
            newest_first = self.session.toggle_display_order()
            order = "newest first" if newest_first else "oldest first"
            self.view.set_message(Message(MessageType.INFO, f"Moves shown {order}"))

        elif command.type == CommandType.RESTART:
            self.session.reset()
            self.view.set_message(Message(MessageType.RESTART, "New game"))

        self._dirty = True

    @staticmethod
    def _jump_text(move: int) -> str:
        return "Game start" if move == 0 else f"Move #{move}"
