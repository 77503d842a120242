from __future__ import annotations

import argparse
from typing import List, Optional

from tictactoe.app.config import LOG_LEVELS, AppConfig
from tictactoe.app.controller import GameController
from tictactoe.app.logs import init_logger, shutdown_logger


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Tic-tac-toe with move history")
    ap.add_argument(
        "--reversed",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Show the move list newest first (default: False)",
    )
    ap.add_argument(
        "--clear",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Clear the screen before each render (default: True)",
    )
    ap.add_argument("--log-file", default=None, help="Write a rotating log to this file")
    ap.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=LOG_LEVELS,
    )
    return ap


def config_from_args(argv: Optional[List[str]] = None) -> AppConfig:
    args = build_parser().parse_args(argv)
    return AppConfig(
        reversed=args.reversed,
        clear_screen=args.clear,
        log_file=args.log_file,
        log_level=args.log_level,
    )


def main(argv: Optional[List[str]] = None) -> None:
    cfg = config_from_args(argv)
    logger = init_logger(cfg.log_file, cfg.log_level)
    try:
        GameController(config=cfg).run()
    finally:
        shutdown_logger(logger)


if __name__ == "__main__":
    main()
