"""Command line entry point.

Run with: `python -m tinytetris`

``--frontend curses`` (the default) plays in the terminal, ``pygame`` opens a
window and ``ascii`` prints a single frame of a freshly started game.
"""

from __future__ import annotations

import argparse
import logging
import random
from typing import Optional, Sequence

from .board import COLS, ROWS
from .engine import GRAVITY_TICKS, Engine
from .render import ascii_frame


LOGGER = logging.getLogger(__name__)

FRONTENDS = ("curses", "pygame", "ascii")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tinytetris", description=__doc__)
    parser.add_argument("--frontend", choices=FRONTENDS, default="curses", help="How to play.")
    parser.add_argument("--rows", type=int, default=ROWS, help="Board height in cells.")
    parser.add_argument("--cols", type=int, default=COLS, help="Board width in cells.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for piece selection.")
    parser.add_argument(
        "--gravity-ticks",
        type=int,
        default=GRAVITY_TICKS,
        help="Frames between one-row drops of the active piece.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file (recommended with the curses front-end).",
    )
    args = parser.parse_args(argv)
    if args.rows < 1 or args.cols < 1:
        parser.error("--rows and --cols must be at least 1")
    if args.gravity_ticks < 1:
        parser.error("--gravity-ticks must be at least 1")
    return args


def configure_logging(level: str, log_file: Optional[str]) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        filename=log_file,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level, args.log_file)
    options = dict(rows=args.rows, cols=args.cols, seed=args.seed, gravity_ticks=args.gravity_ticks)
    LOGGER.debug("Starting %s front-end with %s", args.frontend, options)

    if args.frontend == "ascii":
        engine = Engine(
            args.rows,
            args.cols,
            rng=random.Random(args.seed),
            gravity_ticks=args.gravity_ticks,
        )
        print(ascii_frame(engine))
        return 0
    if args.frontend == "pygame":
        from .run_pygame import main as run
    else:
        from .run_curses import main as run

    score = run(**options)
    print(f"Final score: {score}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
