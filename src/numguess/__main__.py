from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional, TextIO

from . import __version__
from .config import GameConfig
from .console import ConsoleGame
from .controller import GameController
from .exceptions import ConfigError
from .rng import RandomSource

logger = logging.getLogger(__name__)


def _setup_logging(verbosity: int, default_level: str) -> None:
    level = getattr(logging, default_level, logging.WARNING)
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def main(
    argv: Optional[list[str]] = None,
    stdin: Optional[Iterable[str]] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = argparse.ArgumentParser(
        prog="numguess",
        description="High or Low - guess the secret number",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible targets")
    parser.add_argument("--config", type=Path, default=None, help="Path to a YAML config file")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    out = stdout or sys.stdout

    try:
        config = GameConfig.load(args.config)
    except ConfigError as exc:
        sys.stderr.write(f"numguess: {exc}\n")
        return 2

    _setup_logging(args.verbose, config.log_level)

    # CLI seed wins over config
    seed = args.seed if args.seed is not None else config.seed
    controller = GameController.from_config(config, RandomSource(seed))
    logger.info("Starting numguess %s", __version__)
    return ConsoleGame(controller, out).run(stdin if stdin is not None else sys.stdin)


if __name__ == "__main__":
    sys.exit(main())
