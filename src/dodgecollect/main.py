"""Executable entrypoint for Dodge & Collect."""

from __future__ import annotations

import logging
import os

from .game import DodgeGame


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main() -> None:
    """Launch the game."""
    debug = os.getenv("DODGECOLLECT_DEBUG", "false").lower() == "true"
    setup_logging(debug)
    DodgeGame().run()


if __name__ == "__main__":
    main()
