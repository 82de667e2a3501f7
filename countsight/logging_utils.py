"""Logging setup shared by the drill engine and the pygame front-end."""

import logging


def setup_logging(level: str = "INFO") -> None:
    """Call once at program start (pygame_ui/main.py)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
