"""Logging setup for the panelkit namespace."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: str | None = None,
    console: Console | None = None,
) -> logging.Logger:
    """Configure the ``panelkit`` logger.

    Args:
        level: Logging level name or number.
        log_file: Optional path to also write plain-text logs to.
        console: Rich console for the terminal handler (stderr by default).

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("panelkit")
    logger.setLevel(level)

    # Avoid duplicate output when called more than once
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    rich_handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    rich_handler.setLevel(level)
    logger.addHandler(rich_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    logger.debug("Logging initialized.")
    return logger


__all__ = ["setup_logging"]
