"""
Rich logging for texnative.

Provides colorful console logging using the rich library.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def _make_rich_handler(console: Console) -> RichHandler:
    rich_handler = RichHandler(
        console=console,
        show_time=True,
        show_path=True,
        markup=False,
        rich_tracebacks=True
    )
    rich_handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    return rich_handler


def setup_logging(level: str = "INFO", use_rich: bool = True, console: Console = None) -> None:
    """
    Setup logging for the application.

    Args:
        level: Log level
        use_rich: Whether to use rich logging
        console: Console to log to (defaults to stderr)
    """
    if use_rich:
        console = console or Console(stderr=True)
        root_logger = logging.getLogger()
        root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        root_logger.handlers.clear()
        root_logger.addHandler(_make_rich_handler(console))
    else:
        logging.basicConfig(
            level=getattr(logging, level.upper(), logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    logging.getLogger(__name__).debug(f"Logging initialized at {level} level (rich={use_rich})")


def create_logger(name: str, level: str = "INFO") -> logging.Logger:
    """
    Create a logger with rich formatting.

    Args:
        name: Logger name
        level: Log level

    Returns:
        Logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.addHandler(_make_rich_handler(Console(stderr=True)))
    return logger
