import logging as root_logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_ROOT_LOGGER_NAME = "querybody"


def setup_logging(
    level="INFO",
    pretty: bool = False,
    console: Optional[Console] = None,
    propagate: bool = False,
):
    """
    Configures the logging output of the querybody package.

    The package is silent by default (a `NullHandler` is attached on import).
    Calling this function replaces any handler previously attached to the
    'querybody' logger with either a Rich handler or a plain stream handler,
    so it can safely be called more than once.

    Args:
        level (str): The logging threshold (e.g., "DEBUG", "INFO", "WARNING").
            Defaults to "INFO".
        pretty (bool): If True, log records are rendered by
            `rich.logging.RichHandler` with colors and formatted tracebacks.
        console (Optional[rich.console.Console]): The Rich console used in
            pretty mode. Defaults to a new `Console(stderr=True)`.
        propagate (bool): Whether records also bubble up to the root logger.
            Disabled by default to avoid duplicated lines under pytest.
    """
    logger = root_logging.getLogger(_ROOT_LOGGER_NAME)

    if logger.hasHandlers():
        logger.handlers.clear()

    if pretty:
        handler = RichHandler(
            level=level,
            console=console or Console(stderr=True),
            show_time=True,
            show_path=False,
            markup=True,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(
            root_logging.Formatter(
                fmt="[dim white]%(name)s[/dim white]: %(message)s", datefmt="[%X]"
            )
        )
        init_message = f"Logging initialized at level: [bold]{level}[/bold]"
        extra = {"markup": True}
    else:
        handler = root_logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            root_logging.Formatter(
                fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        init_message = f"Logging initialized at level: {level}"
        extra = {}

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate

    logger.info(init_message, extra=extra)


def get_logger(name: Optional[str] = None) -> root_logging.Logger:
    """
    Returns a logger inside the 'querybody' namespace.

    Args:
        name (Optional[str]): Dotted logger name, typically `__name__`
            (e.g., 'querybody.builders.body_builder'). If None, the top-level
            package logger is returned.
    """
    return root_logging.getLogger(name or _ROOT_LOGGER_NAME)
