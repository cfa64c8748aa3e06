import logging as root_logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_SDK_LOGGER_NAME = "jobconf"


def setup_sdk_logging(
    level="INFO",
    pretty: bool = False,
    console: Optional[Console] = None,
    propagate: bool = False,
):
    """
    Configures the logging strategy for the jobconf library.

    The library logs under the 'jobconf' namespace and stays silent until this
    function is called (a `NullHandler` is installed at import time). Submission
    tools and worker bootstrap code call it once to make the configuration
    traffic visible, e.g. which keys were written for which consumer.

    Calling it again replaces the previously installed handler instead of
    stacking a new one.

    Args:
        level (str): The logging threshold (e.g., "DEBUG", "INFO", "WARNING").
            Defaults to "INFO".
        pretty (bool): If True, renders records through a `rich` handler with
            colors, timestamps and formatted tracebacks.
        console (Optional[rich.console.Console]): The Rich Console the pretty
            handler writes to. Defaults to a new `Console(stderr=True)`.
        propagate (bool): Whether records bubble up to the root logger.
            Defaults to False to avoid duplicated output under pytest.
    """
    logger = root_logging.getLogger(_SDK_LOGGER_NAME)

    # Clear existing handlers to prevent duplicates
    if logger.hasHandlers():
        logger.handlers.clear()

    if pretty:
        console = console or Console(stderr=True)

        handler = RichHandler(
            level=level,
            console=console,
            show_time=True,
            show_path=True,
            markup=True,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        formatter = root_logging.Formatter(
            fmt="[dim white]%(name)s[/dim white]: %(message)s", datefmt="[%X]"
        )
        handler.setFormatter(formatter)
        init_message = f"jobconf logging initialized at level: [bold]{level}[/bold]"
        extra = {"markup": True}
    else:
        handler = root_logging.StreamHandler(sys.stderr)
        # Time [Level] Name: Message
        formatter = root_logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        handler.setFormatter(formatter)
        init_message = f"jobconf logging initialized at level: {level}"
        extra = {}

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate

    logger.info(init_message, extra=extra)


def get_logger(name: Optional[str] = None):
    """
    Retrieves a logger instance within the jobconf namespace.

    Args:
        name (Optional[str]): The name of the logger, typically `__name__`
            (e.g., 'jobconf.configurator.output'). If None, the top-level
            'jobconf' logger is returned.

    Returns:
        logging.Logger: The requested logger.
    """
    if name is not None:
        return root_logging.getLogger(name=name)
    else:
        return root_logging.getLogger(_SDK_LOGGER_NAME)
