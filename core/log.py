"""Logging setup: rich-formatted records on stderr."""
import logging

from rich.console import Console
from rich.logging import RichHandler

_LOGGERS = ("core", "scanners", "reporters", "lintbaseline")


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    root_logger = logging.getLogger()

    # Clear existing handlers to prevent duplicate logs
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s", datefmt="%H:%M:%S"))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in _LOGGERS:
        logging.getLogger(name).setLevel(level)
