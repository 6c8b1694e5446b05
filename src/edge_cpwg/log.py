"""
Logging configuration for edge-cpwg.

Modules log through ``logging.getLogger(__name__)``; the package logger
carries a NullHandler so nothing is printed unless verbose output is
switched on (``-v`` on the command line or ``defaults.verbose`` in config).
In verbose mode the geometry, backing moduli and mode results of each run
are written to stderr as ``[DEBUG] ...`` lines.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

_logger = logging.getLogger("edge_cpwg")
_logger.addHandler(logging.NullHandler())

VERBOSE_FORMAT = "[%(levelname)s] %(message)s"


def _stream_handlers() -> list:
    return [h for h in _logger.handlers if not isinstance(h, logging.NullHandler)]


def set_verbose(verbose: bool) -> None:
    """Switch the stderr trace of intermediate values on or off.

    Args:
        verbose: The resolved ``-v`` / ``defaults.verbose`` setting
    """
    for handler in _stream_handlers():
        _logger.removeHandler(handler)

    if not verbose:
        _logger.setLevel(logging.NOTSET)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(VERBOSE_FORMAT))
    _logger.addHandler(handler)
    _logger.setLevel(logging.DEBUG)


@contextmanager
def verbose_logging(verbose: bool) -> Iterator[None]:
    """Apply :func:`set_verbose` for the duration of one CLI run."""
    set_verbose(verbose)
    try:
        yield
    finally:
        set_verbose(False)
