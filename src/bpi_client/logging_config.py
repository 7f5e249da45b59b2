"""Logging configuration for the BPI client.

The library itself only emits through loguru's ``logger``; applications call
``configure_logging`` once to decide where the records go.
"""

import sys
from typing import Any

from loguru import logger

_FORMAT = "{level.icon} [{name}] {message}"


def configure_logging(*, verbose: bool = False, sink: Any = None) -> int:
    """Replace loguru sinks with a single one for BPI traffic.

    Args:
        verbose: Emit request-level DEBUG records when True.
        sink: Any loguru sink; defaults to stderr.

    Returns:
        The loguru handler id, usable with ``logger.remove``.
    """
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    return logger.add(sys.stderr if sink is None else sink, level=level, format=_FORMAT)
