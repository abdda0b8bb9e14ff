"""
Logging helpers for crossflags.

Only simple configuration is provided: the level follows the shared
-debug and -silent flags.
"""

from __future__ import annotations

import logging


def configure_logging(debug: bool = False, silent: bool = False) -> None:
    """
    Configure the root logger from the debug and silent flags.

    silent          -> ERROR
    debug           -> DEBUG
    neither         -> WARNING

    silent wins when both are given.
    """

    if silent:
        level = logging.ERROR
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
