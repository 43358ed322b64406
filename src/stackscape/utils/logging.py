"""
Logging helpers for stackscape

Library modules only ask for a logger:

    from stackscape.utils.logging import get_logger
    logger = get_logger(__name__)

Command line entry points and scripts turn on log output:

    from stackscape.utils.logging import configure_logging
    configure_logging(level="DEBUG")

Handlers are only ever attached to the "stackscape" logger, never to the
root logger, so an application embedding stackscape keeps control of its
own logging configuration.

Functions
---------
configure_logging
    Attach a stderr handler to the stackscape logger

get_logger
    Return a logger by name, defaulting to the stackscape logger
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "stackscape"
LEVEL_ENV_VAR = "STACKSCAPE_LOG_LEVEL"

DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s:%(lineno)d: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(
    level: Optional[Union[str, int]] = None,
    *,
    fmt: Optional[str] = None,
    datefmt: Optional[str] = None,
    force: bool = False,
) -> None:
    """
    Configure logging for the stackscape logger only

    Parameters
    ----------
    level : str or int, optional
        Logging level, like "DEBUG" or `logging.INFO`.  Defaults to the
        STACKSCAPE_LOG_LEVEL environment variable, or "INFO" if unset.
    fmt : str, optional
        Log record format.
    datefmt : str, optional
        Timestamp format.
    force : bool, default False
        Remove existing handlers before adding a new one.  Otherwise a
        second call is a no-op if a stderr handler is already attached.
    """
    if level is None:
        level = os.environ.get(LEVEL_ENV_VAR, "INFO")
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if force:
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)
    else:
        for handler in logger.handlers:
            if (isinstance(handler, logging.StreamHandler)
                and handler.stream is sys.stderr):
                return

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(logging.Formatter(fmt=fmt or DEFAULT_FMT,
                                           datefmt=datefmt or DEFAULT_DATEFMT))
    logger.addHandler(console)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger by name, defaulting to the stackscape logger
    """
    return logging.getLogger(name or PACKAGE_LOGGER)
