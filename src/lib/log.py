"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the verbosity of the
document currently connected to the logging context, without requiring the
document to be passed around.

Usage:
    from texdsl.lib.log import LOG, state_connected

    # Bind an object with a `verbosity` attribute for the duration of a block:
    with state_connected(document):
        LOG("Appears if verbosity >= 1", level=1)
        LOG("Serialization details appear if verbosity >= 2", level=2)
        LOG("Per-write trace appears if verbosity >= 3", level=3)

When nothing is connected, appsettings.verbosity (TEXDSL_VERBOSITY) is used.

Importing this module leaves the host's loguru handlers alone; call
logger_configure() to install the texdsl console format.
"""

from loguru import logger
from typing import Any, Iterator, Optional
from contextlib import contextmanager
from contextvars import ContextVar, Token
import sys

from ..config import appsettings

# Context variable to hold the object whose verbosity gates LOG()
_log_state: ContextVar[Optional[Any]] = ContextVar('log_state', default=None)

# texdsl-specific console format
logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<cyan>{function: <20}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)


def logger_configure(sink: Any = sys.stderr, level: str = "DEBUG") -> int:
    """
    Replace loguru's handlers with a single texdsl-formatted sink.

    Args:
        sink: Destination passed to logger.add (default: stderr)
        level: Minimum loguru level for the sink

    Returns:
        Handler id, usable with logger.remove()
    """
    logger.remove()
    return logger.add(sink, format=logger_format, level=level)


def state_connectToLogger(state: Any) -> Token:
    """
    Connect an object to the logging context.

    Args:
        state: Any object with a `verbosity` attribute (typically a TeXDocument)

    Returns:
        Token to pass to state_disconnectFromLogger()
    """
    return _log_state.set(state)


def state_disconnectFromLogger(token: Token) -> None:
    """Restore whatever was connected before the matching state_connectToLogger()"""
    _log_state.reset(token)


@contextmanager
def state_connected(state: Any) -> Iterator[Any]:
    """Connect `state` for the duration of a with-block, then restore the previous one"""
    token = state_connectToLogger(state)
    try:
        yield state
    finally:
        state_disconnectFromLogger(token)


def verbosity_current() -> int:
    """Verbosity of the connected state, falling back to appsettings"""
    state = _log_state.get()
    if state is not None and hasattr(state, 'verbosity'):
        return state.verbosity
    return appsettings.verbosity


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if the current verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata
    """
    if verbosity_current() >= level:
        logger.opt(depth=1).debug(message, **kwargs)
