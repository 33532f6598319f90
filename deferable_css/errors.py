"""Exceptions and the pluggable error/warning sink."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Union

logger = logging.getLogger("deferable_css")

ERROR = "error"
WARNING = "warning"

LogSink = Callable[[str, str], object]


class DeferableCSSError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(DeferableCSSError):
    """Bad or missing root directory, invalid option, or no aliases."""


class ResolutionError(DeferableCSSError):
    """Alias target could not be found on disk."""


class InvalidAliasError(DeferableCSSError):
    """Alias name is missing, unknown, or did not resolve."""


class TypeMismatchError(DeferableCSSError):
    """Operation is not supported for this kind of asset."""


class ErrorHandler:
    """Default policy: errors raise, warnings are logged."""

    def error(self, exc: DeferableCSSError) -> None:
        raise exc

    def warning(self, message: str) -> None:
        logger.warning(message)


class LogSinkHandler(ErrorHandler):
    """Adapt a ``log(level, message)`` callable to the handler interface.

    The callable decides the policy: if it raises, the operation aborts; if it
    returns, the operation carries on with an empty result for that item.
    """

    def __init__(self, log: LogSink) -> None:
        self.log = log

    def error(self, exc: DeferableCSSError) -> None:
        self.log(ERROR, str(exc))

    def warning(self, message: str) -> None:
        self.log(WARNING, message)


def make_error_handler(
    log: Optional[Union[ErrorHandler, LogSink]] = None,
) -> ErrorHandler:
    if log is None:
        return ErrorHandler()
    if isinstance(log, ErrorHandler):
        return log
    if not callable(log):
        raise TypeError(f"log must be callable, got {type(log).__name__}")
    return LogSinkHandler(log)
