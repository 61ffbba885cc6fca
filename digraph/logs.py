"""Logging configuration for the digraph command."""

import logging
import sys
from logging import Formatter, LogRecord, StreamHandler
from typing import NoReturn, TextIO

VERBOSITY = [logging.WARNING, logging.INFO, logging.DEBUG]


class ErrorHandler(StreamHandler):

    """Stream handler that decides the exit status from the errors it sees.

    Every record at ERROR or above is counted. Without keep_going the first
    one exits with status 1, so a bad edge list stops the command. With
    keep_going the command carries on to its remaining files and calls
    finish() at the end. FATAL records always exit.
    """

    def __init__(self, stream: TextIO, keep_going: bool):
        super().__init__(stream)
        self.keep_going = keep_going
        self.errors = 0

    def emit(self, record: LogRecord):
        super().emit(record)
        if record.levelno < logging.ERROR:
            return
        self.errors += 1
        if record.levelno >= logging.FATAL or not self.keep_going:
            sys.exit(1)

    def finish(self):
        """Exit with status 1 if any errors were logged."""
        if self.errors:
            sys.exit(1)


def setup_logging(stream: TextIO, verbosity: int, keep_going: bool) -> ErrorHandler:
    """Install an ErrorHandler writing to stream on the root logger.

    Verbosity 0 shows warnings, 1 adds info, and 2 or more adds debug logs.
    Returns the handler so the caller can finish and remove it.
    """
    logger = logging.getLogger()
    logger.setLevel(VERBOSITY[min(verbosity, len(VERBOSITY) - 1)])
    handler = ErrorHandler(stream, keep_going)
    handler.setFormatter(Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(handler)
    logging.addLevelName(logging.FATAL, "FATAL")
    return handler


def fatal(msg: str, *args, **kwargs) -> NoReturn:
    """Log at the FATAL level, which always exits."""
    logging.fatal(msg, *args, **kwargs)
    assert False  # unreachable
