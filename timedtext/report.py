import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Receives conversion failures: an error code, the cause and where it happened."""

    def report(self, code: int, cause: BaseException, context: str) -> None:
        ...


class LoggingReporter:
    """Default reporter, sends failures to the logging module."""

    def __init__(self, log=None):
        self.logger = log or logger

    def report(self, code, cause, context):
        self.logger.error(f"[{code}] {cause} ({context})", exc_info=cause)
