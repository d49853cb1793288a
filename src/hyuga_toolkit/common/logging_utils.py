"""
Logging utilities: console setup for the CLI and a queue handler that feeds
log records to a GUI console widget.
"""
from __future__ import annotations

import logging
from queue import Queue
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """
    Configure root logging for command line use.

    Args:
        verbose: Log DEBUG records when True, INFO otherwise.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        force=True,
    )


class QueueLogHandler(logging.Handler):
    """
    A logging handler that sends (message, level) tuples to a queue.

    Used to capture logs from the storage and export layers and display them
    in the GUI console.
    """

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            level = record.levelname
            # Map DEBUG to INFO for GUI display
            if level == "DEBUG":
                level = "INFO"
            self.log_queue.put((message, level))
        except Exception:
            self.handleError(record)


def attach_queue_handler(log_queue: Queue, logger_name: Optional[str] = None) -> QueueLogHandler:
    """
    Attach a QueueLogHandler to the specified logger (or root logger if None).

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue)
    logger.addHandler(handler)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = None) -> None:
    """Remove a QueueLogHandler from the specified logger."""
    logging.getLogger(logger_name).removeHandler(handler)
