"""JSON logging for the ACM import tool.

Progress and errors go to stderr as one JSON object per line, leaving stdout
for the certificate ARN. The CLI's ``--verbose`` flag calls ``set_verbose``
to lower the level to DEBUG, which also shows the region fallback in
``acm_client.resolve_session``.
"""

import logging
import sys

from pythonjsonlogger import jsonlogger

LOGGER_NAME = "acm_import"
LOG_FORMAT = "%(timestamp)s %(levelname)s %(funcName)s %(lineno)d %(message)s"
LOG_FIELDS = frozenset({"timestamp", "level", "message", "exc_info", "funcName", "lineno"})


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter emitting only LOG_FIELDS, with levelname shown as 'level'."""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        if "levelname" in log_record:
            log_record["level"] = log_record.pop("levelname")

        for key in set(log_record) - LOG_FIELDS:
            del log_record[key]


def _build_stderr_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(CustomJsonFormatter(fmt=LOG_FORMAT, timestamp=True))
    return handler


def _setup_logger() -> logging.Logger:
    """Configure the tool logger once; child loggers (acm_import.lib.*) share its handler."""
    logger = logging.getLogger(LOGGER_NAME)

    # Module reloads must not stack handlers
    if not logger.handlers:
        logger.addHandler(_build_stderr_handler())
        logger.setLevel(logging.INFO)
        logger.propagate = False

    return logger


def set_verbose(verbose: bool) -> None:
    """Switch the tool logger between INFO and DEBUG (the CLI's --verbose)."""
    LOGGER.setLevel(logging.DEBUG if verbose else logging.INFO)


LOGGER = _setup_logger()
