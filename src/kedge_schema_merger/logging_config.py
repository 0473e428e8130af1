"""Diagnostic logging setup for the command line."""

from __future__ import annotations

import logging
import sys

_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
_CLI_HANDLER_NAME = "kedge-schema-merger-cli"


def configure_logging(*, verbose: bool) -> None:
    """Send package log records to stderr, at DEBUG when ``verbose`` is set."""
    package_logger = logging.getLogger("kedge_schema_merger")
    for existing in list(package_logger.handlers):
        if existing.get_name() == _CLI_HANDLER_NAME:
            package_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_CLI_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
