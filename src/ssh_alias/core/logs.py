"""Diagnostic logging for ssh-alias, rendered through structlog.

Verbosity comes from the ``SSH_ALIAS_LOG`` environment variable (a level
name such as ``info``/``debug`` or a number) and defaults to WARNING. Output
goes to stderr so it never mixes with anything printed on stdout.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Union

import structlog

LOG_ENV_VAR = "SSH_ALIAS_LOG"
ROOT_LOGGER = "ssh_alias"


def _resolve_level(value: Union[str, int, None]) -> int:
    if value is None or value == "":
        return logging.WARNING
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    return logging._nameToLevel.get(value.strip().upper(), logging.WARNING)


def configure_logging(level: Union[str, int, None] = None) -> logging.Logger:
    """Attach a structlog-formatted stderr handler to the package logger.

    Calling it again replaces the handler, so it always writes to the current
    ``sys.stderr``.
    """
    pre_chain = [
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
    ]
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=structlog.dev.ConsoleRenderer(colors=False),
        foreign_pre_chain=pre_chain,
    )

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(_resolve_level(level if level is not None else os.environ.get(LOG_ENV_VAR)))
    for old in [h for h in logger.handlers if getattr(h, "_ssh_alias", False)]:
        logger.removeHandler(old)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    handler._ssh_alias = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    logger.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return logger
