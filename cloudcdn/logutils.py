"""Logging configuration.

cloudcdn modules log through structlog. Applications call
`configure_logging` once with a profile name to route those logs to
stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Dict, List

import structlog

from cloudcdn.exceptions import ConfigurationError

__all__ = ["PROFILES", "configure_logging"]

PROFILES: Dict[str, int] = {
    "development": logging.DEBUG,
    "testing": logging.DEBUG,
    "production": logging.INFO,
}
"""Log level of each logging profile."""


def configure_logging(profile: str = "production") -> None:
    """Configure the ``cloudcdn`` logger and structlog.

    The ``production`` profile renders JSON; the other profiles render
    key-value pairs.
    """
    try:
        level = PROFILES[profile]
    except KeyError:
        raise ConfigurationError(
            "Logging profile {0!r} unknown. Valid values are {1!r}".format(
                profile, list(PROFILES.keys())
            )
        )

    stream_handler = logging.StreamHandler(stream=sys.stdout)
    stream_handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger("cloudcdn")
    if logger.hasHandlers():
        logger.handlers.clear()
    logger.addHandler(stream_handler)
    logger.setLevel(level)

    renderer: Any
    if profile == "production":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.processors.KeyValueRenderer(
            key_order=["event", "method", "path", "status"],
        )
    processors: List[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        renderer,
    ]
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
