"""Structured logging configuration.

Logging goes through ``structlog`` on top of the standard library. Package
loggers wrap ``logging.getLogger`` under the ``rank_biased_centroids``
namespace, so fusion stays silent until an application opts in: the stdlib
root logger drops DEBUG events, and the engine only emits DEBUG summaries.

Typical usage
- Call ``configure_logging()`` once; level and format default to
  ``FusionSettings`` (``RBC_LOG_LEVEL`` / ``RBC_LOG_FORMAT``)
- Acquire loggers via ``get_logger(__name__)``
"""

import logging
import sys
from typing import Any, List, Optional

import structlog
from structlog.stdlib import LoggerFactory, add_logger_name

from .config import FusionSettings, get_settings

PACKAGE_LOGGER = "rank_biased_centroids"


def configure_logging(
    component: str = "rank-biased-centroids",
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
) -> None:
    """Configure structured logging for the package.

    Parameters
    - component: Name bound to every log line as ``component``
    - log_level: ``DEBUG``, ``INFO``, ``WARNING``, ``ERROR``; defaults to
      ``FusionSettings.log_level``
    - log_format: ``json`` for production, ``console`` for local use;
      defaults to ``FusionSettings.log_format``
    """
    if log_level is None or log_format is None:
        settings = get_settings()
        log_level = log_level or settings.log_level
        log_format = log_format or settings.log_format

    level = getattr(logging, log_level.upper())
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)

    processors: List[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_logger_name,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(component=component)


def configure_logging_from_settings(
    settings: FusionSettings,
    component: str = "rank-biased-centroids",
) -> None:
    """Configure logging from an explicit ``FusionSettings`` instance."""
    configure_logging(component, settings.log_level, settings.log_format)


def get_logger(name: str) -> Any:
    """Get a structured logger backed by the stdlib logger ``name``.

    Until ``configure_logging`` runs, events go to the unconfigured stdlib
    logger and DEBUG/INFO lines are dropped.
    """
    return structlog.wrap_logger(logging.getLogger(name))
