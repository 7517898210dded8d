# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Logger factory.

Returns either a structlog bound logger or a standard library logger, both
filtered at the configured log level. Callers use the shared subset of the two
APIs: ``debug``, ``info``, ``warning``, ``error`` and ``exception``.
"""

import logging
from functools import lru_cache

import structlog

from openstef_timeseries.app_settings import LoggerType, Settings


@lru_cache
def _configure_structlog(log_level: str) -> None:
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(log_level)
        )
    )


def get_logger(name: str, logger_type: str = Settings.logger_type):
    """Get a logger of the requested type.

    Args:
        name: Name of the logger, usually ``__name__``.
        logger_type: One of the ``LoggerType`` values.

    Returns:
        A structlog bound logger or a ``logging.Logger``.

    Raises:
        ValueError: If the logger type is unknown.
    """
    if logger_type == LoggerType.STANDARD:
        logger = logging.getLogger(name)
        logger.setLevel(Settings.log_level)
        return logger
    elif logger_type == LoggerType.STRUCTLOG:
        _configure_structlog(Settings.log_level)
        return structlog.get_logger(name)
    else:
        raise ValueError(f"Unknown logger type: {logger_type}")
