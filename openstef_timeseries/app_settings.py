# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

from enum import StrEnum
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggerType(StrEnum):
    STANDARD = "logging"
    STRUCTLOG = "structlog"


class AppSettings(BaseSettings):
    """Global app settings."""

    model_config = SettingsConfigDict(
        env_prefix="openstef_timeseries_", env_file=".env", extra="ignore"
    )

    logger_type: LoggerType = Field(
        LoggerType.STRUCTLOG,
        description="The type of logger to use.",
    )

    # Logging settings.
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Log level used for logging statements."
    )

    strict_alignment: bool = Field(
        False,
        description="Raise on elementwise arithmetic between series of different "
        "lengths instead of truncating to the shorter one.",
    )


@lru_cache
def get_settings() -> AppSettings:
    """Process-wide settings, read from the environment once."""
    return AppSettings()


Settings = get_settings()
