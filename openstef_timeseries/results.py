# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Success-or-error values and their reduction over a series.

A series of ``Ok`` / ``Err`` values is typically the output of ``map`` with a
function that can fail on individual elements. ``collapse_results`` turns such
a series into one outcome: every unwrapped value, or the first error.

Example:
    >>> from openstef_timeseries import TimeSeries
    >>> parsed = TimeSeries(["1.5", "2"]).map(
    ...     lambda s: Ok(float(s)) if s.replace(".", "", 1).isdigit() else Err(s)
    ... )
    >>> collapse_results(parsed)
    Ok(value=TimeSeries([1.5, 2.0]))
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Union

from openstef_timeseries.exceptions import UnwrapError
from openstef_timeseries.log import get_logger
from openstef_timeseries.types import E, T

if TYPE_CHECKING:
    from openstef_timeseries.time_series import TimeSeries

logger = get_logger(__name__)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome carrying the error unchanged."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self):
        raise UnwrapError(self.error)

    def unwrap_or(self, default):
        return default


Result = Union[Ok[T], Err[E]]


def collapse_results(series: "TimeSeries[Result]") -> "Result[TimeSeries, E]":
    """Reduce a series of results to a single result.

    Elements are scanned in order and the scan stops at the first ``Err``.

    Args:
        series: Series whose elements are ``Ok`` or ``Err`` values.

    Returns:
        ``Ok`` wrapping a series of the unwrapped values when every element
        succeeded, otherwise the first ``Err`` unchanged.

    Raises:
        TypeError: If an element is neither ``Ok`` nor ``Err``.
    """
    values = []
    for position, item in enumerate(series):
        if isinstance(item, Ok):
            values.append(item.value)
        elif isinstance(item, Err):
            logger.debug(f"Collapsing series stopped at error in position {position}")
            return item
        else:
            raise TypeError(
                f"Expected Ok or Err at position {position}, got {type(item).__name__}"
            )
    return Ok(type(series)(values))
