# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Ordered container for time series values.

Position in the series is the time step: the first value pushed is the
oldest. The series holds values of a single element type and supports
elementwise arithmetic with other series, transforms, and lagged variation.

Example:
    >>> ts = TimeSeries([1.0, 2.0, 4.0, 7.0])
    >>> ts.diff(1)
    TimeSeries([1.0, 2.0, 3.0])
    >>> ts.pct_change(1)
    TimeSeries([1.0, 1.0, 0.75])
    >>> ts.slice(1, 3) + ts.slice(2, 4)
    TimeSeries([6.0, 11.0])
"""

import copy
import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Generic, Optional, overload

import numpy as np
import pandas as pd

from openstef_timeseries import arithmetic
from openstef_timeseries.exceptions import SliceBoundsError
from openstef_timeseries.results import collapse_results
from openstef_timeseries.types import T, U
from openstef_timeseries.variation import Variation


class TimeSeries(Variation, Generic[T]):
    """Growable, zero-indexed sequence of values in time order.

    Args:
        values: Ordered source of the initial values. The series keeps its own
            copy of the values, the source is not referenced afterwards.
    """

    __hash__ = None

    def __init__(self, values: Optional[Iterable[T]] = None):
        self._values: list[T] = [] if values is None else list(values)

    # Construction and mutation

    def push(self, value: T) -> None:
        self._values.append(value)

    def pop_front(self) -> Optional[T]:
        """Remove and return the oldest value, or None if the series is empty."""
        if not self._values:
            return None
        return self._values.pop(0)

    def clear(self) -> None:
        self._values.clear()

    def append(self, other: "TimeSeries[T]") -> None:
        """Extend this series in place with copies of the values of another series."""
        self._values.extend(copy.copy(value) for value in other._values)

    def extend(self, values: Iterable[T]) -> None:
        self._values.extend(values)

    # Queries

    def is_empty(self) -> bool:
        return not self._values

    def first(self) -> Optional[T]:
        return self.get(0)

    def last(self) -> Optional[T]:
        return self.get(len(self._values) - 1)

    def get(self, index: int) -> Optional[T]:
        """Copy of the value at ``index``, or None if there is no such position.

        Unlike ``ts[index]`` this never raises.
        """
        if 0 <= index < len(self._values):
            return copy.copy(self._values[index])
        return None

    # Views and conversion

    @property
    def values(self) -> tuple[T, ...]:
        """Read-only view of all values."""
        return tuple(self._values)

    def as_mut(self) -> list[T]:
        """Mutable view of the values; writes are visible in the series."""
        return self._values

    def to_list(self) -> list[T]:
        return list(self._values)

    def to_numpy(self) -> np.ndarray:
        return np.array(self._values)

    def to_pandas(self, name: Optional[str] = None) -> pd.Series:
        """Convert to a pandas Series indexed by time step position."""
        return pd.Series(
            self._values, index=pd.RangeIndex(len(self._values)), name=name
        )

    def copy(self) -> "TimeSeries[T]":
        return self.__class__(copy.copy(value) for value in self._values)

    __copy__ = copy

    # Indexing

    def _check_range(self, key: slice) -> tuple[int, int]:
        if key.step not in (None, 1):
            raise ValueError(f"Series ranges do not support a step, got {key.step}")
        length = len(self._values)
        start = 0 if key.start is None else operator.index(key.start)
        end = length if key.stop is None else operator.index(key.stop)
        if start < 0 or end > length or start > end:
            raise SliceBoundsError(start, end, length)
        return start, end

    def _check_position(self, key) -> int:
        position = operator.index(key)
        if not 0 <= position < len(self._values):
            raise IndexError(
                f"Position {position} is out of bounds for a series of length {len(self._values)}"
            )
        return position

    @overload
    def __getitem__(self, key: int) -> T: ...

    @overload
    def __getitem__(self, key: slice) -> tuple[T, ...]: ...

    def __getitem__(self, key):
        if isinstance(key, slice):
            start, end = self._check_range(key)
            return tuple(self._values[start:end])
        return self._values[self._check_position(key)]

    def __setitem__(self, key, value) -> None:
        if isinstance(key, slice):
            start, end = self._check_range(key)
            value = list(value)
            if len(value) != end - start:
                raise ValueError(
                    f"Cannot assign {len(value)} values to a range of {end - start} positions"
                )
            self._values[start:end] = value
        else:
            self._values[self._check_position(key)] = value

    def slice(self, start: int, end: int) -> "TimeSeries[T]":
        """New series with copies of the values in ``[start, end)``.

        Raises:
            SliceBoundsError: If ``end`` exceeds the length or ``start > end``.
        """
        start, end = self._check_range(slice(start, end))
        return self.__class__(copy.copy(value) for value in self._values[start:end])

    # Container protocol

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[T]:
        return iter(self._values)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._values)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TimeSeries):
            return NotImplemented
        if len(self._values) != len(other._values):
            return False
        return all(
            np.array_equal(a, b)
            if isinstance(a, np.ndarray) or isinstance(b, np.ndarray)
            else a == b
            for a, b in zip(self._values, other._values)
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._values!r})"

    # Transforms

    def map(self, func: Callable[[T], U]) -> "TimeSeries[U]":
        """Apply ``func`` to every value, keeping order and length."""
        return self.__class__(func(value) for value in self._values)

    def filter(self, predicate: Callable[[T], bool]) -> "TimeSeries[T]":
        return self.__class__(
            copy.copy(value) for value in self._values if predicate(value)
        )

    def reverse(self) -> "TimeSeries[T]":
        return self.__class__(copy.copy(value) for value in reversed(self._values))

    def collapse_results(self):
        """See ``openstef_timeseries.results.collapse_results``."""
        return collapse_results(self)

    # Elementwise arithmetic

    def _combine(self, other: "TimeSeries[T]", op: Callable) -> "TimeSeries[T]":
        if not isinstance(other, TimeSeries):
            raise TypeError(
                f"Cannot combine a series with {type(other).__name__}, only with another series"
            )
        return self.__class__(arithmetic.combine(self._values, other._values, op))

    def add(self, other: "TimeSeries[T]") -> "TimeSeries[T]":
        return self._combine(other, operator.add)

    def sub(self, other: "TimeSeries[T]") -> "TimeSeries[T]":
        return self._combine(other, operator.sub)

    def mul(self, other: "TimeSeries[T]") -> "TimeSeries[T]":
        return self._combine(other, operator.mul)

    def div(self, other: "TimeSeries[T]") -> "TimeSeries[T]":
        return self._combine(other, operator.truediv)

    def __add__(self, other):
        if not isinstance(other, TimeSeries):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, TimeSeries):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other):
        if not isinstance(other, TimeSeries):
            return NotImplemented
        return self.mul(other)

    def __truediv__(self, other):
        if not isinstance(other, TimeSeries):
            return NotImplemented
        return self.div(other)

    # Variation

    def diff(self, offset: int) -> "TimeSeries[T]":
        """Lagged difference: ``result[i] = self[offset + i] - self[i]``.

        Args:
            offset: Lag in positions. Equal to the length gives an empty series.

        Raises:
            SliceBoundsError: If ``offset`` is negative or exceeds the length.
        """
        length = len(self._values)
        if offset < 0 or offset > length:
            raise SliceBoundsError(offset, length, length)
        return self.slice(offset, length) - self.slice(0, length - offset)

    def pct_change(self, offset: int) -> "TimeSeries[T]":
        """Lagged relative change: ``(self[offset + i] - self[i]) / self[i]``.

        Division by a zero value follows the element type, e.g. ``inf`` for
        numpy floats and ``ZeroDivisionError`` for Python floats.
        """
        length = len(self._values)
        if offset < 0 or offset > length:
            raise SliceBoundsError(offset, length, length)
        base = self.slice(0, length - offset)
        return (self.slice(offset, length) - base) / base
