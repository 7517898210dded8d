# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Element type constraints for time series operations.

Arithmetic on series is only defined when the element type is closed under
the operator: combining two elements yields a new element of the same type
without modifying either operand.
"""

from typing import Protocol, Self, TypeVar


class SupportsArithmetic(Protocol):
    """Element type supporting ``+ - * /`` with itself."""

    def __add__(self, other: Self, /) -> Self: ...

    def __sub__(self, other: Self, /) -> Self: ...

    def __mul__(self, other: Self, /) -> Self: ...

    def __truediv__(self, other: Self, /) -> Self: ...


T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
N = TypeVar("N", bound=SupportsArithmetic)
