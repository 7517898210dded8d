# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Elementwise combination of two aligned sequences of values."""

from collections.abc import Callable, Sequence

from openstef_timeseries.app_settings import Settings
from openstef_timeseries.exceptions import SeriesLengthMismatchError
from openstef_timeseries.log import get_logger
from openstef_timeseries.types import N

logger = get_logger(__name__)


def combine(
    left: Sequence[N],
    right: Sequence[N],
    op: Callable[[N, N], N],
    strict: bool | None = None,
) -> list[N]:
    """Combine two sequences position by position.

    The sequences are zipped, so the result stops at the shorter of the two and
    trailing values of the longer one are dropped.

    Args:
        left: Values on the left hand side of the operator.
        right: Values on the right hand side of the operator.
        op: Binary operator applied to each pair of values.
        strict: Raise instead of truncating when the lengths differ. Defaults to
            the ``strict_alignment`` setting.

    Returns:
        list: ``[op(left[i], right[i]) for i < min(len(left), len(right))]``

    Raises:
        SeriesLengthMismatchError: If ``strict`` and the lengths differ.
    """
    if strict is None:
        strict = Settings.strict_alignment

    if len(left) != len(right):
        if strict:
            raise SeriesLengthMismatchError(len(left), len(right))
        logger.debug(
            f"Truncating elementwise {getattr(op, '__name__', op)} to the shorter "
            f"operand ({len(left)} vs {len(right)} values)"
        )

    return [op(a, b) for a, b in zip(left, right)]
