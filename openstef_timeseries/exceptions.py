# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

"""Custom exceptions for openstef-timeseries."""


class SliceBoundsError(IndexError):
    """Range access outside the bounds of a time series."""

    def __init__(self, start: int, end: int, length: int):
        """Initialize the exception with the offending range.

        Args:
            start: Requested (inclusive) start position.
            end: Requested (exclusive) end position.
            length: Length of the series at the time of access.
        """
        self.start = start
        self.end = end
        self.length = length
        super().__init__(
            f"Range [{start}, {end}) is out of bounds for a series of length {length}."
        )


class SeriesLengthMismatchError(ValueError):
    """Two series combined elementwise have different lengths."""

    def __init__(self, left_length: int, right_length: int):
        self.left_length = left_length
        self.right_length = right_length
        super().__init__(
            f"Cannot align series of length {left_length} with series of length {right_length}."
        )


class UnwrapError(Exception):
    """Unwrap was called on an Err value."""

    def __init__(self, error, message: str = "Called unwrap on an Err value"):
        self.error = error
        self.message = f"{message}: {error!r}"
        super().__init__(self.message)
