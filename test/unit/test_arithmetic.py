# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

import operator
from unittest.mock import patch

import numpy as np

from openstef_timeseries import TimeSeries
from openstef_timeseries.arithmetic import combine
from openstef_timeseries.exceptions import SeriesLengthMismatchError
from test.unit.utils.base import BaseTestCase


class TestArithmetic(BaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.a = TimeSeries([1.0, 2.0, 3.0, 4.0])
        self.b = TimeSeries([0.5, 4.0, -1.0, 8.0])

    def test_operators_are_elementwise(self):
        cases = [
            (operator.add, self.a + self.b),
            (operator.sub, self.a - self.b),
            (operator.mul, self.a * self.b),
            (operator.truediv, self.a / self.b),
        ]
        for op, result in cases:
            with self.subTest(op=op.__name__):
                self.assertEqual(len(result), 4)
                for i in range(4):
                    self.assertEqual(result[i], op(self.a[i], self.b[i]))

    def test_named_methods_match_operators(self):
        self.assertEqual(self.a.add(self.b), self.a + self.b)
        self.assertEqual(self.a.sub(self.b), self.a - self.b)
        self.assertEqual(self.a.mul(self.b), self.a * self.b)
        self.assertEqual(self.a.div(self.b), self.a / self.b)

    def test_operands_are_not_modified(self):
        _ = (self.a + self.b) * self.a

        self.assertEqual(self.a, TimeSeries([1.0, 2.0, 3.0, 4.0]))
        self.assertEqual(self.b, TimeSeries([0.5, 4.0, -1.0, 8.0]))

    def test_unequal_lengths_truncate_to_shorter(self):
        short = TimeSeries([1.0, 1.0])

        self.assertEqual(self.a + short, TimeSeries([2.0, 3.0]))
        self.assertEqual(short - self.a, TimeSeries([0.0, -1.0]))
        self.assertEqual(len(self.a * TimeSeries()), 0)

    def test_scalar_operand_is_not_supported(self):
        with self.assertRaises(TypeError):
            self.a + 1.0
        with self.assertRaises(TypeError):
            2.0 * self.a
        with self.assertRaises(TypeError):
            self.a.add(1.0)

    def test_integer_series(self):
        self.assertEqual(TimeSeries([1, 2]) + TimeSeries([3, 4]), TimeSeries([4, 6]))

    def test_numpy_division_by_zero_follows_element_type(self):
        a = TimeSeries(np.array([1.0, 0.0]))
        b = TimeSeries(np.array([0.0, 0.0]))

        with np.errstate(divide="ignore", invalid="ignore"):
            result = a / b

        self.assertTrue(np.isinf(result[0]))
        self.assertTrue(np.isnan(result[1]))

    def test_python_division_by_zero_propagates(self):
        with self.assertRaises(ZeroDivisionError):
            TimeSeries([1.0]) / TimeSeries([0.0])

    def test_combine_strict_raises_on_mismatch(self):
        with self.assertRaises(SeriesLengthMismatchError) as context:
            combine([1, 2, 3], [1, 2], operator.add, strict=True)

        self.assertEqual(context.exception.left_length, 3)
        self.assertEqual(context.exception.right_length, 2)

    def test_combine_strict_accepts_equal_lengths(self):
        self.assertEqual(combine([1, 2], [3, 4], operator.mul, strict=True), [3, 8])

    @patch("openstef_timeseries.arithmetic.Settings")
    def test_strict_alignment_setting(self, settings_mock):
        settings_mock.strict_alignment = True

        with self.assertRaises(SeriesLengthMismatchError):
            self.a + TimeSeries([1.0])

    @patch("openstef_timeseries.arithmetic.logger")
    def test_truncation_is_logged(self, logger_mock):
        _ = self.a + TimeSeries([1.0])

        logger_mock.debug.assert_called_once()
