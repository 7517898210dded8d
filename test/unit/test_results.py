# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

from openstef_timeseries import Err, Ok, TimeSeries, collapse_results
from openstef_timeseries.exceptions import UnwrapError
from test.unit.utils.base import BaseTestCase


def parse(text):
    try:
        return Ok(float(text))
    except ValueError as e:
        return Err(str(e))


class TestResults(BaseTestCase):
    def test_ok(self):
        ok = Ok(1)

        self.assertTrue(ok.is_ok())
        self.assertFalse(ok.is_err())
        self.assertEqual(ok.unwrap(), 1)
        self.assertEqual(ok.unwrap_or(2), 1)

    def test_err(self):
        err = Err("boom")

        self.assertTrue(err.is_err())
        self.assertFalse(err.is_ok())
        self.assertEqual(err.unwrap_or(2), 2)
        with self.assertRaises(UnwrapError) as context:
            err.unwrap()
        self.assertEqual(context.exception.error, "boom")

    def test_collapse_all_success(self):
        series = TimeSeries(["1", "2.5", "-3"]).map(parse)

        result = collapse_results(series)

        self.assertEqual(result, Ok(TimeSeries([1.0, 2.5, -3.0])))

    def test_collapse_returns_first_error(self):
        series = TimeSeries([Ok(1), Err("first"), Ok(3), Err("second")])

        self.assertEqual(collapse_results(series), Err("first"))
        self.assertEqual(series.collapse_results(), Err("first"))

    def test_collapse_stops_at_first_error(self):
        visited = []

        class Recording(TimeSeries):
            def __iter__(self):
                for item in super().__iter__():
                    visited.append(item)
                    yield item

        series = Recording([Ok(1), Err("stop"), Ok(3)])

        collapse_results(series)

        self.assertEqual(visited, [Ok(1), Err("stop")])

    def test_collapse_empty(self):
        self.assertEqual(collapse_results(TimeSeries()), Ok(TimeSeries()))

    def test_collapse_rejects_plain_values(self):
        with self.assertRaises(TypeError):
            collapse_results(TimeSeries([Ok(1), 2]))

    def test_result_types_are_documented(self):
        self.assertEqual(Ok.__doc__, "Successful outcome carrying a value.")
        self.assertEqual(Err.__doc__, "Failed outcome carrying the error unchanged.")
