# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

from importlib.metadata import PackageNotFoundError, version

from openstef_timeseries.results import Err, Ok, collapse_results
from openstef_timeseries.time_series import TimeSeries
from openstef_timeseries.variation import Variation

try:
    __version__ = version("openstef-timeseries")
except PackageNotFoundError:
    # package is not installed
    pass

__all__ = [
    "Err",
    "Ok",
    "TimeSeries",
    "Variation",
    "collapse_results",
]
