# SPDX-FileCopyrightText: 2017-2025 Contributors to the OpenSTEF project <korte.termijn.prognoses@alliander.com> # noqa E501>
#
# SPDX-License-Identifier: MPL-2.0

from abc import ABC, abstractmethod
from typing import Self


class Variation(ABC):
    """Lagged differences and relative changes of an ordered series."""

    @abstractmethod
    def diff(self, offset: int) -> Self:
        """Difference between each value and the value ``offset`` positions earlier."""

    @abstractmethod
    def pct_change(self, offset: int) -> Self:
        """Relative change between each value and the value ``offset`` positions earlier."""
