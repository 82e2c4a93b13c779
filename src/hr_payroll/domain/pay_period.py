"""Pay period value object (calendar year + month)."""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date

from hr_payroll.domain.errors import InvalidArgumentError

_PERIOD_PATTERN = re.compile(r"^(\d{4})-(\d{2})$")


@dataclass(frozen=True, order=True)
class PayPeriod:
    """A monthly pay period such as ``2025-03``."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not isinstance(self.year, int) or not 1 <= self.year <= 9999:
            raise InvalidArgumentError(f"Invalid pay period year: {self.year!r}")
        if not isinstance(self.month, int) or not 1 <= self.month <= 12:
            raise InvalidArgumentError(f"Invalid pay period month: {self.month!r}")

    @classmethod
    def of(cls, year: int, month: int) -> PayPeriod:
        return cls(year, month)

    @classmethod
    def from_date(cls, value: date) -> PayPeriod:
        return cls(value.year, value.month)

    @classmethod
    def parse(cls, value: str) -> PayPeriod:
        """Parse the ``YYYY-MM`` form."""
        match = _PERIOD_PATTERN.match((value or "").strip())
        if not match:
            raise InvalidArgumentError(f"Invalid pay period: {value!r} (expected YYYY-MM)")
        return cls(int(match.group(1)), int(match.group(2)))

    @property
    def start_date(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def end_date(self) -> date:
        return date(self.year, self.month, calendar.monthrange(self.year, self.month)[1])

    def contains(self, value: date) -> bool:
        return self.start_date <= value <= self.end_date

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"

    def __str__(self) -> str:
        return self.isoformat()
