# weather_candles/domain/period.py

from __future__ import annotations

from enum import Enum


class Period(Enum):
    """
    Aggregation granularity.

    Each member carries the length of the timestamp prefix used as
    grouping key (YYYY / YYYY-MM / YYYY-MM-DD).
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"

    @property
    def key_length(self) -> int:
        return _KEY_LENGTHS[self]

    @classmethod
    def parse(cls, value: str) -> Period:
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(p.value for p in cls)
            raise ValueError(
                f"Unknown period: {value!r} (expected one of: {choices})"
            ) from None


_KEY_LENGTHS = {
    Period.YEAR: 4,
    Period.MONTH: 7,
    Period.DAY: 10,
}
