# weather_candles/domain/services/record_filter.py

from __future__ import annotations

from typing import Iterable

from weather_candles.entities.weather_record import WeatherRecord

DATE_PREFIX_LENGTH = 10


class RecordFilter:
    """
    Domain Service with the range filters applied between loading
    and aggregation.

    Both filters:
    - preserve input order
    - never mutate the input
    - are inclusive at both ends
    """

    @staticmethod
    def by_date_range(
        records: Iterable[WeatherRecord],
        start: str,
        end: str,
    ) -> list[WeatherRecord]:
        """
        Keeps records whose date (first 10 chars of the timestamp)
        falls in [start, end].

        Comparison is plain string comparison, so start and end must be
        zero-padded YYYY-MM-DD like the timestamps. No normalization is
        performed.
        """
        return [
            r
            for r in records
            if start <= r.timestamp[:DATE_PREFIX_LENGTH] <= end
        ]

    @staticmethod
    def by_value_range(
        records: Iterable[WeatherRecord],
        min_value: float,
        max_value: float,
    ) -> list[WeatherRecord]:
        return [r for r in records if min_value <= r.value <= max_value]
