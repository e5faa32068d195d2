# weather_candles/domain/services/candle_aggregator.py

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable, List

from weather_candles.domain.period import Period
from weather_candles.entities.candle import Candle
from weather_candles.entities.weather_record import WeatherRecord

logger = logging.getLogger(__name__)


class CandleAggregator:
    """
    Domain Service that reduces weather records into OHLC candles,
    one per period bucket.

    This service:
    - Groups by timestamp prefix (YYYY / YYYY-MM / YYYY-MM-DD)
    - Does not depend on pandas, files or rendering
    - Returns candles ordered by label
    """

    def aggregate(
        self,
        records: Iterable[WeatherRecord],
        period: Period,
    ) -> List[Candle]:
        """
        Builds one candle per period bucket.

        Rules:
            open  = value of the earliest record in the bucket
            close = value of the latest record in the bucket
            high  = max value in the bucket
            low   = min value in the bucket

        Records whose timestamp is shorter than the period key are
        discarded silently.

        Args:
            records: loaded (and optionally filtered) records
            period: aggregation granularity

        Returns:
            List of Candle sorted by label
        """

        key_length = period.key_length
        grouped: dict[str, list[WeatherRecord]] = defaultdict(list)
        discarded = 0

        for record in records:
            if len(record.timestamp) < key_length:
                discarded += 1
                continue

            grouped[record.timestamp[:key_length]].append(record)

        candles: list[Candle] = []

        for label, group in grouped.items():
            # open/close depend on chronological order inside the bucket
            ordered = sorted(group, key=lambda r: r.timestamp)
            values = [r.value for r in ordered]

            candles.append(
                Candle(
                    label=label,
                    open=values[0],
                    high=max(values),
                    low=min(values),
                    close=values[-1],
                )
            )

        candles.sort(key=lambda c: c.label)

        if discarded:
            logger.debug(
                "Records discarded (timestamp shorter than period key)",
                extra={"period": period.value, "discarded": discarded},
            )

        return candles
