# weather_candles/use_cases/build_candles_use_case.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from weather_candles.domain.period import Period
from weather_candles.domain.services.candle_aggregator import CandleAggregator
from weather_candles.domain.services.record_filter import RecordFilter
from weather_candles.entities.candle import Candle
from weather_candles.interfaces.weather_loader import WeatherLoader

logger = logging.getLogger(__name__)

DATE_LOWER_BOUND = "0000-00-00"
DATE_UPPER_BOUND = "9999-12-31"


@dataclass(frozen=True)
class BuildCandlesResult:
    series_key: str
    period: Period
    loaded: int
    filtered: int
    candles: list[Candle]


class BuildCandlesUseCase:
    def __init__(
        self,
        weather_loader: WeatherLoader,
        aggregator: CandleAggregator | None = None,
    ):
        self.weather_loader = weather_loader
        self.aggregator = aggregator or CandleAggregator()

    def execute(
        self,
        source: str | Path,
        series_key: str,
        *,
        period: Period = Period.MONTH,
        date_from: str = DATE_LOWER_BOUND,
        date_to: str = DATE_UPPER_BOUND,
        min_value: float = float("-inf"),
        max_value: float = float("inf"),
    ) -> BuildCandlesResult:
        """
        Orchestrates the candle pipeline:
        - loads the series (loader errors propagate to the caller)
        - applies the date filter, then the value filter
        - aggregates what is left into candles
        """

        logger.info(
            "Building candles",
            extra={
                "series_key": series_key,
                "period": period.value,
                "from": date_from,
                "to": date_to,
                "min_value": min_value,
                "max_value": max_value,
            },
        )

        records = self.weather_loader.load(source, series_key)

        filtered = RecordFilter.by_date_range(records, date_from, date_to)
        filtered = RecordFilter.by_value_range(filtered, min_value, max_value)

        candles = self.aggregator.aggregate(filtered, period)

        logger.info(
            "Candles built",
            extra={
                "series_key": series_key,
                "loaded": len(records),
                "filtered": len(filtered),
                "candles": len(candles),
            },
        )

        return BuildCandlesResult(
            series_key=series_key,
            period=period,
            loaded=len(records),
            filtered=len(filtered),
            candles=candles,
        )
