# weather_candles/entities/weather_record.py
from dataclasses import dataclass


@dataclass(frozen=True)
class WeatherRecord:
    """
    One observation of a weather series.

    timestamp is kept as the raw text from the source (e.g.
    "2020-01-01T00:00:00Z"); period grouping and date filtering
    work on its zero-padded prefix.
    """

    timestamp: str
    series_key: str
    value: float
