# weather_candles/interfaces/weather_loader.py
from abc import ABC, abstractmethod
from pathlib import Path

from weather_candles.entities.weather_record import WeatherRecord


class WeatherLoader(ABC):
    """
    Port for reading one weather series out of a multi-series source.

    Implementations resolve the value column from the series key
    (e.g. "GB" -> "GB_temperature") and must not expose file format
    details to the use cases.
    """

    @abstractmethod
    def load(self, source: str | Path, series_key: str) -> list[WeatherRecord]:
        """
        Loads every parseable record of a series, in source order.

        Args:
            source: Location of the tabular source
            series_key: Series identifier (e.g. a country code)

        Returns:
            Records in source order (not sorted).

        Raises:
            FileNotFoundError: if the source cannot be opened
            SchemaError: if a required column is missing
        """
        ...
