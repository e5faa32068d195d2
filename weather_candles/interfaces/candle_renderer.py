# weather_candles/interfaces/candle_renderer.py
from abc import ABC, abstractmethod

from weather_candles.entities.candle import Candle


class CandleRenderer(ABC):
    @abstractmethod
    def render(self, candles: list[Candle], width: int) -> list[str]:
        """Returns one text line per candle, in input order."""
        ...
