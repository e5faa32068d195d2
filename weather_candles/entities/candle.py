# weather_candles/entities/candle.py
from dataclasses import dataclass


@dataclass(frozen=True)
class Candle:
    label: str  # period prefix: "2020", "2020-01" or "2020-01-15"
    open: float
    high: float
    low: float
    close: float

    def __post_init__(self):
        if self.low > min(self.open, self.close):
            raise ValueError("Low must be <= open and close")

        if self.high < max(self.open, self.close):
            raise ValueError("High must be >= open and close")

    @property
    def average(self) -> float:
        return (self.open + self.high + self.low + self.close) / 4.0
