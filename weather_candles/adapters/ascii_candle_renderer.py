# weather_candles/adapters/ascii_candle_renderer.py

from __future__ import annotations

import logging

from weather_candles.entities.candle import Candle
from weather_candles.interfaces.candle_renderer import CandleRenderer

logger = logging.getLogger(__name__)

DEFAULT_CHART_WIDTH = 50
LABEL_WIDTH = 8


class AsciiCandleRenderer(CandleRenderer):
    """
    Renders candles as horizontal text strips on a shared value scale:

         2020-01 | | ###     |
         2020-02 |       ###

    Columns are computed over [min low, max high] of the whole chart.
    When every candle sits on the same value the scale collapses and
    all marks land on column 0.
    """

    def __init__(self, wick_char: str = "|", body_char: str = "#"):
        if len(wick_char) != 1 or len(body_char) != 1:
            raise ValueError("wick_char and body_char must be single characters")

        self.wick_char = wick_char
        self.body_char = body_char

    @staticmethod
    def _column(value: float, min_v: float, max_v: float, width: int) -> int:
        if max_v == min_v:
            return 0
        return int((value - min_v) / (max_v - min_v) * (width - 1))

    def render(self, candles: list[Candle], width: int = DEFAULT_CHART_WIDTH) -> list[str]:
        if width < 1:
            raise ValueError(f"width must be >= 1, got {width}")

        if not candles:
            return []

        min_v = min(c.low for c in candles)
        max_v = max(c.high for c in candles)

        if max_v == min_v:
            logger.debug("Flat chart range, all marks on column 0", extra={"value": min_v})

        lines: list[str] = []
        for c in candles:
            low_col = self._column(c.low, min_v, max_v, width)
            high_col = self._column(c.high, min_v, max_v, width)
            open_col = self._column(c.open, min_v, max_v, width)
            close_col = self._column(c.close, min_v, max_v, width)

            strip = [" "] * width
            strip[low_col] = self.wick_char
            strip[high_col] = self.wick_char
            for i in range(min(open_col, close_col), max(open_col, close_col) + 1):
                strip[i] = self.body_char

            lines.append(f"{c.label:>{LABEL_WIDTH}} | {''.join(strip)}")

        return lines
