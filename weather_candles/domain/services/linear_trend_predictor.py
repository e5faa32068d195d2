# weather_candles/domain/services/linear_trend_predictor.py

from __future__ import annotations

from typing import Sequence

import numpy as np


class LinearTrendPredictor:
    @staticmethod
    def predict_next(values: Sequence[float]) -> float:
        """
        Extrapolates the next value of a series with an ordinary
        least-squares line fitted over (index, value).

        x = 0..n-1, prediction at x = n.

        - empty series -> 0.0
        - single value -> that value
        """
        n = len(values)
        if n == 0:
            return 0.0
        if n == 1:
            return float(values[0])

        y = np.asarray(values, dtype=float)
        x = np.arange(n, dtype=float)

        x_bar = (n - 1) / 2.0
        y_bar = float(y.mean())

        dx = x - x_bar
        numerator = float(np.sum(dx * (y - y_bar)))
        denominator = float(np.sum(dx * dx))

        slope = numerator / denominator if denominator != 0 else 0.0
        intercept = y_bar - slope * x_bar

        return intercept + slope * n
