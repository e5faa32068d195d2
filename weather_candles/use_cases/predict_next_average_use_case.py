# weather_candles/use_cases/predict_next_average_use_case.py

from __future__ import annotations

import logging

from weather_candles.domain.services.linear_trend_predictor import LinearTrendPredictor
from weather_candles.entities.candle import Candle

logger = logging.getLogger(__name__)


class PredictNextAverageUseCase:
    def __init__(self, predictor: LinearTrendPredictor | None = None):
        self.predictor = predictor or LinearTrendPredictor()

    def execute(self, candles: list[Candle]) -> float:
        """
        Predicts the OHLC average of the candle following the last one.

        Each candle is reduced to (open + high + low + close) / 4 and the
        resulting series is extrapolated one step with a linear trend.
        """
        averages = [c.average for c in candles]
        prediction = self.predictor.predict_next(averages)

        logger.info(
            "Next average predicted",
            extra={"history": len(averages), "prediction": prediction},
        )

        return prediction
