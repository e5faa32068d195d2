# weather_candles/main_candles.py
from __future__ import annotations

import argparse
import logging
from typing import Sequence

from dotenv import load_dotenv

from weather_candles.adapters.ascii_candle_renderer import AsciiCandleRenderer
from weather_candles.adapters.csv_weather_loader import CsvWeatherLoader
from weather_candles.domain.errors import SchemaError
from weather_candles.domain.period import Period
from weather_candles.use_cases.build_candles_use_case import (
    DATE_LOWER_BOUND,
    DATE_UPPER_BOUND,
    BuildCandlesUseCase,
)
from weather_candles.use_cases.predict_next_average_use_case import (
    PredictNextAverageUseCase,
)
from weather_candles.utils.config_loader import load_config
from weather_candles.utils.logging_config import setup_logging

logger = logging.getLogger(__name__)
load_dotenv()


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Aggregate a weather temperature series into OHLC candles"
    )
    parser.add_argument("source", help="CSV file with a utc_timestamp column")
    parser.add_argument(
        "series_key",
        help="Series key selecting the <KEY>_temperature column (e.g. GB)",
    )
    parser.add_argument(
        "--from",
        dest="date_from",
        default=DATE_LOWER_BOUND,
        help="Inclusive start date, zero-padded YYYY-MM-DD",
    )
    parser.add_argument(
        "--to",
        dest="date_to",
        default=DATE_UPPER_BOUND,
        help="Inclusive end date, zero-padded YYYY-MM-DD",
    )
    parser.add_argument(
        "--minT",
        dest="min_value",
        type=float,
        default=float("-inf"),
        help="Inclusive minimum temperature",
    )
    parser.add_argument(
        "--maxT",
        dest="max_value",
        type=float,
        default=float("inf"),
        help="Inclusive maximum temperature",
    )
    parser.add_argument(
        "--period",
        choices=[p.value for p in Period],
        default=None,
        help="Aggregation period (default from config: month)",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Print an ASCII candlestick chart",
    )
    parser.add_argument(
        "--predict",
        action="store_true",
        help="Print the predicted OHLC average of the next period",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        help="Chart width in columns (default from config: 50)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="YAML config file (default: config/weather_candles.yaml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level name (default from config: INFO)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)

    config = load_config(args.config)
    setup_logging(args.log_level or config["logging"]["level"])

    period = Period.parse(args.period or config["aggregation"]["default_period"])
    width = args.width if args.width is not None else int(config["chart"]["width"])

    use_case = BuildCandlesUseCase(weather_loader=CsvWeatherLoader())

    try:
        result = use_case.execute(
            args.source,
            args.series_key,
            period=period,
            date_from=args.date_from,
            date_to=args.date_to,
            min_value=args.min_value,
            max_value=args.max_value,
        )
    except (OSError, SchemaError) as exc:
        logger.error(
            "Candle pipeline aborted",
            extra={"source": args.source, "series_key": args.series_key, "error": str(exc)},
        )
        raise

    if args.plot:
        renderer = AsciiCandleRenderer(
            wick_char=config["chart"]["wick_char"],
            body_char=config["chart"]["body_char"],
        )
        for line in renderer.render(result.candles, width):
            print(line)

    if args.predict:
        prediction = PredictNextAverageUseCase().execute(result.candles)
        print(f"Predicted next average: {prediction:g}")

    logger.info(
        "Candle pipeline completed",
        extra={
            "series_key": result.series_key,
            "period": result.period.value,
            "loaded": result.loaded,
            "filtered": result.filtered,
            "candles": len(result.candles),
        },
    )


if __name__ == "__main__":
    main()
