# weather_candles/adapters/csv_weather_loader.py

from __future__ import annotations

import csv
import logging
from pathlib import Path

import numpy as np
import pandas as pd

from weather_candles.domain.errors import SchemaError
from weather_candles.entities.weather_record import WeatherRecord
from weather_candles.interfaces.weather_loader import WeatherLoader

from weather_candles.infrastructure.schemas.weather_csv_schema import (
    WEATHER_CSV_DELIMITER,
    WEATHER_CSV_TIMESTAMP_COLUMN,
    required_columns,
    value_column,
)

logger = logging.getLogger(__name__)


class CsvWeatherLoader(WeatherLoader):
    """
    Loader adapter for multi-series weather CSV files
    (one utc_timestamp column + one <KEY>_temperature column per series).

    Parsing policy:
    - Missing required columns abort the load (SchemaError)
    - Rows too short to hold the value column are skipped
    - Rows whose value cell is not a finite number are skipped
    - Cells beyond the header width are ignored
    - Quote characters are plain text, every line is split on the delimiter

    Noisy real-world files still produce a usable (smaller) series.
    """

    def __init__(self, delimiter: str = WEATHER_CSV_DELIMITER):
        self.delimiter = delimiter

    def _check_source(self, source: str | Path) -> Path:
        filepath = Path(source)

        if not filepath.exists():
            raise FileNotFoundError(
                f"Weather source does not exist: {filepath.resolve()}"
            )

        if filepath.is_dir():
            raise IsADirectoryError(
                f"Weather source is a directory, not a file: {filepath.resolve()}"
            )

        return filepath

    def _read_header(self, filepath: Path, series_key: str) -> list[str]:
        try:
            header = pd.read_csv(
                filepath,
                sep=self.delimiter,
                header=None,
                nrows=1,
                index_col=False,
                dtype=str,
                keep_default_na=False,
                quoting=csv.QUOTE_NONE,
            )
        except pd.errors.EmptyDataError:
            raise SchemaError(required_columns(series_key), source=str(filepath)) from None

        return [str(c) for c in header.iloc[0].tolist()]

    @staticmethod
    def _last_index(columns: list[str], name: str) -> int:
        # a repeated header name resolves to its last occurrence
        return len(columns) - 1 - columns[::-1].index(name)

    def load(self, source: str | Path, series_key: str) -> list[WeatherRecord]:
        filepath = self._check_source(source)
        columns = self._read_header(filepath, series_key)

        missing = [c for c in required_columns(series_key) if c not in columns]
        if missing:
            raise SchemaError(missing, source=str(filepath))

        ts_idx = self._last_index(columns, WEATHER_CSV_TIMESTAMP_COLUMN)
        value_idx = self._last_index(columns, value_column(series_key))
        width = len(columns)

        logger.info(
            "Loading weather series from csv",
            extra={
                "path": str(filepath),
                "series_key": series_key,
                "timestamp_col": WEATHER_CSV_TIMESTAMP_COLUMN,
                "value_col": value_column(series_key),
            },
        )

        try:
            df = pd.read_csv(
                filepath,
                sep=self.delimiter,
                header=None,
                skiprows=1,
                names=list(range(width)),
                # only the two resolved columns are parsed; extra trailing
                # cells are ignored and short rows are padded with NaN
                usecols=[ts_idx, value_idx],
                index_col=False,
                dtype=str,
                keep_default_na=False,
                # lines are split on the delimiter alone, quotes are cell text
                quoting=csv.QUOTE_NONE,
                on_bad_lines="skip",
            )
        except pd.errors.EmptyDataError:
            df = pd.DataFrame(columns=[ts_idx, value_idx], dtype=str)

        timestamps = df[ts_idx]
        values = pd.to_numeric(df[value_idx], errors="coerce").astype(float)

        mask = timestamps.notna() & values.notna() & np.isfinite(values)

        records = [
            WeatherRecord(timestamp=ts, series_key=series_key, value=float(v))
            for ts, v in zip(timestamps[mask], values[mask])
        ]

        skipped = len(df) - len(records)
        if skipped:
            logger.debug(
                "Malformed rows skipped",
                extra={"path": str(filepath), "skipped": skipped},
            )

        logger.info(
            "Weather series loaded successfully",
            extra={
                "series_key": series_key,
                "rows": len(df),
                "count": len(records),
            },
        )

        return records
