# weather_candles/infrastructure/schemas/weather_csv_schema.py

WEATHER_CSV_DELIMITER = ","

WEATHER_CSV_TIMESTAMP_COLUMN = "utc_timestamp"

WEATHER_CSV_VALUE_SUFFIX = "_temperature"


def value_column(series_key: str) -> str:
    return f"{series_key}{WEATHER_CSV_VALUE_SUFFIX}"


def required_columns(series_key: str) -> list[str]:
    return [WEATHER_CSV_TIMESTAMP_COLUMN, value_column(series_key)]
