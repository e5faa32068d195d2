# weather_candles/domain/errors.py


class SchemaError(ValueError):
    """Raised when a source lacks a column the pipeline requires."""

    def __init__(self, missing: list[str], source: str | None = None):
        self.missing = list(missing)
        self.source = source

        message = f"Missing required columns: {self.missing}"
        if source is not None:
            message += f". Source: {source}"
        super().__init__(message)
