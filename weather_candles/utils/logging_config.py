# weather_candles/utils/logging_config.py
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TextIO


class ExtraFormatter(logging.Formatter):
    _standard_keys = {
        "name",
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "message",
        "asctime",
    }

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        extras = {
            k: v for k, v in record.__dict__.items() if k not in self._standard_keys
        }
        if not extras:
            return base
        extra_str = " ".join(f"{k}={v}" for k, v in sorted(extras.items()))
        return f"{base} | {extra_str}"


def setup_logging(level: int | str = logging.INFO, stream: TextIO | None = None) -> None:
    """
    Standard project logging:
    2026-01-14 09:49:59 | INFO | module.name | message | key=value

    Logs go to stderr by default; stdout carries the chart and the
    prediction. A file handler is added only when LOG_DIR is set.
    """

    if isinstance(level, str):
        name = level.upper()
        level = logging.getLevelName(name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {name}")

    root = logging.getLogger()

    # avoid duplicated handlers when setup_logging() runs more than once
    if root.handlers:
        root.setLevel(level)
        return

    root.setLevel(level)

    formatter = ExtraFormatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    root.addHandler(handler)

    log_dir_env = os.getenv("LOG_DIR")
    if log_dir_env:
        log_dir = Path(log_dir_env)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "weather_candles.log", encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
