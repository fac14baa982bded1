"""Operator-facing output: JSON log lines and CloudWatch embedded metrics."""
import json
import logging
import os
import time
from typing import Any, Dict


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())
    return logger


def _render(msg: str, fields: Dict[str, Any]) -> str:
    return json.dumps({"msg": msg, **fields}, default=str)


def log_json(logger: logging.Logger, level: str, msg: str, **fields: Any) -> None:
    level_value = logging.getLevelName(level.upper())
    if not isinstance(level_value, int):
        level_value = logging.INFO
    logger.log(level_value, _render(msg, fields))


def log_exception(
    logger: logging.Logger, msg: str, error: BaseException, **fields: Any
) -> None:
    fields = {
        "error_type": type(error).__name__,
        "error_message": str(error),
        **fields,
    }
    logger.error(
        _render(msg, fields),
        exc_info=(type(error), error, error.__traceback__),
    )


def emit_metric(name: str, value: float = 1, unit: str = "Count") -> None:
    """Print one EMF record; the Lambda log stream turns it into a metric."""
    dimensions = {"Stage": os.environ["STAGE"]} if os.environ.get("STAGE") else {}
    record = {
        "_aws": {
            "Timestamp": int(time.time() * 1000),
            "CloudWatchMetrics": [
                {
                    "Namespace": os.environ.get("METRICS_NAMESPACE", "LambdaPipeline"),
                    "Dimensions": [sorted(dimensions)],
                    "Metrics": [{"Name": name, "Unit": unit}],
                }
            ],
        },
        name: value,
        **dimensions,
    }
    print(json.dumps(record))


def elapsed_ms(started: float) -> int:
    """Milliseconds since ``started``, a ``time.perf_counter()`` reading."""
    return round((time.perf_counter() - started) * 1000)
