"""Preprocessors run on ``(event, context)`` before the wrapped function.

Each returns the ``(event, context)`` pair the function is called with and may
rewrite ``event["body"]`` in place.
"""
import json
from typing import Any, MutableMapping, Tuple

from lambda_pipeline.body_decoder import decode_event_body64, parse_form_urlencoded
from lambda_pipeline.errors import InternalServerError
from lambda_pipeline.observability import get_logger, log_json

logger = get_logger(__name__)

Event = MutableMapping[str, Any]


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Invalid JSON constant {token}")


def preprocess_passthrough(event: Event, context: Any) -> Tuple[Event, Any]:
    return event, context


def preprocess_body_json(event: Event, context: Any) -> Tuple[Event, Any]:
    body = event.get("body")
    if body:
        try:
            event["body"] = json.loads(body, parse_constant=_reject_constant)
        except (TypeError, ValueError):
            log_json(logger, "error", "body_json_parse_failed", body=body)
            raise InternalServerError("Invalid body JSON") from None
    return event, context


def preprocess_body64(event: Event, context: Any) -> Tuple[Event, Any]:
    event["body"] = decode_event_body64(event)
    return event, context


def preprocess_body64_form_urlencoded(event: Event, context: Any) -> Tuple[Event, Any]:
    body = decode_event_body64(event)
    event["body"] = parse_form_urlencoded(body)
    return event, context
