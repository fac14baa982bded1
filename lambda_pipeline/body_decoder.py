import base64
import binascii
import re
from typing import Any, Dict, MutableMapping
from urllib.parse import unquote

from lambda_pipeline.errors import BadRequest, InternalServerError
from lambda_pipeline.observability import get_logger, log_json

logger = get_logger(__name__)

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def decode_event_body64(event: MutableMapping[str, Any]) -> str:
    body64 = event.get("body64")
    if not body64:
        raise InternalServerError("No base64-encoded body found")

    if event.get("body"):
        raise InternalServerError("Event already contains body in addition to body64")

    try:
        return base64.b64decode(body64, validate=True).decode("utf-8")
    except (binascii.Error, TypeError, ValueError):
        log_json(logger, "error", "body64_decode_failed", body64=body64)
        raise InternalServerError("Failed to decode base64-encoded body") from None


def _decode_component(component: str) -> str:
    if _MALFORMED_ESCAPE.search(component):
        raise ValueError(f"Malformed percent escape in {component!r}")
    return unquote(component.replace("+", " "), errors="strict")


def parse_form_urlencoded(body: str) -> Dict[str, str]:
    parsed: Dict[str, str] = {}
    for pair in body.split("&"):
        try:
            split_pair = pair.split("=")
            if len(split_pair) != 2:
                raise ValueError(f"Invalid pair length {len(split_pair)}")
            key = _decode_component(split_pair[0])
            value = _decode_component(split_pair[1])
        except ValueError:
            log_json(
                logger,
                "warning",
                "form_body_pair_invalid",
                body=body,
                pair=pair,
            )
            raise BadRequest("Failed to parse form-url-encoded body") from None
        parsed[key] = value
    return parsed
