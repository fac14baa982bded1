from typing import Any, Dict

from lambda_pipeline import post_raw
from lambda_pipeline.observability import get_logger, log_json

logger = get_logger(__name__)


@post_raw
def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    raw_body = event["body"]
    log_json(logger, "info", "raw_echo_request", length=len(raw_body))
    return {"length": len(raw_body), "body": raw_body}
