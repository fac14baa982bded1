from typing import Any, Dict

from lambda_pipeline import BadRequest, api
from lambda_pipeline.observability import get_logger, log_json

logger = get_logger(__name__)


@api
def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    body = event.get("body")
    if body is None:
        raise BadRequest("Request body is required")

    request_id = event.get("requestContext", {}).get("requestId")
    log_json(logger, "info", "echo_request", request_id=request_id)

    if isinstance(body, dict) and "status" in body:
        return {
            "statusCode": body["status"],
            "headers": {"Content-Type": "application/json"},
            "body": {"requestId": request_id, "echo": body},
        }
    return {"requestId": request_id, "echo": body}
