from typing import Any, Dict

from lambda_pipeline import post_form_urlencoded
from lambda_pipeline.observability import get_logger, log_json

logger = get_logger(__name__)


@post_form_urlencoded
async def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    fields = event["body"]
    log_json(logger, "info", "form_echo_request", field_names=sorted(fields))
    return {"fields": fields}
