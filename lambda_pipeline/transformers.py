"""Success and failure transformers.

A transformer receives the wrapped function's outcome, the completion callback
and the invocation context, and reports the final response through the
callback exactly once.
"""
import json
from typing import Any, Dict, List

from lambda_pipeline.completion import Completion
from lambda_pipeline.errors import HttpError, InternalServerError
from lambda_pipeline.observability import emit_metric, get_logger, log_exception

logger = get_logger(__name__)


def success_passthrough(data: Any, complete: Completion, context: Any = None) -> None:
    complete(None, data)


def failure_passthrough(error: BaseException, complete: Completion, context: Any = None) -> None:
    complete(error)


def _to_json(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def _is_status_code(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def success_api(data: Any, complete: Completion, context: Any = None) -> None:
    if isinstance(data, dict) and "statusCode" in data:
        if not _is_status_code(data["statusCode"]):
            raise InternalServerError("Handler returned invalid status code")
        response = {
            "statusCode": data["statusCode"],
            "body": data.get("body", ""),
            "headers": data.get("headers", {}),
        }
    else:
        response = {
            "statusCode": 200,
            "body": data,
            "headers": {},
        }

    if not isinstance(response["body"], str):
        response["body"] = _to_json(response["body"])

    complete(None, response)


def failure_api(error: BaseException, complete: Completion, context: Any = None) -> None:
    errors: List[Dict[str, Any]] = []
    if isinstance(error, HttpError):
        entry = {
            "status": str(error.status_code),
            "title": error.title,
            "detail": error.message,
        }
        if entry["title"] is None:
            del entry["title"]
        errors.append(entry)
        status_code = error.status_code
    else:
        errors.append(
            {
                "status": "500",
                "title": "Internal Server Error",
                "detail": "Unexpected internal server error",
            }
        )
        status_code = 500
        log_exception(
            logger,
            "unexpected_internal_server_error",
            error,
            request_id=getattr(context, "aws_request_id", None),
        )
        emit_metric("UnexpectedError", 1)

    complete(
        None,
        {
            "statusCode": status_code,
            "body": _to_json({"errors": errors}),
            "headers": {},
        },
    )
