from lambda_pipeline.assembler import LambdaEntryPoint, Pipeline, assemble_lambda_handler
from lambda_pipeline.errors import (
    BadGateway,
    BadRequest,
    CompletionError,
    Conflict,
    Forbidden,
    HttpError,
    InternalServerError,
    MethodNotAllowed,
    NotFound,
    ServiceUnavailable,
    TooManyRequests,
    Unauthorized,
    UnprocessableEntity,
    http_error,
)
from lambda_pipeline.pipelines import api, lambda_passthrough, post_form_urlencoded, post_raw

__all__ = [
    "BadGateway",
    "BadRequest",
    "CompletionError",
    "Conflict",
    "Forbidden",
    "HttpError",
    "InternalServerError",
    "LambdaEntryPoint",
    "MethodNotAllowed",
    "NotFound",
    "Pipeline",
    "ServiceUnavailable",
    "TooManyRequests",
    "Unauthorized",
    "UnprocessableEntity",
    "api",
    "assemble_lambda_handler",
    "http_error",
    "lambda_passthrough",
    "post_form_urlencoded",
    "post_raw",
]
