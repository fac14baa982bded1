from lambda_pipeline.assembler import assemble_lambda_handler
from lambda_pipeline.preprocessors import (
    preprocess_body64,
    preprocess_body64_form_urlencoded,
    preprocess_body_json,
    preprocess_passthrough,
)
from lambda_pipeline.transformers import (
    failure_api,
    failure_passthrough,
    success_api,
    success_passthrough,
)

# Event and result handed through untouched.
lambda_passthrough = assemble_lambda_handler(
    preprocess_passthrough,
    success_passthrough,
    failure_passthrough,
)

# JSON request body in, API Gateway proxy response out.
api = assemble_lambda_handler(
    preprocess_body_json,
    success_api,
    failure_api,
)

post_raw = assemble_lambda_handler(
    preprocess_body64,
    success_passthrough,
    failure_passthrough,
)

post_form_urlencoded = assemble_lambda_handler(
    preprocess_body64_form_urlencoded,
    success_passthrough,
    failure_passthrough,
)
