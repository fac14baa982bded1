import os

from aws_cdk import (
    CfnOutput,
    Stack,
    aws_apigateway as apigateway,
    aws_lambda as _lambda,
)
from constructs import Construct

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
BODY64_TEMPLATE = '{"body64": "$util.base64Encode($input.body)"}'

# Matched against the Lambda errorMessage; every other error is a 500.
BAD_REQUEST_PATTERN = "Failed to parse form-url-encoded body.*"
SERVER_ERROR_PATTERN = r"(?!Failed to parse form-url-encoded body)[\s\S]+"

ASSET_EXCLUDES = [
    "cdk.out",
    "tests",
    "pipeline_demo",
    "app.py",
    "*.md",
    "*.txt",
    "pyproject.toml",
    "cdk.json",
    ".git",
    ".pytest_cache",
    "*.egg-info",
    "**/__pycache__",
]


class PipelineDemoStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        stage_name = self.node.try_get_context("stageName") or "dev"
        log_level = self.node.try_get_context("logLevel") or "INFO"
        code = _lambda.Code.from_asset(PROJECT_ROOT, exclude=ASSET_EXCLUDES)
        environment = {"LOG_LEVEL": log_level, "STAGE": stage_name}

        echo_fn = _lambda.Function(
            self,
            "EchoFunction",
            runtime=_lambda.Runtime.PYTHON_3_11,
            handler="handlers.echo.echo.handler",
            code=code,
            environment=environment,
        )
        raw_echo_fn = _lambda.Function(
            self,
            "RawEchoFunction",
            runtime=_lambda.Runtime.PYTHON_3_11,
            handler="handlers.raw_echo.raw_echo.handler",
            code=code,
            environment=environment,
        )
        form_echo_fn = _lambda.Function(
            self,
            "FormEchoFunction",
            runtime=_lambda.Runtime.PYTHON_3_11,
            handler="handlers.form_echo.form_echo.handler",
            code=code,
            environment=environment,
        )

        api = apigateway.RestApi(
            self,
            "PipelineDemoApi",
            deploy_options=apigateway.StageOptions(stage_name=stage_name),
        )

        echo = api.root.add_resource("echo")
        echo.add_method("POST", apigateway.LambdaIntegration(echo_fn, proxy=True))

        raw = api.root.add_resource("raw")
        raw.add_method(
            "POST",
            _body64_integration(
                raw_echo_fn,
                content_types=["text/plain", "application/octet-stream"],
            ),
            method_responses=_method_responses(),
        )

        form = api.root.add_resource("form")
        form.add_method(
            "POST",
            _body64_integration(
                form_echo_fn,
                content_types=["application/x-www-form-urlencoded"],
            ),
            method_responses=_method_responses(),
        )

        CfnOutput(self, "ApiUrl", value=api.url)
        CfnOutput(self, "EchoUrl", value=f"{api.url}echo")
        CfnOutput(self, "RawUrl", value=f"{api.url}raw")
        CfnOutput(self, "FormUrl", value=f"{api.url}form")


def _body64_integration(
    fn: _lambda.IFunction, *, content_types: list
) -> apigateway.LambdaIntegration:
    return apigateway.LambdaIntegration(
        fn,
        proxy=False,
        passthrough_behavior=apigateway.PassthroughBehavior.NEVER,
        request_templates={content_type: BODY64_TEMPLATE for content_type in content_types},
        integration_responses=[
            apigateway.IntegrationResponse(status_code="200"),
            apigateway.IntegrationResponse(
                status_code="400",
                selection_pattern=BAD_REQUEST_PATTERN,
            ),
            apigateway.IntegrationResponse(
                status_code="500",
                selection_pattern=SERVER_ERROR_PATTERN,
            ),
        ],
    )


def _method_responses() -> list:
    return [
        apigateway.MethodResponse(status_code="200"),
        apigateway.MethodResponse(status_code="400"),
        apigateway.MethodResponse(status_code="500"),
    ]
