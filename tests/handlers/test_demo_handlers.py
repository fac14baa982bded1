import json

import pytest

import handlers.echo.echo as echo
import handlers.form_echo.form_echo as form_echo
import handlers.raw_echo.raw_echo as raw_echo
from lambda_pipeline import BadRequest, InternalServerError


def test_echo_wraps_body(lambda_context):
    event = {"body": '{"name": "ada"}', "requestContext": {"requestId": "req-1"}}

    response = echo.handler(event, lambda_context)

    assert response["statusCode"] == 200
    assert json.loads(response["body"]) == {"requestId": "req-1", "echo": {"name": "ada"}}


def test_echo_status_override(lambda_context):
    response = echo.handler({"body": '{"status": 202}'}, lambda_context)

    assert response["statusCode"] == 202
    assert response["headers"] == {"Content-Type": "application/json"}
    assert json.loads(response["body"])["echo"] == {"status": 202}


def test_echo_missing_body_is_bad_request(lambda_context):
    response = echo.handler({}, lambda_context)

    assert response["statusCode"] == 400
    assert json.loads(response["body"])["errors"][0]["detail"] == "Request body is required"


def test_echo_logs_request(monkeypatch, lambda_context):
    log_calls = []
    monkeypatch.setattr(echo, "log_json", lambda *args, **kwargs: log_calls.append((args, kwargs)))

    echo.handler({"body": "[1]", "requestContext": {"requestId": "req-9"}}, lambda_context)

    assert log_calls[-1][0][2] == "echo_request"
    assert log_calls[-1][1]["request_id"] == "req-9"


def test_raw_echo_reports_length(lambda_context):
    assert raw_echo.handler({"body64": "aGVsbG8="}, lambda_context) == {
        "length": 5,
        "body": "hello",
    }


def test_raw_echo_conflicting_body(lambda_context):
    with pytest.raises(InternalServerError):
        raw_echo.handler({"body": "hi", "body64": "aGVsbG8="}, lambda_context)


def test_form_echo_returns_fields(lambda_context):
    # "name=Ada+Lovelace&lang=en"
    event = {"body64": "bmFtZT1BZGErTG92ZWxhY2UmbGFuZz1lbg=="}

    assert form_echo.handler(event, lambda_context) == {
        "fields": {"name": "Ada Lovelace", "lang": "en"}
    }


def test_form_echo_rejects_bad_pair(lambda_context):
    # "broken"
    with pytest.raises(BadRequest):
        form_echo.handler({"body64": "YnJva2Vu"}, lambda_context)
