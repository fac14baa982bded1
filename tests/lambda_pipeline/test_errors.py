import pytest

from lambda_pipeline import errors


def test_http_error_defaults_message_to_reason_phrase():
    error = errors.NotFound()
    assert error.status_code == 404
    assert error.message == "Not Found"
    assert error.title == "Not Found"
    assert str(error) == "Not Found"


def test_http_error_keeps_custom_message():
    error = errors.BadRequest("name is required")
    assert error.status_code == 400
    assert error.message == "name is required"
    assert error.title == "Bad Request"


def test_subclasses_are_http_errors():
    assert isinstance(errors.InternalServerError(), errors.HttpError)
    assert not isinstance(ValueError("nope"), errors.HttpError)


def test_http_error_factory_picks_subclass():
    error = errors.http_error(409, "already exists")
    assert isinstance(error, errors.Conflict)
    assert error.message == "already exists"


def test_http_error_factory_generic_code():
    error = errors.http_error(418)
    assert type(error) is errors.HttpError
    assert error.status_code == 418
    assert error.title == "I'm a Teapot"


def test_http_error_factory_rejects_non_error_codes():
    with pytest.raises(ValueError):
        errors.http_error(200)


def test_title_is_none_for_unregistered_code():
    error = errors.HttpError("odd", status_code=599)
    assert error.title is None
    assert error.message == "odd"
