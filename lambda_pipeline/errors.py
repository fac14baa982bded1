"""Errors raised by pipelines and by the functions they wrap.

Anything derived from :class:`HttpError` is a recognized HTTP-style error: the
API pipeline reports its status code and message to the caller. Every other
exception is treated as an unexpected internal failure.
"""
from http import HTTPStatus
from typing import Dict, Optional, Type


def reason_phrase(status_code: int) -> Optional[str]:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return None


class HttpError(Exception):
    status_code: int = 500

    def __init__(self, message: Optional[str] = None, *, status_code: Optional[int] = None):
        if status_code is not None:
            self.status_code = status_code
        self.message = message or reason_phrase(self.status_code) or "Error"
        super().__init__(self.message)

    @property
    def title(self) -> Optional[str]:
        return reason_phrase(self.status_code)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.status_code}, {self.message!r})"


class BadRequest(HttpError):
    status_code = 400


class Unauthorized(HttpError):
    status_code = 401


class Forbidden(HttpError):
    status_code = 403


class NotFound(HttpError):
    status_code = 404


class MethodNotAllowed(HttpError):
    status_code = 405


class Conflict(HttpError):
    status_code = 409


class UnprocessableEntity(HttpError):
    status_code = 422


class TooManyRequests(HttpError):
    status_code = 429


class InternalServerError(HttpError):
    status_code = 500


class BadGateway(HttpError):
    status_code = 502


class ServiceUnavailable(HttpError):
    status_code = 503


_ERRORS_BY_STATUS: Dict[int, Type[HttpError]] = {
    error_class.status_code: error_class
    for error_class in (
        BadRequest,
        Unauthorized,
        Forbidden,
        NotFound,
        MethodNotAllowed,
        Conflict,
        UnprocessableEntity,
        TooManyRequests,
        InternalServerError,
        BadGateway,
        ServiceUnavailable,
    )
}


def http_error(status_code: int, message: Optional[str] = None) -> HttpError:
    if not 400 <= status_code <= 599:
        raise ValueError(f"Not an error status code: {status_code}")
    error_class = _ERRORS_BY_STATUS.get(status_code)
    if error_class is None:
        return HttpError(message, status_code=status_code)
    return error_class(message)


class CompletionError(RuntimeError):
    """The completion callback was misused."""
