from __future__ import annotations

from typing import Dict, Type

import httpx


class PostmarkError(Exception):
    """Base error raised by every client call.

    ``code`` is the vendor ``ErrorCode`` (0 when absent) and ``status_code``
    the HTTP status (0 when the request never got a response).
    """

    def __init__(self, message: str, code: int = 0, status_code: int = 0):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"code={self.code}, status_code={self.status_code})"
        )


class HttpError(PostmarkError):
    """Vendor answered with a non-2xx status."""


class InvalidAPIKeyError(HttpError):
    pass


class ApiInputError(HttpError):
    pass


class RateLimitExceededError(HttpError):
    pass


class InternalServerError(HttpError):
    pass


class ServiceUnavailableError(HttpError):
    pass


class UnknownError(HttpError):
    pass


_ERRORS_BY_STATUS: Dict[int, Type[HttpError]] = {
    401: InvalidAPIKeyError,
    422: ApiInputError,
    429: RateLimitExceededError,
    500: InternalServerError,
    503: ServiceUnavailableError,
}


def error_for_status(message: str, code: int, status_code: int) -> HttpError:
    error_cls = _ERRORS_BY_STATUS.get(status_code, UnknownError)
    return error_cls(message, code, status_code)


def build_error(exc: httpx.HTTPError) -> PostmarkError:
    """Translate an ``httpx`` failure into the matching ``PostmarkError``."""

    if isinstance(exc, httpx.HTTPStatusError):
        response = exc.response
        status = response.status_code
        message = response.reason_phrase or str(exc)
        code = 0
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict):
            message = body.get("Message") or message
            try:
                code = int(body.get("ErrorCode") or 0)
            except (TypeError, ValueError):
                # non-numeric codes, e.g. from a proxy, map to 0
                code = 0
        return error_for_status(message, code, status)

    # Timeouts, refused connections and the like: no response to inspect
    return PostmarkError(str(exc) or type(exc).__name__)
