"""Async client for the Postmark account API."""

__version__ = "0.1.0"

from .account_client import AccountClient  # noqa: E402
from .base_client import BaseClient  # noqa: E402
from .config import ClientOptions  # noqa: E402
from .errors import (  # noqa: E402
    ApiInputError,
    HttpError,
    InternalServerError,
    InvalidAPIKeyError,
    PostmarkError,
    RateLimitExceededError,
    ServiceUnavailableError,
    UnknownError,
)

__all__ = [
    "AccountClient",
    "ApiInputError",
    "BaseClient",
    "ClientOptions",
    "HttpError",
    "InternalServerError",
    "InvalidAPIKeyError",
    "PostmarkError",
    "RateLimitExceededError",
    "ServiceUnavailableError",
    "UnknownError",
]
