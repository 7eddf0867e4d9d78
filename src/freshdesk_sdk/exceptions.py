"""Exception hierarchy raised by the Freshdesk client."""

from __future__ import annotations

from typing import Any, Optional

import requests


class FreshdeskError(Exception):
    """Base class for every error raised by this package."""


class InvalidConfigurationError(FreshdeskError, ValueError):
    """The client was constructed with missing or malformed settings."""


class ApiError(FreshdeskError):
    """A request to the Freshdesk API failed.

    ``status_code`` is None when no response was received at all
    (connection refused, timeout, ...).
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[requests.Response] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response

    @property
    def response_body(self) -> Any:
        """Decoded JSON body of the failed response, or its raw text."""
        if self.response is None:
            return None
        try:
            return self.response.json()
        except ValueError:
            return self.response.text

    @classmethod
    def create(cls, exc: requests.RequestException) -> "ApiError":
        """Build the ApiError subclass matching the status of ``exc``."""
        response = exc.response
        status = response.status_code if response is not None else None
        error_cls = STATUS_ERRORS.get(status, ApiError)
        if status is None:
            message = f"Request failed: {exc}"
        else:
            message = f"{status} {response.reason or ''}".strip()
        return error_cls(message, status_code=status, response=response)


class AuthenticationError(ApiError):
    """401: the API key was rejected."""


class AccessDeniedError(ApiError):
    """403"""


class NotFoundError(ApiError):
    """404"""


class MethodNotAllowedError(ApiError):
    """405"""


class UnsupportedAcceptHeaderError(ApiError):
    """406"""


class ConflictingStateError(ApiError):
    """409: the resource is in a state that does not allow the operation."""


class UnsupportedContentTypeError(ApiError):
    """415"""


class ValidationError(ApiError):
    """422: the payload failed server side validation."""

    @property
    def errors(self) -> list[dict[str, Any]]:
        body = self.response_body
        if isinstance(body, dict):
            return body.get("errors") or []
        return []


class RateLimitExceededError(ApiError):
    """429: the account's hourly/minute quota is spent."""

    @property
    def retry_after(self) -> Optional[int]:
        if self.response is None:
            return None
        value = self.response.headers.get("Retry-After")
        try:
            return int(value)
        except (TypeError, ValueError):
            return None


STATUS_ERRORS: dict[int, type[ApiError]] = {
    401: AuthenticationError,
    403: AccessDeniedError,
    404: NotFoundError,
    405: MethodNotAllowedError,
    406: UnsupportedAcceptHeaderError,
    409: ConflictingStateError,
    415: UnsupportedContentTypeError,
    422: ValidationError,
    429: RateLimitExceededError,
}
