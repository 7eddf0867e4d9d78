"""Freshdesk SDK public API."""

from .api import Api
from .cli import main as cli_main
from .exceptions import (
    AccessDeniedError,
    ApiError,
    AuthenticationError,
    ConflictingStateError,
    FreshdeskError,
    InvalidConfigurationError,
    MethodNotAllowedError,
    NotFoundError,
    RateLimitExceededError,
    UnsupportedAcceptHeaderError,
    UnsupportedContentTypeError,
    ValidationError,
)
from .models import ApiConfig
from .utils import attachment

__all__ = [
    "Api",
    "ApiConfig",
    "attachment",
    "cli_main",
    "FreshdeskError",
    "InvalidConfigurationError",
    "ApiError",
    "AuthenticationError",
    "AccessDeniedError",
    "NotFoundError",
    "MethodNotAllowedError",
    "UnsupportedAcceptHeaderError",
    "ConflictingStateError",
    "UnsupportedContentTypeError",
    "ValidationError",
    "RateLimitExceededError",
]
