from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from .exceptions import ApiError
from .models import ApiConfig
from .resources import (
    Agent,
    BusinessHour,
    Category,
    Comment,
    Company,
    Contact,
    Conversation,
    EmailConfig,
    Forum,
    Group,
    Product,
    SLAPolicy,
    Ticket,
    TimeEntry,
    Topic,
)
from .utils import has_attachments, prepare_multipart

# Logger setup
logger = logging.getLogger("freshdesk_sdk.api")


class Api:
    """Client for the Freshdesk v2 API.

    This is the only class meant to be instantiated directly. Every API
    resource is reachable through an attribute::

        api = Api("my-api-key", "acme")
        api.tickets.view(42)
        api.contacts.all({"email": "jane@example.com"})

    The client keeps no per-call state of its own, but the underlying
    ``requests.Session`` is not documented as thread-safe: under heavy
    concurrency give each thread its own ``Api``.
    """

    def __init__(
        self,
        api_key: str,
        domain: str,
        is_subdomain: bool = True,
        *,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = ApiConfig(api_key, domain, is_subdomain=is_subdomain, timeout=timeout)
        self.session = session or requests.Session()
        self.session.auth = (api_key, "X")

        self._setup_resources()

    @classmethod
    def from_config(cls, config: ApiConfig, session: Optional[requests.Session] = None) -> "Api":
        return cls(
            config.api_key,
            config.domain,
            config.is_subdomain,
            timeout=config.timeout,
            session=session,
        )

    @classmethod
    def from_env(cls, **overrides: Any) -> "Api":
        """Create a client from FRESHDESK_* environment variables."""
        return cls.from_config(ApiConfig.from_env(**overrides))

    def _setup_resources(self) -> None:
        # People
        self.agents = Agent(self)
        self.companies = Company(self)
        self.contacts = Contact(self)
        self.groups = Group(self)

        # Tickets
        self.tickets = Ticket(self)
        self.time_entries = TimeEntry(self)
        self.conversations = Conversation(self)

        # Discussions
        self.categories = Category(self)
        self.forums = Forum(self)
        self.topics = Topic(self)
        self.comments = Comment(self)

        # Admin
        self.products = Product(self)
        self.email_configs = EmailConfig(self)
        self.sla_policies = SLAPolicy(self)
        self.business_hours = BusinessHour(self)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    def request(
        self,
        method: str,
        endpoint: str,
        data: Optional[dict[str, Any]] = None,
        query: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Send a request to ``base_url + endpoint`` and return the decoded body.

        Payloads with a non-empty ``attachments`` entry go out as multipart
        form data, anything else as JSON.
        """
        options: dict[str, Any] = {}
        if has_attachments(data):
            options["files"] = prepare_multipart(data)
        elif data is not None:
            options["json"] = data

        if query is not None:
            options["params"] = query

        url = self.base_url + endpoint
        return self._perform_request(method.upper(), url, options)

    def _perform_request(self, method: str, url: str, options: dict[str, Any]) -> Any:
        logger.debug(
            "%s %s (%s)", method, url, "multipart" if "files" in options else "json"
        )
        try:
            response = self.session.request(method, url, timeout=self.config.timeout, **options)
            response.raise_for_status()
        except requests.RequestException as e:
            error = ApiError.create(e)
            logger.warning(f"{method} {url} failed: {error}")
            raise error from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiError(
                f"Invalid JSON in response from {method} {url}",
                status_code=response.status_code,
                response=response,
            ) from e

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "Api":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
