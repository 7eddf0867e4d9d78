from __future__ import annotations

from typing import Any, Optional

from .base import AllMixin, CreateMixin, DeleteMixin, Resource, UpdateMixin, ViewMixin


class Agent(AllMixin, ViewMixin, UpdateMixin, DeleteMixin, Resource):
    """Agents. Agents are created by promoting a contact, see ``Contact.make_agent``."""

    endpoint = "/agents"

    def current(self) -> dict[str, Any]:
        """The agent that owns the API key."""
        return self.api.request("GET", self._path("me"))


class Company(AllMixin, CreateMixin, ViewMixin, UpdateMixin, DeleteMixin, Resource):
    endpoint = "/companies"

    def fields(self, query: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        return self.api.request("GET", "/company_fields", query=query)


class Contact(AllMixin, CreateMixin, ViewMixin, UpdateMixin, DeleteMixin, Resource):
    """Contacts (requesters). ``delete`` is a soft delete, undone by ``restore``."""

    endpoint = "/contacts"

    def restore(self, id: int) -> None:
        return self.api.request("PUT", self._path(id, "restore"))

    def hard_delete(self, id: int, force: bool = False) -> None:
        query = {"force": "true"} if force else None
        return self.api.request("DELETE", self._path(id, "hard_delete"), query=query)

    def make_agent(self, id: int, data: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        return self.api.request("PUT", self._path(id, "make_agent"), data)

    def send_invite(self, id: int) -> None:
        return self.api.request("PUT", self._path(id, "send_invite"))

    def fields(self, query: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        return self.api.request("GET", "/contact_fields", query=query)


class Group(AllMixin, CreateMixin, ViewMixin, UpdateMixin, DeleteMixin, Resource):
    endpoint = "/groups"
