from __future__ import annotations

from typing import Any, Optional

from .base import (
    AllMixin,
    CreateMixin,
    DeleteMixin,
    Resource,
    UpdateMixin,
    ViewMixin,
)


class Ticket(AllMixin, CreateMixin, ViewMixin, UpdateMixin, DeleteMixin, Resource):
    """Tickets.

    ``create`` and ``update`` accept an ``attachments`` list (see
    ``freshdesk_sdk.attachment``), in which case the payload is sent as
    multipart form data.
    """

    endpoint = "/tickets"

    def restore(self, id: int) -> None:
        return self.api.request("PUT", self._path(id, "restore"))

    def fields(self, query: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        return self.api.request("GET", "/ticket_fields", query=query)

    def conversations(self, id: int, query: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        return self.api.request("GET", self._path(id, "conversations"), query=query)

    def time_entries(self, id: int, query: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        return self.api.request("GET", self._path(id, "time_entries"), query=query)

    def search(self, query: str, page: Optional[int] = None) -> dict[str, Any]:
        """Run a filter query, e.g. ``"priority:3 AND status:2"``.

        Returns the raw ``{"total": ..., "results": [...]}`` envelope.
        """
        if not (len(query) >= 2 and query.startswith('"') and query.endswith('"')):
            query = f'"{query}"'
        params: dict[str, Any] = {"query": query}
        if page is not None:
            params["page"] = page
        return self.api.request("GET", "/search/tickets", query=params)

    def create_outbound_email(self, data: dict[str, Any]) -> dict[str, Any]:
        return self.api.request("POST", self._path("outbound_email"), data)


class Conversation(UpdateMixin, DeleteMixin, Resource):
    """Replies and notes on a ticket."""

    endpoint = "/conversations"

    def reply(self, ticket_id: int, data: dict[str, Any]) -> dict[str, Any]:
        return self.api.request("POST", f"/tickets/{ticket_id}/reply", data)

    def note(self, ticket_id: int, data: dict[str, Any]) -> dict[str, Any]:
        return self.api.request("POST", f"/tickets/{ticket_id}/notes", data)


class TimeEntry(AllMixin, UpdateMixin, DeleteMixin, Resource):
    endpoint = "/time_entries"

    def create(self, ticket_id: int, data: dict[str, Any]) -> dict[str, Any]:
        return self.api.request("POST", f"/tickets/{ticket_id}/time_entries", data)

    def toggle_timer(self, id: int) -> dict[str, Any]:
        return self.api.request("PUT", self._path(id, "toggle_timer"))
