from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ..api import Api


class Resource:
    """Base for API resources bound to a single endpoint."""

    endpoint: str = ""

    def __init__(self, api: "Api"):
        self.api = api

    def _path(self, *parts: Any) -> str:
        return "/".join([self.endpoint, *(str(p) for p in parts)])


class AllMixin:
    def all(self, query: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        """List resources; ``query`` carries filters and ``page``/``per_page``."""
        return self.api.request("GET", self._path(), query=query)


class ViewMixin:
    def view(self, id: int, query: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        return self.api.request("GET", self._path(id), query=query)


class CreateMixin:
    def create(self, data: dict[str, Any]) -> dict[str, Any]:
        return self.api.request("POST", self._path(), data)


class UpdateMixin:
    def update(self, id: int, data: dict[str, Any]) -> dict[str, Any]:
        return self.api.request("PUT", self._path(id), data)


class DeleteMixin:
    def delete(self, id: int) -> None:
        return self.api.request("DELETE", self._path(id))


class MonitorMixin:
    """Follow/unfollow support shared by forums and topics."""

    def monitor(self, id: int, user_id: Optional[int] = None) -> Any:
        data = {"user_id": user_id} if user_id is not None else None
        return self.api.request("POST", self._path(id, "follow"), data)

    def unmonitor(self, id: int, user_id: Optional[int] = None) -> None:
        query = {"user_id": user_id} if user_id is not None else None
        return self.api.request("DELETE", self._path(id, "follow"), query=query)

    def monitor_status(self, id: int, user_id: Optional[int] = None) -> Any:
        query = {"user_id": user_id} if user_id is not None else None
        return self.api.request("GET", self._path(id, "follow"), query=query)
