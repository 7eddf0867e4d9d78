from __future__ import annotations

from typing import Any, Optional

from .base import (
    AllMixin,
    CreateMixin,
    DeleteMixin,
    MonitorMixin,
    Resource,
    UpdateMixin,
    ViewMixin,
)


class Category(AllMixin, CreateMixin, ViewMixin, UpdateMixin, DeleteMixin, Resource):
    endpoint = "/discussions/categories"

    def forums(self, id: int, query: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        return self.api.request("GET", self._path(id, "forums"), query=query)


class Forum(ViewMixin, UpdateMixin, DeleteMixin, MonitorMixin, Resource):
    endpoint = "/discussions/forums"

    def create(self, category_id: int, data: dict[str, Any]) -> dict[str, Any]:
        return self.api.request("POST", f"/discussions/categories/{category_id}/forums", data)

    def topics(self, id: int, query: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        return self.api.request("GET", self._path(id, "topics"), query=query)


class Topic(ViewMixin, UpdateMixin, DeleteMixin, MonitorMixin, Resource):
    endpoint = "/discussions/topics"

    def create(self, forum_id: int, data: dict[str, Any]) -> dict[str, Any]:
        return self.api.request("POST", f"/discussions/forums/{forum_id}/topics", data)

    def comments(self, id: int, query: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        return self.api.request("GET", self._path(id, "comments"), query=query)


class Comment(UpdateMixin, DeleteMixin, Resource):
    endpoint = "/discussions/comments"

    def create(self, topic_id: int, data: dict[str, Any]) -> dict[str, Any]:
        return self.api.request("POST", f"/discussions/topics/{topic_id}/comments", data)
