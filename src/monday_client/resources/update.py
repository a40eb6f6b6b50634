from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..response import Response
from .base import BaseResource

DEFAULT_SELECT = ("id", "body", "created_at")


class Update(BaseResource):
    """Updates (comments) posted on items."""

    def query(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        query = self._operation("query", "updates", args, select)
        return self.make_request(query, operation="update.query")

    def create(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        query = self._operation("mutation", "create_update", args, select)
        return self.make_request(query, operation="update.create")

    def like(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = ("id",),
    ) -> Response:
        query = self._operation("mutation", "like_update", args, select)
        return self.make_request(query, operation="update.like")

    def clear_item_updates(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = ("id",),
    ) -> Response:
        query = self._operation("mutation", "clear_item_updates", args, select)
        return self.make_request(query, operation="update.clear_item_updates")

    def delete(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = ("id",),
    ) -> Response:
        query = self._operation("mutation", "delete_update", args, select)
        return self.make_request(query, operation="update.delete")
