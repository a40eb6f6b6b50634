from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from ..response import Response
from .base import BaseResource

DEFAULT_SELECT = ("id", "name", "created_at")


class Item(BaseResource):
    def query(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        """Retrieve items, e.g. args={"ids": [1, 2]}."""
        query = self._operation("query", "items", args, select)
        return self.make_request(query, operation="item.query")

    def create(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        """
        Create an item. Pass `column_values` as a dict; it is sent as the
        JSON string the API expects.
        """
        query = self._operation("mutation", "create_item", args, select)
        return self.make_request(query, operation="item.create")

    def duplicate(
        self,
        board_id: Union[int, str],
        item_id: Union[int, str],
        with_updates: bool = False,
        *,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        arguments = {
            "board_id": board_id,
            "item_id": item_id,
            "with_updates": with_updates,
        }
        query = self._operation("mutation", "duplicate_item", arguments, select)
        return self.make_request(query, operation="item.duplicate")

    def archive(
        self, item_id: Union[int, str], *, select: Sequence[Any] = ("id",)
    ) -> Response:
        query = self._operation("mutation", "archive_item", {"item_id": item_id}, select)
        return self.make_request(query, operation="item.archive")

    def delete(
        self, item_id: Union[int, str], *, select: Sequence[Any] = ("id",)
    ) -> Response:
        query = self._operation("mutation", "delete_item", {"item_id": item_id}, select)
        return self.make_request(query, operation="item.delete")
