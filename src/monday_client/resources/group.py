from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..response import Response
from .base import BaseResource

DEFAULT_SELECT = ("id", "title")

# mutation name per method; every mutation takes args + select
_MUTATIONS = {
    "create": ("create_group", DEFAULT_SELECT),
    "update": ("update_group", ("id",)),
    "delete": ("delete_group", ("id",)),
    "archive": ("archive_group", ("id",)),
    "duplicate": ("duplicate_group", DEFAULT_SELECT),
    "move_item": ("move_item_to_group", ("id",)),
}


class Group(BaseResource):
    """Board groups. Mutations take board_id/group_id (or item_id) in `args`."""

    def query(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        request_query = self._operation(
            "query", "boards", args, select, wrap="groups"
        )
        return self.make_request(request_query, operation="group.query")

    def _mutate(
        self,
        name: str,
        args: Optional[Mapping[str, Any]],
        select: Optional[Sequence[Any]],
    ) -> Response:
        field, default_select = _MUTATIONS[name]
        query = self._operation(
            "mutation", field, args, default_select if select is None else select
        )
        return self.make_request(query, operation=f"group.{name}")

    def create(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Optional[Sequence[Any]] = None,
    ) -> Response:
        return self._mutate("create", args, select)

    def update(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Optional[Sequence[Any]] = None,
    ) -> Response:
        return self._mutate("update", args, select)

    def delete(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Optional[Sequence[Any]] = None,
    ) -> Response:
        return self._mutate("delete", args, select)

    def archive(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Optional[Sequence[Any]] = None,
    ) -> Response:
        return self._mutate("archive", args, select)

    def duplicate(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Optional[Sequence[Any]] = None,
    ) -> Response:
        return self._mutate("duplicate", args, select)

    def move_item(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Optional[Sequence[Any]] = None,
    ) -> Response:
        """Move an item (item_id) to another group (group_id)."""
        return self._mutate("move_item", args, select)
