from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from ..deprecation import warn_deprecated
from ..formatting import format_args
from ..response import Response
from .base import BaseResource

DEFAULT_SELECT = ("id", "title", "description")
DEFAULT_VALUE_SELECT = ("id", "name")


class Column(BaseResource):
    """Board columns and the values items hold in them."""

    def query(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        request_query = (
            f"query{{boards{self._args(args)}{{columns{{{self._select(select)}}}}}}}"
        )
        return self.make_request(request_query, operation="column.query")

    def column_values(
        self,
        board_ids: Sequence[Union[int, str]] = (),
        item_ids: Sequence[Union[int, str]] = (),
        *,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        warn_deprecated(
            "column_values", removal_version="2.0.0", alternative="item.column_values"
        )
        board_args = format_args({"ids": list(board_ids)}) if board_ids else ""
        item_args = format_args({"ids": list(item_ids)}) if item_ids else ""
        query = (
            f"query{{boards({board_args}){{items({item_args})"
            f"{{column_values{{{self._select(select)}}}}}}}}}"
        )
        return self.make_request(query, operation="column.column_values")

    def create(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        query = self._operation("mutation", "create_column", args, select)
        return self.make_request(query, operation="column.create")

    def change_title(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        query = self._operation("mutation", "change_column_title", args, select)
        return self.make_request(query, operation="column.change_title")

    def change_metadata(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        query = self._operation("mutation", "change_column_metadata", args, select)
        return self.make_request(query, operation="column.change_metadata")

    def change_value(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_VALUE_SELECT,
    ) -> Response:
        """Set a column value from a JSON value (`value` may be a dict)."""
        query = self._operation("mutation", "change_column_value", args, select)
        return self.make_request(query, operation="column.change_value")

    def change_simple_value(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_VALUE_SELECT,
    ) -> Response:
        query = self._operation("mutation", "change_simple_column_value", args, select)
        return self.make_request(query, operation="column.change_simple_value")

    def change_multiple_values(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_VALUE_SELECT,
    ) -> Response:
        query = self._operation(
            "mutation", "change_multiple_column_values", args, select
        )
        return self.make_request(query, operation="column.change_multiple_values")

    def delete(
        self,
        board_id: Union[int, str],
        column_id: str,
        *,
        select: Sequence[Any] = ("id",),
    ) -> Response:
        query = (
            f'mutation{{delete_column(board_id: {board_id}, column_id: "{column_id}")'
            f"{{{self._select(select)}}}}}"
        )
        return self.make_request(query, operation="column.delete")
