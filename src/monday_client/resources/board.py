from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from ..deprecation import warn_deprecated
from ..formatting import format_args, format_graphql_object
from ..response import Response
from .base import BaseResource

DEFAULT_SELECT = ("id", "name", "description")
DEFAULT_PAGINATED_SELECT = ("id", "name")


class Board(BaseResource):
    """Boards: query, create, duplicate, update, archive, delete, paginate items."""

    def query(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        request_query = f"query{{boards{self._args(args)}{{{self._select(select)}}}}}"
        return self.make_request(request_query, operation="board.query")

    def create(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        query = f"mutation{{create_board{self._args(args)}{{{self._select(select)}}}}}"
        return self.make_request(query, operation="board.create")

    def duplicate(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        query = (
            f"mutation{{duplicate_board{self._args(args)}"
            f"{{board{{{self._select(select)}}}}}}}"
        )
        return self.make_request(query, operation="board.duplicate")

    def update(self, *, args: Optional[Mapping[str, Any]] = None) -> Response:
        """Update a board attribute; the API answers with a JSON scalar."""
        query = f"mutation{{update_board{self._args(args)}}}"
        return self.make_request(query, operation="board.update")

    def archive(
        self, board_id: Union[int, str], *, select: Sequence[Any] = ("id",)
    ) -> Response:
        query = (
            f"mutation{{archive_board(board_id: {board_id})"
            f"{{{self._select(select)}}}}}"
        )
        return self.make_request(query, operation="board.archive")

    def delete(
        self, board_id: Union[int, str], *, select: Sequence[Any] = ("id",)
    ) -> Response:
        query = (
            f"mutation{{delete_board(board_id: {board_id})"
            f"{{{self._select(select)}}}}}"
        )
        return self.make_request(query, operation="board.delete")

    def delete_subscribers(
        self,
        board_id: Union[int, str],
        user_ids: Sequence[Union[int, str]],
        *,
        select: Sequence[Any] = ("id",),
    ) -> Response:
        warn_deprecated(
            "delete_subscribers",
            removal_version="2.0.0",
            alternative="user.delete_from_board",
        )
        arguments = format_args({"board_id": board_id, "user_ids": list(user_ids)})
        query = (
            f"mutation{{delete_subscribers_from_board({arguments})"
            f"{{{self._select(select)}}}}}"
        )
        return self.make_request(query, operation="board.delete_subscribers")

    def items_page(
        self,
        board_ids: Union[int, str, Sequence[Union[int, str]]],
        *,
        limit: int = 25,
        cursor: Optional[str] = None,
        query_params: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_PAGINATED_SELECT,
    ) -> Response:
        """
        Retrieve one page of items from one or more boards.

        Pagination is driven by the caller: pass the `cursor` found at
        data.boards[0].items_page.cursor to fetch the next page (cursors
        expire after 60 minutes). `query_params` filters items, e.g.
        {"rules": [{"column_id": "status", "compare_value": [1]}],
         "operator": GraphQLEnum("and")}.
        """
        page_args = [f"limit: {limit}"]
        if cursor:
            page_args.append(f'cursor: "{cursor}"')
        if query_params:
            page_args.append(f"query_params: {format_graphql_object(query_params)}")

        if isinstance(board_ids, (list, tuple)):
            ids = list(board_ids)
        else:
            ids = [board_ids]

        page_select = (
            f"items_page({', '.join(page_args)})"
            f"{{cursor items{{{self._select(select)}}}}}"
        )
        boards = format_args({"ids": ids})
        request_query = f"query{{boards({boards}){{{page_select}}}}}"
        return self.make_request(request_query, operation="board.items_page")
