"""Shared plumbing for resource classes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Sequence

from ..formatting import format_arguments_block, format_select
from ..response import Response

if TYPE_CHECKING:
    from ..client import Client, FileSpec


class BaseResource:
    """A group of GraphQL operations sharing one client."""

    def __init__(self, client: "Client"):
        self.client = client

    def make_request(self, query: str, *, operation: Optional[str] = None) -> Response:
        return self.client.make_request(query, operation=operation)

    def make_file_request(
        self,
        query: str,
        variables: Mapping[str, "FileSpec"],
        *,
        operation: Optional[str] = None,
    ) -> Response:
        return self.client.make_file_request(query, variables, operation=operation)

    @staticmethod
    def _args(args: Optional[Mapping[str, Any]]) -> str:
        return format_arguments_block(args)

    @staticmethod
    def _select(select: Sequence[Any]) -> str:
        return format_select(select)

    def _operation(
        self,
        operation_type: str,
        field: str,
        args: Optional[Mapping[str, Any]] = None,
        select: Optional[Sequence[Any]] = None,
        *,
        wrap: Optional[str] = None,
    ) -> str:
        """
        Build `<operation_type>{<field>(<args>){<select>}}`.
        `wrap` nests the selection under one more field, e.g. "board".
        """
        body = field + self._args(args)
        if select is not None:
            selection = self._select(select)
            if wrap:
                selection = wrap + "{" + selection + "}"
            body += "{" + selection + "}"
        return operation_type + "{" + body + "}"
