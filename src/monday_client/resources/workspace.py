from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from ..response import Response
from .base import BaseResource

DEFAULT_SELECT = ("id", "name", "description")


class Workspace(BaseResource):
    def query(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        query = self._operation("query", "workspaces", args, select)
        return self.make_request(query, operation="workspace.query")

    def create(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        query = self._operation("mutation", "create_workspace", args, select)
        return self.make_request(query, operation="workspace.create")

    def delete(
        self, workspace_id: Union[int, str], *, select: Sequence[Any] = ("id",)
    ) -> Response:
        query = self._operation(
            "mutation", "delete_workspace", {"workspace_id": workspace_id}, select
        )
        return self.make_request(query, operation="workspace.delete")
