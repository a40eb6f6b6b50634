from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from ..response import Response
from .base import BaseResource

DEFAULT_SELECT = ("id", "name")


class Folder(BaseResource):
    def query(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        query = self._operation("query", "folders", args, select)
        return self.make_request(query, operation="folder.query")

    def create(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        query = self._operation("mutation", "create_folder", args, select)
        return self.make_request(query, operation="folder.create")

    def update(self, *, args: Optional[Mapping[str, Any]] = None) -> Response:
        query = self._operation("mutation", "update_folder", args)
        return self.make_request(query, operation="folder.update")

    def delete(
        self, folder_id: Union[int, str], *, select: Sequence[Any] = ("id",)
    ) -> Response:
        query = self._operation(
            "mutation", "delete_folder", {"folder_id": folder_id}, select
        )
        return self.make_request(query, operation="folder.delete")
