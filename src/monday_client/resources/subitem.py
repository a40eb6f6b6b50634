from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..response import Response
from .base import BaseResource

DEFAULT_SELECT = ("id", "name", "created_at")


class Subitem(BaseResource):
    def query(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        """Retrieve the subitems of the items matched by `args`."""
        query = self._operation("query", "items", args, select, wrap="subitems")
        return self.make_request(query, operation="subitem.query")

    def create(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        query = self._operation("mutation", "create_subitem", args, select)
        return self.make_request(query, operation="subitem.create")
