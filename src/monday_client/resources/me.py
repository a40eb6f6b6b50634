from __future__ import annotations

from typing import Any, Sequence

from ..response import Response
from .base import BaseResource

DEFAULT_SELECT = ("id", "name")


class Me(BaseResource):
    """The user owning the API token."""

    def query(self, *, select: Sequence[Any] = DEFAULT_SELECT) -> Response:
        request_query = f"query{{me{{{self._select(select)}}}}}"
        return self.make_request(request_query, operation="me.query")
