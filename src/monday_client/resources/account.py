from __future__ import annotations

from typing import Any, Sequence

from ..response import Response
from .base import BaseResource

DEFAULT_SELECT = ("id", "name")


class Account(BaseResource):
    """The account the authenticated user belongs to."""

    def query(self, *, select: Sequence[Any] = DEFAULT_SELECT) -> Response:
        request_query = f"query{{users{{account{{{self._select(select)}}}}}}}"
        return self.make_request(request_query, operation="account.query")
