from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..response import Response
from .base import BaseResource

DEFAULT_SELECT = ("id", "name", "type")


class BoardView(BaseResource):
    def query(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        """Retrieve the views of the boards matched by `args`."""
        request_query = (
            f"query{{boards{self._args(args)}{{views{{{self._select(select)}}}}}}}"
        )
        return self.make_request(request_query, operation="board_view.query")
