from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence, Union

from ..formatting import format_args
from ..response import Response
from .base import BaseResource

DEFAULT_SELECT = ("id", "event", "data")


class ActivityLog(BaseResource):
    def query(
        self,
        board_ids: Union[int, str, Sequence[Union[int, str]]],
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        """
        Retrieve activity logs for one or more boards.
        `args` filters the logs (from, to, user_ids, limit, ...).
        """
        boards = format_args({"ids": board_ids})
        request_query = (
            f"query{{boards({boards}){{activity_logs{self._args(args)}"
            f"{{{self._select(select)}}}}}}}"
        )
        return self.make_request(request_query, operation="activity_log.query")
