from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from ..response import Response
from .base import BaseResource

DEFAULT_SELECT = ("id",)

CLEAR_ALL_VALUE = '{\\"clear_all\\": true}'


def _split_file_arg(args: Optional[Mapping[str, Any]]) -> tuple[Dict[str, Any], Any]:
    remaining = dict(args or {})
    if remaining.get("file") is None:
        raise ValueError("args must include a 'file' (path, file object or tuple).")
    upload = remaining.pop("file")
    remaining["file"] = "$file"
    return remaining, upload


class File(BaseResource):
    """File assets attached to file columns and updates."""

    def add_file_to_column(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        """
        Upload a file into a file column.
        `args` takes item_id, column_id and file; the file is sent as the
        multipart variable `$file`.
        """
        arguments, upload = _split_file_arg(args)
        query = (
            "mutation add_file($file: File!) "
            + self._operation("", "add_file_to_column", arguments, select)
        )
        return self.make_file_request(
            query, {"file": upload}, operation="file.add_file_to_column"
        )

    def add_file_to_update(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        arguments, upload = _split_file_arg(args)
        query = "mutation ($file: File!) " + self._operation(
            "", "add_file_to_update", arguments, select
        )
        return self.make_file_request(
            query, {"file": upload}, operation="file.add_file_to_update"
        )

    def clear_file_column(
        self,
        *,
        args: Optional[Mapping[str, Any]] = None,
        select: Sequence[Any] = DEFAULT_SELECT,
    ) -> Response:
        """Remove every file from an item's file column (board_id, item_id, column_id)."""
        arguments = {**(args or {}), "value": CLEAR_ALL_VALUE}
        query = self._operation("mutation", "change_column_value", arguments, select)
        return self.make_request(query, operation="file.clear_file_column")
