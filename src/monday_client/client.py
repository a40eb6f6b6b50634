import logging
import mimetypes
import os
import time
from contextlib import ExitStack
from pathlib import Path
from typing import Any, BinaryIO, Dict, Mapping, Optional, Tuple, Union

import httpx

from .config import Configuration
from .errors import error_from_response
from .resources import (
    RESOURCES,
    Account,
    ActivityLog,
    Board,
    BoardView,
    Column,
    File,
    Folder,
    Group,
    Item,
    Me,
    Subitem,
    Update,
    Workspace,
)
from .response import Response

FileSpec = Union[str, "os.PathLike[str]", BinaryIO, Tuple[Any, ...]]


class Client:
    """
    Synchronous client for the monday.com GraphQL API.
    - Sends every query as a single JSON POST; no retries
    - Returns Response on success, raises a typed MondayError otherwise
    - httpx transport errors propagate unchanged
    - Resources (board, item, column, ...) are exposed as attributes
    """

    account: Account
    activity_log: ActivityLog
    board: Board
    board_view: BoardView
    column: Column
    file: File
    folder: Folder
    group: Group
    item: Item
    me: Me
    subitem: Subitem
    update: Update
    workspace: Workspace

    def __init__(
        self,
        config: Optional[Configuration] = None,
        *,
        http: Optional[httpx.Client] = None,
        logger: Optional[logging.Logger] = None,
        **overrides: Any,
    ):
        base = config if config is not None else Configuration()
        self.config = base.override(**overrides)
        self.log = logger or logging.getLogger("monday_client.client")

        self._owns_http = http is None
        self.http = http or httpx.Client(timeout=self._timeout())

        for name, resource_cls in RESOURCES.items():
            setattr(self, name, resource_cls(self))

    @classmethod
    def from_env(cls, **overrides: Any) -> "Client":
        return cls(Configuration.from_env(), **overrides)

    def with_options(self, **overrides: Any) -> "Client":
        """Return a client with overridden configuration sharing this transport."""
        return Client(self.config.override(**overrides), http=self.http, logger=self.log)

    def close(self) -> None:
        if self._owns_http:
            self.http.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def make_request(self, query: str, *, operation: Optional[str] = None) -> Response:
        """
        POST a GraphQL query or mutation.
        - Raises ResponseParseError if the body isn't valid JSON
        - Raises a MondayError subclass when the response is not successful
        """
        start = time.perf_counter()
        resp = self.http.post(
            self.config.host,
            json={"query": query},
            headers=self._headers(content_type="application/json"),
            timeout=self._timeout(),
        )
        response = Response.from_httpx(resp)
        self._log_response("op.request", self.config.host, response, start, operation)
        return self._handle_response(response)

    def make_file_request(
        self,
        query: str,
        variables: Mapping[str, FileSpec],
        *,
        operation: Optional[str] = None,
    ) -> Response:
        """
        Upload files with a GraphQL mutation using multipart/form-data.
        Each variable is sent as the form part `variables[<name>]`.
        """
        if not variables:
            raise ValueError("At least one file variable must be provided.")

        start = time.perf_counter()
        with ExitStack() as stack:
            files = {
                f"variables[{name}]": self._file_part(spec, stack)
                for name, spec in variables.items()
            }
            # httpx sets the multipart boundary itself
            resp = self.http.post(
                self.config.files_host,
                data={"query": query},
                files=files,
                headers=self._headers(),
                timeout=self._timeout(),
            )
        response = Response.from_httpx(resp)
        self._log_response("op.upload", self.config.files_host, response, start, operation)
        return self._handle_response(response)

    def _headers(self, content_type: Optional[str] = None) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if content_type:
            headers["Content-Type"] = content_type
        if self.config.token:
            headers["Authorization"] = self.config.token
        if self.config.version:
            headers["API-Version"] = self.config.version
        return headers

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(self.config.read_timeout, connect=self.config.open_timeout)

    @staticmethod
    def _file_part(spec: FileSpec, stack: ExitStack) -> Tuple[Any, ...]:
        if isinstance(spec, tuple):
            return spec

        if isinstance(spec, (str, os.PathLike)):
            path = Path(spec)
            if not path.is_file():
                raise ValueError(f"File not found: {spec}")
            fh = stack.enter_context(path.open("rb"))
            filename = path.name
        else:
            fh = spec
            filename = Path(getattr(spec, "name", "upload.bin")).name

        ctype = mimetypes.guess_type(filename)[0] or "application/octet-stream"
        return (filename, fh, ctype)

    def _handle_response(self, response: Response) -> Response:
        if response.success:
            return response
        raise error_from_response(response)

    def _log_response(
        self,
        event: str,
        url: str,
        response: Response,
        start: float,
        operation: Optional[str],
    ) -> None:
        # structured-ish log without secrets
        self.log.debug(
            event,
            extra={
                "operation": operation,
                "method": "POST",
                "url": url,
                "status": response.status,
                "success": response.success,
                "error_code": response.error_code,
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
