"""
Error kinds, lookup tables and the exceptions raised for failed responses.

The two tables below are the only place where HTTP statuses and API error
codes are mapped to an ErrorKind.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple, Type

if TYPE_CHECKING:
    from .response import Response


class ErrorKind(Enum):
    UNAUTHORIZED = "unauthorized"
    RATE_LIMITED = "rate_limited"
    NOT_FOUND = "not_found"
    INVALID_REQUEST = "invalid_request"
    SERVER_ERROR = "server_error"
    GENERIC = "generic"


STATUS_CODE_ERRORS: Tuple[Tuple[int, ErrorKind], ...] = (
    (500, ErrorKind.SERVER_ERROR),
    (429, ErrorKind.RATE_LIMITED),
    (404, ErrorKind.NOT_FOUND),
    (403, ErrorKind.UNAUTHORIZED),
    (401, ErrorKind.UNAUTHORIZED),
    (400, ErrorKind.INVALID_REQUEST),
)

API_ERROR_CODES: Tuple[Tuple[str, Tuple[ErrorKind, int]], ...] = (
    ("ComplexityException", (ErrorKind.RATE_LIMITED, 429)),
    ("UserUnauthorizedException", (ErrorKind.UNAUTHORIZED, 403)),
    ("ResourceNotFoundException", (ErrorKind.NOT_FOUND, 404)),
    ("InvalidUserIdException", (ErrorKind.INVALID_REQUEST, 400)),
    ("InvalidVersionException", (ErrorKind.INVALID_REQUEST, 400)),
    ("InvalidColumnIdException", (ErrorKind.INVALID_REQUEST, 400)),
    ("InvalidItemIdException", (ErrorKind.INVALID_REQUEST, 400)),
    ("InvalidBoardIdException", (ErrorKind.INVALID_REQUEST, 400)),
    ("InvalidArgumentException", (ErrorKind.INVALID_REQUEST, 400)),
    ("CreateBoardException", (ErrorKind.INVALID_REQUEST, 400)),
    ("ItemsLimitationException", (ErrorKind.INVALID_REQUEST, 400)),
    ("ItemNameTooLongException", (ErrorKind.INVALID_REQUEST, 400)),
    ("ColumnValueException", (ErrorKind.INVALID_REQUEST, 400)),
    ("CorrectedValueException", (ErrorKind.INVALID_REQUEST, 400)),
    ("InvalidGroupIdException", (ErrorKind.INVALID_REQUEST, 400)),
)

_STATUS_LOOKUP: Dict[int, ErrorKind] = dict(STATUS_CODE_ERRORS)
_API_CODE_LOOKUP: Dict[str, Tuple[ErrorKind, int]] = dict(API_ERROR_CODES)

COMPLEXITY_ERROR_CODE = "ComplexityException"


def classify_by_status(status_code: int) -> ErrorKind:
    return _STATUS_LOOKUP.get(status_code, ErrorKind.GENERIC)


def classify_by_api_code(error_code: Any) -> Tuple[ErrorKind, int]:
    """Return (kind, canonical HTTP status); unknown codes map to (GENERIC, 400)."""
    if not isinstance(error_code, str):
        return (ErrorKind.GENERIC, 400)
    return _API_CODE_LOOKUP.get(error_code, (ErrorKind.GENERIC, 400))


class MondayError(Exception):
    """
    Base error for failed API calls.

    - message: explicit message, the API's error message, or both joined by ": "
    - code: explicit code, the body's status_code, or the HTTP status
    - response: the Response that triggered the error, when there is one
    """

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        response: Optional["Response"] = None,
        code: Optional[Any] = None,
    ):
        self.response = response
        self.message = self._build_message(message)
        self.code = self._build_code(code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message or ""

    @property
    def error_data(self) -> Dict[str, Any]:
        body = self._body()
        data = body.get("error_data")
        return data if isinstance(data, dict) else {}

    def _body(self) -> Dict[str, Any]:
        if self.response is None or not isinstance(self.response.body, dict):
            return {}
        return self.response.body

    def _response_message(self) -> Optional[str]:
        if self.response is None:
            return None
        body = self._body()
        if body.get("error_message") is not None:
            return str(body["error_message"])
        if "errors" in body:
            return json.dumps(body["errors"])
        return None

    def _build_message(self, message: Optional[str]) -> Optional[str]:
        detail = self._response_message()
        if message is None:
            return detail
        if detail is None:
            return message
        return f"{message}: {detail}"

    def _build_code(self, code: Optional[Any]) -> Optional[Any]:
        if code is not None:
            return code
        status_code = self._body().get("status_code")
        if status_code is not None:
            return status_code
        return self.response.status if self.response is not None else None


class InternalServerError(MondayError):
    kind = ErrorKind.SERVER_ERROR


class AuthorizationError(MondayError):
    kind = ErrorKind.UNAUTHORIZED


class RateLimitError(MondayError):
    kind = ErrorKind.RATE_LIMITED


class ComplexityError(RateLimitError):
    """Query complexity budget exhausted (API error code ComplexityException)."""


class ResourceNotFoundError(MondayError):
    kind = ErrorKind.NOT_FOUND


class InvalidRequestError(MondayError):
    kind = ErrorKind.INVALID_REQUEST


class ResponseParseError(MondayError):
    """Response body was not valid JSON."""


_KIND_TO_ERROR: Dict[ErrorKind, Type[MondayError]] = {
    ErrorKind.SERVER_ERROR: InternalServerError,
    ErrorKind.UNAUTHORIZED: AuthorizationError,
    ErrorKind.RATE_LIMITED: RateLimitError,
    ErrorKind.NOT_FOUND: ResourceNotFoundError,
    ErrorKind.INVALID_REQUEST: InvalidRequestError,
    ErrorKind.GENERIC: MondayError,
}


def error_class_for(
    kind: ErrorKind, api_code: Optional[str] = None
) -> Type[MondayError]:
    if api_code == COMPLEXITY_ERROR_CODE:
        return ComplexityError
    return _KIND_TO_ERROR[kind]


def error_from_response(response: "Response") -> MondayError:
    """Build the exception matching a non-success Response."""
    if not 200 <= response.status <= 299:
        kind = classify_by_status(response.status)
        return error_class_for(kind)(response=response)

    api_code = response.error_code
    if api_code is None:
        return MondayError(response=response)

    kind, code = classify_by_api_code(api_code)
    return error_class_for(kind, api_code)(str(api_code), response=response, code=code)


__all__ = [
    "ErrorKind",
    "STATUS_CODE_ERRORS",
    "API_ERROR_CODES",
    "classify_by_status",
    "classify_by_api_code",
    "error_class_for",
    "error_from_response",
    "MondayError",
    "InternalServerError",
    "AuthorizationError",
    "RateLimitError",
    "ComplexityError",
    "ResourceNotFoundError",
    "InvalidRequestError",
    "ResponseParseError",
]
