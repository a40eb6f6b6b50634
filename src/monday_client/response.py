from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import httpx

from .errors import ResponseParseError

ERROR_OBJECT_KEYS = ("errors", "error_message")


@dataclass(frozen=True)
class Response:
    """
    Parsed response from the monday.com API.

    The API answers 200 for GraphQL-level failures, so callers should check
    `success` rather than `status`.
    """

    status: int
    body: Any
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_raw(
        cls, status: int, text: str, headers: Optional[Mapping[str, str]] = None
    ) -> "Response":
        try:
            body = json.loads(text)
        except json.JSONDecodeError as exc:
            snippet = (text or "")[:500]
            raise ResponseParseError(
                f"Expected JSON response body (status {status}), got: {snippet!r}",
                code=status,
            ) from exc
        return cls(status=int(status), body=body, headers=dict(headers or {}))

    @classmethod
    def from_httpx(cls, resp: httpx.Response) -> "Response":
        return cls.from_raw(resp.status_code, resp.text, dict(resp.headers))

    @property
    def success(self) -> bool:
        if not 200 <= self.status <= 299:
            return False
        if isinstance(self.body, dict):
            return not any(key in self.body for key in ERROR_OBJECT_KEYS)
        return True

    @property
    def error_code(self) -> Optional[str]:
        """API error identifier from `error_code` or the first GraphQL error."""
        if not isinstance(self.body, dict):
            return None
        if self.body.get("error_code") is not None:
            return self.body["error_code"]

        errors = self.body.get("errors")
        if not isinstance(errors, list) or not errors:
            return None
        extensions = errors[0].get("extensions") if isinstance(errors[0], dict) else None
        if not isinstance(extensions, dict):
            return None
        return extensions.get("code") or extensions.get("error_code")

    def dig(self, *keys: Any) -> Any:
        """Walk nested dicts/lists; returns None as soon as a step is missing."""
        current = self.body
        for key in keys:
            if isinstance(current, dict):
                current = current.get(key)
            elif isinstance(current, list) and isinstance(key, int):
                if -len(current) <= key < len(current):
                    current = current[key]
                else:
                    return None
            else:
                return None
            if current is None:
                return None
        return current


__all__ = ["Response", "ERROR_OBJECT_KEYS"]
