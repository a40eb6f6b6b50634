from __future__ import annotations

import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HOST = "https://api.monday.com/v2"
DEFAULT_FILES_HOST = "https://api.monday.com/v2/file"
DEFAULT_VERSION = "2023-07"
DEFAULT_OPEN_TIMEOUT = 10.0
DEFAULT_READ_TIMEOUT = 30.0


class Configuration(BaseModel):
    """
    Settings for talking to the monday.com API.

    Unknown options are rejected. Instances are immutable; use override()
    to derive a per-client or per-call variant.
    """

    token: Optional[str] = None
    host: str = DEFAULT_HOST
    files_host: str = DEFAULT_FILES_HOST
    version: Optional[str] = DEFAULT_VERSION
    open_timeout: float = Field(default=DEFAULT_OPEN_TIMEOUT, gt=0)
    read_timeout: float = Field(default=DEFAULT_READ_TIMEOUT, gt=0)

    model_config = ConfigDict(extra="forbid", frozen=True)

    def override(self, **overrides: Any) -> "Configuration":
        if not overrides:
            return self
        return Configuration.model_validate({**self.model_dump(), **overrides})

    @classmethod
    def from_env(cls, *, use_dotenv: bool = True, **overrides: Any) -> "Configuration":
        return cls.model_validate({**load_env_config(use_dotenv=use_dotenv), **overrides})


def load_env_config(*, use_dotenv: bool = True) -> Dict[str, str]:
    """Read MONDAY_TOKEN / MONDAY_HOST / MONDAY_API_VERSION (optional .env)."""
    if use_dotenv:
        load_dotenv()
    values = {
        "token": os.getenv("MONDAY_TOKEN", "").strip(),
        "host": os.getenv("MONDAY_HOST", "").strip(),
        "version": os.getenv("MONDAY_API_VERSION", "").strip(),
    }
    return {key: value for key, value in values.items() if value}


__all__ = [
    "Configuration",
    "load_env_config",
    "DEFAULT_HOST",
    "DEFAULT_FILES_HOST",
    "DEFAULT_VERSION",
    "DEFAULT_OPEN_TIMEOUT",
    "DEFAULT_READ_TIMEOUT",
]
