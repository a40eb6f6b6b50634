from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .response import Response


class ItemRef(BaseModel):
    id: str
    name: Optional[str] = None

    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)


class ItemsPage(BaseModel):
    """
    One page returned by Board.items_page.
    `cursor` is None on the last page.
    """

    cursor: Optional[str] = None
    items: List[ItemRef] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    @property
    def has_more(self) -> bool:
        return self.cursor is not None

    @classmethod
    def from_response(cls, response: Response, board_index: int = 0) -> "ItemsPage":
        raw: Optional[Dict[str, Any]] = response.dig(
            "data", "boards", board_index, "items_page"
        )
        return cls.model_validate(raw or {})


__all__ = ["ItemRef", "ItemsPage"]
