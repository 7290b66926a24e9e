"""
Scryfall record and response envelope models.

Records are transparent projections of the JSON objects Scryfall returns:
every key is kept as-is and nothing beyond the envelope is validated.
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field


class ScryfallRecord(BaseModel):
    """
    Immutable, read-only mapping over one Scryfall JSON object.
    Every key lands in the model's extras; the attributes below only read them.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> ScryfallRecord:
        """
        Build a record from a decoded JSON object
        :param data: JSON object from a response
        :return: Record exposing every key of data
        """
        return cls.model_validate(data)

    @property
    def object(self) -> Any:
        return self.get("object")

    @property
    def id(self) -> Any:
        return self.get("id")

    @property
    def name(self) -> Any:
        return self.get("name")

    @property
    def uri(self) -> Any:
        return self.get("uri")

    def to_dict(self) -> dict[str, Any]:
        """
        :return: The record as it appeared on the wire
        """
        return dict(self.model_extra or {})

    def get(self, key: str, default: Any = None) -> Any:
        return (self.model_extra or {}).get(key, default)

    def keys(self) -> Any:
        return (self.model_extra or {}).keys()

    def __getitem__(self, key: str) -> Any:
        return (self.model_extra or {})[key]

    def __contains__(self, key: Any) -> bool:
        return key in (self.model_extra or {})

    def __len__(self) -> int:
        return len(self.model_extra or {})

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        return iter(self.model_extra or {})


class ScryfallCard(ScryfallRecord):
    """Scryfall Card object."""

    @property
    def set_code(self) -> Any:
        return self.get("set")

    @property
    def set_name(self) -> Any:
        return self.get("set_name")

    @property
    def collector_number(self) -> Any:
        return self.get("collector_number")

    @property
    def lang(self) -> Any:
        return self.get("lang")

    @property
    def oracle_id(self) -> Any:
        return self.get("oracle_id")

    @property
    def prints_search_uri(self) -> Any:
        return self.get("prints_search_uri")

    def __str__(self) -> str:
        return f"{self.name} ({self.set_code} {self.collector_number})"


class ScryfallSet(ScryfallRecord):
    """Scryfall Set object."""

    @property
    def code(self) -> Any:
        return self.get("code")

    @property
    def set_type(self) -> Any:
        return self.get("set_type")

    @property
    def released_at(self) -> Any:
        return self.get("released_at")

    @property
    def card_count(self) -> Any:
        return self.get("card_count")

    @property
    def search_uri(self) -> Any:
        return self.get("search_uri")

    def __str__(self) -> str:
        return f"{self.name} ({self.code})"


class ScryfallError(BaseModel):
    """Scryfall Error object, returned with non-2xx responses."""

    model_config = ConfigDict(extra="allow", frozen=True)

    object: str = "error"
    code: Optional[str] = None
    status: Optional[int] = None
    details: Optional[str] = None


class ScryfallPage(BaseModel):
    """One page of a Scryfall List object. A null has_more counts as false."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    object: Optional[str] = None
    data: list[dict[str, Any]] = Field(default_factory=list)
    has_more: Optional[bool] = False
    next_page: Optional[str] = None
    total_cards: Optional[int] = None
    warnings: Optional[list[str]] = None
