# =================================================================
# ufc_scraper/models.py - Event / Fight / Fighter records
# =================================================================

from datetime import datetime
from typing import Any, Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class Fighter(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    country: str = ""
    ranking: Optional[int] = None
    record: Optional[str] = None  # "W-L-D"


class Fight(BaseModel):
    model_config = ConfigDict(frozen=True)

    weight_class: str = ""
    order: int
    fighters: List[Fighter] = Field(default_factory=list)


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    date: datetime
    title: str
    location: str
    fights: List[Fight] = Field(default_factory=list)


class EventHeader(BaseModel):
    """Header fields read from one listing node."""
    model_config = ConfigDict(frozen=True)

    title: str
    date: datetime
    location: str
    detail_url: str


class ItemResult(Generic[T]):
    """Outcome of processing one listing or fight node."""

    def __init__(self, value: Optional[T] = None, reason: Optional[str] = None, index: Optional[int] = None):
        self.value = value
        self.reason = reason
        self.index = index

    @classmethod
    def ok(cls, value: T, index: Optional[int] = None) -> "ItemResult[T]":
        return cls(value=value, index=index)

    @classmethod
    def skipped(cls, reason: str, index: Optional[int] = None) -> "ItemResult[T]":
        return cls(reason=reason, index=index)

    @property
    def is_ok(self) -> bool:
        return self.reason is None

    def __repr__(self) -> str:
        if self.is_ok:
            return f"ItemResult.ok(index={self.index})"
        return f"ItemResult.skipped({self.reason!r}, index={self.index})"


class ScrapeReport:
    """Everything one scrape produced: events plus what had to be skipped."""

    def __init__(self):
        self.events: List[Event] = []
        self.skipped: List[ItemResult[Any]] = []
        self.skipped_fights: List[ItemResult[Fight]] = []
        self.detail_failures = 0
        self.fallback = False

    def add(self, result: ItemResult[Event]):
        if result.is_ok:
            self.events.append(result.value)
        else:
            self.skipped.append(result)

    def add_fights(self, results: List[ItemResult[Fight]]) -> List[Fight]:
        """Record the skipped bouts and return the extracted ones."""
        fights = []
        for result in results:
            if result.is_ok:
                fights.append(result.value)
            else:
                self.skipped_fights.append(result)
        return fights

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    @property
    def skipped_fight_count(self) -> int:
        return len(self.skipped_fights)
