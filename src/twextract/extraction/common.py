#!/usr/bin/env python3
"""Common data structures shared across the extraction modules."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterator, Optional


class EntityType(Enum):
    """Entity kinds found in tweets. The value is the key used in the wire form."""

    HASHTAG = "hashtag"
    CASHTAG = "cashtag"
    URL = "url"
    MENTION = "screen_name"


@dataclass(frozen=True, order=True)
class Span:
    """Half-open ``[start, end)`` interval of offsets into the tweet text."""

    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def __iter__(self) -> Iterator[int]:
        yield self.start
        yield self.end

    @property
    def length(self) -> int:
        return self.end - self.start

    def overlaps(self, other: Span) -> bool:
        return not (self.end <= other.start or self.start >= other.end)


@dataclass(frozen=True)
class Entity:
    """Represents an entity extracted from a tweet"""

    type: EntityType
    text: str
    span: Span
    list_slug: Optional[str] = field(default=None)

    @property
    def start(self) -> int:
        return self.span.start

    @property
    def end(self) -> int:
        return self.span.end

    @property
    def indices(self) -> tuple[int, int]:
        return (self.span.start, self.span.end)

    @property
    def screen_name(self) -> Optional[str]:
        return self.text if self.type is EntityType.MENTION else None

    def without_list_slug(self) -> Entity:
        return replace(self, list_slug=None) if self.list_slug is not None else self

    def with_span(self, span: Span) -> Entity:
        return replace(self, span=span)

    def to_dict(self, include_list_slug: bool = False) -> Dict[str, Any]:
        """Wire form: ``{"hashtag": "foo", "indices": [0, 4]}`` and friends."""
        data: Dict[str, Any] = {self.type.value: self.text}
        if self.type is EntityType.MENTION and include_list_slug:
            data["list_slug"] = self.list_slug or ""
        data["indices"] = [self.span.start, self.span.end]
        return data


def Hashtag(text: str, span: Span) -> Entity:
    return Entity(EntityType.HASHTAG, text, span)


def Cashtag(text: str, span: Span) -> Entity:
    return Entity(EntityType.CASHTAG, text, span)


def Url(text: str, span: Span) -> Entity:
    return Entity(EntityType.URL, text, span)


def Mention(screen_name: str, span: Span, list_slug: Optional[str] = None) -> Entity:
    return Entity(EntityType.MENTION, screen_name, span, list_slug or None)
