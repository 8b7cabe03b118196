"""Topic filters for matching event logs."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Generic, Iterable, TypeVar

T = TypeVar("T")
O = TypeVar("O")


class TopicKind(Enum):
    """How a topic position is matched."""

    ANY = "any"
    ONE_OF = "one_of"
    THIS = "this"


@dataclass(frozen=True)
class Topic(Generic[T]):
    """Acceptable values for one topic position of a log."""

    kind: TopicKind = TopicKind.ANY
    values: tuple = ()

    @classmethod
    def any(cls) -> Topic:
        """Match any value."""
        return cls(TopicKind.ANY, ())

    @classmethod
    def one_of(cls, values: Iterable[T]) -> Topic[T]:
        """Match any of the given values."""
        return cls(TopicKind.ONE_OF, tuple(values))

    @classmethod
    def this(cls, value: T) -> Topic[T]:
        """Match only this value."""
        return cls(TopicKind.THIS, (value,))

    @classmethod
    def from_value(cls, value: Any) -> Topic:
        """``None`` matches anything, a list matches any of its items, else exactly."""
        if value is None:
            return cls.any()
        if isinstance(value, list):
            return cls.one_of(value)
        return cls.this(value)

    def map(self, func: Callable[[T], O]) -> Topic[O]:
        """Apply ``func`` to every held value."""
        return Topic(self.kind, tuple(func(value) for value in self.values))

    def is_any(self) -> bool:
        """Whether this topic matches anything."""
        return self.kind is TopicKind.ANY

    def to_list(self) -> list[T]:
        """The held values: empty for any, one for an exact match."""
        return list(self.values)

    def __getitem__(self, index: int) -> T:
        if self.kind is TopicKind.ANY or index < 0 or index >= len(self.values):
            raise IndexError("Topic unavailable")
        return self.values[index]

    def to_json_value(self) -> Any:
        """JSON form of a topic of 32-byte hashes."""
        if self.kind is TopicKind.ANY:
            return None
        if self.kind is TopicKind.THIS:
            return "0x" + bytes(self.values[0]).hex()
        return ["0x" + bytes(value).hex() for value in self.values]


@dataclass(frozen=True)
class RawTopicFilter:
    """Topic filter over token values, for the indexed parameters of an event."""

    topic0: Topic = field(default_factory=Topic.any)
    topic1: Topic = field(default_factory=Topic.any)
    topic2: Topic = field(default_factory=Topic.any)


@dataclass(frozen=True)
class TopicFilter:
    """Topic filter over hashes; the first topic is usually the event signature."""

    topic0: Topic = field(default_factory=Topic.any)
    topic1: Topic = field(default_factory=Topic.any)
    topic2: Topic = field(default_factory=Topic.any)
    topic3: Topic = field(default_factory=Topic.any)

    def to_json_value(self) -> list:
        """The four topics as a JSON-ready list."""
        return [
            topic.to_json_value()
            for topic in (self.topic0, self.topic1, self.topic2, self.topic3)
        ]

    def to_json(self) -> str:
        """Compact JSON text of the filter."""
        return json.dumps(self.to_json_value(), separators=(",", ":"))