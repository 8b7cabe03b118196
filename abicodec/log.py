"""Raw and decoded event logs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from abicodec.token import Token


@dataclass(frozen=True)
class RawLog:
    """An event log as stored: indexed params as topics, the rest as data."""

    topics: tuple[bytes, ...]
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, "topics", tuple(bytes(topic) for topic in self.topics))
        object.__setattr__(self, "data", bytes(self.data))

    @classmethod
    def from_tuple(cls, raw: tuple[Iterable[bytes], bytes]) -> RawLog:
        """Build from a ``(topics, data)`` pair."""
        topics, data = raw
        return cls(topics=tuple(topics), data=data)


@dataclass(frozen=True)
class LogParam:
    """One decoded parameter of a log."""

    name: str
    value: Token


@dataclass(frozen=True)
class Log:
    """A decoded log."""

    params: tuple[LogParam, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "params", tuple(self.params))