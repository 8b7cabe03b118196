"""ABI parameter types: the type model, its textual reader and writer."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class InvalidNameError(ValueError):
    """Raised when a string does not name a valid ABI parameter type."""

    def __init__(self, name: str, reason: str | None = None) -> None:
        self.name = name
        message = f"invalid type name: {name!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ParamKind(Enum):
    """The different shapes an ABI parameter type can take."""

    ADDRESS = "address"
    BYTES = "bytes"
    INT = "int"
    UINT = "uint"
    BOOL = "bool"
    STRING = "string"
    ARRAY = "array"
    FIXED_BYTES = "fixed_bytes"
    FIXED_ARRAY = "fixed_array"
    TUPLE = "tuple"


@dataclass(frozen=True)
class ParamType:
    """A function or event parameter type."""

    kind: ParamKind
    size: int | None = None
    inner: ParamType | None = None
    components: tuple[ParamType, ...] = field(default_factory=tuple)

    @classmethod
    def address(cls) -> ParamType:
        return cls(ParamKind.ADDRESS)

    @classmethod
    def bytes_(cls) -> ParamType:
        return cls(ParamKind.BYTES)

    @classmethod
    def bool_(cls) -> ParamType:
        return cls(ParamKind.BOOL)

    @classmethod
    def string(cls) -> ParamType:
        return cls(ParamKind.STRING)

    @classmethod
    def int_(cls, size: int) -> ParamType:
        return cls(ParamKind.INT, size=size)

    @classmethod
    def uint(cls, size: int) -> ParamType:
        return cls(ParamKind.UINT, size=size)

    @classmethod
    def fixed_bytes(cls, size: int) -> ParamType:
        return cls(ParamKind.FIXED_BYTES, size=size)

    @classmethod
    def array(cls, inner: ParamType) -> ParamType:
        return cls(ParamKind.ARRAY, inner=inner)

    @classmethod
    def fixed_array(cls, inner: ParamType, size: int) -> ParamType:
        return cls(ParamKind.FIXED_ARRAY, size=size, inner=inner)

    @classmethod
    def tuple_(cls, components: Iterable[ParamType]) -> ParamType:
        return cls(ParamKind.TUPLE, components=tuple(components))

    def is_dynamic(self) -> bool:
        """Whether values of this type use the head/tail (offset) encoding."""
        if self.kind in (ParamKind.BYTES, ParamKind.STRING, ParamKind.ARRAY):
            return True
        if self.kind is ParamKind.FIXED_ARRAY:
            return self.inner.is_dynamic()
        if self.kind is ParamKind.TUPLE:
            return any(component.is_dynamic() for component in self.components)
        return False

    def is_empty_bytes_valid_encoding(self) -> bool:
        """Whether an empty byte string is a valid encoding of this type."""
        if self.kind in (ParamKind.FIXED_BYTES, ParamKind.FIXED_ARRAY):
            return self.size == 0
        return False

    def __str__(self) -> str:
        return write_param_type(self)


_SIMPLE_NAMES = {
    "address": ParamType.address,
    "bytes": ParamType.bytes_,
    "bool": ParamType.bool_,
    "string": ParamType.string,
    "int": lambda: ParamType.int_(256),
    "uint": lambda: ParamType.uint(256),
    "tuple": lambda: ParamType.tuple_(()),
}

_SIZED_PREFIXES = (
    ("int", ParamType.int_),
    ("uint", ParamType.uint),
    ("bytes", ParamType.fixed_bytes),
)


def _parse_size(text: str, name: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        raise InvalidNameError(name, f"invalid number {text!r}")
    return int(digits)


def _read_tuple(name: str) -> ParamType:
    if not name.startswith("("):
        raise InvalidNameError(name)

    subtypes: list[ParamType] = []
    subtuples: list[list[ParamType]] = []
    nested = 0
    top_level_open = 0
    last_item = 1
    pos = 0
    length = len(name)

    while pos < length:
        char = name[pos]
        if char == "(":
            top_level_open = pos
            nested += 1
            if nested > 1:
                subtuples.append([])
                last_item = pos + 1
        elif char == ")":
            nested -= 1
            if nested < 0:
                raise InvalidNameError(name)
            if not name[last_item:pos]:
                last_item = pos + 1
            elif nested == 0:
                subtypes.append(read_param_type(name[last_item:pos]))
                last_item = pos + 1
            else:
                # Keep trailing array brackets with the nested tuple.
                while pos + 1 < length and name[pos + 1] not in ",)":
                    pos += 1
                subtype = read_param_type(name[top_level_open : pos + 1])
                if nested > 1:
                    level = subtuples[nested - 2]
                    level.append(subtype)
                    subtypes.append(ParamType.tuple_(level))
                    subtuples[nested - 2] = []
                else:
                    subtypes.append(subtype)
                last_item = pos + 1
        elif char == ",":
            if not name[last_item:pos]:
                last_item = pos + 1
            elif nested == 1:
                subtypes.append(read_param_type(name[last_item:pos]))
                last_item = pos + 1
            elif nested > 1:
                subtuples[nested - 2].append(read_param_type(name[last_item:pos]))
                last_item = pos + 1
        pos += 1

    return ParamType.tuple_(subtypes)


def _read_array(name: str) -> ParamType:
    num = name[:-1].rsplit("[", 1)[-1]
    if not num:
        return ParamType.array(read_param_type(name[: len(name) - 2]))
    size = _parse_size(num, name)
    return ParamType.fixed_array(read_param_type(name[: len(name) - len(num) - 2]), size)


def read_param_type(name: str) -> ParamType:
    """Parse a type name such as ``uint256[]`` or ``(address,bool)``."""
    if name.endswith(")"):
        return _read_tuple(name)
    if name.endswith("]"):
        return _read_array(name)

    simple = _SIMPLE_NAMES.get(name)
    if simple is not None:
        return simple()
    for prefix, build in _SIZED_PREFIXES:
        if name.startswith(prefix):
            return build(_parse_size(name[len(prefix):], name))
    raise InvalidNameError(name)


def write_param_type(param: ParamType) -> str:
    """Render a parameter type in its canonical textual form."""
    kind = param.kind
    if kind is ParamKind.FIXED_BYTES:
        return f"bytes{param.size}"
    if kind is ParamKind.INT:
        return f"int{param.size}"
    if kind is ParamKind.UINT:
        return f"uint{param.size}"
    if kind is ParamKind.FIXED_ARRAY:
        return f"{write_param_type(param.inner)}[{param.size}]"
    if kind is ParamKind.ARRAY:
        return f"{write_param_type(param.inner)}[]"
    if kind is ParamKind.TUPLE:
        return "(" + ",".join(write_param_type(c) for c in param.components) + ")"
    return kind.value


def param_types_from_json(text: str) -> list[ParamType]:
    """Read a JSON array of type names into parameter types."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError("expected a JSON array of type names")
    result = []
    for item in data:
        if not isinstance(item, str):
            raise ValueError(f"expected a type name string, got {item!r}")
        result.append(read_param_type(item))
    return result