"""ABI values (tokens), type checking and parsing values from text."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Sequence

from abicodec.param_type import ParamKind, ParamType
from abicodec.util import ADDRESS_SIZE

_U256_LIMIT = 1 << 256
_I256_MIN = -(1 << 255)
_HEX_DIGITS = frozenset(string.hexdigits)


class InvalidDataError(ValueError):
    """Raised when data does not match what an ABI type requires."""


class TokenKind(Enum):
    """The different shapes an ABI value can take."""

    ADDRESS = "address"
    FIXED_BYTES = "fixed_bytes"
    BYTES = "bytes"
    INT = "int"
    UINT = "uint"
    BOOL = "bool"
    STRING = "string"
    FIXED_ARRAY = "fixed_array"
    ARRAY = "array"
    TUPLE = "tuple"


_BYTE_KINDS = (TokenKind.ADDRESS, TokenKind.FIXED_BYTES, TokenKind.BYTES)
_SEQUENCE_KINDS = (TokenKind.FIXED_ARRAY, TokenKind.ARRAY, TokenKind.TUPLE)


@dataclass(frozen=True)
class Token:
    """A single ABI value.

    Addresses and byte strings hold ``bytes``; integers hold an ``int`` in
    unsigned 256-bit form (negative signed values are stored as two's
    complement); arrays and tuples hold a tuple of tokens.
    """

    kind: TokenKind
    value: Any

    def __post_init__(self) -> None:
        kind = self.kind
        if kind in _BYTE_KINDS:
            data = bytes(self.value)
            if kind is TokenKind.ADDRESS and len(data) != ADDRESS_SIZE:
                raise ValueError(f"an address holds {ADDRESS_SIZE} bytes, got {len(data)}")
            object.__setattr__(self, "value", data)
        elif kind in _SEQUENCE_KINDS:
            object.__setattr__(self, "value", tuple(self.value))
        elif kind is TokenKind.UINT:
            if not 0 <= self.value < _U256_LIMIT:
                raise ValueError(f"value out of range for uint256: {self.value}")
        elif kind is TokenKind.INT:
            if not _I256_MIN <= self.value < _U256_LIMIT:
                raise ValueError(f"value out of range for int256: {self.value}")
            object.__setattr__(self, "value", self.value % _U256_LIMIT)
        elif kind is TokenKind.BOOL:
            object.__setattr__(self, "value", bool(self.value))

    def type_check(self, param_type: ParamType) -> bool:
        """Whether this token is a valid value of ``param_type``.

        Integers match integer types of any size; fixed bytes match when the
        declared size is at least the number of bytes held.
        """
        kind = self.kind
        target = param_type.kind
        if kind is TokenKind.ADDRESS:
            return target is ParamKind.ADDRESS
        if kind is TokenKind.BYTES:
            return target is ParamKind.BYTES
        if kind is TokenKind.INT:
            return target is ParamKind.INT
        if kind is TokenKind.UINT:
            return target is ParamKind.UINT
        if kind is TokenKind.BOOL:
            return target is ParamKind.BOOL
        if kind is TokenKind.STRING:
            return target is ParamKind.STRING
        if kind is TokenKind.FIXED_BYTES:
            return target is ParamKind.FIXED_BYTES and param_type.size >= len(self.value)
        if kind is TokenKind.ARRAY:
            return target is ParamKind.ARRAY and all(
                item.type_check(param_type.inner) for item in self.value
            )
        if kind is TokenKind.FIXED_ARRAY:
            return (
                target is ParamKind.FIXED_ARRAY
                and param_type.size == len(self.value)
                and all(item.type_check(param_type.inner) for item in self.value)
            )
        # Tuple
        if target is not ParamKind.TUPLE or len(self.value) > len(param_type.components):
            return False
        return all(
            item.type_check(component)
            for item, component in zip(self.value, param_type.components)
        )

    def is_dynamic(self) -> bool:
        """Whether this value uses the head/tail (offset) encoding."""
        if self.kind in (TokenKind.BYTES, TokenKind.STRING, TokenKind.ARRAY):
            return True
        if self.kind in (TokenKind.FIXED_ARRAY, TokenKind.TUPLE):
            return any(item.is_dynamic() for item in self.value)
        return False

    def __str__(self) -> str:
        kind = self.kind
        if kind is TokenKind.BOOL:
            return "true" if self.value else "false"
        if kind is TokenKind.STRING:
            return self.value
        if kind in _BYTE_KINDS:
            return self.value.hex()
        if kind in (TokenKind.INT, TokenKind.UINT):
            return format(self.value, "x")
        inner = ",".join(str(item) for item in self.value)
        if kind is TokenKind.TUPLE:
            return f"({inner})"
        return f"[{inner}]"


def types_check(tokens: Sequence[Token], param_types: Sequence[ParamType]) -> bool:
    """Whether every token matches the parameter type at the same position."""
    return len(tokens) == len(param_types) and all(
        item.type_check(param_type) for item, param_type in zip(tokens, param_types)
    )


def _split_items(value: str, opening: str, closing: str) -> list[str]:
    """Split a bracketed, comma separated list into its top-level items."""
    if not value.startswith(opening) or not value.endswith(closing):
        raise InvalidDataError(f"expected a value enclosed in {opening}{closing}: {value!r}")
    if len(value) == 2:
        return []

    items: list[str] = []
    nested = 0
    ignore = False
    last_item = 1
    for pos, char in enumerate(value):
        if char == '"':
            ignore = not ignore
        elif ignore:
            continue
        elif char == opening:
            nested += 1
        elif char == closing:
            nested -= 1
            if nested < 0:
                raise InvalidDataError(f"unbalanced brackets in {value!r}")
            if nested == 0:
                items.append(value[last_item:pos])
                last_item = pos + 1
        elif char == "," and nested == 1:
            items.append(value[last_item:pos])
            last_item = pos + 1

    if ignore:
        raise InvalidDataError(f"unterminated quote in {value!r}")
    return items


def _decode_hex(value: str) -> bytes:
    digits = value[2:] if value.startswith(("0x", "0X")) else value
    if len(digits) % 2 or not all(char in _HEX_DIGITS for char in digits):
        raise InvalidDataError(f"invalid hex data: {value!r}")
    return bytes.fromhex(digits)


def _parse_integer(value: str, *, signed: bool) -> int:
    text = value.strip()
    negative = signed and text.startswith("-")
    if negative:
        text = text[1:]
    if text.startswith(("0x", "0X")):
        digits, base, allowed = text[2:], 16, _HEX_DIGITS
    else:
        digits, base, allowed = text, 10, frozenset(string.digits)
    if not digits or not all(char in allowed for char in digits):
        raise InvalidDataError(f"invalid integer: {value!r}")
    number = int(digits, base)
    if negative:
        number = -number
        if number < _I256_MIN:
            raise InvalidDataError(f"integer out of range: {value!r}")
        return number % _U256_LIMIT
    if number >= _U256_LIMIT:
        raise InvalidDataError(f"integer out of range: {value!r}")
    return number


class Tokenizer:
    """Parses textual values into tokens of a given parameter type."""

    @classmethod
    def tokenize(cls, param: ParamType, value: str) -> Token:
        """Parse ``value`` as a token of type ``param``."""
        kind = param.kind
        if kind is ParamKind.ADDRESS:
            return Token(TokenKind.ADDRESS, cls.tokenize_address(value))
        if kind is ParamKind.STRING:
            return Token(TokenKind.STRING, cls.tokenize_string(value))
        if kind is ParamKind.BOOL:
            return Token(TokenKind.BOOL, cls.tokenize_bool(value))
        if kind is ParamKind.BYTES:
            return Token(TokenKind.BYTES, cls.tokenize_bytes(value))
        if kind is ParamKind.FIXED_BYTES:
            return Token(TokenKind.FIXED_BYTES, cls.tokenize_fixed_bytes(value, param.size))
        if kind is ParamKind.UINT:
            return Token(TokenKind.UINT, cls.tokenize_uint(value))
        if kind is ParamKind.INT:
            return Token(TokenKind.INT, cls.tokenize_int(value))
        if kind is ParamKind.ARRAY:
            return Token(TokenKind.ARRAY, cls.tokenize_array(value, param.inner))
        if kind is ParamKind.FIXED_ARRAY:
            return Token(
                TokenKind.FIXED_ARRAY,
                cls.tokenize_fixed_array(value, param.inner, param.size),
            )
        return Token(TokenKind.TUPLE, cls.tokenize_struct(value, param.components))

    @classmethod
    def tokenize_fixed_array(cls, value: str, param: ParamType, length: int) -> list[Token]:
        """Parse ``[a,b,...]`` holding exactly ``length`` items."""
        result = cls.tokenize_array(value, param)
        if len(result) != length:
            raise InvalidDataError(f"expected {length} items, got {len(result)}")
        return result

    @classmethod
    def tokenize_struct(cls, value: str, params: Iterable[ParamType]) -> list[Token]:
        """Parse ``(a,b,...)`` with one item per component type."""
        items = _split_items(value, "(", ")")
        remaining = iter(params)
        result = []
        for item in items:
            param = next(remaining, None)
            if param is None:
                raise InvalidDataError(f"too many values for the tuple: {value!r}")
            result.append(cls.tokenize(param, item))
        return result

    @classmethod
    def tokenize_array(cls, value: str, param: ParamType) -> list[Token]:
        """Parse ``[a,b,...]`` with every item of type ``param``."""
        return [cls.tokenize(param, item) for item in _split_items(value, "[", "]")]

    @classmethod
    def tokenize_address(cls, value: str) -> bytes:
        """Parse 20 bytes of hex, with or without a ``0x`` prefix."""
        data = _decode_hex(value)
        if len(data) != ADDRESS_SIZE:
            raise InvalidDataError(f"an address holds {ADDRESS_SIZE} bytes: {value!r}")
        return data

    @classmethod
    def tokenize_string(cls, value: str) -> str:
        """Take the text, dropping one pair of enclosing double quotes if present."""
        if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
            return value[1:-1]
        return value

    @classmethod
    def tokenize_bool(cls, value: str) -> bool:
        """Parse ``true``/``1`` or ``false``/``0``."""
        if value in ("true", "1"):
            return True
        if value in ("false", "0"):
            return False
        raise InvalidDataError(f"invalid bool: {value!r}")

    @classmethod
    def tokenize_bytes(cls, value: str) -> bytes:
        """Parse hex data of any length."""
        return _decode_hex(value)

    @classmethod
    def tokenize_fixed_bytes(cls, value: str, length: int) -> bytes:
        """Parse hex data of exactly ``length`` bytes."""
        data = _decode_hex(value)
        if len(data) != length:
            raise InvalidDataError(f"expected {length} bytes, got {len(data)}")
        return data

    @classmethod
    def tokenize_uint(cls, value: str) -> int:
        """Parse a decimal or ``0x`` hex unsigned 256-bit integer."""
        return _parse_integer(value, signed=False)

    @classmethod
    def tokenize_int(cls, value: str) -> int:
        """Parse a signed 256-bit integer, returned in two's complement form."""
        return _parse_integer(value, signed=True)