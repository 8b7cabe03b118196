# abicodec

A library for working with contract ABI descriptions. It parses and prints
parameter types, holds ABI values as tokens and checks them against types,
parses values from text, computes function selectors and event topic hashes
with Keccak-256, and builds log topic filters.

It needs Python 3.10 or later and depends on `pycryptodome` for Keccak-256.
The `test` extra adds `pytest` for running the test suite.

## Parameter types

`abicodec.param_type` models types as `ParamType` values, built with
`ParamType.address()`, `bytes_()`, `bool_()`, `string()`, `int_(size)`,
`uint(size)`, `fixed_bytes(size)`, `array(inner)`, `fixed_array(inner, size)`
and `tuple_(components)`.

```python
from abicodec.param_type import ParamType, read_param_type, write_param_type

kind = read_param_type("(uint256,bytes32)[]")
assert kind == ParamType.array(
    ParamType.tuple_([ParamType.uint(256), ParamType.fixed_bytes(32)])
)
assert write_param_type(kind) == "(uint256,bytes32)[]"
assert read_param_type("uint") == ParamType.uint(256)
assert str(ParamType.fixed_array(ParamType.string(), 2)) == "string[2]"
assert ParamType.array(ParamType.bool_()).is_dynamic()
```

A name that cannot be parsed raises `InvalidNameError` (a `ValueError`).
`param_types_from_json` reads a JSON array of type names, and
`ParamType.is_empty_bytes_valid_encoding()` tells whether zero-length data is
a valid encoding of the type (only for zero-sized fixed bytes and fixed arrays).

## Tokens

`abicodec.token.Token` holds one ABI value as a `TokenKind` and a value:
`bytes` for addresses (20 bytes) and byte strings, an `int` for integers
(signed values are stored in 256-bit two's complement form), and a tuple of
tokens for arrays and tuples.

```python
from abicodec.param_type import ParamType, read_param_type
from abicodec.token import Token, TokenKind, Tokenizer, types_check

tokens = [Token(TokenKind.UINT, 0), Token(TokenKind.BOOL, False)]
assert types_check(tokens, [ParamType.uint(32), ParamType.bool_()])

parsed = Tokenizer.tokenize(read_param_type("bool[]"), "[true,false]")
assert parsed == Token(
    TokenKind.ARRAY, [Token(TokenKind.BOOL, True), Token(TokenKind.BOOL, False)]
)
assert str(parsed) == "[true,false]"
```

`Token.type_check` matches integers against integer types of any size, and
fixed bytes against any declared size at least as large as the data.
`Tokenizer` reads hex addresses and byte strings (with or without `0x`),
`true`/`false`/`1`/`0`, decimal or `0x` hex integers, strings, and bracketed
arrays and parenthesised tuples; malformed text raises `InvalidDataError`.

## Signatures

```python
from abicodec.param_type import ParamType
from abicodec.signature import long_signature, short_signature

assert short_signature("baz", [ParamType.uint(32), ParamType.bool_()]).hex() == "cdcd77c0"
topic = long_signature(
    "Transfer", [ParamType.address(), ParamType.address(), ParamType.uint(256)]
)
assert len(topic) == 32
```

## Contract descriptions

`abicodec.params.Param.from_dict` and `TupleParam.from_dict` read parameter
objects from ABI JSON, filling tuple types (also inside arrays) from their
`components`. `abicodec.function.Function.from_dict` reads a function entry;
malformed entries raise `ParamSpecError`.

```python
from abicodec.function import Function

func = Function.from_dict({
    "name": "foo",
    "inputs": [{"name": "a", "type": "address"}],
    "outputs": [{"name": "ok", "type": "bool"}],
    "stateMutability": "view",
})
assert func.signature() == "foo(address):(bool)"
assert len(func.selector()) == 4
```

`abicodec.state_mutability.StateMutability.parse` reads `pure`, `view`,
`payable` and `nonpayable`; the default is `NON_PAYABLE`.

## Log filters and logs

```python
from abicodec.filter import Topic, TopicFilter

topic_filter = TopicFilter(topic0=Topic.this(b"\x11" * 32), topic1=Topic.any())
print(topic_filter.to_json())
```

`Topic.any()`, `Topic.one_of(values)` and `Topic.this(value)` describe what a
topic position accepts; `Topic.from_value` maps `None`, a list or a single
value onto them. `RawTopicFilter` holds three topics of token values.
`abicodec.log` provides `RawLog`, `LogParam` and `Log` to hold raw and decoded
event logs.

## What this package does not do

It does not encode or decode call data, return data or log data: there is no
ABI encoder or decoder, so `Function` offers a selector and a signature but no
call encoding. It reads individual parameter and function entries, not whole
ABI files, and has no constructor or event definitions and no parsing of raw
logs into decoded ones.