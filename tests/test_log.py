import pytest

from abicodec.log import Log, LogParam, RawLog
from abicodec.token import Token, TokenKind

TOPIC = bytes.fromhex(
    "000000000000000000000000a94f5374fce5edbc8e2a8697c15331677e6ebf0b"
)


def test_raw_log_from_tuple_keeps_topics_and_data():
    log = RawLog.from_tuple(([TOPIC], b"\x12\x34"))
    assert log.topics == (TOPIC,)
    assert log.data == b"\x12\x34"


def test_raw_log_from_tuple_equals_direct_construction():
    assert RawLog.from_tuple(([TOPIC, TOPIC], b"")) == RawLog(topics=[TOPIC, TOPIC], data=b"")


def test_raw_log_normalises_bytearray():
    log = RawLog(topics=[bytearray(TOPIC)], data=bytearray(b"\x01"))
    assert log == RawLog(topics=(TOPIC,), data=b"\x01")


def test_raw_log_from_tuple_requires_pair():
    with pytest.raises(ValueError):
        RawLog.from_tuple(([TOPIC],))


def test_log_params_are_kept_in_order():
    first = LogParam(name="a", value=Token(TokenKind.BOOL, True))
    second = LogParam(name="b", value=Token(TokenKind.STRING, "gavofyork"))
    log = Log(params=[first, second])
    assert [param.name for param in log.params] == ["a", "b"]
    assert log.params[1].value == Token(TokenKind.STRING, "gavofyork")


def test_log_equality_depends_on_values():
    one = Log(params=[LogParam(name="a", value=Token(TokenKind.BOOL, True))])
    other = Log(params=[LogParam(name="a", value=Token(TokenKind.BOOL, False))])
    assert one == Log(params=(LogParam(name="a", value=Token(TokenKind.BOOL, True)),))
    assert not one == other