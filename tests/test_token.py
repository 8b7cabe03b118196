import pytest

from abicodec.param_type import ParamType
from abicodec.token import InvalidDataError, Token, TokenKind, Tokenizer, types_check


def uint(value):
    return Token(TokenKind.UINT, value)


def boolean(value):
    return Token(TokenKind.BOOL, value)


def test_type_check_scalars():
    assert types_check([uint(0), boolean(False)], [ParamType.uint(256), ParamType.bool_()])
    assert types_check([uint(0), boolean(False)], [ParamType.uint(32), ParamType.bool_()])
    assert not types_check([uint(0)], [ParamType.uint(32), ParamType.bool_()])
    assert not types_check([uint(0), boolean(False)], [ParamType.uint(32)])
    assert not types_check([boolean(False), uint(0)], [ParamType.uint(32), ParamType.bool_()])


def test_type_check_fixed_bytes():
    assert types_check([Token(TokenKind.FIXED_BYTES, bytes(4))], [ParamType.fixed_bytes(4)])
    assert types_check([Token(TokenKind.FIXED_BYTES, bytes(3))], [ParamType.fixed_bytes(4)])
    assert not types_check([Token(TokenKind.FIXED_BYTES, bytes(4))], [ParamType.fixed_bytes(3)])


def test_type_check_arrays():
    bools = ParamType.array(ParamType.bool_())
    assert types_check([Token(TokenKind.ARRAY, [boolean(False), boolean(True)])], [bools])
    assert not types_check([Token(TokenKind.ARRAY, [boolean(False), uint(0)])], [bools])
    assert not types_check(
        [Token(TokenKind.ARRAY, [boolean(False), boolean(True)])],
        [ParamType.array(ParamType.address())],
    )


def test_type_check_fixed_arrays():
    pair = [boolean(False), boolean(True)]
    assert types_check(
        [Token(TokenKind.FIXED_ARRAY, pair)], [ParamType.fixed_array(ParamType.bool_(), 2)]
    )
    assert not types_check(
        [Token(TokenKind.FIXED_ARRAY, pair)], [ParamType.fixed_array(ParamType.bool_(), 3)]
    )
    assert not types_check(
        [Token(TokenKind.FIXED_ARRAY, [boolean(False), uint(0)])],
        [ParamType.fixed_array(ParamType.bool_(), 2)],
    )
    assert not types_check(
        [Token(TokenKind.FIXED_ARRAY, pair)], [ParamType.fixed_array(ParamType.address(), 2)]
    )


def test_type_check_tuple():
    param = ParamType.tuple_([ParamType.bool_(), ParamType.uint(8)])
    assert Token(TokenKind.TUPLE, [boolean(True), uint(1)]).type_check(param)
    assert not Token(TokenKind.TUPLE, [uint(1), boolean(True)]).type_check(param)


@pytest.mark.parametrize(
    "value, expected",
    [
        (Token(TokenKind.ADDRESS, bytes(20)), False),
        (Token(TokenKind.BYTES, bytes(4)), True),
        (Token(TokenKind.FIXED_BYTES, bytes(4)), False),
        (Token(TokenKind.UINT, 0), False),
        (Token(TokenKind.INT, 0), False),
        (Token(TokenKind.BOOL, False), False),
        (Token(TokenKind.STRING, ""), True),
        (Token(TokenKind.ARRAY, [Token(TokenKind.BOOL, False)]), True),
        (Token(TokenKind.FIXED_ARRAY, [Token(TokenKind.UINT, 0)]), False),
        (Token(TokenKind.FIXED_ARRAY, [Token(TokenKind.STRING, "")]), True),
        (
            Token(
                TokenKind.FIXED_ARRAY,
                [Token(TokenKind.ARRAY, [Token(TokenKind.BOOL, False)])],
            ),
            True,
        ),
    ],
)
def test_is_dynamic(value, expected):
    assert value.is_dynamic() is expected


def test_display():
    value = Token(
        TokenKind.TUPLE,
        [
            Token(TokenKind.BOOL, True),
            Token(TokenKind.UINT, 255),
            Token(TokenKind.BYTES, b"\x12\x34"),
            Token(TokenKind.ARRAY, [Token(TokenKind.STRING, "a"), Token(TokenKind.STRING, "b")]),
        ],
    )
    assert str(value) == "(true,ff,1234,[a,b])"
    assert str(Token(TokenKind.ADDRESS, b"\x11" * 20)) == "11" * 20
    assert str(Token(TokenKind.UINT, 0)) == "0"


def test_negative_int_stored_as_twos_complement():
    assert Token(TokenKind.INT, -1).value == (1 << 256) - 1


def test_uint_out_of_range_rejected():
    with pytest.raises(ValueError):
        Token(TokenKind.UINT, -1)


@pytest.mark.parametrize(
    "value",
    ['[1,"0,false]', '[false"]', '[1,false"]', '[1,"0",false]'],
)
def test_single_quoted_in_array_must_error(value):
    with pytest.raises(InvalidDataError):
        Tokenizer.tokenize_array(value, ParamType.bool_())


def test_array_of_bool_numbers():
    result = Tokenizer.tokenize_array("[1,0]", ParamType.bool_())
    assert result == [boolean(True), boolean(False)]


def test_tokenize_empty_array():
    assert Tokenizer.tokenize_array("[]", ParamType.bool_()) == []


def test_tokenize_nested_array():
    param = ParamType.array(ParamType.array(ParamType.uint(256)))
    parsed = Tokenizer.tokenize(param, "[[1,2],[3]]")
    assert parsed == Token(
        TokenKind.ARRAY,
        [Token(TokenKind.ARRAY, [uint(1), uint(2)]), Token(TokenKind.ARRAY, [uint(3)])],
    )


def test_tokenize_struct():
    param = ParamType.tuple_([ParamType.bool_(), ParamType.address(), ParamType.string()])
    parsed = Tokenizer.tokenize(param, "(true," + "22" * 20 + ",hello)")
    assert parsed == Token(
        TokenKind.TUPLE,
        [boolean(True), Token(TokenKind.ADDRESS, b"\x22" * 20), Token(TokenKind.STRING, "hello")],
    )


def test_tokenize_quoted_strings_in_array():
    parsed = Tokenizer.tokenize_array('["a,b","c"]', ParamType.string())
    assert parsed == [Token(TokenKind.STRING, "a,b"), Token(TokenKind.STRING, "c")]


def test_tokenize_struct_too_many_values():
    with pytest.raises(InvalidDataError):
        Tokenizer.tokenize_struct("(true,false)", [ParamType.bool_()])


def test_tokenize_fixed_array_length_mismatch():
    with pytest.raises(InvalidDataError):
        Tokenizer.tokenize_fixed_array("[1,0,1]", ParamType.bool_(), 2)


def test_tokenize_integers():
    assert Tokenizer.tokenize_uint("69") == 69
    assert Tokenizer.tokenize_uint("0x45") == 69
    assert Tokenizer.tokenize_int("-1") == (1 << 256) - 1
    with pytest.raises(InvalidDataError):
        Tokenizer.tokenize_uint("-1")
    with pytest.raises(InvalidDataError):
        Tokenizer.tokenize_uint(str(1 << 256))


def test_tokenize_bytes_and_address():
    assert Tokenizer.tokenize_bytes("0x1234") == b"\x12\x34"
    assert Tokenizer.tokenize_fixed_bytes("1234", 2) == b"\x12\x34"
    with pytest.raises(InvalidDataError):
        Tokenizer.tokenize_fixed_bytes("1234", 3)
    with pytest.raises(InvalidDataError):
        Tokenizer.tokenize_address("1234")
    with pytest.raises(InvalidDataError):
        Tokenizer.tokenize_bytes("zz")


def test_tokenize_bool_invalid():
    with pytest.raises(InvalidDataError):
        Tokenizer.tokenize_bool("yes")