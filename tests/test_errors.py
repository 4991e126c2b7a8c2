import pytest

from chnative.errors import (
    CompressionError,
    Error,
    ErrorCode,
    LibraryAssertionError,
    OpenSSLError,
    ProtocolError,
    ServerError,
    ServerExceptionInfo,
    UnimplementedError,
    ValidationError,
)


def test_error_code_values_from_source():
    assert ErrorCode(0).name == "OK"
    assert ErrorCode(60).name == "UNKNOWN_TABLE"
    assert ErrorCode(1002).name == "UNKNOWN_EXCEPTION"


def test_error_code_lookup_by_number():
    assert ErrorCode(193) is ErrorCode.WRONG_PASSWORD
    assert ErrorCode(999) is ErrorCode.KEEPER_EXCEPTION


def test_error_code_unknown_number_rejected():
    # 5 is a gap in the code table
    with pytest.raises(ValueError):
        ErrorCode(5)


def test_error_codes_lookup_round_trip():
    for member in ErrorCode:
        assert ErrorCode(member.value) is member


def test_server_exception_info_defaults():
    info = ServerExceptionInfo()
    assert info.code == 0
    assert info.name == ""
    assert info.display_text == ""
    assert info.stack_trace == ""
    assert info.nested is None


def test_chain_single():
    info = ServerExceptionInfo(code=60, name="DB::Exception")
    assert list(info.chain()) == [info]


def test_chain_nested_order():
    inner = ServerExceptionInfo(code=ErrorCode.UNKNOWN_TABLE, name="inner")
    middle = ServerExceptionInfo(code=ErrorCode.SYNTAX_ERROR, name="middle", nested=inner)
    outer = ServerExceptionInfo(code=ErrorCode.LOGICAL_ERROR, name="outer", nested=middle)
    assert [e.name for e in outer.chain()] == ["outer", "middle", "inner"]
    assert [e.code for e in outer.chain()] == [
        ErrorCode.LOGICAL_ERROR,
        ErrorCode.SYNTAX_ERROR,
        ErrorCode.UNKNOWN_TABLE,
    ]


def test_server_error_exposes_exception():
    info = ServerExceptionInfo(
        code=ErrorCode.UNKNOWN_TABLE,
        name="DB::Exception",
        display_text="Table does not exist",
        stack_trace="trace",
    )
    err = ServerError(info)
    assert err.code == ErrorCode.UNKNOWN_TABLE
    assert err.exception is info
    assert str(err) == "Table does not exist"


def test_server_error_is_base_error():
    info = ServerExceptionInfo(code=ErrorCode.READONLY, display_text="readonly mode")
    err = ServerError(info)
    assert isinstance(err, Error)
    assert err.code == ErrorCode.READONLY
    assert str(err) == "readonly mode"


@pytest.mark.parametrize(
    "cls",
    [
        ValidationError,
        ProtocolError,
        UnimplementedError,
        LibraryAssertionError,
        OpenSSLError,
        CompressionError,
    ],
)
def test_library_errors_carry_message_and_are_errors(cls):
    err = cls("something failed")
    assert str(err) == "something failed"
    assert isinstance(err, Error)
    assert isinstance(err, RuntimeError)


def test_specific_error_not_a_sibling():
    err = ProtocolError("checksum")
    assert str(err) == "checksum"
    assert isinstance(err, Error)
    assert not isinstance(err, ValidationError)