import pytest

from chnative.errors import ProtocolError
from chnative.protocol import (
    ClientCode,
    CompressionState,
    ServerCode,
    Stage,
    parse_client_code,
    parse_server_code,
)


def test_documented_values():
    assert parse_server_code(14) is ServerCode.PROFILE_EVENTS
    assert parse_client_code(4) is ClientCode.PING
    assert Stage(2) is Stage.COMPLETE


def test_server_codes_are_consecutive():
    parsed = [parse_server_code(i) for i in range(len(ServerCode))]
    assert parsed == sorted(ServerCode, key=int)


def test_client_codes_are_consecutive():
    parsed = [parse_client_code(i) for i in range(len(ClientCode))]
    assert parsed == sorted(ClientCode, key=int)


def test_compression_state_is_boolean_like():
    assert bool(CompressionState(1)) is True
    assert bool(CompressionState(0)) is False
    assert CompressionState(1) is CompressionState.ENABLE


@pytest.mark.parametrize("code", list(ServerCode))
def test_parse_server_code_round_trip(code):
    assert parse_server_code(int(code)) is code


@pytest.mark.parametrize("code", list(ClientCode))
def test_parse_client_code_round_trip(code):
    assert parse_client_code(int(code)) is code


def test_parse_server_code_unknown():
    with pytest.raises(ProtocolError):
        parse_server_code(len(ServerCode))


def test_parse_client_code_unknown():
    with pytest.raises(ProtocolError):
        parse_client_code(len(ClientCode))


def test_parse_negative_code():
    with pytest.raises(ProtocolError):
        parse_server_code(-1)