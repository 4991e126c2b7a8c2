import pytest

from chnative.support import (
    format_container,
    format_duration,
    format_optional,
    get_env_or_default,
    uuid_to_string,
    version_number,
)


def test_uuid_to_string_source_case():
    uuid = (0x0102030405060708, 0x090A0B0C0D0E0F10)
    assert uuid_to_string(uuid) == "01020304-0506-0708-090a-0b0c0d0e0f10"


def test_uuid_to_string_shape_and_roundtrip():
    uuid = (0xBB6A8C699AB2414C, 0x86697B7FD27F0825)
    text = uuid_to_string(uuid)
    assert len(text) == 36
    assert [len(part) for part in text.split("-")] == [8, 4, 4, 4, 12]
    value = int(text.replace("-", ""), 16)
    assert (value >> 64, value & ((1 << 64) - 1)) == uuid


def test_uuid_to_string_zero():
    text = uuid_to_string((0, 0))
    assert set(text.replace("-", "")) == {"0"}


def test_uuid_to_string_out_of_range():
    with pytest.raises(ValueError):
        uuid_to_string((1 << 64, 0))


def test_version_number_ordering():
    assert version_number(21, 8) < version_number(21, 9) < version_number(22, 1)
    assert version_number(21, 8, 1) > version_number(21, 8, 0, 54448)


def test_version_number_components_separate():
    base = version_number(23, 3, 2)
    assert version_number(23, 3, 2, 54460) - base == 54460
    assert version_number(0, 0, 1) == version_number(0, 0, 0, 10**8)


def test_version_number_rejects_negative():
    with pytest.raises(ValueError):
        version_number(-1, 0)


def test_get_env_reads_variable(monkeypatch):
    monkeypatch.setenv("CHNATIVE_TEST_HOST", "example.com")
    assert get_env_or_default("CHNATIVE_TEST_HOST", "localhost") == "example.com"


def test_get_env_uses_default(monkeypatch):
    monkeypatch.delenv("CHNATIVE_TEST_HOST", raising=False)
    assert get_env_or_default("CHNATIVE_TEST_HOST", "localhost") == "localhost"


def test_get_env_int_conversion(monkeypatch):
    monkeypatch.delenv("CHNATIVE_TEST_PORT", raising=False)
    assert get_env_or_default("CHNATIVE_TEST_PORT", "9000", int) == 9000
    monkeypatch.setenv("CHNATIVE_TEST_PORT", "9440")
    assert get_env_or_default("CHNATIVE_TEST_PORT", "9000", int) == 9440


def test_get_env_missing_without_default(monkeypatch):
    monkeypatch.delenv("CHNATIVE_TEST_MISSING", raising=False)
    with pytest.raises(RuntimeError, match="CHNATIVE_TEST_MISSING"):
        get_env_or_default("CHNATIVE_TEST_MISSING")


def test_get_env_bad_int(monkeypatch):
    monkeypatch.setenv("CHNATIVE_TEST_PORT", "not a number")
    with pytest.raises(ValueError):
        get_env_or_default("CHNATIVE_TEST_PORT", "9000", int)


def test_format_container_numbers():
    assert format_container([1, 2, 3]) == "[1, 2, 3] (3 items)"


def test_format_container_quotes_strings():
    text = format_container(["a", "ab"])
    assert '"a"' in text and '"ab"' in text
    assert text.endswith("(2 items)")


def test_format_container_nested():
    inner = format_container([1])
    empty = format_container([])
    text = format_container([[1], []])
    assert text == f"[{inner}, {empty}] (2 items)"


def test_format_optional():
    assert format_optional(None) == "NULL"
    assert format_optional(42) == str(42)


def test_format_duration_units():
    assert format_duration(0.5, "m") == "500ms"
    assert format_duration(3) == "3s"
    assert format_duration(2, "u").endswith("us")
    assert format_duration(2, "u") == f"{2 * 10**6}us"


def test_format_duration_unknown_unit():
    with pytest.raises(ValueError):
        format_duration(1, "k")