import math

from chnative.comparison import (
    ComparisonResult,
    compare_containers_recursive,
    compare_recursive,
    is_container,
)

NAN = math.nan


def test_compare_values():
    assert compare_recursive(1, 1)
    assert compare_recursive(1.0, 1.0)
    assert compare_recursive("1.0L", "1.0L")
    assert compare_recursive(b"1.0L", b"1.0L")


def test_compare_different_values():
    result = compare_recursive(1, 2)
    assert not result
    assert "Expected value: 1" in result.message
    assert "Actual value  : 2" in result.message


def test_compare_containers():
    assert compare_recursive([1, 2, 3], [1, 2, 3])
    assert compare_recursive([], [])
    assert not compare_recursive([1, 2, 3], [1, 2, 4])
    assert not compare_recursive([1, 2, 3], [1, 2])


def test_compare_nested_containers():
    assert compare_recursive([[1, 2, 3], [4, 5, 6]], [[1, 2, 3], [4, 5, 6]])
    assert compare_recursive([[1, 2, 3], [4, 5, 6], []], [[1, 2, 3], [4, 5, 6], []])
    assert compare_recursive([[]], [[]])

    assert not compare_recursive([[1, 2, 3], [4, 5, 6]], [[1, 2, 3], [4, 5, 7]])
    assert not compare_recursive([[1, 2, 3], [4, 5, 6]], [[1, 2, 3], [4, 5]])
    assert not compare_recursive([[1, 2, 3], [4, 5, 6]], [[1, 2, 3], []])
    assert not compare_recursive([[1, 2, 3], [4, 5, 6]], [[]])


def test_nan():
    assert compare_recursive(NAN, NAN)
    assert compare_recursive(float("nan"), NAN)
    assert not compare_recursive(NAN, 1.0)
    assert not compare_recursive(1.0, NAN)


def test_optional_as_none():
    assert compare_recursive(None, None)
    assert not compare_recursive(NAN, None)
    assert not compare_recursive(None, NAN)
    assert not compare_recursive(None, 1)


def test_nan_inside_containers():
    assert compare_recursive([1.0, NAN], [1.0, NAN])
    assert not compare_recursive([NAN], [1.0])


def test_size_mismatch_message():
    result = compare_containers_recursive([1, 2, 3], [1, 2])
    assert not result
    assert "Mismatching containers size, expected: 3 actual: 2" in result.message


def test_mismatch_position_reported():
    result = compare_recursive([1, 2, 3], [1, 2, 4])
    assert "Mismatch at pos: 3" in result.message
    assert "Expected container" in result.message


def test_strings_compared_as_values():
    result = compare_recursive("abc", "abd")
    assert not result
    assert "Expected value: abc" in result.message


def test_is_container():
    assert is_container([1, 2])
    assert is_container((1,))
    assert is_container("text")
    assert not is_container(5)
    assert not is_container(1.5)


def test_result_truthiness():
    failed = ComparisonResult(False, "why")
    assert failed.__bool__() is False
    assert failed.message == "why"
    assert ComparisonResult(True).__bool__() is True
    assert compare_recursive(3, 3).__bool__() is True
    assert compare_recursive(3, 4).__bool__() is False