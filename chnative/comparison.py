"""Deep comparison of values and nested containers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any


@dataclass
class ComparisonResult:
    """Outcome of a comparison; falsy on mismatch, with a message saying why."""

    success: bool
    message: str = ""

    def __bool__(self) -> bool:
        return self.success


def _is_string(value: Any) -> bool:
    return isinstance(value, (str, bytes, bytearray, memoryview))


def is_container(value: Any) -> bool:
    """True for sized iterables; strings count as containers too."""
    return hasattr(value, "__len__") and hasattr(value, "__iter__")


def _is_sequence_like(value: Any) -> bool:
    return is_container(value) and not _is_string(value)


def _format(value: Any) -> str:
    if _is_sequence_like(value):
        items = ", ".join(
            f'"{item}"' if isinstance(item, str) else _format(item) for item in value
        )
        return f"[{items}] ({len(value)} items)"
    if value is None:
        return "NULL"
    return str(value)


def _failure(message: str) -> ComparisonResult:
    return ComparisonResult(False, message)


def compare_containers_recursive(left: Any, right: Any) -> ComparisonResult:
    """Compare two containers element-wise, descending into nested ones."""
    if len(left) != len(right):
        return _failure(
            f"\nMismatching containers size, expected: {len(left)} actual: {len(right)}"
        )
    for position, (l_item, r_item) in enumerate(zip(left, right), start=1):
        result = compare_recursive(l_item, r_item)
        if not result:
            return _failure(f"{result.message}\n\nMismatch at pos: {position}")
    return ComparisonResult(True)


def compare_recursive(left: Any, right: Any) -> ComparisonResult:
    """Compare two values; containers are compared deeply and NaN equals NaN.

    None stands for an empty optional value and equals only None.
    """
    if _is_sequence_like(left) and _is_sequence_like(right):
        result = compare_containers_recursive(left, right)
        if result:
            return result
        return _failure(
            f"{result.message}\nExpected container: {_format(left)}"
            f"\nActual container  : {_format(right)}"
        )

    if left == right:
        return ComparisonResult(True)

    if (
        isinstance(left, float)
        and isinstance(right, float)
        and math.isnan(left)
        and math.isnan(right)
    ):
        return ComparisonResult(True)

    return _failure(f"\nExpected value: {_format(left)}\nActual value  : {_format(right)}")