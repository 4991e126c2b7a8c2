"""Helpers for tests and tools: environment lookup, version numbers, formatting."""

from __future__ import annotations

import os
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Iterable, Optional, Tuple, TypeVar, Union

T = TypeVar("T")

_UINT64_MAX = (1 << 64) - 1

# Seconds per tick for each supported unit prefix.
_UNIT_MULTIPLIERS = {
    "n": 10**9,
    "u": 10**6,
    "m": 10**3,
    "c": 10**2,
    "d": 10,
    "": 1,
}

_REVISION_DECIMAL_PLACES = 8
_PATCH_DECIMAL_PLACES = 4
_MINOR_DECIMAL_PLACES = 4


def get_env_or_default(
    env: str,
    default: Optional[str] = None,
    result_type: Callable[[str], T] = str,  # type: ignore[assignment]
) -> T:
    """Read an environment variable, falling back to default.

    The text found is converted with result_type (str by default, or int).
    Raises RuntimeError if the variable is not set and there is no default.
    """
    value = os.environ.get(env)
    if value is None:
        if default is None:
            raise RuntimeError(f"Environment var '{env}' is not set.")
        value = default
    return result_type(value)


def version_number(major: int, minor: int, patch: int = 0, revision: int = 0) -> int:
    """Pack a server version into one comparable number.

    The revision takes the low 8 decimal places, the patch the next 4,
    the minor the next 4 and the major the rest.
    """
    for name, part in (("major", major), ("minor", minor), ("patch", patch), ("revision", revision)):
        if part < 0:
            raise ValueError(f"{name} version component must not be negative: {part}")
    return (
        major * 10 ** (_MINOR_DECIMAL_PLACES + _PATCH_DECIMAL_PLACES + _REVISION_DECIMAL_PLACES)
        + minor * 10 ** (_PATCH_DECIMAL_PLACES + _REVISION_DECIMAL_PLACES)
        + patch * 10**_REVISION_DECIMAL_PLACES
        + revision
    )


def uuid_to_string(uuid: Tuple[int, int]) -> str:
    """Format a UUID held as two 64-bit halves in the canonical 8-4-4-4-12 form."""
    first, second = uuid
    if not (0 <= first <= _UINT64_MAX and 0 <= second <= _UINT64_MAX):
        raise ValueError("Error while converting UUID to string")
    return (
        f"{first >> 32:08x}-{(first >> 16) & 0xFFFF:04x}-{first & 0xFFFF:04x}"
        f"-{second >> 48:04x}-{second & 0xFFFFFFFFFFFF:012x}"
    )


def _is_string(value: Any) -> bool:
    return isinstance(value, (str, bytes, bytearray))


def _is_container(value: Any) -> bool:
    return hasattr(value, "__len__") and hasattr(value, "__iter__") and not _is_string(value)


def format_container(container: Iterable[Any]) -> str:
    """Render a container as "[a, b, ...] (N items)", quoting strings and nesting."""
    parts = []
    for item in container:
        if isinstance(item, str):
            parts.append(f'"{item}"')
        elif _is_container(item):
            parts.append(format_container(item))
        else:
            parts.append(str(item))
    return f"[{', '.join(parts)}] ({len(parts)} items)"


def format_optional(value: Any) -> str:
    """Render an optional value: "NULL" for None, the value itself otherwise."""
    if value is None:
        return "NULL"
    return str(value)


def _to_fraction(seconds: Union[int, float, Decimal, Fraction]) -> Fraction:
    if isinstance(seconds, float):
        return Fraction(Decimal(repr(seconds)))
    return Fraction(seconds)


def format_duration(seconds: Union[int, float, Decimal, Fraction], unit: str = "") -> str:
    """Render a duration as its count in the given unit followed by "<prefix>s".

    unit is a metric prefix: "n", "u", "m", "c", "d" or "" for whole seconds.
    """
    try:
        multiplier = _UNIT_MULTIPLIERS[unit]
    except KeyError:
        raise ValueError(f"unsupported duration unit: {unit!r}") from None
    count = _to_fraction(seconds) * multiplier
    text = str(count.numerator) if count.denominator == 1 else str(float(count))
    return f"{text}{unit}s"