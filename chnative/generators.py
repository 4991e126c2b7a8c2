"""Value generators producing sample data for column and round-trip tests."""

from __future__ import annotations

import ipaddress
import random
import struct
import sys
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar, Union

T = TypeVar("T")

_INT64_MIN = -(1 << 63)
_UINT64_MAX = (1 << 64) - 1

# Limits of 32-bit floats, exactly representable as doubles.
_FLT_MIN = 1.1754943508222875e-38
_FLT_MAX = 3.4028234663852886e38
_FLT_EPSILON = 1.1920928955078125e-07
_FLT_MAX_EXPONENT = 128
_FLT_MIN_EXPONENT = -125
_FLT_MIN_EXPONENT10 = -37

_LONG_STRING = "long string to test how those are handled. Here goes more text. " * 19


def _to_float32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _wrap_int64(value: int) -> int:
    value &= _UINT64_MAX
    return value - (1 << 64) if value >= (1 << 63) else value


def _make_int128(high: int, low: int) -> int:
    """Build a signed 128-bit value from a 64-bit high half and low half."""
    raw = ((high & _UINT64_MAX) << 64) | (low & _UINT64_MAX)
    return raw - (1 << 128) if raw >= (1 << 127) else raw


def make_ipv4(ip: int) -> ipaddress.IPv4Address:
    """An IPv4 address whose in-memory bytes are those of ip in little-endian order."""
    if not 0 <= ip <= 0xFFFFFFFF:
        raise ValueError(f"IPv4 value out of range: {ip}")
    return ipaddress.IPv4Address(ip.to_bytes(4, "little"))


def make_ipv6(*args: int) -> ipaddress.IPv6Address:
    """An IPv6 address from its 16 bytes, or from its last 6 bytes (the rest zero)."""
    if len(args) == 6:
        octets = (0,) * 10 + tuple(args)
    elif len(args) == 16:
        octets = tuple(args)
    else:
        raise ValueError(f"expected 6 or 16 bytes, got {len(args)}")
    if any(not 0 <= octet <= 0xFF for octet in octets):
        raise ValueError("every IPv6 byte must be in range 0..255")
    return ipaddress.IPv6Address(bytes(octets))


def make_numbers() -> List[int]:
    """A short list of small unsigned numbers."""
    return [1, 2, 3, 7, 11, 13, 17, 19, 23, 29, 31]


def make_int_numbers(bits: int, signed: bool) -> List[int]:
    """Numbers spanning the whole range of an integer type in 32 even steps."""
    if bits < 8:
        raise ValueError(f"integer width too small: {bits}")
    if signed:
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        low, high = 0, (1 << bits) - 1
    step = 1 << (bits - 5)
    result = list(range(low, high - step + 1, step))
    result.append(high)
    return result


def make_float_numbers(double: bool = True) -> List[float]:
    """Special and boundary float values plus values across the exponent range.

    With double false every value is a 32-bit float.
    """
    if double:
        info = sys.float_info
        low, high, epsilon = info.min, info.max, info.epsilon
        max_exp, min_exp, min_exp10 = info.max_exp, info.min_exp, info.min_10_exp
        narrow: Callable[[float], float] = float
    else:
        low, high, epsilon = _FLT_MIN, _FLT_MAX, _FLT_EPSILON
        max_exp, min_exp, min_exp10 = _FLT_MAX_EXPONENT, _FLT_MIN_EXPONENT, _FLT_MIN_EXPONENT10
        narrow = _to_float32

    result = [low, high, float("nan"), float("inf"), float("-inf"), 0.0, epsilon, -epsilon]

    total_steps = 100
    step = 10.0 ** ((max_exp - min_exp) // total_steps)
    min_value = 10.0 ** min_exp10

    value = high
    while value >= min_value * step:
        result.append(value)
        result.append(-value)
        value = narrow(value / step)
    result.append(narrow(min_value))
    result.append(narrow(-min_value))
    return result


def make_bools() -> List[int]:
    """A fixed pattern of 0/1 values."""
    return [1, 0, 0, 0, 1, 1, 0, 1, 1, 1, 0]


def make_strings() -> List[str]:
    """Strings of growing length, the last one very long."""
    return ["a", "ab", "abc", "abcd", _LONG_STRING]


def make_fixed_strings(string_size: int) -> List[str]:
    """make_strings() cut or padded with NUL characters to string_size."""
    return [value[:string_size].ljust(string_size, "\0") for value in make_strings()]


def make_uuids() -> List[Tuple[int, int]]:
    """UUIDs as pairs of 64-bit halves."""
    return [
        (0, 0),
        (0xBB6A8C699AB2414C, 0x86697B7FD27F0825),
        (0x84B9F24BC26B49C6, 0xA03B4AB723341951),
        (0x3507213C178649F9, 0x9FAF035D662F60AE),
    ]


def make_datetime64s(scale: int, values_size: int = 200) -> List[int]:
    """DateTime64 ticks roughly 200 years around the epoch, with sub-second parts."""
    seconds_multiplier = 10**scale
    year = 86400 * 365 * seconds_multiplier
    return generate_vector(
        values_size,
        lambda i: _wrap_int64((i - 100) * year * 2 + (i * 10) * seconds_multiplier + i),
    )


def make_dates(as_seconds: bool = False) -> List[int]:
    """Day numbers at powers of two up to 65535; as seconds if as_seconds."""
    days = [0, 1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096, 8192, 16384, 32768, 65536 - 1]
    if as_seconds:
        return [day * 86400 for day in days]
    return days


def make_dates32() -> List[int]:
    """make_dates() followed by the same values negated, for pre-epoch dates."""
    days = make_dates()
    return days + [-day for day in days]


def make_datetimes() -> List[int]:
    """Seconds at powers of two, up to the largest 32-bit unsigned value."""
    return [0] + [1 << power for power in range(32)] + [4294967296 - 1]


def make_int128s() -> List[int]:
    """Signed 128-bit values at the edges of the 64-bit halves."""
    return [
        _make_int128(0xFFFFFFFFFFFFFFFF, 0xFFFFFFFFFFFFFFFF),
        _make_int128(0, 0xFFFFFFFFFFFFFFFF),
        _make_int128(0xFFFFFFFFFFFFFFFF, 0),
        _make_int128(0x8000000000000000, 0),
        0,
    ]


def make_decimals(precision: int, scale: int) -> List[int]:
    """Raw decimal values: powers of two scaled, with a fixed fractional part."""
    scale_multiplier = 10**scale
    rhs_value = 12345678910
    values = [0, 1, 2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048, 4096, 8192, 16384, 32768, 65536 - 1]
    return [value * scale_multiplier + rhs_value % scale_multiplier for value in values]


def make_ipv4s() -> List[ipaddress.IPv4Address]:
    """A few IPv4 addresses, including loopback and the zero address."""
    return [
        make_ipv4(0x12345678),
        make_ipv4(0x0100007F),
        make_ipv4(3585395774),
        make_ipv4(0),
        make_ipv4(0x12345678),
    ]


def make_ipv6s() -> List[ipaddress.IPv6Address]:
    """A few IPv6 addresses, including loopback, unspecified and IPv4-mapped."""
    return [
        make_ipv6(0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15),
        make_ipv6(0, 0, 0, 0, 0, 1),
        make_ipv6(0, 0, 0, 0, 0, 0),
        make_ipv6(0xFF, 0xFF, 204, 152, 189, 116),
    ]


def make_arrays(generator: Callable[[], Sequence[T]]) -> List[List[T]]:
    """Prefixes of the generated values: the i-th array holds the first i values."""
    values = list(generator())
    return [values[:length] for length in range(len(values))]


def foobar_generator(i: int) -> str:
    """"Foo" for multiples of 3, "Bar" for multiples of 5, both for 15, else the number."""
    result = ("Foo" if i % 3 == 0 else "") + ("Bar" if i % 5 == 0 else "")
    return result or str(i)


def generate_vector(items: int, gen: Callable[[int], T]) -> List[T]:
    """A list of gen(0), gen(1), ..., gen(items - 1)."""
    return [gen(i) for i in range(items)]


def same_value_generator(value: T) -> Callable[[int], T]:
    """A generator returning value whatever the index."""
    return lambda _index: value


def alternate_generators(gen1: Callable[[int], T], gen2: Callable[[int], T]) -> Callable[[int], T]:
    """A generator taking even indexes from gen1 and odd ones from gen2, each halved."""

    def generate(i: int) -> T:
        return gen1(i // 2) if i % 2 == 0 else gen2(i // 2)

    return generate


def concat_sequences(first: Sequence[T], second: Sequence[T]) -> List[T]:
    """The items of first followed by the items of second."""
    return [*first, *second]


class RandomGenerator:
    """Uniformly distributed pseudo-random values from a seeded generator.

    Integer bounds give integers in [value_min, value_max]; float bounds give floats.
    """

    def __init__(
        self,
        seed: int = 0,
        value_min: Optional[Union[int, float]] = None,
        value_max: Optional[Union[int, float]] = None,
    ) -> None:
        self._min = 0 if value_min is None else value_min
        self._max = _UINT64_MAX if value_max is None else value_max
        if self._min > self._max:
            raise ValueError(f"value_min {self._min} is greater than value_max {self._max}")
        self._real = isinstance(self._min, float) or isinstance(self._max, float)
        self._random = random.Random(seed)

    def __call__(self, index: object = None) -> Union[int, float]:
        if self._real:
            return self._random.uniform(self._min, self._max)
        return self._random.randint(int(self._min), int(self._max))


class FromVectorGenerator:
    """Picks pseudo-random items out of a fixed list."""

    def __init__(self, data: Sequence[T]) -> None:
        self.data = list(data)
        if not self.data:
            raise ValueError("can't generate values from empty vector")
        self._random_generator = RandomGenerator(0, 0, len(self.data) - 1)

    def __call__(self, pos: int):
        return self.data[int(self._random_generator(pos))]