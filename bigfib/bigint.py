"""Arbitrary-size non-negative integers stored as base 10**9 limbs."""

from __future__ import annotations

from itertools import zip_longest
from typing import Iterable

BASE = 1_000_000_000
"""Numeric base of a single limb."""

_LIMB_DIGITS = 9
_NAIVE_LIMIT = 32


def _naive_mult(a: list[int], b: list[int]) -> list[int]:
    """Schoolbook product of two equally long limb lists, without carrying."""
    result = [0] * (2 * len(a))
    for i, x in enumerate(a):
        if x:
            for j, y in enumerate(b, i):
                result[j] += x * y
    return result


def _karatsuba_mult(a: list[int], b: list[int]) -> list[int]:
    """Karatsuba product of two limb lists whose length is a power of two.

    The result has twice the input length and its limbs are not carried.
    """
    size = len(a)
    if size <= _NAIVE_LIMIT:
        return _naive_mult(a, b)

    mid = size // 2
    a_low, a_high = a[:mid], a[mid:]
    b_low, b_high = b[:mid], b[mid:]

    high = _karatsuba_mult(a_high, b_high)
    low = _karatsuba_mult(a_low, b_low)
    cross = _karatsuba_mult(
        [x + y for x, y in zip(a_low, a_high)],
        [x + y for x, y in zip(b_low, b_high)],
    )

    result = low + high
    for i, (c, h, lo) in enumerate(zip(cross, high, low), mid):
        result[i] += c - h - lo
    return result


class BigInt:
    """Non-negative integer held as little-endian limbs of base 10**9."""

    __slots__ = ("_limbs",)

    def __init__(self, value: int = 0) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected a non-negative int, got {type(value).__name__}")
        if value < 0:
            raise ValueError("BigInt cannot hold a negative value")
        limbs = []
        while True:
            value, limb = divmod(value, BASE)
            limbs.append(limb)
            if not value:
                break
        self._limbs = limbs

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> BigInt:
        """Build a number from little-endian limbs, each below ``BASE``."""
        values = list(limbs)
        if not values:
            raise ValueError("at least one limb is required")
        for limb in values:
            if not 0 <= limb < BASE:
                raise ValueError(f"limb out of range: {limb}")
        return cls._wrap(values)

    @classmethod
    def _wrap(cls, limbs: list[int]) -> BigInt:
        number = cls.__new__(cls)
        number._limbs = limbs
        return number

    @staticmethod
    def _coerce(other: object) -> BigInt | None:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return BigInt(other)
        return None

    def chunks(self) -> int:
        """Number of limbs in storage, leading zero limbs included."""
        return len(self._limbs)

    def __str__(self) -> str:
        limbs = self._limbs
        top = len(limbs) - 1
        while top > 0 and limbs[top] == 0:
            top -= 1
        tail = "".join(f"{limb:0{_LIMB_DIGITS}d}" for limb in reversed(limbs[:top]))
        return f"{limbs[top]}{tail}"

    def __repr__(self) -> str:
        return f"BigInt({self})"

    def __int__(self) -> int:
        value = 0
        for limb in reversed(self._limbs):
            value = value * BASE + limb
        return value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigInt):
            return int(self) == int(other)
        if isinstance(other, int) and not isinstance(other, bool):
            return int(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(int(self))

    def __add__(self, other: object) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = []
        carry = 0
        for x, y in zip_longest(self._limbs, rhs._limbs, fillvalue=0):
            carry, limb = divmod(x + y + carry, BASE)
            result.append(limb)
        if carry:
            result.append(carry)
        return BigInt._wrap(result)

    __radd__ = __add__

    def __sub__(self, other: object) -> BigInt:
        """Difference; leading zero limbs of the minuend are kept."""
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        result = []
        borrow = 0
        for x, y in zip_longest(self._limbs, rhs._limbs, fillvalue=0):
            limb = x - y - borrow
            if limb < 0:
                limb += BASE
                borrow = 1
            else:
                borrow = 0
            result.append(limb)
        if borrow:
            raise ValueError("subtraction result would be negative")
        return BigInt._wrap(result)

    def __mul__(self, other: object) -> BigInt:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        longest = max(len(self._limbs), len(rhs._limbs))
        size = 1 << (longest - 1).bit_length()
        x = self._limbs + [0] * (size - len(self._limbs))
        y = rhs._limbs + [0] * (size - len(rhs._limbs))

        result = []
        carry = 0
        for value in _karatsuba_mult(x, y):
            carry, limb = divmod(value + carry, BASE)
            result.append(limb)
        while carry:
            carry, limb = divmod(carry, BASE)
            result.append(limb)

        while len(result) > 1 and result[-1] == 0:
            result.pop()
        return BigInt._wrap(result)

    __rmul__ = __mul__