"""Integer kinds: the arithmetic rules a :class:`~ratio.Ratio` is built on.

A ratio always stores plain Python ``int`` payloads. The *kind* attached to
it decides what those integers are allowed to be: unbounded (:data:`BIGINT`)
or confined to the range of a NumPy integer dtype (:data:`I8` ... :data:`U64`).
Plain operations on a bounded kind raise :class:`OverflowError` when a result
leaves the range; the ``checked_*`` family returns ``None`` instead.
"""
from __future__ import annotations

import abc
import math
import numbers
import operator
import re
from typing import Any, Optional, Tuple

import numpy as np

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_INT_PATTERN = re.compile(r"([+-]?)([0-9A-Za-z]+)")


def _trunc_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("attempt to divide by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class IntegerKind(abc.ABC):
    """Capability set shared by every backing integer type."""

    name: str = "int"
    signed: bool = True
    min_value: Optional[int] = None
    max_value: Optional[int] = None

    zero = 0
    one = 1

    @property
    def bounded(self) -> bool:
        return self.max_value is not None

    @abc.abstractmethod
    def can_hold(self, other: "IntegerKind") -> bool:
        """Return ``True`` when every value of *other* fits in this kind."""

    def contains(self, value: int) -> bool:
        if self.min_value is not None and value < self.min_value:
            return False
        if self.max_value is not None and value > self.max_value:
            return False
        return True

    def _checked(self, value: int, op: str) -> int:
        if not self.contains(value):
            raise OverflowError(f"attempt to {op} with overflow ({self.name})")
        return value

    # ------------------------------------------------------------------
    # Arithmetic
    def add(self, a: int, b: int) -> int:
        return self._checked(a + b, "add")

    def sub(self, a: int, b: int) -> int:
        return self._checked(a - b, "subtract")

    def mul(self, a: int, b: int) -> int:
        return self._checked(a * b, "multiply")

    def neg(self, a: int) -> int:
        return self._checked(-a, "negate")

    def div(self, a: int, b: int) -> int:
        """Quotient rounded toward zero."""
        return self._checked(_trunc_div(a, b), "divide")

    def rem(self, a: int, b: int) -> int:
        """Remainder of :meth:`div`; takes the sign of the dividend."""
        return a - b * _trunc_div(a, b)

    def div_mod_floor(self, a: int, b: int) -> Tuple[int, int]:
        if b == 0:
            raise ZeroDivisionError("attempt to divide by zero")
        quotient, remainder = divmod(a, b)
        return self._checked(quotient, "divide"), remainder

    def gcd(self, a: int, b: int) -> int:
        return self._checked(math.gcd(a, b), "compute gcd")

    def pow(self, base: int, exponent: int) -> int:
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        return self._checked(base ** exponent, "raise to a power")

    def checked_add(self, a: int, b: int) -> Optional[int]:
        result = a + b
        return result if self.contains(result) else None

    def checked_sub(self, a: int, b: int) -> Optional[int]:
        result = a - b
        return result if self.contains(result) else None

    def checked_mul(self, a: int, b: int) -> Optional[int]:
        result = a * b
        return result if self.contains(result) else None

    def checked_neg(self, a: int) -> Optional[int]:
        return self.checked_sub(self.zero, a)

    def checked_gcd(self, a: int, b: int) -> Optional[int]:
        result = math.gcd(a, b)
        return result if self.contains(result) else None

    # ------------------------------------------------------------------
    # Conversions
    def cast(self, value: Any) -> Optional[int]:
        """Convert a primitive number into this kind, or ``None`` if it does not fit.

        Floats are truncated toward zero; NaN and infinities never fit.
        """
        if isinstance(value, (float, np.floating)):
            if not math.isfinite(value):
                return None
            value = int(value)
        elif isinstance(value, numbers.Integral):
            value = operator.index(value)
        else:
            raise TypeError(f"cannot cast {type(value)!r} to {self.name}")
        return value if self.contains(value) else None

    def parse(self, text: str, radix: int = 10) -> int:
        """Parse ``[+-]digits`` in base *radix*; raise ``ValueError`` otherwise."""
        if not 2 <= radix <= 36:
            raise ValueError(f"radix must be in [2, 36], got {radix}")
        match = _INT_PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"invalid integer literal {text!r}")
        sign, digits = match.groups()
        allowed = _DIGITS[:radix]
        if any(char not in allowed for char in digits.lower()):
            raise ValueError(f"invalid digit for radix {radix} in {text!r}")
        if sign == "-" and not self.signed:
            raise ValueError(f"invalid integer literal {text!r} for {self.name}")
        value = int(digits, radix)
        if sign == "-":
            value = -value
        if not self.contains(value):
            raise ValueError(f"{text!r} is out of range for {self.name}")
        return value

    def __repr__(self) -> str:
        return f"<IntegerKind {self.name}>"


class BigIntKind(IntegerKind):
    """Arbitrary-precision integers; nothing ever overflows."""

    name = "bigint"

    def can_hold(self, other: IntegerKind) -> bool:
        return True

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, BigIntKind)

    def __hash__(self) -> int:
        return hash(BigIntKind)


class FixedWidthKind(IntegerKind):
    """Machine integers confined to the range of a NumPy integer dtype."""

    def __init__(self, dtype: Any) -> None:
        dtype = np.dtype(dtype)
        if dtype.kind not in "iu":
            raise TypeError(f"{dtype} is not an integer dtype")
        info = np.iinfo(dtype)
        self.dtype = dtype
        self.name = dtype.name
        self.signed = dtype.kind == "i"
        self.min_value = int(info.min)
        self.max_value = int(info.max)

    @property
    def bits(self) -> int:
        return self.dtype.itemsize * 8

    def can_hold(self, other: IntegerKind) -> bool:
        if not isinstance(other, FixedWidthKind):
            return False
        return bool(np.can_cast(other.dtype, self.dtype, casting="safe"))

    def scalar(self, value: int) -> np.integer:
        """Return *value* as a NumPy scalar of this kind's dtype."""
        return self.dtype.type(self._checked(value, "convert"))

    def __eq__(self, other: Any) -> bool:
        return isinstance(other, FixedWidthKind) and other.dtype == self.dtype

    def __hash__(self) -> int:
        return hash(self.dtype)


BIGINT = BigIntKind()
I8 = FixedWidthKind(np.int8)
I16 = FixedWidthKind(np.int16)
I32 = FixedWidthKind(np.int32)
I64 = FixedWidthKind(np.int64)
U8 = FixedWidthKind(np.uint8)
U16 = FixedWidthKind(np.uint16)
U32 = FixedWidthKind(np.uint32)
U64 = FixedWidthKind(np.uint64)

_FIXED_KINDS = {kind.dtype: kind for kind in (I8, I16, I32, I64, U8, U16, U32, U64)}


def kind_for(dtype: Any) -> FixedWidthKind:
    """Return the fixed-width kind matching a NumPy integer *dtype*."""
    dtype = np.dtype(dtype)
    try:
        return _FIXED_KINDS[dtype]
    except KeyError:
        return FixedWidthKind(dtype)


def kind_of(value: Any) -> IntegerKind:
    """Infer the kind of an integer value: its dtype for NumPy scalars, else :data:`BIGINT`."""
    if isinstance(value, np.integer):
        return kind_for(value.dtype)
    if isinstance(value, numbers.Integral):
        return BIGINT
    raise TypeError(f"expected an integer, got {type(value)!r}")


__all__ = [
    "IntegerKind",
    "BigIntKind",
    "FixedWidthKind",
    "BIGINT",
    "I8",
    "I16",
    "I32",
    "I64",
    "U8",
    "U16",
    "U32",
    "U64",
    "kind_for",
    "kind_of",
]
