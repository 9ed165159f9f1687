"""Exact rational numbers over pluggable integer kinds, with NumPy interoperability."""
from __future__ import annotations

import numbers
import operator
from typing import Any, Callable, Optional, Tuple, Union

import numpy as np

from . import approx, ordering
from .errors import ParseRatioError, RatioConversionError, RatioErrorKind
from .integers import BIGINT, IntegerKind, kind_of

IntegerLike = Union[int, numbers.Integral]
NumberLike = Union["Ratio", numbers.Real]


def _ensure_int(value: Any, *, name: str) -> int:
    """Convert *value* to ``int`` when it represents an integer."""
    if isinstance(value, numbers.Integral):
        return operator.index(value)
    raise TypeError(f"{name} must be an integer, got {type(value)!r}")


def _infer_kind(*values: Any) -> IntegerKind:
    kinds = {kind_of(value) for value in values if isinstance(value, np.integer)}
    if not kinds:
        return BIGINT
    if len(kinds) > 1:
        names = ", ".join(sorted(kind.name for kind in kinds))
        raise TypeError(f"cannot mix integer kinds in one ratio: {names}")
    return kinds.pop()


def _fit(kind: IntegerKind, value: Any, *, name: str) -> int:
    value = _ensure_int(value, name=name)
    if not kind.contains(value):
        raise OverflowError(f"{name} {value} is out of range for {kind.name}")
    return value


class Ratio:
    """A numerator/denominator pair compared, hashed and combined by value."""

    __slots__ = ("_numer", "_denom", "_kind")
    __array_priority__ = 1000.0  # Prefer Ratio semantics in NumPy expressions.

    def __init__(
        self,
        numer: IntegerLike = 0,
        denom: IntegerLike = 1,
        *,
        kind: Optional[IntegerKind] = None,
    ) -> None:
        if kind is None:
            kind = _infer_kind(numer, denom)
        num = _fit(kind, numer, name="numerator")
        den = _fit(kind, denom, name="denominator")
        if den == 0:
            raise ZeroDivisionError("denominator == 0")
        num, den = self._normalize(kind, num, den)

        self._numer = num
        self._denom = den
        self._kind = kind

    # ------------------------------------------------------------------
    # Constructors
    @classmethod
    def _raw(cls, kind: IntegerKind, numer: int, denom: int) -> "Ratio":
        obj = object.__new__(cls)
        obj._numer = numer
        obj._denom = denom
        obj._kind = kind
        return obj

    @classmethod
    def _from_parts(cls, kind: IntegerKind, numer: int, denom: int) -> "Ratio":
        if denom == 0:
            raise ZeroDivisionError("denominator == 0")
        return cls._raw(kind, *cls._normalize(kind, numer, denom))

    @classmethod
    def new_raw(
        cls, numer: IntegerLike, denom: IntegerLike, *, kind: Optional[IntegerKind] = None
    ) -> "Ratio":
        """Build a ratio without checking the denominator or reducing.

        Equality, ordering and hashing still treat the result by value.
        """
        if kind is None:
            kind = _infer_kind(numer, denom)
        return cls._raw(
            kind,
            _fit(kind, numer, name="numerator"),
            _fit(kind, denom, name="denominator"),
        )

    @classmethod
    def from_integer(cls, value: IntegerLike, *, kind: Optional[IntegerKind] = None) -> "Ratio":
        if kind is None:
            kind = _infer_kind(value)
        return cls._raw(kind, _fit(kind, value, name="value"), kind.one)

    @classmethod
    def zero(cls, kind: IntegerKind = BIGINT) -> "Ratio":
        return cls._raw(kind, kind.zero, kind.one)

    @classmethod
    def one(cls, kind: IntegerKind = BIGINT) -> "Ratio":
        return cls._raw(kind, kind.one, kind.one)

    @classmethod
    def from_pair(
        cls, pair: Tuple[IntegerLike, IntegerLike], *, kind: Optional[IntegerKind] = None
    ) -> "Ratio":
        """Rebuild a ratio from its ``(numer, denom)`` interchange form.

        The pair is kept as given; a zero denominator is rejected.
        """
        try:
            numer, denom = pair
        except (TypeError, ValueError) as exc:
            raise RatioConversionError(f"expected a (numer, denom) pair, got {pair!r}") from exc
        if kind is None:
            kind = _infer_kind(numer, denom)
        try:
            numer = _fit(kind, numer, name="numerator")
            denom = _fit(kind, denom, name="denominator")
        except (TypeError, OverflowError) as exc:
            raise RatioConversionError(str(exc)) from exc
        if denom == 0:
            raise RatioConversionError("expected a ratio with non-zero denominator, got 0")
        return cls._raw(kind, numer, denom)

    @classmethod
    def from_float(cls, value: Any) -> Optional["Ratio"]:
        """Exact unbounded ratio of a finite float; ``None`` for NaN and infinities."""
        pair = approx.exact_pair(value)
        if pair is None:
            return None
        return cls._from_parts(BIGINT, *pair)

    @classmethod
    def approximate_float(
        cls,
        value: Any,
        kind: IntegerKind,
        *,
        max_error: float = approx.DEFAULT_MAX_ERROR,
        max_iterations: int = approx.DEFAULT_MAX_ITERATIONS,
    ) -> Optional["Ratio"]:
        """Best approximation of *value* whose terms fit the bounded *kind*."""
        pair = approx.approximate(value, kind, max_error, max_iterations)
        if pair is None:
            return None
        return cls._from_parts(kind, *pair)

    @classmethod
    def from_primitive(cls, value: Any, kind: IntegerKind = BIGINT) -> Optional["Ratio"]:
        """Convert an int or float into *kind*, or ``None`` when it has no representation."""
        if isinstance(value, (float, np.floating)):
            if kind.bounded:
                return cls.approximate_float(value, kind)
            return cls.from_float(value)
        if isinstance(value, numbers.Integral):
            cast = kind.cast(value)
            return None if cast is None else cls._raw(kind, cast, kind.one)
        raise TypeError(f"Cannot convert {type(value)!r} to Ratio")

    @classmethod
    def try_from(cls, value: Any, kind: IntegerKind = BIGINT) -> "Ratio":
        """As :meth:`from_primitive`, raising :class:`RatioConversionError` on failure."""
        result = cls.from_primitive(value, kind)
        if result is None:
            raise RatioConversionError(f"{value!r} cannot be represented as a ratio of {kind.name}")
        return result

    @classmethod
    def widen(cls, value: Any, kind: IntegerKind) -> "Ratio":
        """Lossless conversion of a NumPy integer scalar into a wider *kind*."""
        source = kind_of(value)
        if not kind.can_hold(source):
            raise TypeError(f"{source.name} does not widen losslessly to {kind.name}")
        return cls._raw(kind, operator.index(value), kind.one)

    @classmethod
    def from_str(cls, text: str, *, kind: IntegerKind = BIGINT) -> "Ratio":
        """Parse ``"numer"`` or ``"numer/denom"``."""
        return cls.from_str_radix(text, 10, kind=kind)

    @classmethod
    def from_str_radix(cls, text: str, radix: int, *, kind: IntegerKind = BIGINT) -> "Ratio":
        """Parse ``"numer"`` or ``"numer/denom"`` with digits in base *radix*."""
        if not 2 <= radix <= 36:
            raise ValueError(f"radix must be in [2, 36], got {radix}")
        numer_text, slash, denom_text = text.partition("/")
        try:
            numer = kind.parse(numer_text, radix)
            denom = kind.parse(denom_text, radix) if slash else kind.one
        except ValueError:
            raise ParseRatioError(RatioErrorKind.PARSE_ERROR) from None
        if denom == 0:
            raise ParseRatioError(RatioErrorKind.ZERO_DENOMINATOR)
        try:
            return cls._from_parts(kind, numer, denom)
        except OverflowError:
            # "-128/-1" parses as two int8 fields but its value does not fit.
            raise ParseRatioError(RatioErrorKind.PARSE_ERROR) from None

    @classmethod
    def rationalize(cls, value: NumberLike, *, kind: Optional[IntegerKind] = None) -> "Ratio":
        """Coerce a numeric-like value into :class:`Ratio`."""
        if isinstance(value, Ratio):
            if kind is None or kind == value._kind:
                return value
            return value.astype(kind)
        if isinstance(value, numbers.Integral):
            return cls.from_integer(value, kind=kind)
        if isinstance(value, (numbers.Real, np.floating)):
            return cls.try_from(value, BIGINT if kind is None else kind)
        raise TypeError(f"Cannot convert {type(value)!r} to Ratio")

    # ------------------------------------------------------------------
    # Properties and helpers
    @property
    def numer(self) -> int:
        return self._numer

    @property
    def denom(self) -> int:
        return self._denom

    # numbers.Rational spelling
    numerator = numer
    denominator = denom

    @property
    def kind(self) -> IntegerKind:
        return self._kind

    def to_pair(self) -> Tuple[int, int]:
        return self._numer, self._denom

    def to_integer(self) -> int:
        """Integer part, rounded toward zero."""
        return self._kind.div(self._numer, self._denom)

    def is_integer(self) -> bool:
        return self._denom == 1

    def is_zero(self) -> bool:
        return self._numer == 0

    def is_one(self) -> bool:
        return self._numer == self._denom

    def is_positive(self) -> bool:
        return (self._numer > 0 and self._denom > 0) or (self._numer < 0 and self._denom < 0)

    def is_negative(self) -> bool:
        return (self._numer < 0 and self._denom > 0) or (self._numer > 0 and self._denom < 0)

    def astype(self, kind: IntegerKind) -> "Ratio":
        """Return the same pair backed by *kind*."""
        numer = kind.cast(self._numer)
        denom = kind.cast(self._denom)
        if numer is None or denom is None:
            raise RatioConversionError(f"{self} does not fit in {kind.name}")
        return Ratio._raw(kind, numer, denom)

    def reduced(self) -> "Ratio":
        return Ratio._raw(self._kind, *self._normalize(self._kind, self._numer, self._denom))

    def recip(self) -> "Ratio":
        """Return the reciprocal with the sign moved to the numerator."""
        kind = self._kind
        if self._numer == 0:
            raise ZeroDivisionError("numerator == 0")
        if self._numer > 0:
            return Ratio._raw(kind, self._denom, self._numer)
        return Ratio._raw(kind, kind.neg(self._denom), kind.neg(self._numer))

    # ------------------------------------------------------------------
    # Rounding
    def floor(self) -> "Ratio":
        """Round toward minus infinity."""
        quotient, _ = self._kind.div_mod_floor(self._numer, self._denom)
        return Ratio._raw(self._kind, quotient, self._kind.one)

    def ceil(self) -> "Ratio":
        """Round toward plus infinity."""
        kind = self._kind
        quotient, remainder = kind.div_mod_floor(self._numer, self._denom)
        if remainder != 0:
            quotient = kind.add(quotient, kind.one)
        return Ratio._raw(kind, quotient, kind.one)

    def trunc(self) -> "Ratio":
        """Round toward zero."""
        return Ratio._raw(self._kind, self.to_integer(), self._kind.one)

    def fract(self) -> "Ratio":
        """Fractional part; ``self == self.trunc() + self.fract()``."""
        kind = self._kind
        return Ratio._raw(kind, kind.rem(self._numer, self._denom), self._denom)

    def round(self) -> "Ratio":
        """Round to the nearest integer, half-way cases away from zero."""
        kind = self._kind
        rem = kind.rem(self._numer, self._denom)
        # Compare the unsigned fractional part a/b with 1/2 as a >= b/2, using
        # a >= b/2 + 1 for odd b, so b is never doubled.
        a = kind.neg(rem) if rem < 0 else rem
        b = kind.neg(self._denom) if self._denom < 0 else self._denom
        half = kind.div(b, 2)
        if b % 2 == 0:
            half_or_larger = a >= half
        else:
            half_or_larger = a >= kind.add(half, kind.one)

        integer = self.to_integer()
        if half_or_larger:
            if self.is_negative():
                integer = kind.sub(integer, kind.one)
            else:
                integer = kind.add(integer, kind.one)
        return Ratio._raw(kind, integer, kind.one)

    # ------------------------------------------------------------------
    # Sign
    def abs(self) -> "Ratio":
        return -self if self.is_negative() else self

    def signum(self) -> "Ratio":
        if self.is_positive():
            return Ratio.one(self._kind)
        if self.is_zero():
            return Ratio.zero(self._kind)
        return -Ratio.one(self._kind)

    def abs_sub(self, other: "Ratio") -> "Ratio":
        """``self - other`` when positive, zero otherwise."""
        if self <= other:
            return Ratio.zero(self._kind)
        return self - other

    # ------------------------------------------------------------------
    # Numeric protocol
    def __float__(self) -> float:
        return self._numer / self._denom

    def __int__(self) -> int:
        return self.to_integer()

    def __bool__(self) -> bool:
        return self._numer != 0

    def __floor__(self) -> int:
        return self.floor()._numer

    def __ceil__(self) -> int:
        return self.ceil()._numer

    def __trunc__(self) -> int:
        return self.to_integer()

    # ------------------------------------------------------------------
    # Representation
    def __repr__(self) -> str:
        if self._kind == BIGINT:
            return f"Ratio({self._numer}, {self._denom})"
        return f"Ratio({self._numer}, {self._denom}, kind={self._kind.name})"

    def __str__(self) -> str:
        if self._denom == 1:
            return str(self._numer)
        return f"{self._numer}/{self._denom}"

    def __format__(self, format_spec: str) -> str:
        if format_spec in ("", "r", "R"):
            return str(self)
        try:
            return format(float(self), format_spec)
        except (ValueError, TypeError):
            return format(str(self), format_spec)

    # ------------------------------------------------------------------
    # Internal helpers
    @staticmethod
    def _normalize(kind: IntegerKind, num: int, den: int) -> Tuple[int, int]:
        gcd = kind.gcd(num, den)
        num = kind.div(num, gcd)
        den = kind.div(den, gcd)
        # keep the denominator positive
        if den < 0:
            num, den = kind.neg(num), kind.neg(den)
        return num, den

    def _coerce_scalar(self, value: Any) -> Union["Ratio", int]:
        if isinstance(value, Ratio):
            if value._kind != self._kind:
                raise TypeError(
                    f"cannot combine {self._kind.name} and {value._kind.name} ratios"
                )
            return value
        if isinstance(value, numbers.Integral):
            return _fit(self._kind, value, name="operand")
        raise TypeError(f"Cannot interpret {type(value)!r} as Ratio")

    def _as_ratio(self, value: Any) -> "Ratio":
        operand = self._coerce_scalar(value)
        if isinstance(operand, Ratio):
            return operand
        return Ratio._raw(self._kind, operand, self._kind.one)

    def _binary_operation(self, other: Any, ratio_op: Callable, int_op: Callable) -> Any:
        if isinstance(other, np.ndarray):
            vectorised = np.vectorize(
                lambda x: self._apply(self._coerce_scalar(x), ratio_op, int_op),
                otypes=[object],
            )
            return vectorised(other)
        try:
            operand = self._coerce_scalar(other)
        except TypeError:
            return NotImplemented
        return self._apply(operand, ratio_op, int_op)

    def _apply(self, operand: Union["Ratio", int], ratio_op: Callable, int_op: Callable) -> "Ratio":
        if isinstance(operand, Ratio):
            return ratio_op(self, operand)
        return int_op(self, operand)

    def _reflected_operation(self, other: Any, op: Callable) -> Any:
        try:
            left = self._as_ratio(other)
        except TypeError:
            return NotImplemented
        return op(left, self)

    def _coerce_power(self, value: Any) -> int:
        if isinstance(value, numbers.Integral):
            return operator.index(value)
        if isinstance(value, Ratio):
            if not value.is_integer():
                raise ValueError("Exponent must be an integer")
            return value._numer
        raise TypeError("Unsupported exponent type")

    # ------------------------------------------------------------------
    # Arithmetic operators
    # a/b OP c/d = (a*d OP b*c) / (b*d); a/b OP c = (a OP b*c) / b
    def __add__(self, other: Any) -> Any:
        def _add(a: "Ratio", b: "Ratio") -> "Ratio":
            k = a._kind
            return Ratio._from_parts(
                k,
                k.add(k.mul(a._numer, b._denom), k.mul(a._denom, b._numer)),
                k.mul(a._denom, b._denom),
            )

        def _add_int(a: "Ratio", c: int) -> "Ratio":
            k = a._kind
            return Ratio._from_parts(k, k.add(a._numer, k.mul(a._denom, c)), a._denom)

        return self._binary_operation(other, _add, _add_int)

    def __radd__(self, other: Any) -> Any:
        return self.__add__(other)

    def __sub__(self, other: Any) -> Any:
        def _sub(a: "Ratio", b: "Ratio") -> "Ratio":
            k = a._kind
            return Ratio._from_parts(
                k,
                k.sub(k.mul(a._numer, b._denom), k.mul(a._denom, b._numer)),
                k.mul(a._denom, b._denom),
            )

        def _sub_int(a: "Ratio", c: int) -> "Ratio":
            k = a._kind
            return Ratio._from_parts(k, k.sub(a._numer, k.mul(a._denom, c)), a._denom)

        return self._binary_operation(other, _sub, _sub_int)

    def __rsub__(self, other: Any) -> Any:
        return self._reflected_operation(other, operator.sub)

    def __mul__(self, other: Any) -> Any:
        def _mul(a: "Ratio", b: "Ratio") -> "Ratio":
            k = a._kind
            return Ratio._from_parts(k, k.mul(a._numer, b._numer), k.mul(a._denom, b._denom))

        def _mul_int(a: "Ratio", c: int) -> "Ratio":
            k = a._kind
            return Ratio._from_parts(k, k.mul(a._numer, c), a._denom)

        return self._binary_operation(other, _mul, _mul_int)

    def __rmul__(self, other: Any) -> Any:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Any:
        def _truediv(a: "Ratio", b: "Ratio") -> "Ratio":
            if b._numer == 0:
                raise ZeroDivisionError("division by zero")
            k = a._kind
            return Ratio._from_parts(k, k.mul(a._numer, b._denom), k.mul(a._denom, b._numer))

        def _truediv_int(a: "Ratio", c: int) -> "Ratio":
            if c == 0:
                raise ZeroDivisionError("division by zero")
            k = a._kind
            return Ratio._from_parts(k, a._numer, k.mul(a._denom, c))

        return self._binary_operation(other, _truediv, _truediv_int)

    def __rtruediv__(self, other: Any) -> Any:
        return self._reflected_operation(other, operator.truediv)

    def __mod__(self, other: Any) -> Any:
        # Remainder of truncating division, sign of the dividend.
        def _mod(a: "Ratio", b: "Ratio") -> "Ratio":
            if b._numer == 0:
                raise ZeroDivisionError("division by zero")
            k = a._kind
            return Ratio._from_parts(
                k,
                k.rem(k.mul(a._numer, b._denom), k.mul(a._denom, b._numer)),
                k.mul(a._denom, b._denom),
            )

        def _mod_int(a: "Ratio", c: int) -> "Ratio":
            if c == 0:
                raise ZeroDivisionError("division by zero")
            k = a._kind
            return Ratio._from_parts(k, k.rem(a._numer, k.mul(a._denom, c)), a._denom)

        return self._binary_operation(other, _mod, _mod_int)

    def __rmod__(self, other: Any) -> Any:
        return self._reflected_operation(other, operator.mod)

    # Compound assignment rebinds the name to a fresh reduced value; the
    # left operand is never updated field by field.
    __iadd__ = __add__
    __isub__ = __sub__
    __imul__ = __mul__
    __itruediv__ = __truediv__
    __imod__ = __mod__

    def __pow__(self, exponent: Any) -> Any:
        if isinstance(exponent, np.ndarray):
            vectorised = np.vectorize(lambda x: self.__pow__(x), otypes=[object])
            return vectorised(exponent)
        try:
            power = self._coerce_power(exponent)
        except TypeError:
            return NotImplemented
        return self.pow(power)

    def pow(self, exponent: int) -> "Ratio":
        kind = self._kind
        if exponent == 0:
            return Ratio.one(kind)
        base = self
        if exponent < 0:
            if self._numer == 0:
                raise ZeroDivisionError("0 cannot be raised to a negative power")
            base = self.recip()
            exponent = -exponent
        return Ratio._raw(
            kind,
            kind.pow(base._numer, exponent),
            kind.pow(base._denom, exponent),
        )

    def __neg__(self) -> "Ratio":
        return Ratio._raw(self._kind, self._kind.neg(self._numer), self._denom)

    def __pos__(self) -> "Ratio":
        return self

    def __abs__(self) -> "Ratio":
        return self.abs()

    # ------------------------------------------------------------------
    # Checked arithmetic: None instead of an overflow
    @classmethod
    def _checked_from_parts(cls, kind: IntegerKind, num: int, den: int) -> Optional["Ratio"]:
        if den == 0:
            return None
        gcd = kind.checked_gcd(num, den)
        if gcd is None:
            return None
        num = kind.div(num, gcd)
        den = kind.div(den, gcd)
        if den < 0:
            num = kind.checked_neg(num)
            den = kind.checked_neg(den)
            if num is None or den is None:
                return None
        return cls._raw(kind, num, den)

    def _checked_operand(self, other: Any) -> Optional["Ratio"]:
        # An integer operand outside the kind counts as an overflow.
        try:
            return self._as_ratio(other)
        except OverflowError:
            return None

    def _checked_combine(self, other: Any, combine: Callable) -> Optional["Ratio"]:
        kind = self._kind
        b = self._checked_operand(other)
        if b is None:
            return None
        ad = kind.checked_mul(self._numer, b._denom)
        if ad is None:
            return None
        bc = kind.checked_mul(self._denom, b._numer)
        if bc is None:
            return None
        bd = kind.checked_mul(self._denom, b._denom)
        if bd is None:
            return None
        numer = combine(ad, bc)
        if numer is None:
            return None
        return Ratio._checked_from_parts(kind, numer, bd)

    def checked_add(self, other: Any) -> Optional["Ratio"]:
        return self._checked_combine(other, self._kind.checked_add)

    def checked_sub(self, other: Any) -> Optional["Ratio"]:
        return self._checked_combine(other, self._kind.checked_sub)

    def checked_mul(self, other: Any) -> Optional["Ratio"]:
        kind = self._kind
        b = self._checked_operand(other)
        if b is None:
            return None
        numer = kind.checked_mul(self._numer, b._numer)
        if numer is None:
            return None
        denom = kind.checked_mul(self._denom, b._denom)
        if denom is None:
            return None
        return Ratio._checked_from_parts(kind, numer, denom)

    def checked_div(self, other: Any) -> Optional["Ratio"]:
        kind = self._kind
        b = self._checked_operand(other)
        if b is None:
            return None
        bc = kind.checked_mul(self._denom, b._numer)
        if bc is None or bc == 0:
            return None
        numer = kind.checked_mul(self._numer, b._denom)
        if numer is None:
            return None
        return Ratio._checked_from_parts(kind, numer, bc)

    # ------------------------------------------------------------------
    # Comparisons
    def _compare(self, other: Any) -> Optional[int]:
        if isinstance(other, Ratio):
            if other._kind != self._kind:
                return None
            return ordering.compare(
                self._kind, self._numer, self._denom, other._numer, other._denom
            )
        if isinstance(other, numbers.Integral):
            # Bare integers may lie outside the kind, so compare unbounded.
            return ordering.compare(
                BIGINT, self._numer, self._denom, operator.index(other), 1
            )
        return None

    def cmp(self, other: Union["Ratio", IntegerLike]) -> int:
        """Return -1, 0 or 1 as ``self`` is less than, equal to or greater than *other*."""
        order = self._compare(other)
        if order is None:
            raise TypeError(f"cannot compare Ratio with {type(other)!r}")
        return order

    def __eq__(self, other: Any) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order == 0

    def __lt__(self, other: Any) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order < 0

    def __le__(self, other: Any) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order <= 0

    def __gt__(self, other: Any) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order > 0

    def __ge__(self, other: Any) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order >= 0

    def __hash__(self) -> int:
        # Must agree with __eq__ for unreduced pairs and for bare integers.
        terms = ordering.hash_terms(self._kind, self._numer, self._denom)
        if len(terms) == 2:
            return hash(terms[0])
        return hash(terms)

    # ------------------------------------------------------------------
    # NumPy interoperability
    _UFUNC_DISPATCH = {
        np.add: operator.add,
        np.subtract: operator.sub,
        np.multiply: operator.mul,
        np.divide: operator.truediv,
        np.true_divide: operator.truediv,
        np.remainder: operator.mod,
        np.negative: operator.neg,
        np.positive: operator.pos,
        np.absolute: operator.abs,
        np.power: operator.pow,
    }

    def __array_ufunc__(self, ufunc, method, *inputs, **kwargs):
        if method != "__call__":
            return NotImplemented
        if kwargs.get("out") is not None:
            raise NotImplementedError("`out` argument is not supported for Ratio ufuncs")
        op = self._UFUNC_DISPATCH.get(ufunc)
        if op is None:
            return NotImplemented

        coerced = []
        has_array = False
        for value in inputs:
            if isinstance(value, Ratio):
                coerced.append(value)
            elif isinstance(value, np.ndarray):
                vectorised = np.vectorize(self._coerce_scalar, otypes=[object])
                coerced.append(vectorised(value))
                has_array = True
            else:
                coerced.append(self._coerce_scalar(value))
        if has_array:
            vectorised = np.vectorize(lambda *args: op(*args), otypes=[object])
            return vectorised(*coerced)
        return op(*coerced)


def rationalize(value: NumberLike, *, kind: Optional[IntegerKind] = None) -> Ratio:
    """Public helper to convert *value* into :class:`Ratio`."""

    return Ratio.rationalize(value, kind=kind)


def approximate_float(
    value: Any,
    kind: IntegerKind,
    *,
    max_error: float = approx.DEFAULT_MAX_ERROR,
    max_iterations: int = approx.DEFAULT_MAX_ITERATIONS,
) -> Optional[Ratio]:
    """Best rational approximation of *value* in the bounded *kind*, or ``None``."""

    return Ratio.approximate_float(
        value, kind, max_error=max_error, max_iterations=max_iterations
    )


__all__ = ["Ratio", "rationalize", "approximate_float"]
