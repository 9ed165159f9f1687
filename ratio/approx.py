"""Best rational approximation of floats by continued-fraction convergents.

The engine works on numerator/denominator pairs of a bounded integer kind and
never lets a convergent leave the kind's range. Float arithmetic happens in
the precision of the input: ``numpy.float32`` values iterate in float32,
everything else in float64.
"""
from __future__ import annotations

import logging
from typing import Any, Optional, Tuple

import numpy as np

from .integers import IntegerKind

logger = logging.getLogger(__name__)

# Tighter than any float can resolve; the iteration cap is what usually stops.
DEFAULT_MAX_ERROR = 10e-20
DEFAULT_MAX_ITERATIONS = 30

Pair = Tuple[int, int]


def _float_type(value: Any):
    if isinstance(value, np.floating):
        return type(value)
    return np.float64


def _require_bounded(kind: IntegerKind) -> int:
    if kind.max_value is None:
        raise TypeError(f"float approximation needs a bounded kind, got {kind.name}")
    return kind.max_value


def approximate_unsigned(
    value: Any,
    kind: IntegerKind,
    max_error: float = DEFAULT_MAX_ERROR,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> Optional[Pair]:
    """Approximate a non-negative float; ``None`` for negative, NaN or out-of-range input."""
    t_max = _require_bounded(kind)
    ftype = _float_type(value)
    val = ftype(value)
    if np.isnan(val) or val < 0:
        return None

    t_max_f = ftype(t_max)
    if not np.isfinite(t_max_f):
        return None
    # Remainders below 1/max_value would blow up on the next reciprocal.
    epsilon = ftype(1) / t_max_f
    if val > t_max_f:
        return None

    max_error = ftype(max_error)
    one = ftype(1)
    q = val
    n0, d0 = kind.zero, kind.one
    n1, d1 = kind.one, kind.zero

    for iteration in range(max_iterations):
        a = kind.cast(q)
        if a is None:
            logger.debug("%s: term %r does not fit %s", val, q, kind.name)
            break
        f = q - ftype(a)

        if a != 0 and (
            n1 > t_max // a
            or d1 > t_max // a
            or a * n1 > t_max - n0
            or a * d1 > t_max - d0
        ):
            logger.debug(
                "%s: convergent %d would overflow %s, keeping %d/%d",
                val, iteration, kind.name, n1, d1,
            )
            break

        n = a * n1 + n0
        d = a * d1 + d0
        n0, d0 = n1, d1
        n1, d1 = n, d

        # Reducing every step keeps later convergents inside the range.
        g = kind.gcd(n1, d1)
        if g != 0:
            n1 = kind.div(n1, g)
            d1 = kind.div(d1, g)

        if abs(ftype(n) / ftype(d) - val) < max_error:
            break
        if f < epsilon:
            break
        q = one / f
    else:
        logger.debug("%s: iteration budget of %d exhausted", val, max_iterations)

    if d1 == 0:
        return None
    return n1, d1


def approximate(
    value: Any,
    kind: IntegerKind,
    max_error: float = DEFAULT_MAX_ERROR,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> Optional[Pair]:
    """Approximate *value* as a pair of *kind*, handling the sign for signed kinds."""
    if not kind.signed:
        return approximate_unsigned(value, kind, max_error, max_iterations)

    ftype = _float_type(value)
    val = ftype(value)
    negative = bool(np.signbit(val))
    pair = approximate_unsigned(abs(val), kind, max_error, max_iterations)
    if pair is None:
        return None
    numer, denom = pair
    if negative:
        numer = kind.neg(numer)
    return numer, denom


def exact_pair(value: Any) -> Optional[Pair]:
    """Exact numerator/denominator of a finite float, or ``None`` for NaN and infinities."""
    val = float(value)
    if not np.isfinite(val):
        return None
    return val.as_integer_ratio()


__all__ = [
    "DEFAULT_MAX_ERROR",
    "DEFAULT_MAX_ITERATIONS",
    "approximate",
    "approximate_unsigned",
    "exact_pair",
]
