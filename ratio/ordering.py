"""Overflow-free comparison and hashing of numerator/denominator pairs.

Comparing ``a/b`` with ``c/d`` through ``a*d`` and ``c*b`` overflows easily on
fixed-width kinds. Instead both pairs are expanded as continued fractions with
floor division and compared term by term, which only ever divides. The same
expansion drives hashing, so pairs with equal value hash alike whether or not
they are reduced.
"""
from __future__ import annotations

from typing import Iterator, Tuple

from .integers import IntegerKind


def _sign(a: int, b: int) -> int:
    return (a > b) - (a < b)


def compare_with_depth(
    kind: IntegerKind, an: int, ad: int, bn: int, bd: int
) -> Tuple[int, int]:
    """Compare ``an/ad`` with ``bn/bd``; return ``(order, steps)``.

    ``order`` is -1, 0 or 1. ``steps`` counts the descent iterations and never
    exceeds the continued-fraction length of either operand plus one.
    """
    flip = 1
    steps = 0
    while True:
        steps += 1
        # Equal denominators: the numerators decide.
        if ad == bd:
            order = _sign(an, bn)
            return flip * (-order if ad < 0 else order), steps

        # Equal numerators: the denominators decide, inversely.
        if an == bn:
            if an == 0:
                return 0, steps
            if (ad < 0) == (bd < 0):
                order = _sign(ad, bd)
                return flip * (order if an < 0 else -order), steps

        a_int, a_rem = kind.div_mod_floor(an, ad)
        b_int, b_rem = kind.div_mod_floor(bn, bd)
        if a_int != b_int:
            return flip * _sign(a_int, b_int), steps
        if a_rem == 0 and b_rem == 0:
            return 0, steps
        if a_rem == 0:
            return -flip, steps
        if b_rem == 0:
            return flip, steps

        # Same integer part: compare the reciprocals of the remainders, reversed.
        an, ad, bn, bd = ad, a_rem, bd, b_rem
        flip = -flip


def compare(kind: IntegerKind, an: int, ad: int, bn: int, bd: int) -> int:
    """Return -1, 0 or 1 as ``an/ad`` is less than, equal to or greater than ``bn/bd``."""
    return compare_with_depth(kind, an, ad, bn, bd)[0]


def continued_fraction(kind: IntegerKind, numer: int, denom: int) -> Iterator[int]:
    """Yield the floor quotients of the continued-fraction expansion of ``numer/denom``."""
    while denom != 0:
        quotient, remainder = kind.div_mod_floor(numer, denom)
        yield quotient
        numer, denom = denom, remainder


def hash_terms(kind: IntegerKind, numer: int, denom: int) -> Tuple[int, ...]:
    """Quotients of the expansion followed by the final (zero) divisor."""
    terms = tuple(continued_fraction(kind, numer, denom))
    return terms + (kind.zero,)


__all__ = ["compare", "compare_with_depth", "continued_fraction", "hash_terms"]
