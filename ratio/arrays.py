"""Object arrays of :class:`~ratio.Ratio` values."""
from __future__ import annotations

from typing import Any, Optional

import numpy as np

from .integers import BIGINT, IntegerKind, kind_for
from .rational import Ratio


def as_ratio_array(
    values: Any,
    *,
    kind: Optional[IntegerKind] = None,
    copy: bool = True,
) -> np.ndarray:
    """Return a ``numpy.ndarray`` of :class:`Ratio` values.

    ``values`` can be any iterable containing numeric-like entries or an existing
    NumPy array. Integer arrays keep their width unless ``kind`` says otherwise.
    When ``copy`` is ``False`` and ``values`` is already an object array of
    ratios of the requested kind, the original array is returned.
    """

    if isinstance(values, np.ndarray):
        array = values.copy() if copy else values
        if array.dtype == object and all(
            isinstance(item, Ratio) and (kind is None or item.kind == kind)
            for item in array.flat
        ):
            return array
        if kind is None and array.dtype.kind in "iu":
            kind = kind_for(array.dtype)
        vectorised = np.vectorize(
            lambda item: Ratio.rationalize(item, kind=kind),
            otypes=[object],
        )
        return vectorised(array)

    if isinstance(values, (list, tuple)):
        coerced = [Ratio.rationalize(item, kind=kind) for item in values]
        return np.array(coerced, dtype=object)

    return as_ratio_array(list(values), kind=kind, copy=copy)


def zeros(length: int, *, kind: IntegerKind = BIGINT) -> np.ndarray:
    """Return a one-dimensional array of length ``length`` filled with zeros."""

    if length < 0:
        raise ValueError("length must be non-negative")
    return as_ratio_array([Ratio.zero(kind) for _ in range(length)], kind=kind)


def zeros_like(values: Any, *, kind: Optional[IntegerKind] = None) -> np.ndarray:
    """Return a zero-filled array that matches the shape of ``values``."""

    array = as_ratio_array(values, kind=kind)
    if kind is None:
        kinds = {item.kind for item in array.flat}
        kind = kinds.pop() if len(kinds) == 1 else BIGINT
    zeros_flat = [Ratio.zero(kind) for _ in range(array.size)]
    return np.array(zeros_flat, dtype=object).reshape(array.shape)


__all__ = ["as_ratio_array", "zeros", "zeros_like"]
