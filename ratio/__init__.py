"""Exact rational numbers over fixed-width and arbitrary-precision integers."""

from .approx import DEFAULT_MAX_ERROR, DEFAULT_MAX_ITERATIONS
from .arrays import as_ratio_array, zeros, zeros_like
from .errors import ParseRatioError, RatioConversionError, RatioErrorKind
from .integers import (
    BIGINT,
    I8,
    I16,
    I32,
    I64,
    U8,
    U16,
    U32,
    U64,
    BigIntKind,
    FixedWidthKind,
    IntegerKind,
    kind_for,
    kind_of,
)
from .rational import Ratio, approximate_float, rationalize

__all__ = [
    "Ratio",
    "rationalize",
    "approximate_float",
    "DEFAULT_MAX_ERROR",
    "DEFAULT_MAX_ITERATIONS",
    "as_ratio_array",
    "zeros",
    "zeros_like",
    "ParseRatioError",
    "RatioConversionError",
    "RatioErrorKind",
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
