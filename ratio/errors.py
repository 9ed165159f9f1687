"""Exceptions raised while parsing or converting ratios."""
from __future__ import annotations

import enum
from typing import Any


class RatioErrorKind(enum.Enum):
    PARSE_ERROR = "failed to parse integer"
    ZERO_DENOMINATOR = "zero value denominator"

    @property
    def description(self) -> str:
        return self.value


class ParseRatioError(ValueError):
    """Text could not be turned into a ratio."""

    def __init__(self, kind: RatioErrorKind) -> None:
        super().__init__(kind.description)
        self.kind = kind

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ParseRatioError):
            return NotImplemented
        return self.kind is other.kind

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return f"ParseRatioError({self.kind.name})"


class RatioConversionError(ValueError):
    """A number or pair has no representation as a ratio of the requested kind."""


__all__ = ["RatioErrorKind", "ParseRatioError", "RatioConversionError"]
