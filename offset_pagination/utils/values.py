"""Bound validators for pagination input.

A bound validator answers two questions about an untrusted candidate value:
is it a permitted value (``accepts``), and what integer does it normalize to
(``convert``). ``OffsetLimitPaginator`` delegates every page size decision to
one of these, so restricting page sizes to a range, a fixed set, or anything
custom is a matter of passing a different object.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class BoundValidator(Protocol):
    def accepts(self, value: Any) -> bool: ...

    def convert(self, value: Any) -> int: ...


def parse_int(value: Any) -> int | None:
    """Interpret ``value`` as an integer, or return None if it is not numeric.

    Fractional values are truncated toward zero. Strings are stripped and may
    use decimal or scientific notation ("20", " 20.9 ", "1e3").
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, Decimal):
        return int(value) if value.is_finite() else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if math.isfinite(number) else None
    return None


@dataclass(frozen=True)
class IntValue:
    def accepts(self, value: Any) -> bool:
        return parse_int(value) is not None

    def convert(self, value: Any) -> int:
        result = parse_int(value)
        if result is None:
            raise ValueError(f"not an integer value: {value!r}")
        return result


@dataclass(frozen=True)
class Boundary:
    value: int
    include: bool = True

    @classmethod
    def including(cls, value: int) -> "Boundary":
        return cls(value=value, include=True)

    @classmethod
    def excluding(cls, value: int) -> "Boundary":
        return cls(value=value, include=False)


@dataclass(frozen=True)
class RangeValue:
    base: BoundValidator
    lower: Boundary | None = None
    upper: Boundary | None = None

    def accepts(self, value: Any) -> bool:
        if not self.base.accepts(value):
            return False
        number = self.base.convert(value)
        if self.lower is not None:
            if number < self.lower.value or (number == self.lower.value and not self.lower.include):
                return False
        if self.upper is not None:
            if number > self.upper.value or (number == self.upper.value and not self.upper.include):
                return False
        return True

    def convert(self, value: Any) -> int:
        return self.base.convert(value)


@dataclass(frozen=True)
class EnumValue:
    base: BoundValidator
    allowed: frozenset[int]

    def __post_init__(self) -> None:
        if not self.allowed:
            raise ValueError("at least one allowed value is required")

    @classmethod
    def of(cls, base: BoundValidator, *allowed: int) -> "EnumValue":
        return cls(base=base, allowed=frozenset(allowed))

    def accepts(self, value: Any) -> bool:
        return self.base.accepts(value) and self.base.convert(value) in self.allowed

    def convert(self, value: Any) -> int:
        return self.base.convert(value)
