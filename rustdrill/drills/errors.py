"""Worked answers to the error-handling drills."""

from __future__ import annotations

from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_PROCESSING_FEE = 1
_COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width, with strict digit rules."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] in "+-" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(text)
    limit = 1 << (bits - 1)
    if value >= limit:
        raise ValueError("number too large to fit in target type")
    if value < -limit:
        raise ValueError("number too small to fit in target type")
    return value


def generate_nametag_text(name: str) -> str:
    """Return the nametag text; raise ValueError for an empty name."""
    if not name:
        raise ValueError("`name` was empty; it must be nonempty.")
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Cost of the typed quantity at 5 tokens each plus a fee of 1.

    Raises ValueError when the quantity is not a 32-bit integer.
    """
    qty = _parse_int(item_quantity, 32)
    cost = qty * _COST_PER_ITEM + _PROCESSING_FEE
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("total cost does not fit in 32 bits")
    return cost


def spend_tokens(tokens: int, item_quantity: str) -> int:
    """Return the tokens left after buying; raise ValueError if they do not suffice."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise ValueError("You can't afford that many!")
    return tokens - cost


class CreationError(ValueError):
    """A value cannot be a positive non-zero integer."""

    NEGATIVE = "negative"
    ZERO = "zero"

    _DESCRIPTIONS = {NEGATIVE: "number is negative", ZERO: "number is zero"}

    def __init__(self, kind: str) -> None:
        if kind not in self._DESCRIPTIONS:
            raise ValueError(f"unknown creation error kind: {kind!r}")
        super().__init__(self._DESCRIPTIONS[kind])
        self.kind = kind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CreationError):
            return NotImplemented
        return self.kind == other.kind

    def __hash__(self) -> int:
        return hash((CreationError, self.kind))


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer greater than zero."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise CreationError(CreationError.NEGATIVE)
        if self.value == 0:
            raise CreationError(CreationError.ZERO)


class ParsePosNonzeroError(ValueError):
    """Text could not be turned into a positive non-zero integer."""

    def __init__(self, source: Exception) -> None:
        super().__init__(str(source))
        self.source = source

    @classmethod
    def from_creation(cls, err: CreationError) -> "ParsePosNonzeroError":
        """Wrap a creation error."""
        return cls(err)

    @classmethod
    def from_parse_int(cls, err: ValueError) -> "ParsePosNonzeroError":
        """Wrap an integer parsing error."""
        return cls(err)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ParsePosNonzeroError):
            return NotImplemented
        if isinstance(self.source, CreationError) or isinstance(other.source, CreationError):
            return self.source == other.source
        return str(self.source) == str(other.source)

    def __hash__(self) -> int:
        return hash((ParsePosNonzeroError, str(self.source)))


def parse_pos_nonzero(s: str) -> PositiveNonzeroInteger:
    """Parse text into a PositiveNonzeroInteger; raise ParsePosNonzeroError on failure."""
    try:
        x = _parse_int(s, 64)
    except ValueError as exc:
        raise ParsePosNonzeroError.from_parse_int(exc) from exc
    try:
        return PositiveNonzeroInteger(x)
    except CreationError as exc:
        raise ParsePosNonzeroError.from_creation(exc) from exc