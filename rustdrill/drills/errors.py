"""Error handling drills: name tags, token purchases and positive integers."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
PROCESSING_FEE = 1
COST_PER_ITEM = 5


def _parse_int(text: str, bits: int) -> int:
    """Parse a signed integer of the given width with strict rules."""
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


class EmptyNameError(ValueError):
    """A name tag was requested for an empty name."""

    def __init__(self) -> None:
        super().__init__("`name` was empty; it must be nonempty.")


def generate_nametag_text(name: str) -> str:
    """Text for a name tag; empty names are refused."""
    if not name:
        raise EmptyNameError()
    return f"Hi! My name is {name}"


def total_cost(item_quantity: str) -> int:
    """Token cost of buying the typed-in quantity of items."""
    quantity = _parse_int(item_quantity, 32)
    cost = quantity * COST_PER_ITEM + PROCESSING_FEE
    if not -(1 << 31) <= cost < (1 << 31):
        raise OverflowError("cost does not fit in a 32-bit integer")
    return cost


class InsufficientTokensError(ValueError):
    """The player cannot afford the purchase."""

    def __init__(self, cost: int, tokens: int) -> None:
        super().__init__("You can't afford that many!")
        self.cost = cost
        self.tokens = tokens


def buy_items(tokens: int, item_quantity: str) -> int:
    """Spend tokens on the typed-in quantity and return what remains."""
    cost = total_cost(item_quantity)
    if cost > tokens:
        raise InsufficientTokensError(cost, tokens)
    return tokens - cost


class CreationErrorKind(enum.Enum):
    """Why a value is not a positive non-zero integer."""

    NEGATIVE = "number is negative"
    ZERO = "number is zero"


class CreationError(ValueError):
    """A positive non-zero integer could not be created."""

    def __init__(self, kind: CreationErrorKind) -> None:
        super().__init__(kind.value)
        self.kind = kind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class PositiveNonzeroInteger:
    """An integer known to be greater than zero."""

    value: int

    @classmethod
    def new(cls, value: int) -> PositiveNonzeroInteger:
        if value < 0:
            raise CreationError(CreationErrorKind.NEGATIVE)
        if value == 0:
            raise CreationError(CreationErrorKind.ZERO)
        return cls(value)


class ParsePosNonzeroError(ValueError):
    """Text was not a number, or not a positive non-zero one; see ``cause``."""

    def __init__(self, cause: ValueError) -> None:
        super().__init__(str(cause))
        self.cause = cause


def parse_pos_nonzero(text: str) -> PositiveNonzeroInteger:
    """Parse text into a positive non-zero integer."""
    try:
        value = _parse_int(text, 64)
    except ValueError as err:
        raise ParsePosNonzeroError(err) from err
    try:
        return PositiveNonzeroInteger.new(value)
    except CreationError as err:
        raise ParsePosNonzeroError(err) from err