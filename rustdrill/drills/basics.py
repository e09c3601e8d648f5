"""Basic drills: comparisons, lookups, optional values, strings, lists and wrappers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, MutableSequence, Sequence, TypeVar

T = TypeVar("T")

_U16_MAX = (1 << 16) - 1
_COLOR_WORDS = frozenset({"green", "blue", "red"})
_HABITATS = {"crab": "Beach", "gopher": "Burrow", "snake": "Desert"}
_FIZZ = {"fizz": "foo", "fuzz": "bar"}


def bigger(a: int, b: int) -> int:
    """The larger of two numbers."""
    return a if a > b else b


def foo_if_fizz(fizzish: str) -> str:
    """"foo" for "fizz", "bar" for "fuzz", otherwise "baz"."""
    return _FIZZ.get(fizzish, "baz")


def animal_habitat(animal: str) -> str:
    """Where the animal lives, or "Unknown"."""
    return _HABITATS.get(animal, "Unknown")


def is_even(num: int) -> bool:
    """True when the number is divisible by two."""
    return num % 2 == 0


def sale_price(price: int) -> int:
    """Even prices get 10 off, odd prices get 3 off."""
    return price - 10 if is_even(price) else price - 3


def maybe_icecream(time_of_day: int) -> int | None:
    """Ice cream left at an hour of the day; None for hours past 23."""
    if not 0 <= time_of_day <= _U16_MAX:
        raise ValueError("time of day must be in 0..=65535")
    if time_of_day > 23:
        return None
    if time_of_day < 22:
        return 5
    return 0


def is_a_color_word(attempt: str) -> bool:
    """True for the colour words green, blue and red."""
    return attempt in _COLOR_WORDS


def trim_me(text: str) -> str:
    """Remove whitespace from both ends."""
    return text.strip()


def compose_me(text: str) -> str:
    """Add " world!" to the text."""
    return f"{text} world!"


def replace_me(text: str) -> str:
    """Replace every "cars" with "balloons"."""
    return text.replace("cars", "balloons")


def vec_loop(values: MutableSequence[int]) -> MutableSequence[int]:
    """Double every element in place and return the same sequence."""
    values[:] = [value * 2 for value in values]
    return values


def vec_map(values: Sequence[int]) -> list[int]:
    """A new list with every element doubled."""
    return [value * 2 for value in values]


@dataclass(frozen=True)
class Wrapper(Generic[T]):
    """Holds a single value of any type."""

    value: T