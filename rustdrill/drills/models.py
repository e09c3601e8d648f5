"""Modelling drills: orders, packages, a message machine, traits, lists and copy-on-write."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import singledispatch
from typing import Iterator, Sequence

_U8_RANGE = range(256)


def _check_u8(*values: int) -> None:
    if not all(value in _U8_RANGE for value in values):
        raise ValueError("value must be in 0..=255")


@dataclass(frozen=True)
class Order:
    """A customer order."""

    name: str
    year: int
    made_by_phone: bool
    made_by_mobile: bool
    made_by_email: bool
    item_number: int
    count: int


def create_order_template() -> Order:
    """A template order to derive new orders from."""
    return Order(
        name="Bob",
        year=2019,
        made_by_phone=False,
        made_by_mobile=False,
        made_by_email=True,
        item_number=123,
        count=0,
    )


MIN_PACKAGE_WEIGHT = 10


@dataclass(frozen=True)
class Package:
    """A parcel sent between two countries."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < MIN_PACKAGE_WEIGHT:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        return self.weight_in_grams * cents_per_gram


@dataclass(frozen=True)
class Point:
    """A position with 8-bit coordinates."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check_u8(self.x, self.y)


@dataclass(frozen=True)
class ChangeColor:
    """Set the machine's colour."""

    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        _check_u8(self.red, self.green, self.blue)


@dataclass(frozen=True)
class Echo:
    """Set the machine's message."""

    text: str


@dataclass(frozen=True)
class Move:
    """Move the machine to a point."""

    point: Point


@dataclass(frozen=True)
class Quit:
    """Stop the machine."""


Message = ChangeColor | Echo | Move | Quit


@dataclass
class MachineState:
    """State changed by processing messages."""

    color: tuple[int, int, int] = (0, 0, 0)
    position: Point = field(default_factory=lambda: Point(0, 0))
    quit: bool = False
    message: str = ""

    def process(self, message: Message) -> None:
        match message:
            case ChangeColor(red=red, green=green, blue=blue):
                self.color = (red, green, blue)
            case Echo(text=text):
                self.message = text
            case Move(point=point):
                self.position = point
            case Quit():
                self.quit = True
            case _:
                raise TypeError(f"unknown message: {message!r}")


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return value + "Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Software that carries licensing information."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass(frozen=True)
class SomeSoftware(Licensed):
    """Software with a numeric version."""

    version_number: int


@dataclass(frozen=True)
class OtherSoftware(Licensed):
    """Software with a textual version."""

    version_number: str


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """A cons cell: a value followed by the rest of the list."""

    value: int
    rest: Cons | Nil


def create_empty_list() -> Nil:
    """The empty cons list."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a single value."""
    return Cons(1, Nil())


class Cow:
    """Read access to borrowed data, copied on first mutation."""

    def __init__(self, data: Sequence[int], owned: bool) -> None:
        self._data = data
        self._owned = owned

    @classmethod
    def borrowed(cls, data: Sequence[int]) -> Cow:
        return cls(data, owned=False)

    @classmethod
    def owned_from(cls, data: Sequence[int]) -> Cow:
        return cls(data if isinstance(data, list) else list(data), owned=True)

    @property
    def is_owned(self) -> bool:
        return self._owned

    def to_mut(self) -> list[int]:
        """Mutable access, copying borrowed data first."""
        if not self._owned:
            self._data = list(self._data)
            self._owned = True
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> int:
        return self._data[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cow):
            return NotImplemented
        return list(self._data) == list(other._data)

    def __repr__(self) -> str:
        kind = "Owned" if self._owned else "Borrowed"
        return f"Cow.{kind}({list(self._data)!r})"


def abs_all(cow: Cow) -> Cow:
    """Make every element non-negative, copying only if a change is needed."""
    for index, value in enumerate(list(cow)):
        if value < 0:
            cow.to_mut()[index] = -value
    return cow


@dataclass(frozen=True)
class Rectangle:
    """A rectangle with positive sides."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle width and height cannot be negative!")