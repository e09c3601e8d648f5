"""Quiz drills: apple pricing, a string transformer and report cards."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

BULK_THRESHOLD = 40
REGULAR_PRICE = 2
BULK_PRICE = 1


def calculate_price_of_apples(quantity: int) -> int:
    """Price of an apple order: cheaper per apple above forty apples."""
    if quantity > BULK_THRESHOLD:
        return quantity * BULK_PRICE
    return quantity * REGULAR_PRICE


@dataclass(frozen=True)
class Uppercase:
    """Upper-case the string."""


@dataclass(frozen=True)
class Trim:
    """Strip whitespace from both ends of the string."""


@dataclass(frozen=True)
class Append:
    """Append "bar" to the string a number of times."""

    count: int

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("append count must not be negative")


Command = Uppercase | Trim | Append


def _apply(text: str, command: Command) -> str:
    match command:
        case Uppercase():
            return text.upper()
        case Trim():
            return text.strip()
        case Append(count=count):
            return text + "bar" * count
    raise TypeError(f"unknown command: {command!r}")


def transformer(items: Iterable[tuple[str, Command]]) -> list[str]:
    """Apply each command to its string."""
    return [_apply(text, command) for text, command in items]


def _format_grade(grade: float | str) -> str:
    if isinstance(grade, float) and grade.is_integer():
        return str(int(grade))
    return str(grade)


@dataclass(frozen=True)
class ReportCard:
    """A student's report card with a numeric or alphabetic grade."""

    grade: float | str
    student_name: str
    student_age: int

    def __post_init__(self) -> None:
        if not 0 <= self.student_age <= 255:
            raise ValueError("student age must be in 0..=255")

    def render(self) -> str:
        return (
            f"{self.student_name} ({self.student_age}) - achieved a grade of "
            f"{_format_grade(self.grade)}"
        )