"""Hash map drills: fruit baskets and a football scores table."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")
_U8_MAX = 255


def _parse_u8(text: str) -> int:
    """Parse an unsigned 8-bit integer with strict rules."""
    if not text:
        raise ValueError("cannot parse integer from empty string")
    digits = text[1:] if text[0] == "+" else text
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("invalid digit found in string")
    value = int(digits)
    if value > _U8_MAX:
        raise ValueError("number too large to fit in target type")
    return value


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds of fruit and at least five pieces."""
    basket = {"banana": 2}
    basket["apple"] = 3
    basket["mango"] = 1
    return basket


class Fruit(enum.Enum):
    """Kinds of fruit that can go into the cake basket."""

    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


_NEW_FRUIT_COUNT = 1


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add every kind of fruit missing from the basket, leaving present ones alone."""
    for fruit in Fruit:
        basket.setdefault(fruit, _NEW_FRUIT_COUNT)


@dataclass
class Team:
    """Goals a team has scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0

    def record(self, scored: int, conceded: int) -> None:
        scored_total = self.goals_scored + scored
        conceded_total = self.goals_conceded + conceded
        if scored_total > _U8_MAX or conceded_total > _U8_MAX:
            raise OverflowError("goal count does not fit in an 8-bit integer")
        self.goals_scored = scored_total
        self.goals_conceded = conceded_total


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of "<team_1>,<team_2>,<goals_1>,<goals_2>"."""
    scores: dict[str, Team] = {}
    for line in _lines(results):
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1_name, team_2_name = fields[0], fields[1]
        team_1_score = _parse_u8(fields[2])
        team_2_score = _parse_u8(fields[3])
        scores.setdefault(team_1_name, Team()).record(team_1_score, team_2_score)
        scores.setdefault(team_2_name, Team()).record(team_2_score, team_1_score)
    return scores