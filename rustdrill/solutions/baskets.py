"""Worked answers to the hash map exercises."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_U8_RANGE = range(0, 256)


def fruit_basket() -> dict[str, int]:
    """A basket with at least three kinds and five fruits in total."""
    return {"banana": 2, "apple": 3, "mango": 1}


class Fruit(enum.Enum):
    APPLE = "apple"
    BANANA = "banana"
    MANGO = "mango"
    LYCHEE = "lychee"
    PINEAPPLE = "pineapple"


def fill_fruit_basket(basket: dict[Fruit, int]) -> None:
    """Add one of each missing kind, leaving kinds already present untouched."""
    for fruit in Fruit:
        basket.setdefault(fruit, 1)


@dataclass
class Team:
    """Goals a team scored and conceded."""

    goals_scored: int = 0
    goals_conceded: int = 0


def _parse_goals(text: str) -> int:
    if not text.isascii() or not text.isdigit() or int(text) not in _U8_RANGE:
        raise ValueError(f"invalid goal count: {text!r}")
    return int(text)


def build_scores_table(results: str) -> dict[str, Team]:
    """Build a table from lines of "team1,team2,goals1,goals2"."""
    scores: dict[str, Team] = {}
    for line in results.splitlines():
        fields = line.split(",")
        if len(fields) < 4:
            raise ValueError(f"malformed result line: {line!r}")
        team_1, team_2 = fields[0], fields[1]
        goals_1, goals_2 = _parse_goals(fields[2]), _parse_goals(fields[3])

        first = scores.setdefault(team_1, Team())
        first.goals_scored += goals_1
        first.goals_conceded += goals_2

        second = scores.setdefault(team_2, Team())
        second.goals_scored += goals_2
        second.goals_conceded += goals_1
    return scores