"""Stamina and knowledge costs per command."""

from __future__ import annotations

from dataclasses import dataclass

from medrpg import config
from medrpg.domain.enums import CommandName


@dataclass(frozen=True)
class CommandCost:
    stamina: int
    knowledge: int = 0


COSTS = {
    CommandName.FIND_COFFEE_MUG: CommandCost(stamina=10),
    CommandName.STUDY: CommandCost(stamina=15, knowledge=20),
}


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def can_afford(stamina: int, cost: CommandCost) -> bool:
    return stamina >= cost.stamina


def rest_gain(stamina: int) -> int:
    return clamp(config.MAX_STAMINA - stamina, 0, config.REST_GAIN)
