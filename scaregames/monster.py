"""Monsters that compete in the scare games."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Monster:
    """A competitor with a name and a scream power.

    Two monsters are equal when both name and scream power match; ordering
    compares scream power only.
    """

    name: str = ""
    scream_power: int = 0

    def __lt__(self, other: Monster) -> bool:
        if not isinstance(other, Monster):
            return NotImplemented
        return self.scream_power < other.scream_power

    def __gt__(self, other: Monster) -> bool:
        if not isinstance(other, Monster):
            return NotImplemented
        return self.scream_power > other.scream_power

    def __str__(self) -> str:
        return f"{self.name} (Power: {self.scream_power})"