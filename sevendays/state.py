"""Player state and endings."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class Ending(enum.IntEnum):
    """Ways a run can end in death."""

    STARVATION = 1
    THIRST = 2
    MADNESS = 3
    ILLNESS = 4
    BOSS = 5
    BLOODLOSS = 6
    DEATH = 7


class GameOver(Exception):
    """Raised when the player dies."""

    def __init__(self, ending: Ending):
        super().__init__(ending.name.lower())
        self.ending = ending


@dataclass
class StoryPools:
    """Indices of location stories that have not been played yet."""

    hospital: list[int] = field(default_factory=list)
    supermarket: list[int] = field(default_factory=list)
    weaponshop: list[int] = field(default_factory=list)


_STATS = ("health", "food", "water", "sanity", "hunger", "thirst")


@dataclass
class GameState:
    """Everything that describes the survivor."""

    day: float = 0.0
    food: int = 5
    water: int = 5
    difficulty: int = 0
    hunger: int = 5
    thirst: int = 5
    health: int = 10
    sanity: int = 10
    bullet: int = 3
    ill: int = 0
    items: list[str] = field(default_factory=lambda: ["GLOCK-18"])

    def is_night(self) -> bool:
        """True during the second half of each day."""
        return int(self.day / 0.5) % 2 == 1

    def day_label(self) -> str:
        """Text shown in the top-left corner of the screen."""
        if self.is_night():
            return "Night Time"
        return f"Day {int(self.day) + 1}"

    def status_lines(self) -> list[str]:
        """Lines of the status screen, top to bottom."""
        lines = [
            "Game Status",
            f"Difficulty: {self.difficulty}",
            f"Day: {self.day:.1f}",
            f"Food: {self.food}",
            f"Water: {self.water}",
            f"Health: {self.health}",
            f"Hunger: {self.hunger}",
            f"Thirst: {self.thirst}",
            f"Sanity: {self.sanity}",
            f"Bullet: {self.bullet}",
        ]
        lines.append("You are ill!!!" if self.ill > 0 else "")
        lines.append("Items: " + "  ".join(self.items))
        lines.append("")
        lines.append("Press 'q' to quit")
        return lines

    def apply_stat(self, kind: str, value: int) -> bool:
        """Change a stat; False when it drops to a fatal or invalid level."""
        if kind in _STATS:
            new = getattr(self, kind) + value
            setattr(self, kind, new)
            return new > 0
        if kind == "bullet":
            if self.bullet + value < 0:
                return False
            self.bullet += value
            return True
        return True

    def add_item(self, item: str) -> None:
        """Put an item into the inventory."""
        self.items.append(item)

    def remove_item(self, item: str) -> bool:
        """Take one copy of an item out; False if it was not carried."""
        try:
            self.items.remove(item)
        except ValueError:
            return False
        return True