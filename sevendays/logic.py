"""Daily upkeep, the final boss fight and ending texts."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .state import Ending, GameOver, GameState

BOSS_HEALTH = 15
HEADSHOT = "headshot"
SHOT = "shot"
MELEE = "melee"

_ENDING_TEXTS = {
    Ending.STARVATION: "You starved to death at the end of the wilderness due to lack of food.",
    Ending.THIRST: "You died of thirst, parched in the desolate wilderness.",
    Ending.MADNESS: "You lost your mind to madness, consumed by chaos in the end.",
    Ending.ILLNESS: "You succumbed to illness, fading away in the grip of disease.",
    Ending.BOSS: "You fell in the boss battle, vanquished by an unstoppable foe.",
    Ending.BLOODLOSS: "You lie in a pool of blood, and your vision gradually turns black.",
    Ending.DEATH: "You died",
}


def ending_text(ending: Ending) -> str:
    """Text shown for a death ending."""
    return _ENDING_TEXTS[Ending(ending)]


def end_a_day(state: GameState) -> str:
    """Pass half a day and consume supplies; return the summary of changes.

    Raises GameOver when health runs out.
    """
    state.day += 0.5
    delta = 1 + state.difficulty
    lost = 0
    parts = []

    if state.food >= delta:
        state.food -= delta
        parts.append(f"Food {state.food}(-{delta}) ")
    elif state.hunger > delta:
        state.hunger -= delta
        parts.append(f"Hunger {state.hunger}(-{delta}) ")
    elif state.hunger < delta:
        state.health -= delta
        lost += delta
        if state.health <= 0:
            raise GameOver(Ending.STARVATION)

    if state.water >= delta:
        state.water -= delta
        parts.append(f"Water {state.water}(-{delta}) ")
    elif state.thirst > delta:
        state.thirst -= delta
        parts.append(f"Thirst {state.thirst}(-{delta}) ")
    elif state.thirst < delta:
        state.health -= delta
        lost += delta
        if state.health <= 0:
            raise GameOver(Ending.THIRST)

    if state.sanity < delta:
        state.health -= delta
        lost += delta
        if state.health <= 0:
            raise GameOver(Ending.MADNESS)

    if state.ill > 0:
        state.health -= delta
        parts.append(f"Illness, health {state.ill}(-{delta}) ")
        if state.health <= 0:
            raise GameOver(Ending.ILLNESS)

    if lost > 0:
        parts.append(f"Health {state.health}(-{lost}) ")
    return "".join(parts)


def head_shot(sanity: int, rng: random.Random) -> bool:
    """Whether a shot hits the head; steadier minds aim better."""
    return rng.randrange(500) < sanity * sanity


@dataclass
class BossFight:
    """The fight against the boss at the end of the seventh day."""

    state: GameState
    rng: random.Random = field(default_factory=random.Random)
    boss_health: int = BOSS_HEALTH
    defeated: bool = False

    def play_round(self) -> str:
        """Play one exchange of blows; return how the player attacked.

        The boss strikes back unless it fell; raises GameOver when the
        player dies.
        """
        if self.defeated:
            raise RuntimeError("the boss is already defeated")
        if self.state.bullet > 0:
            if head_shot(self.state.sanity, self.rng):
                attack = HEADSHOT
                self.boss_health -= 10
            else:
                attack = SHOT
                self.boss_health -= 3
            self.state.bullet -= 1
        else:
            attack = MELEE
            self.boss_health -= 1

        if self.boss_health <= 0:
            self.defeated = True
            return attack

        self.state.health -= 1
        if self.state.health <= 0:
            raise GameOver(Ending.BOSS)
        return attack