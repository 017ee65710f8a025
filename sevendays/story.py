"""Branching stories, their rewards and where they appear on maps."""

from __future__ import annotations

import json
import os
import random
import re
from dataclasses import dataclass, field
from typing import Optional

from .maps import Grid, is_door, is_wall
from .state import Ending, GameOver, GameState, StoryPools

LOCATIONS = ("hospital", "supermarket", "weaponshop")
NIGHT_EVENTS = (
    "knocking_door",
    "glass_breaking_noise",
    "lights_off",
    "temperature_drop",
    "temperature_increase",
    "green_light",
)
_STAT_REWARDS = ("health", "food", "water", "bullet", "sanity")


@dataclass(eq=False, repr=False)
class Story:
    """One page of a story: text, choices and what each choice leads to."""

    text: str = ""
    options: list[str] = field(default_factory=list)
    next: list[Optional["Story"]] = field(default_factory=list)
    reward: list[str] = field(default_factory=list)

    def __repr__(self) -> str:
        return f"Story({self.text!r})"


@dataclass
class StorySpot:
    """A story waiting at a screen position."""

    story: Story
    row: int
    col: int


@dataclass
class StoryBook:
    """All stories of the game."""

    hospital: list[Story] = field(default_factory=list)
    supermarket: list[Story] = field(default_factory=list)
    weaponshop: list[Story] = field(default_factory=list)
    night: dict[str, Story] = field(default_factory=dict)
    ui: list[Story] = field(default_factory=list)
    initial_pools: StoryPools = field(default_factory=StoryPools)

    def sample(
        self, count: int, location: str, pools: StoryPools, rng: random.Random
    ) -> list[Story]:
        """Draw unplayed stories for a location, removing them from the pool."""
        if location not in LOCATIONS:
            return []
        pool = _pool_for(pools, location)
        if count > len(pool):
            raise ValueError(f"only {len(pool)} {location} stories left")
        stories = _stories_for(self, location)
        rng.shuffle(pool)
        chosen = [stories[pool.pop()] for _ in range(count)]
        return chosen


def _pool_for(pools: StoryPools, location: str) -> list[int]:
    return {
        "hospital": pools.hospital,
        "supermarket": pools.supermarket,
        "weaponshop": pools.weaponshop,
    }[location]


def _stories_for(book: StoryBook, location: str) -> list[Story]:
    return {
        "hospital": book.hospital,
        "supermarket": book.supermarket,
        "weaponshop": book.weaponshop,
    }[location]


def parse_reward(reward: str) -> tuple[str, str]:
    """Split a reward such as "inventory Canned Beans" into kind and value."""
    match = re.match(r"\s*(\S*)", reward)
    kind = match.group(1)
    if not kind:
        return "", ""
    value = reward[match.end():].split("\n", 1)[0]
    if value.startswith(" "):
        value = value[1:]
    return kind, value


def place_story_spots(
    book: StoryBook,
    pools: StoryPools,
    count: int,
    location: str,
    grid: Grid,
    origin_row: int,
    origin_col: int,
    rng: random.Random,
) -> list[StorySpot]:
    """Put sampled stories on free floor cells of a location map."""
    if location not in LOCATIONS:
        return []
    height = len(grid)
    width = len(grid[0])

    def blocked(r: int, c: int) -> bool:
        row = grid[r]
        cell = row[c] if c < len(row) else "#"
        return is_wall(cell) or is_door(cell)

    spots = []
    for story in book.sample(count, location, pools, rng):
        r = rng.randrange(height - 1) + 1
        c = rng.randrange(width)
        while blocked(r, c):
            r = rng.randrange(height - 1) + 1
            c = rng.randrange(width)
        spots.append(StorySpot(story, r + origin_row, c + origin_col))
    return spots


def check_requirements(state: GameState, story: Story) -> Optional[str]:
    """Check whether a story can be entered; return the refusal message if not.

    Items demanded with "inventory-" are taken from the player as they are
    checked.
    """
    if len(story.options) != 1:
        return None
    bullets = state.bullet
    for reward in story.reward:
        kind, value = parse_reward(reward)
        if kind == "bullet":
            bullets += int(value)
            if bullets < 0:
                return "(Insufficient stats!, please choose again)"
        if kind == "inventory-" and not state.remove_item(value):
            return "(Item not found!, please choose again)"
    return None


def apply_rewards(state: GameState, pools: StoryPools, story: Story) -> list[str]:
    """Apply a story's rewards; return the ones worth showing to the player."""
    shown = []
    for reward in story.reward:
        kind, value = parse_reward(reward)
        if kind == "inventory":
            state.add_item(value)
            shown.append(reward)
        elif kind in _STAT_REWARDS:
            if state.apply_stat(kind, int(value)):
                shown.append(reward)
            elif kind == "health":
                raise GameOver(Ending.BLOODLOSS)
            elif kind == "sanity":
                raise GameOver(Ending.MADNESS)
        elif kind == "death":
            raise GameOver(Ending.DEATH)
        elif kind == "startstory":
            pools.hospital.append(int(value))
        else:
            shown.append(reward)
    return shown


def _resolve(stories: dict[str, Story], key: Optional[str]) -> Optional[Story]:
    if key is None:
        return None
    try:
        return stories[key]
    except KeyError:
        raise ValueError(f"unknown story id: {key!r}") from None


def load_book(path: str | os.PathLike) -> StoryBook:
    """Read a story book from a JSON file.

    Stories are listed under "stories" by id; "next" entries, the location
    lists, "ui" and "night" refer to those ids. "pools" is optional and
    defaults to every story of each location.
    """
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)

    raw = data.get("stories", {})
    stories = {
        key: Story(
            text=entry.get("text", ""),
            options=list(entry.get("options", [])),
            reward=list(entry.get("reward", [])),
        )
        for key, entry in raw.items()
    }
    for key, entry in raw.items():
        stories[key].next = [_resolve(stories, ref) for ref in entry.get("next", [])]

    book = StoryBook(
        hospital=[_resolve(stories, k) for k in data.get("hospital", [])],
        supermarket=[_resolve(stories, k) for k in data.get("supermarket", [])],
        weaponshop=[_resolve(stories, k) for k in data.get("weaponshop", [])],
        night={name: _resolve(stories, k) for name, k in data.get("night", {}).items()},
        ui=[_resolve(stories, k) for k in data.get("ui", [])],
    )
    pools = data.get("pools", {})
    book.initial_pools = StoryPools(
        **{
            loc: list(pools.get(loc, range(len(_stories_for(book, loc)))))
            for loc in LOCATIONS
        }
    )
    return book