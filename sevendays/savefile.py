"""Saving and loading a run as a plain text file."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, TextIO

from .state import GameState, StoryPools

EXTENSION = ".save"
END_OF_ITEMS = "END_OF_ITEMS"
END_OF_POOL = -1

_INT_FIELDS = (
    "food",
    "water",
    "difficulty",
    "hunger",
    "thirst",
    "health",
    "sanity",
    "bullet",
)


def list_saves(directory: str | os.PathLike, extension: str = EXTENSION) -> list[str]:
    """Names of the files in a directory that end with the extension."""
    path = Path(directory)
    if not path.is_dir():
        return []
    return sorted(entry.name for entry in path.iterdir() if entry.name.endswith(extension))


def normalize_name(name: str) -> str:
    """Check a save name typed by the player and give it the save extension."""
    if not name:
        raise ValueError("empty save name")
    if "/" in name:
        raise ValueError("Filename cannot contain '/'")
    if not name.endswith(EXTENSION):
        name += EXTENSION
    return name


def dump(state: GameState, pools: StoryPools, stream: TextIO) -> None:
    """Write the state and the unplayed story pools, one value per line."""
    values = [f"{state.day:g}"]
    values += [str(getattr(state, name)) for name in _INT_FIELDS]
    values.append("1" if state.ill else "0")
    values += state.items
    values.append(END_OF_ITEMS)
    for pool in (pools.hospital, pools.supermarket, pools.weaponshop):
        values += [str(index) for index in pool]
        values.append(str(END_OF_POOL))
    stream.write("".join(f"{value}\n" for value in values))


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _number(token: str | None, convert, what: str):
    if token is None:
        raise ValueError(f"save file ends before {what}")
    try:
        return convert(token)
    except ValueError:
        raise ValueError(f"bad value for {what}: {token!r}") from None


def load(stream: TextIO) -> tuple[GameState, StoryPools]:
    """Read a state and story pools written by dump.

    Values are separated by whitespace, so an item whose name has spaces
    comes back as several items.
    """
    tokens = _tokens(stream)
    state = GameState(items=[])
    state.day = _number(next(tokens, None), float, "day")
    for name in _INT_FIELDS:
        setattr(state, name, _number(next(tokens, None), int, name))
    state.ill = 1 if _number(next(tokens, None), int, "ill") else 0

    for token in tokens:
        if token == END_OF_ITEMS:
            break
        state.items.append(token)

    pools = StoryPools()
    for pool in (pools.hospital, pools.supermarket, pools.weaponshop):
        for token in tokens:
            index = _number(token, int, "story pool")
            if index == END_OF_POOL:
                break
            pool.append(index)
    return state, pools


def save_game(
    directory: str | os.PathLike, name: str, state: GameState, pools: StoryPools
) -> Path:
    """Save the run under the given name in the directory; return the file's path."""
    path = Path(directory) / normalize_name(name)
    with open(path, "w", encoding="utf-8") as fh:
        dump(state, pools, fh)
    return path


def load_game(path: str | os.PathLike) -> tuple[GameState, StoryPools]:
    """Load a run from a save file."""
    with open(path, encoding="utf-8") as fh:
        return load(fh)