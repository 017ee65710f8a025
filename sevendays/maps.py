"""Location maps and helpers for placing them on screen."""

from __future__ import annotations

from collections.abc import Iterable

Grid = list[list[str]]

WALL = "#"
DOOR_CHARS = frozenset("Dor")


def _pad(width: int, left: str, right: str = "") -> str:
    """A row of ``width`` characters: ``left``, blank space, then ``right``."""
    return left + " " * (width - len(left) - len(right)) + right


def _room(width: int, left: str = "#", right: str = "#") -> str:
    return _pad(width, left, right)


def _build_hospital() -> tuple[str, ...]:
    width = 53
    wall = WALL * width
    ward = _room(width, "#           #")
    ward_door = _room(width, "########    #")
    return (
        _pad(width, "Hospital"),
        wall,
        _room(width),
        _room(width, "#############", "##############"),
        *[_room(width, "#           #", "#            #")] * 3,
        _room(width, "#           #", "##########   #"),
        ward_door,
        *[ward] * 4,
        ward_door,
        *[ward] * 4,
        ward_door,
        _room(width, "#", "Door   #"),
        wall,
    )


def _build_shelter() -> tuple[str, ...]:
    width = 52
    wall = WALL * width
    blank = _room(width)
    return (
        _pad(width, "Shelter"),
        wall,
        _room(width, "# #############"),
        _room(width, "# #           #"),
        _room(width, "# #  S    E   #"),
        blank,
        _room(width, "#          #####################"),
        *[blank] * 3,
        _room(width, "#      ######          ###"),
        _room(width, "#                      # #"),
        _room(width, "#          ######      # #"),
        _room(width, "#                      ###"),
        *[blank] * 4,
        _room(width, "#", "Door #"),
        wall,
        _pad(width, "Press I to Check Status"),
        "Save at S              \t\t\t                 ",
        _pad(width, "Exit at E"),
    )


def _build_weaponshop() -> tuple[str, ...]:
    width = 52
    wall = WALL * width
    blank = _room(width)
    rack = WALL * 13
    closed = _room(width, "#", rack)
    return (
        _pad(width, "Weapon Shop"),
        wall,
        closed,
        closed,
        _room(width, rack, rack),
        closed,
        closed,
        _room(width, rack, rack),
        blank,
        blank,
        _room(width, rack),
        blank,
        blank,
        _room(width, rack),
        blank,
        blank,
        _room(width, rack),
        blank,
        _room(width, "#", "Door #"),
        wall,
    )


def _build_supermarket() -> tuple[str, ...]:
    width = 52
    wall = WALL * width
    blank = _room(width)
    shelf = _room(width, "#    " + WALL * 26)
    counter = "#" + " " * 15 + WALL * 14
    return (
        _pad(width, "Supermarket"),
        wall,
        blank,
        blank,
        shelf,
        *[blank] * 3,
        shelf,
        *[blank] * 3,
        shelf,
        *[blank] * 3,
        _room(width, "#               ###        ###"),
        _room(width, counter),
        _room(width, counter, "Door #"),
        wall,
    )


_MENU_ART = (
    r"#      _____ ______   ________  ________      #",
    r"#     |\   _ \  _   \|\   __  \|\   __  \     #",
    r"#     \ \  \\|__| \  \ \   __  \ \   ____\    #",
    r"#      \ \  \    \ \  \ \  \ \  \ \  \___|    #",
    r"#       \ \__\    \ \__\ \__\ \__\ \__\       #",
    r"#        \|__|     \|__|\|__|\|__|\|__|       #",
)


def _build_menu() -> tuple[str, ...]:
    width = 47
    wall = WALL * width
    blank = _room(width)
    entries = ("Shelter", "Supermarket", "Hospital", "Weapon Shop", "Exit")
    return (
        wall,
        blank,
        *_MENU_ART,
        blank,
        _room(width, "#            Choose your destination"),
        *(_room(width, "#" + " " * 15 + entry) for entry in entries),
        blank,
        wall,
    )


HOSPITAL = _build_hospital()
SHELTER = _build_shelter()
WEAPONSHOP = _build_weaponshop()
SUPERMARKET = _build_supermarket()
MENU = _build_menu()

GAME_NAME = (
    r" _______ _______ ___ ___ _______ _______      _____  _______ ___ ___ _______ ",
    r"|     __|    ___|   |   |    ___|    |  |    |     \|   _   |   |   |     __|",
    r"|__     |    ___|   |   |    ___|       |    |  --  |       |\     /|__     |",
    r"|_______|_______|\_____/|_______|__|____|    |_____/|___|___| |___| |_______|",
)

_MAPS = {
    "shelter": SHELTER,
    "hospital": HOSPITAL,
    "weaponshop": WEAPONSHOP,
    "supermarket": SUPERMARKET,
    "menu": MENU,
}


def to_grid(rows: Iterable[str]) -> Grid:
    """Turn rows of text into a grid of single characters."""
    return [list(row) for row in rows]


def load_map(name: str) -> Grid:
    """Return a fresh grid for the named map."""
    try:
        rows = _MAPS[name]
    except KeyError:
        raise ValueError(f"unknown map: {name!r}") from None
    return to_grid(rows)


def _half(value: int) -> int:
    # Halve, rounding toward zero as integer division on the screen does.
    return value // 2 if value >= 0 else -((-value) // 2)


def origin(grid: Grid, height: int, width: int) -> tuple[int, int]:
    """Screen row and column of the grid's top-left corner when centred."""
    return _half(height - len(grid)), _half(width - len(grid[0]))


def is_door(ch: str) -> bool:
    """True for characters that make up a door."""
    return ch in DOOR_CHARS


def is_wall(ch: str) -> bool:
    """True for wall characters."""
    return ch == WALL