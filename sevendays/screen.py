"""Drawing maps on a curses-like screen and the destination menu."""

from __future__ import annotations

import curses
from collections.abc import Iterable
from typing import Optional

from .maps import Grid, load_map, origin
from .story import StorySpot

ENTER = 10
ARROW = "->"
SPOT_MARK = "S"

DESTINATIONS = ("shelter", "supermarket", "hospital", "weaponshop", "exit")
_FIRST_CHOICE_ROW = 10
_HEADING_ROW = 9
_BELOW_LAST_ROW = 15


def _put(screen, row: int, col: int, text: str) -> None:
    # Writes that fall off the screen are dropped, as the terminal does.
    if row < 0 or col < 0:
        return
    try:
        screen.addstr(row, col, text)
    except curses.error:
        pass


def clear_screen(screen, height: int, width: int) -> None:
    """Overwrite every cell of a height by width area with blanks."""
    blank = " " * width
    for row in range(height):
        _put(screen, row, 0, blank)


def _spot_cell(
    spot: StorySpot, grid: Grid, top: int, left: int
) -> Optional[tuple[int, int]]:
    r, c = spot.row - top, spot.col - left
    if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
        return r, c
    return None


def draw_map(
    screen, grid: Grid, spots: Iterable[StorySpot], height: int, width: int
) -> None:
    """Draw a grid centred on the screen, marking story spots that lie on it."""
    top, left = origin(grid, height, width)
    for r, line in enumerate(grid):
        for c, ch in enumerate(line):
            _put(screen, top + r, left + c, ch)
    for spot in spots:
        if _spot_cell(spot, grid, top, left) is not None:
            _put(screen, spot.row, spot.col, SPOT_MARK)


def restore_cell(
    screen,
    row: int,
    col: int,
    grid: Grid,
    spots: Iterable[StorySpot],
    height: int,
    width: int,
) -> None:
    """Redraw one screen cell from the map, or its story mark if it has one."""
    top, left = origin(grid, height, width)
    r, c = row - top, col - left
    if 0 <= r < len(grid) and 0 <= c < len(grid[r]):
        _put(screen, row, col, grid[r][c])
    for spot in spots:
        if spot.row == row and spot.col == col:
            _put(screen, row, col, SPOT_MARK)


def destination_for_row(row: int) -> Optional[str]:
    """Destination named on a row of the menu map, or None."""
    index = row - _FIRST_CHOICE_ROW
    if 0 <= index < len(DESTINATIONS):
        return DESTINATIONS[index]
    return None


def choose_destination(screen) -> str:
    """Let the player pick a destination from the menu map.

    Returns one of DESTINATIONS; pressing q picks the shelter.
    """
    grid = load_map("menu")
    height, width = screen.getmaxyx()
    top, _ = origin(grid, height, width)
    row, col = height // 2 + 2, width // 2 - 11
    _put(screen, row, col, ARROW)
    draw_map(screen, grid, (), height, width)

    while True:
        ch = screen.getch()
        if ch == ord("q"):
            return DESTINATIONS[0]
        restore_cell(screen, row, col, grid, (), height, width)
        restore_cell(screen, row, col + 1, grid, (), height, width)
        menu_row = row - top
        if ch == curses.KEY_UP:
            row += 4 if menu_row - 1 == _HEADING_ROW else -1
        elif ch == curses.KEY_DOWN:
            row += -4 if menu_row + 1 == _BELOW_LAST_ROW else 1
        elif ch == ENTER:
            destination = destination_for_row(menu_row)
            if destination is not None:
                return destination
        _put(screen, row, col, ARROW)
        screen.refresh()