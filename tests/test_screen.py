import curses

import pytest

from sevendays.maps import load_map, origin
from sevendays.screen import (
    choose_destination,
    clear_screen,
    destination_for_row,
    draw_map,
    restore_cell,
)
from sevendays.story import Story, StorySpot


class FakeScreen:
    def __init__(self, height=41, width=80, keys=()):
        self.height = height
        self.width = width
        self.keys = list(keys)
        self.cells = {}

    def getmaxyx(self):
        return self.height, self.width

    def addstr(self, row, col, text):
        for offset, ch in enumerate(text):
            self.cells[(row, col + offset)] = ch

    def getch(self):
        return self.keys.pop(0)

    def refresh(self):
        pass

    def clear(self):
        self.cells.clear()


def test_clear_screen_blanks_every_cell():
    screen = FakeScreen(height=5, width=7)
    screen.addstr(2, 3, "X")
    clear_screen(screen, 5, 7)
    assert len(screen.cells) == 35
    assert set(screen.cells.values()) == {" "}


def test_draw_map_centres_grid():
    screen = FakeScreen()
    grid = load_map("shelter")
    draw_map(screen, grid, [], 41, 80)
    top, left = origin(grid, 41, 80)
    for r, line in enumerate(grid):
        assert "".join(screen.cells[(top + r, left + c)] for c in range(len(line))) == "".join(line)


def test_draw_map_marks_spots_on_grid_only():
    screen = FakeScreen()
    grid = load_map("hospital")
    top, left = origin(grid, 41, 80)
    inside = StorySpot(Story("a"), top + 2, left + 3)
    outside = StorySpot(Story("b"), 0, 0)
    draw_map(screen, grid, [inside, outside], 41, 80)
    assert screen.cells[(top + 2, left + 3)] == "S"
    assert (0, 0) not in screen.cells


def test_restore_cell_redraws_map_character():
    screen = FakeScreen()
    grid = load_map("shelter")
    top, left = origin(grid, 41, 80)
    screen.addstr(top + 1, left, "X")
    restore_cell(screen, top + 1, left, grid, [], 41, 80)
    assert screen.cells[(top + 1, left)] == grid[1][0]


def test_restore_cell_keeps_story_mark():
    screen = FakeScreen()
    grid = load_map("shelter")
    top, left = origin(grid, 41, 80)
    spot = StorySpot(Story("a"), top + 5, left + 5)
    restore_cell(screen, top + 5, left + 5, grid, [spot], 41, 80)
    assert screen.cells[(top + 5, left + 5)] == "S"


def test_restore_cell_outside_grid_draws_nothing():
    screen = FakeScreen()
    grid = load_map("shelter")
    restore_cell(screen, 0, 0, grid, [], 41, 80)
    assert screen.cells == {}


@pytest.mark.parametrize(
    "row, expected",
    [(10, "shelter"), (11, "supermarket"), (12, "hospital"), (13, "weaponshop"), (14, "exit"), (9, None), (15, None)],
)
def test_destination_for_row(row, expected):
    assert destination_for_row(row) == expected


def test_choose_destination_enter_on_first_row():
    screen = FakeScreen(keys=[-1, 10])
    assert choose_destination(screen) == "shelter"


def test_choose_destination_moves_down():
    screen = FakeScreen(keys=[curses.KEY_DOWN, curses.KEY_DOWN, 10])
    assert choose_destination(screen) == "hospital"


def test_choose_destination_up_wraps_to_last():
    screen = FakeScreen(keys=[curses.KEY_UP, 10])
    assert choose_destination(screen) == "exit"


def test_choose_destination_down_wraps_to_first():
    keys = [curses.KEY_DOWN] * 5 + [10]
    screen = FakeScreen(keys=keys)
    assert choose_destination(screen) == "shelter"


def test_choose_destination_quit_gives_shelter():
    screen = FakeScreen(keys=[curses.KEY_DOWN, ord("q")])
    assert choose_destination(screen) == "shelter"