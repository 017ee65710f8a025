"""The shelter, trips to other locations and the run of days."""

from __future__ import annotations

import curses
import random
import time
from typing import Optional

from .logic import HEADSHOT, MELEE, SHOT, BossFight, end_a_day
from .maps import Grid, is_door, is_wall, load_map, origin
from .player import StoryPlayer
from .savefile import normalize_name, save_game
from .screen import choose_destination, clear_screen, draw_map, restore_cell
from .state import GameOver, GameState, StoryPools
from .story import LOCATIONS, NIGHT_EVENTS, Story, StoryBook, StorySpot, place_story_spots

SAVE_DIR = "save"
MESSAGE_PAUSE = 1.0
SPOTS_PER_VISIT = 2
FINAL_DAY = 7
LAST_DAY = 100
ENTER = 10
ESCAPE = 27
PLAYER_MARK = "X"
NAME_LIMIT = 255

_PLAY_KEYS = (ord("a"), ord("A"))
_QUIT_KEY = ord("q")
_STATUS_KEY = ord("i")
_QUIT_OPTIONS = ("Yes, Quit", "No, Go Back")

_DIRECTIONS = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}
_ARROWS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
}

# Indices of the interface stories in the story book.
_UI_LEAVE = 0
_UI_MORNING = 1
_UI_BOSS_INTRO = 2
_UI_BOSS_STATS = 3
_UI_SHOOT = 4
_UI_HEADSHOT = 5
_UI_SHOT = 6
_UI_NO_BULLETS = 7
_UI_MELEE = 8
_UI_BOSS_FALLS = 9
_UI_BOSS_DEAD = 10
_UI_BOSS_HEALTH = 11
_UI_BOSS_STRIKES = 12
_UI_PLAYER_HEALTH = 13
_UI_PLAYER_FALLS = 14
_UI_DAY_END = 16
_UI_DAY_SUMMARY = 17

_ATTACK_STORIES = {HEADSHOT: _UI_HEADSHOT, SHOT: _UI_SHOT, MELEE: _UI_MELEE}


def _put(screen, row: int, col: int, text: str, attr: Optional[int] = None) -> None:
    if row < 0 or col < 0:
        return
    try:
        if attr is None:
            screen.addstr(row, col, text)
        else:
            screen.addstr(row, col, text, attr)
    except curses.error:
        pass


def _cursor(visibility: int) -> None:
    try:
        curses.curs_set(visibility)
    except curses.error:
        pass


def _ui(book: StoryBook, index: int) -> Optional[Story]:
    return book.ui[index] if index < len(book.ui) else None


def _set_text(book: StoryBook, index: int, text: str) -> None:
    story = _ui(book, index)
    if story is not None:
        story.text = text


def move(grid: Grid, position: tuple[int, int], direction: str) -> tuple[int, int]:
    """Step one cell in a direction unless a wall or the map's edge is in the way."""
    try:
        dr, dc = _DIRECTIONS[direction]
    except KeyError:
        raise ValueError(f"unknown direction: {direction!r}") from None
    row, col = position[0] + dr, position[1] + dc
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]) and not is_wall(grid[row][col]):
        return row, col
    return position[0], position[1]


def _show_status(screen, state: GameState) -> None:
    _, width = screen.getmaxyx()
    center = width // 2 - 5
    for offset, line in enumerate(state.status_lines()):
        if line:
            _put(screen, 5 + offset, center, line)
    screen.refresh()
    while screen.getch() != _QUIT_KEY:
        pass


def _confirm_quit(screen) -> bool:
    height, width = screen.getmaxyx()
    if height < 5 or width < 40:
        return False
    top, left = (height - 5) // 2, (width - 40) // 2
    highlight = 0
    while True:
        for r in range(5):
            _put(screen, top + r, left, " " * 40)
        _put(screen, top + 1, left + 2, "Are you sure you want to quit?")
        for index, option in enumerate(_QUIT_OPTIONS):
            attr = curses.A_REVERSE if index == highlight else curses.A_NORMAL
            _put(screen, top + 3, left + 2 + index * 15, option, attr)
        screen.refresh()

        ch = screen.getch()
        if ch == curses.KEY_LEFT:
            highlight = max(0, highlight - 1)
        elif ch == curses.KEY_RIGHT:
            highlight = min(len(_QUIT_OPTIONS) - 1, highlight + 1)
        elif ch == ENTER:
            return highlight == 0
        elif ch == ESCAPE:
            return False


def _read_line(screen, row: int, col: int) -> str:
    text = ""
    while True:
        ch = screen.getch()
        if ch in (ENTER, curses.KEY_ENTER):
            return text
        if ch in (curses.KEY_BACKSPACE, 127, 8):
            text = text[:-1]
        elif 32 <= ch < 127 and len(text) < NAME_LIMIT:
            text += chr(ch)
        else:
            continue
        _put(screen, row, col, text + " ")
        screen.refresh()


def _prompt_save(screen, state: GameState, pools: StoryPools) -> None:
    height, width = screen.getmaxyx()
    top, left = (height - 5) // 2, (width - 40) // 2
    _put(screen, top + 1, left + 2, "Enter filename to save game")
    _put(screen, top + 2, left + 2, "(Enter empty filename to cancel):")
    screen.refresh()

    _cursor(1)
    name = _read_line(screen, top + 3, left + 2)
    _cursor(0)

    if not name:
        message = "Save cancelled"
    else:
        try:
            path = save_game(SAVE_DIR, name, state, pools)
            message = f"Game saved to {path.name}"
        except ValueError as exc:
            message = f"Error: {exc}"
        except OSError:
            message = f"Error: Could not save to {normalize_name(name)}"
    _put(screen, height - 1, 0, message)
    screen.refresh()
    time.sleep(MESSAGE_PAUSE)


class _Walk:
    """One stretch of walking around, from waking in the shelter to the night."""

    def __init__(self, screen, state: GameState, book: StoryBook, pools: StoryPools, rng):
        self.screen = screen
        self.state = state
        self.book = book
        self.pools = pools
        self.rng = rng
        self.height, self.width = screen.getmaxyx()
        self.player = StoryPlayer(screen, state, pools)
        self.location = "shelter"
        self.grid = load_map("shelter")
        self.spots: list[StorySpot] = []
        self._home()

    def _home(self) -> None:
        self.row, self.col = self.height // 2, self.width // 2

    def _origin(self) -> tuple[int, int]:
        return origin(self.grid, self.height, self.width)

    def _cell(self) -> str:
        top, left = self._origin()
        r, c = self.row - top, self.col - left
        if 0 <= r < len(self.grid) and 0 <= c < len(self.grid[r]):
            return self.grid[r][c]
        return " "

    def _redraw(self) -> None:
        draw_map(self.screen, self.grid, self.spots, self.height, self.width)

    def _clear(self) -> None:
        clear_screen(self.screen, self.height, self.width)

    def _message(self, text: str) -> None:
        row = len(self.grid) // 2 + self.height // 2 - 1
        col = len(self.grid[0]) // 2 + self.width // 2 + 1
        _put(self.screen, row, col, text)

    def run(self) -> bool:
        _put(self.screen, self.row, self.col, PLAYER_MARK)
        self._redraw()
        while True:
            ch = self.screen.getch()
            restore_cell(
                self.screen, self.row, self.col, self.grid, self.spots, self.height, self.width
            )
            self._check_spot(ch)
            if self.location == "shelter":
                outcome = self._shelter(ch)
                if outcome is not None:
                    return outcome
            if self.location in LOCATIONS:
                self._outside(ch)
            self._handle_key(ch)
            _put(self.screen, self.row, self.col, PLAYER_MARK)
            _put(self.screen, 0, 0, self.state.day_label())
            self.screen.refresh()

    def _check_spot(self, ch: int) -> None:
        row = (self.height + len(self.grid)) // 2
        col = (self.width + len(self.grid[0])) // 2 + 1
        spot = next(
            (s for s in self.spots if (s.row, s.col) == (self.row, self.col)), None
        )
        if spot is not None:
            _put(self.screen, row, col, "Press A to play story")
            if ch in _PLAY_KEYS:
                self.player.play(spot.story)
                self.spots.remove(spot)
                self._redraw()
        elif self.spots:
            _put(self.screen, row, col, " " * 26)

    def _shelter(self, ch: int) -> Optional[bool]:
        cell = self._cell()
        night = self.state.is_night()
        if is_door(cell):
            if not night:
                self._message("Press Enter to start daytime")
                if ch == ENTER:
                    self._go_out()
            else:
                self._message("You cannot go out at night")
        elif cell == "S":
            self._message("Press A to save game       ")
            if ch in _PLAY_KEYS:
                self._clear()
                _prompt_save(self.screen, self.state, self.pools)
                self._clear()
                self._redraw()
                self.screen.refresh()
        elif cell == "E" or ch == _QUIT_KEY:
            self._message("Press A to quit game       ")
            if ch in _PLAY_KEYS or ch == _QUIT_KEY:
                self._clear()
                self.screen.refresh()
                if _confirm_quit(self.screen):
                    return False
                self._clear()
                self._redraw()
                self.screen.refresh()
        elif night:
            self._night()
            return True
        else:
            self._message(" " * 36)
        return None

    def _go_out(self) -> None:
        self._clear()
        destination = choose_destination(self.screen)
        self._home()
        self._clear()
        if destination in LOCATIONS:
            self.location = destination
            self.grid = load_map(destination)
            top, left = self._origin()
            count = min(SPOTS_PER_VISIT, len(getattr(self.pools, destination)))
            self.spots = place_story_spots(
                self.book, self.pools, count, destination, self.grid, top, left, self.rng
            )
        else:
            self.location = "shelter"
            self.grid = load_map("shelter")
        self._redraw()
        self.screen.refresh()

    def _outside(self, ch: int) -> None:
        if is_door(self._cell()):
            self._message(f"Press Enter to leave {self.location}")
            if ch == ENTER:
                self.player.play(_ui(self.book, _UI_LEAVE))
                self.location = "shelter"
                self.grid = load_map("shelter")
                self.state.day += 0.5
                self._home()
                self.spots = []
                self._redraw()
                self.screen.refresh()
        else:
            self._message(" " * 36)

    def _night(self) -> None:
        events = [self.book.night[name] for name in NIGHT_EVENTS if name in self.book.night]
        self.player.play(self.rng.choice(events) if events else None)
        summary = end_a_day(self.state)
        _set_text(self.book, _UI_DAY_SUMMARY, summary)
        self.player.play(_ui(self.book, _UI_DAY_END))
        self.player.play(_ui(self.book, _UI_MORNING))

    def _handle_key(self, ch: int) -> None:
        if ch in _ARROWS:
            top, left = self._origin()
            r, c = move(self.grid, (self.row - top, self.col - left), _ARROWS[ch])
            self.row, self.col = r + top, c + left
        elif ch == _STATUS_KEY:
            self._clear()
            _show_status(self.screen, self.state)
            self._clear()
            self._redraw()
            self.screen.refresh()


def run_day(
    screen, state: GameState, book: StoryBook, pools: StoryPools, rng: random.Random
) -> bool:
    """Play from the shelter until the night has passed.

    Returns True when the night is over and False when the player quits.
    Raises GameOver when the player dies.
    """
    screen.keypad(True)
    screen.nodelay(True)
    _cursor(0)
    return _Walk(screen, state, book, pools, rng).run()


def _boss_battle(
    screen, state: GameState, book: StoryBook, pools: StoryPools, rng: random.Random
) -> None:
    player = StoryPlayer(screen, state, pools)
    player.play(_ui(book, _UI_BOSS_INTRO))
    _set_text(
        book,
        _UI_BOSS_STATS,
        f"You got {state.health} health, {state.sanity} sanity and {state.bullet} bullets",
    )
    player.play(_ui(book, _UI_BOSS_STATS))

    fight = BossFight(state, rng)
    while True:
        armed = state.bullet > 0
        player.play(_ui(book, _UI_SHOOT if armed else _UI_NO_BULLETS))
        before = fight.boss_health
        fallen: Optional[GameOver] = None
        try:
            fight.play_round()
        except GameOver as exc:
            fallen = exc
        if not armed:
            attack = MELEE
        elif before - fight.boss_health >= 10:
            attack = HEADSHOT
        else:
            attack = SHOT
        player.play(_ui(book, _ATTACK_STORIES[attack]))

        if fight.defeated:
            player.play(_ui(book, _UI_BOSS_FALLS))
            player.play(_ui(book, _UI_BOSS_DEAD))
            return

        _set_text(book, _UI_BOSS_HEALTH, f"The boss has {fight.boss_health} health left.")
        player.play(_ui(book, _UI_BOSS_HEALTH))
        player.play(_ui(book, _UI_BOSS_STRIKES))
        if fallen is not None:
            player.play(_ui(book, _UI_PLAYER_FALLS))
            raise fallen
        _set_text(book, _UI_PLAYER_HEALTH, f"You got {state.health} health left.")
        player.play(_ui(book, _UI_PLAYER_HEALTH))


def explore(
    screen, state: GameState, book: StoryBook, pools: StoryPools, rng: random.Random
) -> bool:
    """Run day after day until the boss fight.

    Returns True when the boss is beaten and False when the player quits.
    Raises GameOver when the player dies.
    """
    while state.day < LAST_DAY:
        if state.day == FINAL_DAY:
            _boss_battle(screen, state, book, pools, rng)
            return True
        if not run_day(screen, state, book, pools, rng):
            return False
    return False