"""Title screen, difficulty selection, endings and the program's entry point."""

from __future__ import annotations

import argparse
import copy
import curses
import random
import time
from pathlib import Path
from typing import Optional, Sequence

from .logic import ending_text
from .savefile import list_saves, load_game
from .shelter import explore
from .state import Ending, GameOver, GameState, StoryPools
from .story import StoryBook, load_book

SAVE_DIR = "save"
ENTER = 10
ESCAPE = 27

QUIT = "quit"
VICTORY = "victory"
DEATH = "death"

MENU_OPTIONS = ("Start Game", "Continue", "Information", "Quit")
DIFFICULTY_OPTIONS = ("hard", "normal", "easy")
QUIT_OPTIONS = ("Yes, Quit", "No, Go Back")
_DIFFICULTIES = {1: 2, 2: 1, 3: 0}

MENU_WIDTH = 30
TITLE_HEIGHT = 8
QUIT_PAUSE = 1.0

TITLE = (
    r"  ______   _____      __     _______ ",
    r" |____  | |  __ \   /\\ \   / / ____|",
    r"     / /  | |  | | /  \\ \_/ / (___  ",
    r"    / /   | |  | |/ /\ \\   / \___ \ ",
    r"   / /    | |__| / ____ \| |  ____) |",
    r"  /_/     |_____/_/    \_\_| |_____/ ",
)

VICTORY_ART = (
    r"$$\     $$\                                       $$\           ",
    r"\$$\   $$  |                                      \__|          ",
    r" \$$\ $$  /$$$$$$\  $$\   $$\       $$\  $$\  $$\ $$\ $$$$$$$\  ",
    r"  \$$$$  /$$  __$$\ $$ |  $$ |      $$ | $$ | $$ |$$ |$$  __$$\ ",
    r"   \$$  / $$ /  $$ |$$ |  $$ |      $$ | $$ | $$ |$$ |$$ |  $$ |",
    r"    $$ |  $$ |  $$ |$$ |  $$ |      $$ | $$ | $$ |$$ |$$ |  $$ |",
    r"    $$ |  \$$$$$$  |\$$$$$$  |      \$$$$$\$$$$  |$$ |$$ |  $$ |",
    r"    \__|   \______/  \______/        \_____\____/ \__|\__|  \__|",
)

INFORMATION = (
    (1, 1, "Game Information:"),
    (3, 1, "Name: Seven Days"),
    (5, 1, "Goal of game: survive 7 days"),
    (7, 1, "Rules:"),
    (8, 3, "- You have to control human's basic needs with items"),
    (10, 1, "Factors influence your survival:"),
    (11, 3, "* Hunger, Thirst, Sanity, Illness, and other items"),
    (13, 1, "Game Mechanics:"),
    (14, 3, "1. After night:"),
    (15, 5, "- If hunger, thirst, or sanity reaches zero -> health decreases"),
    (16, 5, "- If illness is above zero -> health decreases"),
    (17, 3, "2. Through events -> sanity changes"),
    (18, 3, "3. Collect food/water (automatically used after night)"),
    (19, 3, "4. No health -> different endings"),
    (21, 1, "Important Keys:"),
    (22, 3, "1. In shelter: S->Save  E->Exit"),
    (23, 3, "2. Outside: S->Story"),
    (24, 3, "3. Press I to check your status"),
    (26, 1, "Press any key to continue..."),
)
_INFO_HEIGHT = 28
_INFO_WIDTH = 90


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


def _init_colors() -> None:
    try:
        curses.start_color()
        curses.init_pair(1, curses.COLOR_BLACK, curses.COLOR_YELLOW)
        curses.init_pair(2, curses.COLOR_RED, curses.COLOR_BLACK)
    except curses.error:
        pass


def _attr(pair: int, extra: int) -> int:
    try:
        return curses.color_pair(pair) | extra
    except curses.error:
        return extra


def _box(screen, top: int, left: int, height: int, width: int) -> None:
    _put(screen, top, left, "+" + "-" * (width - 2) + "+")
    for row in range(top + 1, top + height - 1):
        _put(screen, row, left, "|" + " " * (width - 2) + "|")
    _put(screen, top + height - 1, left, "+" + "-" * (width - 2) + "+")


def _select(screen, top: int, left: int, options: Sequence[str]) -> int:
    """Vertical menu in a box; return the 1-based number of the chosen option."""
    highlight = 1
    marked = _attr(2, curses.A_REVERSE)
    while True:
        _box(screen, top, left, len(options) + 2, MENU_WIDTH)
        for index, option in enumerate(options, start=1):
            attr = marked if index == highlight else None
            _put(screen, top + index, left + 2, option, attr)
        screen.refresh()
        ch = screen.getch()
        if ch == curses.KEY_UP:
            highlight = max(1, highlight - 1)
        elif ch == curses.KEY_DOWN:
            highlight = min(len(options), highlight + 1)
        elif ch == ENTER:
            return highlight


def difficulty_for_choice(choice: int) -> int:
    """Difficulty level for a 1-based choice of hard, normal or easy."""
    try:
        return _DIFFICULTIES[choice]
    except KeyError:
        raise ValueError(f"no difficulty for choice {choice!r}") from None


def confirm_quit(screen) -> bool:
    """Ask whether to quit; True only when the player confirms."""
    height, width = screen.getmaxyx()
    if height < 5 or width < 40:
        return False
    top, left = (height - 5) // 2, (width - 40) // 2
    marked = _attr(2, curses.A_REVERSE)
    highlight = 1
    while True:
        _box(screen, top, left, 5, 40)
        _put(screen, top + 1, left + 2, "Are you sure you want to quit?")
        for index, option in enumerate(QUIT_OPTIONS, start=1):
            attr = marked if index == highlight else None
            _put(screen, top + 3, left + 2 + (index - 1) * 15, option, attr)
        screen.refresh()
        ch = screen.getch()
        if ch == curses.KEY_LEFT:
            highlight = max(1, highlight - 1)
        elif ch == curses.KEY_RIGHT:
            highlight = min(len(QUIT_OPTIONS), highlight + 1)
        elif ch == ENTER:
            return highlight == 1
        elif ch == ESCAPE:
            return False


def choose_difficulty(screen) -> int:
    """Let the player pick hard, normal or easy; return the difficulty level."""
    screen.clear()
    screen.refresh()
    height, width = screen.getmaxyx()
    top = max(0, (height - len(DIFFICULTY_OPTIONS)) // 2)
    left = max(0, (width - MENU_WIDTH) // 2)
    return difficulty_for_choice(_select(screen, top, left, DIFFICULTY_OPTIONS))


def show_victory(screen) -> None:
    """Show the victory banner and wait for a key."""
    screen.nodelay(False)
    screen.clear()
    screen.refresh()
    height, width = screen.getmaxyx()
    _box(screen, 0, 0, max(2, height - 1), width)
    start = (height - len(VICTORY_ART)) // 2
    for offset, line in enumerate(VICTORY_ART):
        _put(screen, start + offset, max(0, (width - len(line)) // 2), line)
    message = "Press any key to exit"
    _put(screen, start + len(VICTORY_ART) + 2, max(0, (width - len(message)) // 2), message)
    screen.refresh()
    screen.getch()


def show_ending(screen, ending: Ending) -> None:
    """Show how the player died and wait for a key."""
    screen.nodelay(False)
    screen.clear()
    height, width = screen.getmaxyx()
    text = ending_text(ending)
    _put(screen, height // 3, max(0, (width - len(text)) // 2), text)
    message = "Press any key to exit"
    _put(screen, height // 3 * 2, max(0, (width - len(message)) // 2), message)
    screen.refresh()
    screen.getch()


def _print_title(screen, width: int, top: int) -> None:
    attr = _attr(1, curses.A_BOLD)
    left = max(0, (width - len(TITLE[0])) // 2)
    for offset, line in enumerate(TITLE, start=1):
        _put(screen, top + offset, left, line, attr)
    screen.refresh()


def _show_information(screen) -> None:
    screen.clear()
    screen.refresh()
    height, width = screen.getmaxyx()
    top = max(0, (height - _INFO_HEIGHT) // 2)
    left = max(0, (width - _INFO_WIDTH) // 2)
    _box(screen, top, left, _INFO_HEIGHT, _INFO_WIDTH)
    for row, col, text in INFORMATION:
        _put(screen, top + row, left + col, text)
    screen.refresh()
    screen.getch()


def _fresh_pools(book: StoryBook) -> StoryPools:
    return copy.deepcopy(book.initial_pools)


def _choose_save(
    screen, book: StoryBook, save_dir: str
) -> Optional[tuple[GameState, StoryPools]]:
    """Pick a save file; None means going back to the title menu."""
    height, width = screen.getmaxyx()
    names = list_saves(save_dir)
    if not names:
        _put(screen, height - 1, 0, "No save files found!")
        screen.refresh()
        return GameState(), _fresh_pools(book)

    box_height = len(names) + 4
    top = max(0, (height - box_height) // 2)
    left = max(0, (width - 60) // 2)
    _box(screen, top, left, box_height, 60)
    _put(screen, top + 1, left + 2, "Select a save file to load from:")
    _put(screen, top + box_height - 2, left + 2, "Use arrows, Enter to load, ESC to cancel")
    highlight = 0
    while True:
        for index, name in enumerate(names):
            attr = curses.A_REVERSE if index == highlight else None
            _put(screen, top + index + 2, left + 2, name, attr)
        screen.refresh()
        ch = screen.getch()
        if ch == curses.KEY_UP:
            highlight = max(0, highlight - 1)
        elif ch == curses.KEY_DOWN:
            highlight = min(len(names) - 1, highlight + 1)
        elif ch == ENTER:
            name = names[highlight]
            screen.clear()
            try:
                loaded = load_game(Path(save_dir) / name)
            except (OSError, ValueError):
                _put(screen, height - 1, 0, f"Error: Could not load {name}")
                screen.refresh()
                return None
            _put(screen, height - 1, 0, f"Game loaded from {name}")
            screen.refresh()
            return loaded
        elif ch == ESCAPE:
            screen.clear()
            _put(screen, height - 1, 0, "Load cancelled")
            screen.refresh()
            return None


def _play(screen, state: GameState, book: StoryBook, pools: StoryPools, rng) -> str:
    try:
        won = explore(screen, state, book, pools, rng)
    except GameOver as exc:
        show_ending(screen, exc.ending)
        return DEATH
    if won:
        show_victory(screen)
        return VICTORY
    return QUIT


def run(screen, book: StoryBook, save_dir: str = SAVE_DIR) -> str:
    """Show the title menu and play; return QUIT, VICTORY or DEATH."""
    screen.keypad(True)
    screen.nodelay(False)
    _cursor(0)
    _init_colors()
    rng = random.Random()
    height, width = screen.getmaxyx()
    menu_height = len(MENU_OPTIONS) + 2
    menu_top = max(TITLE_HEIGHT, (height - (TITLE_HEIGHT + menu_height)) // 2 + TITLE_HEIGHT)
    menu_left = max(0, (width - MENU_WIDTH) // 2)

    while True:
        screen.nodelay(False)
        screen.clear()
        _print_title(screen, width, menu_top - TITLE_HEIGHT)
        choice = _select(screen, menu_top, menu_left, MENU_OPTIONS)
        if choice == 1:
            state = GameState(difficulty=choose_difficulty(screen))
            pools = _fresh_pools(book)
        elif choice == 2:
            loaded = _choose_save(screen, book, save_dir)
            if loaded is None:
                continue
            state, pools = loaded
        elif choice == 3:
            _show_information(screen)
            continue
        else:
            screen.clear()
            _put(screen, 0, 0, "Quitting the Game...", _attr(1, curses.A_NORMAL))
            screen.refresh()
            time.sleep(QUIT_PAUSE)
            return QUIT
        return _play(screen, state, book, pools, rng)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game in the terminal."""
    parser = argparse.ArgumentParser(prog="sevendays", description="Survive seven days.")
    parser.add_argument("--stories", help="JSON file holding the story book")
    parser.add_argument("--save-dir", default=SAVE_DIR, help="directory of save files")
    args = parser.parse_args(argv)

    if args.stories:
        try:
            book = load_book(args.stories)
        except (OSError, ValueError) as exc:
            parser.error(f"cannot read stories: {exc}")
    else:
        book = StoryBook()
    Path(args.save_dir).mkdir(parents=True, exist_ok=True)
    curses.wrapper(run, book, args.save_dir)
    return 0