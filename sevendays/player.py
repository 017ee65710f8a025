"""Playing a branching story on screen."""

from __future__ import annotations

import curses
from typing import Optional

from .screen import clear_screen
from .state import GameState, StoryPools
from .story import Story, apply_rewards, check_requirements

ENTER = 10
QUIT = ord("q")
ARROW = "->"


def _put(screen, row: int, col: int, text: str) -> None:
    if row < 0 or col < 0:
        return
    try:
        screen.addstr(row, col, text)
    except curses.error:
        pass


class StoryPlayer:
    """Shows stories letter by letter and follows the player's choices.

    Rewards collected along a chain of stories are shown together once
    the chain reaches its end.
    """

    def __init__(self, screen, state: GameState, pools: StoryPools):
        self.screen = screen
        self.state = state
        self.pools = pools
        self._pending: list[str] = []

    def _show_corner(self) -> None:
        self.screen.clear()
        _put(self.screen, 0, 0, self.state.day_label())
        self.screen.refresh()

    def play(self, story: Optional[Story]) -> None:
        """Play a story and whatever the player's choices lead to.

        Raises GameOver when a reward kills the player.
        """
        height, width = self.screen.getmaxyx()
        while True:
            self._show_corner()
            if story is None:
                return
            following = self._play_page(story, height, width)
            if following is _QUIT:
                self._show_corner()
                return
            if following is _DONE:
                return
            story = following

    def _play_page(self, story: Story, height: int, width: int):
        screen = self.screen
        top = height // 3
        left = max(0, (width - len(story.text)) // 2)
        options_row = top * 2
        shown = 0
        choice = 0

        while True:
            ch = screen.getch()
            if ch == QUIT:
                return _QUIT

            if shown < len(story.text):
                _put(screen, top, left + shown, story.text[shown])
                shown += 1
                screen.refresh()
            elif shown == len(story.text):
                for k, option in enumerate(story.options):
                    _put(screen, options_row + k, left, option)
                _put(screen, options_row, left - 3, ARROW)
                shown += 1
                screen.refresh()

            if ch == curses.KEY_UP:
                if choice > 0:
                    _put(screen, options_row + choice, left - 3, "  ")
                    choice -= 1
                    _put(screen, options_row + choice, left - 3, ARROW)
                    screen.refresh()
            elif ch == curses.KEY_DOWN:
                if choice < len(story.options) - 1:
                    _put(screen, options_row + choice, left - 3, "  ")
                    choice += 1
                    _put(screen, options_row + choice, left - 3, ARROW)
                    screen.refresh()
            elif ch == ENTER:
                proceed = True
                if choice < len(story.next) and story.next[choice] is not None:
                    refusal = check_requirements(self.state, story.next[choice])
                    if refusal is not None:
                        proceed = False
                        _put(screen, options_row + choice, left + 20, refusal)
                        screen.refresh()

                self._pending.extend(apply_rewards(self.state, self.pools, story))
                if self._pending and (not story.next or story.next[0] is None):
                    self._show_rewards(height, width)

                if not proceed:
                    continue
                if choice < len(story.next):
                    following = story.next[choice]
                    return following if following is not None else None
                return _DONE

    def _show_rewards(self, height: int, width: int) -> None:
        screen = self.screen
        text = ", ".join(self._pending)
        clear_screen(screen, height, width)
        _put(screen, 0, 0, self.state.day_label())
        screen.refresh()
        _put(screen, height // 2, max(0, (width - len(text) - 6) // 2), f"Added {text}")
        _put(screen, height // 2 + 2, max(0, (width - 24) // 2), "Press Enter to continue...")
        screen.refresh()
        while screen.getch() != ENTER:
            pass
        self._pending.clear()


class _Marker:
    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = name

    def __repr__(self) -> str:
        return self.name


_QUIT = _Marker("QUIT")
_DONE = _Marker("DONE")