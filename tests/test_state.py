import pytest

from sevendays.state import Ending, GameOver, GameState, StoryPools


def test_defaults():
    state = GameState()
    assert state.day == 0
    assert (state.food, state.water, state.hunger, state.thirst) == (5, 5, 5, 5)
    assert (state.health, state.sanity, state.bullet) == (10, 10, 3)
    assert state.items == ["GLOCK-18"]


def test_defaults_not_shared():
    first = GameState()
    first.add_item("Rope")
    assert GameState().items == ["GLOCK-18"]


def test_night_alternates():
    assert not GameState(day=0).is_night()
    assert GameState(day=0.5).is_night()
    assert not GameState(day=1.0).is_night()
    assert GameState(day=6.5).is_night()


def test_day_label():
    assert GameState(day=0).day_label() == "Day 1"
    assert GameState(day=0.5).day_label() == "Night Time"
    assert GameState(day=3).day_label() == "Day 4"


def test_status_lines():
    state = GameState(day=2.5, items=["Rope", "Knife"])
    lines = state.status_lines()
    assert lines[0] == "Game Status"
    assert "Day: 2.5" in lines
    assert "Items: Rope  Knife" in lines
    assert "You are ill!!!" not in lines


def test_status_lines_ill():
    assert "You are ill!!!" in GameState(ill=1).status_lines()


def test_apply_stat_changes_value():
    state = GameState()
    before = state.water
    assert state.apply_stat("water", 2) is True
    assert state.water == before + 2


def test_apply_stat_fatal():
    state = GameState()
    assert state.apply_stat("health", -state.health) is False
    assert state.health == 0


def test_apply_stat_bullet_refused():
    state = GameState()
    assert state.apply_stat("bullet", -4) is False
    assert state.bullet == 3
    assert state.apply_stat("bullet", -3) is True
    assert state.bullet == 0


def test_apply_stat_unknown_kind():
    state = GameState()
    assert state.apply_stat("luck", -100) is True
    assert state == GameState()


def test_items():
    state = GameState()
    state.add_item("Rope")
    assert state.items == ["GLOCK-18", "Rope"]
    assert state.remove_item("GLOCK-18") is True
    assert state.items == ["Rope"]
    assert state.remove_item("GLOCK-18") is False


def test_game_over_carries_ending():
    error = GameOver(Ending.THIRST)
    assert error.ending is Ending.THIRST
    assert Ending(6) is Ending.BLOODLOSS
    assert Ending(2) is Ending.THIRST


def test_story_pools_default_empty():
    pools = StoryPools()
    assert (pools.hospital, pools.supermarket, pools.weaponshop) == ([], [], [])