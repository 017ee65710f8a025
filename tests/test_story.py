import json
import random

import pytest

from sevendays.maps import is_door, is_wall, load_map
from sevendays.state import Ending, GameOver, GameState, StoryPools
from sevendays.story import (
    Story,
    StoryBook,
    apply_rewards,
    check_requirements,
    load_book,
    parse_reward,
    place_story_spots,
)


def _book(n=5):
    stories = [Story(text=f"story {i}") for i in range(n)]
    return StoryBook(hospital=stories, supermarket=list(stories), weaponshop=list(stories))


def test_parse_reward():
    assert parse_reward("health 5") == ("health", "5")
    assert parse_reward("inventory Canned Beans") == ("inventory", "Canned Beans")
    assert parse_reward("death") == ("death", "")
    assert parse_reward("") == ("", "")


def test_sample_draws_and_removes():
    book = _book()
    pools = StoryPools(hospital=list(range(5)))
    chosen = book.sample(2, "hospital", pools, random.Random(3))
    assert len(chosen) == 2
    assert len(pools.hospital) == 3
    chosen_idx = {book.hospital.index(s) for s in chosen}
    assert chosen_idx.isdisjoint(pools.hospital)
    assert chosen_idx | set(pools.hospital) == set(range(5))


def test_sample_unknown_location():
    pools = StoryPools(hospital=[0, 1])
    assert _book().sample(2, "shelter", pools, random.Random(0)) == []
    assert pools.hospital == [0, 1]


def test_sample_too_many():
    with pytest.raises(ValueError):
        _book().sample(2, "weaponshop", StoryPools(weaponshop=[0]), random.Random(0))


@pytest.mark.parametrize("location", ["hospital", "supermarket", "weaponshop"])
def test_place_story_spots_on_floor(location):
    grid = load_map(location)
    pools = StoryPools(*(list(range(5)) for _ in range(3)))
    spots = place_story_spots(_book(), pools, 2, location, grid, 3, 7, random.Random(9))
    assert len(spots) == 2
    for spot in spots:
        cell = grid[spot.row - 3][spot.col - 7]
        assert not is_wall(cell)
        assert not is_door(cell)
        assert spot.row - 3 >= 1


def test_place_story_spots_shelter_empty():
    grid = load_map("shelter")
    assert place_story_spots(_book(), StoryPools(), 2, "shelter", grid, 0, 0, random.Random(0)) == []


def test_check_requirements_bullets():
    story = Story(options=["ok"], reward=["bullet -4"])
    assert check_requirements(GameState(), story) == "(Insufficient stats!, please choose again)"
    assert check_requirements(GameState(bullet=4), story) is None


def test_check_requirements_items():
    story = Story(options=["ok"], reward=["inventory- Rope"])
    state = GameState()
    assert check_requirements(state, story) == "(Item not found!, please choose again)"
    state.add_item("Rope")
    assert check_requirements(state, story) is None
    assert "Rope" not in state.items


def test_check_requirements_ignores_multi_option():
    story = Story(options=["a", "b"], reward=["bullet -100"])
    assert check_requirements(GameState(), story) is None


def test_apply_rewards():
    state = GameState()
    pools = StoryPools()
    story = Story(reward=["inventory Rope", "food 2", "note hello", "startstory 4"])
    shown = apply_rewards(state, pools, story)
    assert shown == ["inventory Rope", "food 2", "note hello"]
    assert state.items[-1] == "Rope"
    assert state.food == GameState().food + 2
    assert pools.hospital == [4]


def test_apply_rewards_failed_stat_hidden():
    state = GameState()
    shown = apply_rewards(state, StoryPools(), Story(reward=["bullet -10", "water -10"]))
    assert shown == []
    assert state.bullet == 3


@pytest.mark.parametrize(
    "reward, ending",
    [("health -10", Ending.BLOODLOSS), ("sanity -10", Ending.MADNESS), ("death", Ending.DEATH)],
)
def test_apply_rewards_endings(reward, ending):
    with pytest.raises(GameOver) as info:
        apply_rewards(GameState(), StoryPools(), Story(reward=[reward]))
    assert info.value.ending is ending


def test_load_book(tmp_path):
    data = {
        "stories": {
            "a": {"text": "A door", "options": ["Open", "Leave"], "next": ["b", None]},
            "b": {"text": "Inside", "options": ["Ok"], "next": [None], "reward": ["food 1"]},
            "n": {"text": "Knock", "options": ["Ok"], "next": [None]},
        },
        "hospital": ["a", "b"],
        "supermarket": ["b"],
        "night": {"knocking_door": "n"},
        "ui": ["n"],
    }
    path = tmp_path / "book.json"
    path.write_text(json.dumps(data))
    book = load_book(path)
    assert book.hospital[0].text == "A door"
    assert book.hospital[0].next[0] is book.hospital[1]
    assert book.hospital[0].next[1] is None
    assert book.night["knocking_door"] is book.ui[0]
    assert book.hospital[1].reward == ["food 1"]
    assert book.initial_pools == StoryPools(hospital=[0, 1], supermarket=[0], weaponshop=[])


def test_load_book_unknown_id(tmp_path):
    path = tmp_path / "book.json"
    path.write_text(json.dumps({"stories": {}, "hospital": ["missing"]}))
    with pytest.raises(ValueError):
        load_book(path)