import pytest

from sevendays.logic import (
    BOSS_HEALTH,
    HEADSHOT,
    MELEE,
    SHOT,
    BossFight,
    end_a_day,
    ending_text,
    head_shot,
)
from sevendays.state import Ending, GameOver, GameState


class FixedRng:
    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        assert 0 <= self.value < stop
        return self.value


def test_end_a_day_consumes_supplies():
    state = GameState()
    food, water = state.food, state.water
    text = end_a_day(state)
    assert state.day == 0.5
    assert state.food == food - 1
    assert state.water == water - 1
    assert text == f"Food {food - 1}(-1) Water {water - 1}(-1) "


def test_difficulty_raises_consumption():
    state = GameState(difficulty=2)
    food = state.food
    end_a_day(state)
    assert state.food == food - 3


def test_hunger_used_when_out_of_food():
    state = GameState(food=0, hunger=5)
    text = end_a_day(state)
    assert state.hunger == 4
    assert text.startswith("Hunger 4(-1) ")


def test_hunger_equal_to_delta_changes_nothing():
    state = GameState(food=0, hunger=1)
    health = state.health
    end_a_day(state)
    assert (state.food, state.hunger, state.health) == (0, 1, health)


def test_health_lost_when_starving():
    state = GameState(food=0, hunger=0, health=5)
    text = end_a_day(state)
    assert state.health == 4
    assert text.endswith("Health 4(-1) ")


@pytest.mark.parametrize(
    "kwargs, ending",
    [
        (dict(food=0, hunger=0, health=1), Ending.STARVATION),
        (dict(water=0, thirst=0, health=1), Ending.THIRST),
        (dict(sanity=0, health=1), Ending.MADNESS),
        (dict(ill=1, health=1), Ending.ILLNESS),
    ],
)
def test_fatal_days(kwargs, ending):
    with pytest.raises(GameOver) as info:
        end_a_day(GameState(**kwargs))
    assert info.value.ending is ending


def test_illness_reported():
    state = GameState(ill=2)
    health = state.health
    text = end_a_day(state)
    assert state.health == health - 1
    assert "Illness, health 2(-1) " in text


def test_head_shot():
    assert head_shot(0, FixedRng(0)) is False
    assert head_shot(23, FixedRng(499)) is True
    assert head_shot(10, FixedRng(99)) is True
    assert head_shot(10, FixedRng(100)) is False


def test_ending_text():
    assert ending_text(Ending.STARVATION) == (
        "You starved to death at the end of the wilderness due to lack of food."
    )
    assert ending_text(Ending.DEATH) == "You died"


def test_boss_headshots_win():
    state = GameState(sanity=23, bullet=3, health=10)
    fight = BossFight(state, FixedRng(0))
    assert fight.play_round() == HEADSHOT
    assert fight.boss_health == BOSS_HEALTH - 10
    assert state.health == 9
    assert fight.play_round() == HEADSHOT
    assert fight.defeated
    assert state.health == 9
    assert state.bullet == 1
    with pytest.raises(RuntimeError):
        fight.play_round()


def test_boss_body_shot_and_melee():
    state = GameState(sanity=0, bullet=1, health=10)
    fight = BossFight(state, FixedRng(0))
    assert fight.play_round() == SHOT
    assert fight.boss_health == BOSS_HEALTH - 3
    assert fight.play_round() == MELEE
    assert fight.boss_health == BOSS_HEALTH - 4
    assert state.bullet == 0


def test_boss_kills_player():
    state = GameState(bullet=0, health=1)
    fight = BossFight(state, FixedRng(0))
    with pytest.raises(GameOver) as info:
        fight.play_round()
    assert info.value.ending is Ending.BOSS
    assert not fight.defeated