# sevendays

A terminal survival game played in a curses window. You wake up in a
shelter and have to stay alive for seven days. You keep track of food,
water, hunger, thirst, sanity, illness, bullets and an inventory. By day you
can go out to the supermarket, the hospital or the weapon shop and play the
stories found there. By night something happens in the shelter and your
supplies are used up. When day 7 begins, a boss fight decides the run.

## Installing

```
pip install .
```

Only the Python standard library is used. You need a terminal that `curses`
supports, and the window must be large enough for the maps (about 60 columns
by 25 rows).

## Running

```
sevendays [--stories FILE] [--save-dir DIR]
```

- `--stories FILE`: a JSON story book (see below). Without it the game runs
  with an empty book, so there are no story spots, no night events and no
  story screens. The maps, the daily upkeep and the boss fight still work.
- `--save-dir DIR`: the directory that **Continue** lists saves from. The
  default is `save`. The directory is created if it is missing.

The title menu offers:

- **Start Game**: pick hard, normal or easy, then begin in the shelter.
- **Continue**: choose a `.save` file to load. Enter loads it and Esc goes
  back. If there are no saves, a new game starts.
- **Information**: the rules and the keys.
- **Quit**

## Keys

- Arrow keys move your character `X` and the cursor in menus.
- In the shelter:
  - Stand on the door and press Enter (daytime only) to pick a destination.
  - Stand on `S` and press `A` to save.
  - Stand on `E` and press `A`, or press `q` anywhere, to be asked whether to quit.
- At a location, stand on a story spot `S` and press `A` to play it. Stand
  on the door and press Enter to go back to the shelter. Going back ends the
  day and brings night.
- At night, walking about in the shelter starts a random night event. After
  it, the night's upkeep is applied.
- `i` shows your status. Press `q` to leave the status screen.
- In a story, up and down choose an option, Enter confirms, and `q` leaves
  the story.

## Saving

Saves go to a directory named `save` under the current working directory.
This is the case whatever `--save-dir` says. The name you type gets `.save`
appended, and names containing `/` are refused. A save file is plain text
with one value per line: the day, food, water, difficulty, hunger, thirst,
health, sanity, bullets and illness flag, then the items and
`END_OF_ITEMS`. After that come the three unplayed story pools (hospital,
supermarket, weapon shop), each ended by `-1`. Items are read back split on
whitespace, so an item whose name has spaces comes back as several items.

## How a half-day ends

Each night costs `1 + difficulty` food and the same amount of water. If the
food is gone, that amount is taken from hunger instead. If hunger is gone
too, it is taken from health. Water and thirst work the same way. Sanity
below that amount also costs health, and so does any illness. When health
reaches zero the game ends, with an ending that depends on the cause:
starvation, thirst, madness or illness. Story rewards can also kill
(bloodloss, madness, death), and so can the boss.

## The boss fight

Each round you shoot if you have bullets and strike by hand if not. A shot
hits the head with a chance that grows with your sanity. A head shot takes
10 of the boss's 15 health, a body shot 3 and a blow 1. Unless the boss
falls, it strikes back for 1 health.

## Story book format

```json
{
  "stories": {
    "door": {"text": "Someone knocks.", "options": ["Open", "Hide"],
             "next": ["open", null], "reward": []},
    "open": {"text": "A stranger hands you a can.", "options": ["Continue"],
             "next": [], "reward": ["inventory Beans", "food 2"]}
  },
  "hospital": [], "supermarket": [], "weaponshop": [],
  "night": {"knocking_door": "door"},
  "ui": [],
  "pools": {"hospital": [0]}
}
```

- `stories` maps ids to pages. `next` lists the page each option leads to,
  with `null` for none.
- `hospital`, `supermarket` and `weaponshop` list the stories that can
  appear as spots. `pools` (optional) gives the indices into those lists
  still to be played. By default every story is in the pool.
- `night` maps event names (`knocking_door`, `glass_breaking_noise`,
  `lights_off`, `temperature_drop`, `temperature_increase`, `green_light`)
  to stories.
- `ui` lists interface stories by position:
  - 0: leaving a location
  - 1: morning
  - 2 to 14: the boss fight (intro, your stats, shooting, head shot, body
    shot, no bullets, melee, the boss falls, the boss is dead, the boss's
    health, the boss strikes, your health, you fall)
  - 16: the end of the night
  - 17: the night's summary

  The texts of 3, 11, 13 and 17 are filled in by the game.
- Rewards:
  - `health N`, `food N`, `water N`, `bullet N` and `sanity N` change stats.
  - `inventory ITEM` adds an item.
  - `inventory- ITEM` requires and removes an item before a one-option page
    can be entered. A negative `bullet` on such a page also requires enough
    bullets.
  - `death` ends the game.
  - `startstory N` puts hospital story `N` back in the pool.
  - Any other reward is only shown.

## Using it as a library

- `sevendays.state`: `GameState`, `StoryPools`, `Ending` and `GameOver`.
- `sevendays.logic`: `end_a_day`, `head_shot`, `BossFight` and `ending_text`.
- `sevendays.story`: `Story`, `StoryBook`, `load_book`, `parse_reward`,
  `check_requirements`, `apply_rewards` and `place_story_spots`.
- `sevendays.savefile`: `dump`, `load`, `save_game`, `load_game`,
  `list_saves` and `normalize_name`.
- `sevendays.maps`: the maps and `load_map`, `to_grid`, `origin`, `is_door`
  and `is_wall`.

## What it does not do

The package ships no stories. The location stories, night events and
interface texts all come from the JSON file given with `--stories`.

## Development

```
pip install -e ".[test]"
pytest
```