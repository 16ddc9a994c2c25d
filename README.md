# lootdogs

`lootdogs` is the game model of a multiplayer game. Dogs run along the roads of
a map, pick up lost objects and carry them to offices for points. The package
uses only the standard library.

## What is in it

- `lootdogs.model`: `Point`, `Road`, `Building`, `Office`, `LootType` and
  `LootGeneratorConfig`.
- `lootdogs.maps.Map`: roads, buildings, offices and loot types of one map.
  It also picks random points on roads (`random_point`).
- `lootdogs.json_loader.load_game`: builds a `lootdogs.game.Game` from a JSON
  configuration file.
- `lootdogs.game_session.GameSession` moves dogs along roads and stops them
  at road edges. It spawns loot through `lootdogs.loot_generator.LootGenerator`
  and lets dogs pick loot up and hand it in at offices. It removes dogs that
  stood still for the retirement time and reports them as
  `lootdogs.retired_players.RetiredPlayer` records to callbacks registered with
  `connect_retired_players`.
- `lootdogs.ticker.Ticker`: calls a handler periodically on a background
  thread. A session with a non-zero tick period uses it after `run()`.
- `lootdogs.collision_detector.find_gather_events`: finds the items that
  moving gatherers pass close enough to.
- `lootdogs.serialization`: `LostObjectRepr`, `DogRepr`, `GameSessionRepr` and
  `PlayerRepr` turn state into plain dictionaries (`to_dict`) and back
  (`from_dict`, `restore`).
- `lootdogs.api_json`: JSON views of maps, roads, buildings, offices and loot
  types, plus `parse_query` for URL query strings.
- `lootdogs.program_options.parse_command_line`: parses server options
  (`--tick-period`, `--config-file`, `--www-root`, `--randomize-spawn-points`,
  `--state-file`, `--save-state-period`) into an `Args` dataclass.
- `lootdogs.logger`: `init_logger` and `log_with_data` write records as JSON
  lines with a timestamp, a data payload and a message.
- `lootdogs.files`: `is_sub_path`, `url_decode` and `mime_type` for serving
  static files.

## Loading a game

```python
from lootdogs.json_loader import load_game

game = load_game("config.json")
for game_map in game.maps:
    print(game_map.id, game_map.name)
```

The configuration file has this shape:

```json
{
  "defaultDogSpeed": 3.0,
  "defaultBagCapacity": 3,
  "dogRetirementTime": 60.0,
  "lootGeneratorConfig": {"period": 5.0, "probability": 0.5},
  "maps": [
    {
      "id": "map1",
      "name": "Map 1",
      "dogSpeed": 4.0,
      "bagCapacity": 5,
      "roads": [{"x0": 0, "y0": 0, "x1": 40}, {"x0": 40, "y0": 0, "y1": 30}],
      "buildings": [{"x": 5, "y": 5, "w": 30, "h": 20}],
      "offices": [{"id": "o0", "x": 40, "y": 30, "offsetX": 5, "offsetY": 0}],
      "lootTypes": [{"name": "key", "file": "assets/key.obj", "type": "obj",
                     "rotation": 90, "color": "#338844", "scale": 0.03, "value": 10}]
    }
  ]
}
```

Per-map `dogSpeed` and `bagCapacity` override the game defaults.
`dogRetirementTime` is given in seconds. The loader raises `ValueError` in
these cases:

- a road that is neither horizontal nor vertical,
- a missing or mistyped field,
- a duplicate map id or office id.

It raises `OSError` when the file cannot be read.

## Playing a session

```python
from datetime import timedelta

from lootdogs.constants import Direction
from lootdogs.dog import Dog

game_map = game.find_map("map1")
session = game.find_valid_session(game_map, timedelta(0))  # 0: no automatic ticks

dog = Dog("Rex")
session.add_dog(dog, False)  # placed at the start of the first road
dog.direction = Direction.EAST
dog.set_speed((game_map.dog_speed, 0.0))

session.update(timedelta(milliseconds=500))
print(dog.coordinate, dog.bag, dog.score)
```

A session builds its `LootGenerator` from the game's `loot_generator_config`.
The period must be positive, otherwise creating the session raises
`ValueError`. Loot can appear only on maps that have loot types.

## Finding collisions

```python
from lootdogs.collision_detector import (
    Gatherer, Item, ItemGathererDogProvider, find_gather_events,
)
from lootdogs.geom import Point2D

provider = ItemGathererDogProvider()
provider.add_item(Item(Point2D(2, 2), 0.5))
provider.add_gatherer(Gatherer(Point2D(0, 0), Point2D(4, 4), 0.5))

for event in find_gather_events(provider):
    print(event.item_id, event.gatherer_id, event.sq_distance, event.time)
```

Events are ordered by the fraction of the move at which each item is reached.
A gatherer that did not move collects nothing.

## What it does not do

The package is the model only. It has these gaps:

- No HTTP server and no request routing. `api_json` only builds the JSON
  bodies.
- No command to start a server. `parse_command_line` only parses options.
- No player registry or token handling beyond the `PlayerRepr` snapshot.
- No database. `RetiredPlayersRepository` is an abstract interface with no
  storage behind it.
- No saving of snapshots to files. The serialization classes stop at
  dictionaries.

## Running the tests

Install the `test` extra and run pytest from the project directory.