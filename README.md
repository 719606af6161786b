# spacewar

A small top-down space game drawn with pygame. It opens on a menu with one
button. Clicking the button switches to the play scene, where a spinning ship
sits in the middle of the window and moves with the keyboard.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
spacewar [CONFIG_FILE]
```

`CONFIG_FILE` is the text configuration described below. Without it the game
reads `../../config.txt` relative to the current directory. If the file cannot
be opened or parsed, or it has no `Window` record, the game prints the current
path and the error and exits with status 1.

The game keeps switching scenes until the current scene closes the window
without asking for another scene, or asks for a scene name the game does not
know (`menu`, `play` and `multiplayer` are known).

## Controls

| Input        | Where         | Action                                       |
|--------------|---------------|----------------------------------------------|
| Left click   | Menu          | Press the button under the cursor            |
| W A S D      | Play          | Move the ship                                |
| P            | Menu and play | Pause or resume; mouse clicks are ignored while paused |
| Escape       | Menu and play | Close the window                             |

Closing the window also ends the scene.

## Configuration file

The configuration is plain text split on whitespace. A record starts with a
keyword followed by its values. Any other word is skipped on its own.

```
Window  WIDTH HEIGHT FPS FULLSCREEN
Player  SHAPE_RADIUS COLLISION_RADIUS SPEED FILL_R FILL_G FILL_B OUTLINE_R OUTLINE_G OUTLINE_B OUTLINE_THICKNESS VERTICES
Bullet  SHAPE_RADIUS COLLISION_RADIUS SPEED FILL_R FILL_G FILL_B OUTLINE_R OUTLINE_G OUTLINE_B OUTLINE_THICKNESS VERTICES LIFESPAN
SinglePlayerButton  WIDTH HEIGHT X Y OUTLINE_THICKNESS FILL_R FILL_G FILL_B OUTLINE_R OUTLINE_G OUTLINE_B
```

- `FULLSCREEN` set to `1` opens a window of the given size. Any other value
  opens the game fullscreen.
- `SPEED` may be a decimal number. The other values are whole numbers.
- Radii, thicknesses, button sizes and positions, and `LIFESPAN` must lie
  between 0 and 65535. Colour channels keep only their low 8 bits.
- A missing or malformed value raises `spacewar.config.ConfigError`.

Example:

```
Window 1280 720 60 1
Player 32 32 5 5 5 5 255 0 0 4 8
Bullet 10 10 20 255 255 255 255 255 255 2 20 90
SinglePlayerButton 300 80 490 320 4 40 40 120 255 255 255
```

The button's clickable area runs from `X` to `X + WIDTH` and from `Y` to
`Y + HEIGHT`. The drawn rectangle has its bottom-right corner at `X, Y`.

## Using it as a library

```python
from spacewar.config import parse_config
from spacewar.entity_manager import EntityManager

config = parse_config("Window 800 600 60 1\n")
assert config.window.width == 800

manager = EntityManager()
ship = manager.add_entity("Player")
manager.update()               # new entities become visible after update()
assert manager.get_entities("Player") == [ship]

ship.destroy()
manager.update()               # destroyed entities are removed on the next update()
assert manager.get_entities() == []
```

Modules:

- `spacewar.components`: dataclasses for entity parts (`Transform`,
  `CircleShape`, `RectangleShape`, `Input`, `Button`, `Shoot`,
  `SpecialShoot`, `LifeSpan` and others).
- `spacewar.entity`: `Entity`, a tag, an id and optional components.
- `spacewar.entity_manager`: `EntityManager`, which adds new entities and drops
  destroyed ones on `update()`.
- `spacewar.config`: `parse_config`, `load_config` and the settings dataclasses.
- `spacewar.scene`: the abstract `Scene` base class.
- `spacewar.menu_scene`, `spacewar.play_scene`, `spacewar.multiplayer_scene`:
  the scenes. The menu and play scenes have a `step(events)` method that runs
  one frame from a list of pygame events. This lets them be driven without
  an event loop.
- `spacewar.game`: `Game`, which loads a configuration file, opens the window
  and runs the scenes, and `main`, the `spacewar` command.

## What it does not do

- Clicking in the play scene does not fire. `PlayScene.shoot()` (one bullet
  toward the cursor) and `PlayScene.special_shoot()` (a ring of bullets) work
  when called directly, but the frame loop does not call them.
- There are no enemies, collisions or scores. An `EnemySpecs` dataclass exists,
  but no `Enemy` record is read from the configuration. Bullet lifespans are
  stored but never count down.
- `MultiplayerScene` only prints a prompt on standard output, waits for input
  and then returns to the menu. No button on the menu leads to it.