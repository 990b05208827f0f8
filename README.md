# tactisim

A small tactical simulator. It opens a 1024 × 768 window showing a 32 × 24
tile map of 32-pixel tiles (grass, scattered water and an obstacle border)
with three units placed on it: a friendly infantry unit at tile (3, 3), an
enemy tank at tile (10, 7) and an enemy infantry unit at tile (5, 11). You
select a unit with the mouse and send it somewhere, and it travels there at a
steady speed.

## Installing

```
pip install .
```

This installs pygame too, which is used for the window and the drawing.

## Playing

```
tactisim
```

The command takes no options other than `--help`. On start it prints the map
and window sizes and where each unit was placed.

Controls:

- **Left click** on a unit selects it. A black outline is drawn around the
  selected unit. Left-clicking empty ground clears the selection.
- **Right click** anywhere sends the selected unit moving toward that point.
  It moves at 100 pixels per second and stops on the exact spot. A new
  order replaces the one in progress.
- **Escape** or closing the window quits.

Friendly units are green, enemy units red and neutral units yellow.

## Using the pieces in code

The map, the units and the commands do not need a window, so you can use them
in your own code or tests:

```python
from tactisim.tilemap import TileMap, TileType
from tactisim.unit_manager import UnitManager
from tactisim.unit import UnitType, Faction
from tactisim.command import MoveCommand
from tactisim.geometry import Vec2

tile_map = TileMap(32, 24, 32)
print(tile_map.tile_type(0, 0))     # TileType.OBSTACLE (part of the border)
print(tile_map.is_walkable(3, 3))   # True

units = UnitManager()
units.add_unit(UnitType.INFANTRY, Faction.FRIENDLY, tile_map.tile_to_pixel_center(3, 3))
unit = units.get_unit_by_id(0)
unit.set_command(MoveCommand(Vec2(300.0, 200.0)))

for _ in range(100):
    units.update_all(1 / 60)
print(unit.position)
```

Some details:

- Only grass tiles are walkable. Coordinates outside the map come back as
  `TileType.UNKNOWN`, and `set_tile` ignores them.
- `TileMap` raises `ValueError` if its width, height or tile size is not
  positive.
- `TileMap.pixel_to_tile` truncates toward zero and may return a tile that is
  off the map; check it with `is_valid_coordinate`.
- `UnitManager.add_unit` numbers units from 0 and returns the id the *next*
  unit will get.
- `tactisim.game.Game` can be driven without a window: `select_at`,
  `command_move`, `update` and `render` (which draws onto `Game.surface`).

## What it does not do

There is no combat, no pathfinding and no terrain checking for movement:
a moving unit goes in a straight line and crosses water and obstacle tiles
alike. There are no other orders than moving, no saving or loading, and no
menus or on-screen information beyond the map and the units.

## Running the tests

```
pip install .[test]
pytest
```