# ruztoo

The rules and the world model of a tile-based dungeon roguelike, written in
plain Python with no dependencies outside the standard library. Everything is
drawn onto an in-memory character grid, so any front end can show it.

## What is in the package

- `ruztoo.tiletype`: the `TileType` enum and `tile_walkable`, `tile_opaque`
  and `tile_cost`.
- `ruztoo.map`: the `Map` class. Tiles are stored by column (`tiles[x][y]`)
  alongside revealed, visible and blocked flags, blood stains, blocked-sight
  cells and a per-tile list of entity ids. It gives exits and costs for path
  finding (`get_available_exits`, `get_pathing_distance`), `is_opaque`,
  `populate_blocked`, `get_total_floor_tiles`, and `to_dict` / `from_dict`
  for turning a map into plain data and back (the per-tile entity lists are
  not kept).
- `ruztoo.components`: the dataclasses and enums entities are built from:
  `Position`, `Name`, `Viewshed`, `Renderable`, items and their effects,
  `Equippable` / `Equipped`, `HungerClock`, `Attributes`, `Skills`, `Pools`
  and more. `SufferDamage.new_damage` queues damage for an entity.
- `ruztoo.world`: `World`, a small entity store with `create_entity`,
  `delete_entity`, `get`, `insert`, `remove`, `join` and `clear`, plus the
  shared resources the systems use (`map`, `log`, `rng`, `player_entity`,
  `player_pos`, `runstate`, `particles`); and `GameLog`.
- `ruztoo.gamesystem`: `attr_bonus`, `player_hp_per_level`,
  `player_hp_at_level`, `npc_hp`, `mana_per_level`, `mana_at_level`,
  `skill_bonus` and `roll_dice`.
- `ruztoo.runstate`: the game-loop states (`RunState`, `ShowTargeting`,
  `MainMenu`, `MagicMapReveal`, `MainMenuSelection`),
  `entities_to_remove_on_level_change` and `reveal_map_row`.
- Per-turn systems, each with a `run(world)` method:
  `ruztoo.hunger.HungerSystem` (with `calculate_new_hunger_state`),
  `ruztoo.damage.DamageSystem` (with `delete_the_dead`),
  `ruztoo.bystander_ai.BystanderAI`, and in `ruztoo.inventory`
  `ItemCollectionSystem`, `ItemUseSystem`, `ItemDropSystem` and
  `ItemUnequippingSystem`. `ruztoo.inventory.field_of_view` computes the
  tiles seen from a point, used for area-of-effect items; visual effects are
  queued as `ParticleRequest` values on `world.particles`.
- Drawing: `ruztoo.colors` (`RGB` and named colours), `ruztoo.terminal`
  (`Console`, `Cell`, `Key`, `to_cp437`, `letter_to_option`),
  `ruztoo.camera` (`render_map`, `render_camera`, `render_debug_map`,
  `get_screen_bounds`, `get_tile_glyph`, `wall_glyph`) and `ruztoo.gui`
  (`draw_gui`, `draw_tooltips`, the item menus, `ranged_target`,
  `main_menu`, `game_over`, `draw_ui`).

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A short tour

```python
from ruztoo.map import Map
from ruztoo.gamesystem import attr_bonus, npc_hp, mana_at_level
from ruztoo.world import World, GameLog
from ruztoo.components import Position, Name

# A new map is solid wall.
dungeon = Map(1, 80, 50)
assert dungeon.get_total_floor_tiles() == 0
assert dungeon.is_tile_in_bounds(10, 10)

# Character formulas.
attr_bonus(14)        # 2
npc_hp(11, 2)         # 17
mana_at_level(11, 3)  # 12

# Entities are created from components and looked up by component type.
world = World()
goblin = world.create_entity(Position(5, 7), Name("Goblin"))
assert world.get(goblin, Name).name == "Goblin"

log = GameLog()
log.log("Welcome to the Halls of Ruztoo")
```

Run the systems once per tick with `system.run(world)`, then call
`delete_the_dead(world)` from `ruztoo.damage`: it turns slain creatures into
corpses, sets `world.runstate` to `RunState.GAME_OVER` if the player has
died, and returns whether any other creature died.

Drawing goes to a `Console`; its `key`, `mouse_pos` and `left_click`
attributes hold the input for the current frame, which the menus read:

```python
from ruztoo.terminal import Console, Key
from ruztoo.camera import render_map
from ruztoo.gui import show_inventory, ItemMenuResult

screen = Console(100, 80)
render_map(dungeon, screen)

screen.key = Key.ESCAPE
result, item = show_inventory(world, screen)
assert result is ItemMenuResult.CANCEL
```

## What the package does not do

- It opens no window and reads no real keyboard or mouse; a front end must
  show a `Console`'s cells and fill in its input attributes.
- It has no game loop and no command to start a game; stepping between
  `RunState` values is left to the caller.
- It does not generate levels or place monsters and items: a `Map` starts as
  solid wall and entities must be created by the caller.
- It has no monster AI, melee combat, visibility or trigger systems; only the
  systems listed above.
- It reads and writes no save files. `Map.to_dict` / `Map.from_dict` give
  plain data for a map only, and `main_menu` takes a `save_exists` flag from
  the caller.