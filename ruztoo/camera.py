"""Drawing the map and the entities on it around the player."""

from __future__ import annotations

from ruztoo.colors import (
    BLACK,
    CHOCOLATE,
    CHOCOLATE2,
    CORNFLOWERBLUE,
    CYAN,
    DARK_GRAY,
    FORESTGREEN,
    GREEN1,
    GREY,
    LIGHT_GRAY,
    LIGHT_SLATE,
    MEDIUM_AQUAMARINE,
    NAVY_BLUE,
    RGB,
    SADDLEBROWN,
)
from ruztoo.components import Hidden, Position, Renderable
from ruztoo.map import Map
from ruztoo.terminal import Console, to_cp437
from ruztoo.tiletype import TileType
from ruztoo.world import World

SCREEN_X = 100
SCREEN_Y = 80
SHOW_BOUNDARIES = True
_VIEWPORT_FRACTION = 0.7

_BLOOD = RGB.from_f32(0.75, 0.0, 0.0)
_WALL_FG = RGB.from_u8(127, 30, 20)
_FLOOR_COLOUR = RGB.from_u8(170, 131, 96)
_NO_BG = RGB.from_f32(0.0, 0.0, 0.0)

_TILE_STYLES: dict[TileType, tuple[str, RGB, RGB]] = {
    TileType.FLOOR: (".", _FLOOR_COLOUR, _FLOOR_COLOUR),
    TileType.DOWN_STAIRS: (">", RGB.from_f32(0.0, 1.0, 1.0), _NO_BG),
    TileType.BRIDGE: ("|", CHOCOLATE, SADDLEBROWN),
    TileType.ROAD: ("~", GREY, LIGHT_GRAY),
    TileType.GRASS: ('"', FORESTGREEN, GREEN1),
    TileType.SHALLOW_WATER: ("≈", CYAN, MEDIUM_AQUAMARINE),
    TileType.DEEP_WATER: ("≈", NAVY_BLUE, CORNFLOWERBLUE),
    TileType.WOOD_FLOOR: (".", CHOCOLATE, CHOCOLATE2),
    TileType.GRAVEL: ("'", LIGHT_SLATE, DARK_GRAY),
}

_WALL_MASK_GLYPHS = (9, 186, 186, 186, 205, 188, 187, 185, 205, 200, 201, 204, 205, 202, 203, 206)
_OUTER_WALL = 35


def _draw_tiles(
    game_map: Map, ctx: Console, min_x: int, max_x: int, min_y: int, max_y: int
) -> None:
    """Draw map tiles from the given window with its corner at screen (0, 0)."""
    last_x = game_map.width - 1
    last_y = game_map.height - 1
    boundary = to_cp437(".")
    for y, ty in enumerate(range(min_y, max_y)):
        for x, tx in enumerate(range(min_x, max_x)):
            if 0 < tx < last_x and 0 < ty < last_y:
                if game_map.revealed_tiles[tx][ty]:
                    glyph, fg, bg = get_tile_glyph(tx, ty, game_map)
                    ctx.set(x, y, fg, bg, glyph)
            elif SHOW_BOUNDARIES:
                ctx.set(x, y, GREY, BLACK, boundary)


def render_map(game_map: Map, ctx: Console) -> None:
    """Draw the whole map from its top-left corner."""
    _draw_tiles(game_map, ctx, 0, game_map.width, 0, game_map.height)


def render_camera(world: World, ctx: Console) -> None:
    """Draw the part of the map around the player and the visible entities on it."""
    game_map = world.map
    min_x, max_x, min_y, max_y = get_screen_bounds(world)
    _draw_tiles(game_map, ctx, min_x, max_x, min_y, max_y)

    last_x = game_map.width - 1
    last_y = game_map.height - 1
    hidden = world.storage(Hidden)
    drawable = [
        (pos, render)
        for entity, pos, render in world.join(Position, Renderable)
        if entity not in hidden
    ]
    drawable.sort(key=lambda pair: pair[1].render_order, reverse=True)
    for pos, render in drawable:
        if not game_map.visible_tiles[pos.x][pos.y]:
            continue
        screen_x = pos.x - min_x
        screen_y = pos.y - min_y
        if 0 < screen_x < last_x and 0 < screen_y < last_y:
            ctx.set(screen_x, screen_y, render.fg, render.bg, render.glyph)


def render_debug_map(game_map: Map, ctx: Console) -> None:
    """Draw the map centred on the console, for watching map generation."""
    x_chars, y_chars = ctx.get_char_size()
    min_x = game_map.width // 2 - x_chars // 2
    min_y = game_map.height // 2 - y_chars // 2
    _draw_tiles(game_map, ctx, min_x, min_x + x_chars, min_y, min_y + y_chars)


def get_screen_bounds(world: World) -> tuple[int, int, int, int]:
    """Return ``(min_x, max_x, min_y, max_y)`` of the map window around the player.

    The window covers part of the screen so that the interface fits beside it.
    """
    x_chars = int(SCREEN_X * _VIEWPORT_FRACTION)
    y_chars = int(SCREEN_Y * _VIEWPORT_FRACTION)
    player = world.player_pos
    min_x = player.x - x_chars // 2
    min_y = player.y - y_chars // 2
    return min_x, min_x + x_chars, min_y, min_y + y_chars


def get_tile_glyph(x: int, y: int, game_map: Map) -> tuple[int, RGB, RGB]:
    """Return the glyph and colours for the tile at ``(x, y)``."""
    tile = game_map.tiles[x][y]
    if tile is TileType.WALL:
        glyph, fg, bg = wall_glyph(game_map, x, y), _WALL_FG, _NO_BG
    else:
        ch, fg, bg = _TILE_STYLES[tile]
        glyph = to_cp437(ch)
    if (x, y) in game_map.bloodstains:
        bg = _BLOOD
    if not game_map.visible_tiles[x][y]:
        fg = fg.lerp(BLACK, 0.5)
        bg = bg.lerp(BLACK, 0.7)
    return glyph, fg, bg


def _is_revealed_and_wall(game_map: Map, x: int, y: int) -> bool:
    return game_map.tiles[x][y] is TileType.WALL and game_map.revealed_tiles[x][y]


def wall_glyph(game_map: Map, x: int, y: int) -> int:
    """Return the line-drawing glyph that joins a wall to its revealed neighbours."""
    if x < 1 or x > game_map.width - 2 or y < 1 or y > game_map.height - 2:
        return _OUTER_WALL
    mask = 0
    for bit, (nx, ny) in enumerate(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y))):
        if _is_revealed_and_wall(game_map, nx, ny):
            mask |= 1 << bit
    return _WALL_MASK_GLYPHS[mask]