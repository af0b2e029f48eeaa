"""The in-game interface: status panel, tooltips, menus and targeting."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ruztoo.camera import SCREEN_X, SCREEN_Y, get_screen_bounds
from ruztoo.colors import (
    BLACK,
    BLUE,
    CYAN,
    GREEN,
    GREY,
    MAGENTA,
    ORANGE,
    RED,
    RGB,
    WHEAT,
    WHITE,
    YELLOW,
)
from ruztoo.components import (
    Equipped,
    Hidden,
    HungerClock,
    HungerState,
    InBackpack,
    Name,
    Player,
    Point,
    Pools,
    Position,
    Viewshed,
)
from ruztoo.runstate import MainMenu, MainMenuSelection
from ruztoo.terminal import Console, Key, letter_to_option, to_cp437
from ruztoo.world import World

GUIHEIGHT = 6
GUIY = SCREEN_Y - GUIHEIGHT - 1
GUIWIDTH = SCREEN_X - 1
INVENTORY_X = SCREEN_X // 2 - 20

_HUNGER_LABELS: dict[HungerState, tuple[RGB, str]] = {
    HungerState.WELL_FED: (GREEN, "Well Fed"),
    HungerState.HUNGRY: (ORANGE, "Hungry"),
    HungerState.STARVING: (RED, "Starving"),
}

_MENU_UP = {
    MainMenuSelection.NEW_GAME: MainMenuSelection.QUIT,
    MainMenuSelection.LOAD_GAME: MainMenuSelection.NEW_GAME,
    MainMenuSelection.QUIT: MainMenuSelection.LOAD_GAME,
}

_MENU_DOWN = {
    MainMenuSelection.NEW_GAME: MainMenuSelection.LOAD_GAME,
    MainMenuSelection.LOAD_GAME: MainMenuSelection.QUIT,
    MainMenuSelection.QUIT: MainMenuSelection.NEW_GAME,
}


class ItemMenuResult(Enum):
    """Outcome of one frame of an item menu."""

    CANCEL = "Cancel"
    NO_RESPONSE = "NoResponse"
    SELECTED = "Selected"


@dataclass(frozen=True)
class MainMenuResult:
    """The highlighted main menu entry, and whether it was confirmed."""

    selected: MainMenuSelection
    confirmed: bool = False


class GameOverResult(Enum):
    """Outcome of one frame of the game over screen."""

    NO_SELECTION = "NoSelection"
    QUIT_TO_MENU = "QuitToMenu"


def draw_gui(world: World, ctx: Console) -> None:
    """Draw the bottom panel: health, hunger, depth, the message log and tooltips."""
    ctx.draw_box(0, GUIY, GUIWIDTH, GUIHEIGHT, WHITE, BLACK)

    for _entity, _player, stats, clock in world.join(Player, Pools, HungerClock):
        hp = stats.hit_points
        ctx.print_color(20, GUIY, YELLOW, BLACK, f" HP: {hp.current} / {hp.max} ")
        ctx.draw_bar_horizontal(36, GUIY, 51, hp.current, hp.max, RED, BLACK)
        label = _HUNGER_LABELS.get(clock.state)
        if label is not None:
            colour, text = label
            ctx.print_color(GUIWIDTH - 10, GUIY - 1, colour, BLACK, text)

    newest_first = reversed(world.log.entries)
    for y, message in zip(range(GUIY + 1, GUIY + GUIHEIGHT), newest_first):
        ctx.print(2, y, message)

    ctx.print_color(2, GUIY, YELLOW, BLACK, f"Dungeon Level: {world.map.depth}")

    mouse_x, mouse_y = ctx.mouse_pos
    ctx.set_bg(mouse_x, mouse_y, MAGENTA)
    draw_tooltips(world, ctx)


def draw_tooltips(world: World, ctx: Console) -> None:
    """Describe the tile under the mouse and name the visible entities on it."""
    min_x, _max_x, min_y, _max_y = get_screen_bounds(world)
    game_map = world.map
    mouse_x, mouse_y = ctx.mouse_pos
    map_x, map_y = mouse_x + min_x, mouse_y + min_y
    if not game_map.is_tile_in_bounds(map_x, map_y):
        return

    hidden = world.storage(Hidden)
    tooltip = [
        name.name
        for entity, name, pos in world.join(Name, Position)
        if entity not in hidden
        and pos.x == map_x
        and pos.y == map_y
        and game_map.visible_tiles[pos.x][pos.y]
    ]

    ctx.print(GUIWIDTH - 20, GUIY + 1, f"Coordinates: ({mouse_x},{mouse_y})")
    ctx.print(GUIWIDTH - 20, GUIY + 2, f"Tile: {game_map.tiles[map_x][map_y]}")

    if not tooltip:
        return

    width = max(len(s) for s in tooltip) + 3
    if mouse_x > SCREEN_X // 2:
        arrow_x = mouse_x - 2
        left_x = mouse_x - width
        for y, text in enumerate(tooltip, start=mouse_y):
            ctx.print_color(left_x, y, WHITE, GREY, text)
            for i in range(width - len(text) - 1):
                ctx.print_color(arrow_x - i, y, WHITE, GREY, " ")
        ctx.print_color(arrow_x, mouse_y, WHITE, GREY, "->")
    else:
        arrow_x = mouse_x + 1
        left_x = mouse_x + 3
        for y, text in enumerate(tooltip, start=mouse_y):
            ctx.print_color(left_x + 1, y, WHITE, GREY, text)
            for i in range(width - len(text) - 1):
                ctx.print_color(arrow_x + 1 + i, y, WHITE, GREY, " ")
        ctx.print_color(arrow_x, mouse_y, WHITE, GREY, "<-")


def _item_menu(
    world: World, ctx: Console, title: str, holder_type: type
) -> tuple[ItemMenuResult, Any]:
    """Show the player's items held through ``holder_type`` and read a choice."""
    player = world.player_entity
    items = [
        (entity, name.name)
        for entity, holder, name in world.join(holder_type, Name)
        if holder.owner == player
    ]
    count = len(items)
    y = 25 - count // 2
    ctx.draw_box(INVENTORY_X, y - 2, 31, count + 3, WHITE, BLACK)
    ctx.print_color(INVENTORY_X + 3, y - 2, YELLOW, BLACK, title)
    ctx.print_color(INVENTORY_X + 3, y + count + 1, YELLOW, BLACK, "ESCAPE to cancel")

    for j, (_entity, name) in enumerate(items):
        print_item_options_menu(name, y + j, j, ctx)

    return capture_item_options_selection(ctx, [entity for entity, _ in items], count)


def show_inventory(world: World, ctx: Console) -> tuple[ItemMenuResult, Any]:
    """Let the player choose an item from their backpack to use."""
    return _item_menu(world, ctx, "Inventory", InBackpack)


def drop_item_menu(world: World, ctx: Console) -> tuple[ItemMenuResult, Any]:
    """Let the player choose an item from their backpack to drop."""
    return _item_menu(world, ctx, "Drop Which Item?", InBackpack)


def unequip_item_menu(world: World, ctx: Console) -> tuple[ItemMenuResult, Any]:
    """Let the player choose an equipped item to take off."""
    return _item_menu(world, ctx, "Unequip Which Item?", Equipped)


def ranged_target(
    world: World, ctx: Console, range: int  # noqa: A002
) -> tuple[ItemMenuResult, Point | None]:
    """Highlight tiles in reach and let the player click one as the target."""
    min_x, max_x, min_y, max_y = get_screen_bounds(world)
    player_pos = world.player_pos

    ctx.print_color(5, 0, YELLOW, BLACK, "Select Target:")

    viewshed = world.get(world.player_entity, Viewshed)
    if viewshed is None:
        return ItemMenuResult.CANCEL, None

    available: list[Point] = []
    for point in viewshed.visible_tiles:
        distance = math.hypot(point.x - player_pos.x, point.y - player_pos.y)
        if distance > range:
            continue
        screen_x = point.x - min_x
        screen_y = point.y - min_y
        if 1 < screen_x < (max_x - min_x) - 1 and 1 < screen_y < (max_y - min_y) - 1:
            ctx.set_bg(screen_x, screen_y, BLUE)
            available.append(point)

    mouse_x, mouse_y = ctx.mouse_pos
    target = Point(mouse_x + min_x, mouse_y + min_y)
    if target in available:
        ctx.set_bg(mouse_x, mouse_y, CYAN)
        if ctx.left_click:
            return ItemMenuResult.SELECTED, target
    else:
        ctx.set_bg(mouse_x, mouse_y, RED)
        if ctx.left_click:
            return ItemMenuResult.CANCEL, None
    return ItemMenuResult.NO_RESPONSE, None


def _option_color(selection: MainMenuSelection, option: MainMenuSelection) -> RGB:
    return MAGENTA if selection is option else WHITE


def main_menu(world: World, ctx: Console, save_exists: bool) -> MainMenuResult:
    """Draw the main menu and move or confirm the highlighted entry."""
    ctx.draw_box_double(34, 18, 31, 10, WHEAT, BLACK)
    ctx.print_color_centered(20, YELLOW, BLACK, "The Ruztoo Dungeon")
    ctx.print_color_centered(22, GREY, BLACK, "Use the arrow keys and Enter")

    state = world.runstate
    if not isinstance(state, MainMenu):
        return MainMenuResult(MainMenuSelection.NEW_GAME)

    selection = state.menu_selection
    entries = (
        (24, MainMenuSelection.NEW_GAME, "Begin New Game"),
        (25, MainMenuSelection.LOAD_GAME, "Load Game"),
        (26, MainMenuSelection.QUIT, "Quit"),
    )
    for row, option, label in entries:
        ctx.print_color_centered(row, _option_color(selection, option), BLACK, label)

    key = ctx.key
    if key is None:
        return MainMenuResult(selection)
    if key is Key.ESCAPE:
        return MainMenuResult(MainMenuSelection.QUIT, confirmed=True)
    if key is Key.RETURN:
        return MainMenuResult(selection, confirmed=True)
    if key is Key.UP:
        new_selection = _MENU_UP[selection]
        if new_selection is MainMenuSelection.LOAD_GAME and not save_exists:
            new_selection = MainMenuSelection.NEW_GAME
        return MainMenuResult(new_selection)
    if key is Key.DOWN:
        new_selection = _MENU_DOWN[selection]
        if new_selection is MainMenuSelection.LOAD_GAME and not save_exists:
            new_selection = MainMenuSelection.QUIT
        return MainMenuResult(new_selection)
    return MainMenuResult(selection)


def draw_hollow_box(
    console: Console, sx: int, sy: int, width: int, height: int, fg: RGB, bg: RGB
) -> None:
    """Draw a single-line frame without filling its inside."""
    corner = to_cp437("┌")
    console.set(sx, sy, fg, bg, corner)
    console.set(sx + width, sy, fg, bg, corner)
    console.set(sx, sy + height, fg, bg, to_cp437("└"))
    console.set(sx + width, sy + height, fg, bg, to_cp437("┘"))
    horizontal = to_cp437("─")
    vertical = to_cp437("│")
    for x in range(sx + 1, sx + width):
        console.set(x, sy, fg, bg, horizontal)
        console.set(x, sy + height, fg, bg, horizontal)
    for y in range(sy + 1, sy + height):
        console.set(sx, y, fg, bg, vertical)
        console.set(sx + width, y, fg, bg, vertical)


def draw_ui(ctx: Console) -> None:
    """Draw the frames that divide the screen into map, log and status areas."""
    box_gray = RGB.from_hex("#999999")
    draw_hollow_box(ctx, 0, 0, 79, 59, box_gray, BLACK)
    draw_hollow_box(ctx, 0, 0, 49, 45, box_gray, BLACK)
    draw_hollow_box(ctx, 0, 45, 79, 14, box_gray, BLACK)
    draw_hollow_box(ctx, 49, 0, 30, 8, box_gray, BLACK)


def print_item_options_menu(name: str, y: int, j: int, ctx: Console) -> None:
    """Print one menu line of the form ``(a) name`` with the letter for index ``j``."""
    ctx.set(INVENTORY_X + 2, y, WHITE, BLACK, to_cp437("("))
    ctx.set(INVENTORY_X + 3, y, WHITE, BLACK, 97 + j)
    ctx.set(INVENTORY_X + 4, y, WHITE, BLACK, to_cp437(")"))
    ctx.print(INVENTORY_X + 6, y, name)


def capture_item_options_selection(
    ctx: Console, options: list[Any], count: int
) -> tuple[ItemMenuResult, Any]:
    """Turn the key pressed this frame into a menu result."""
    key = ctx.key
    if key is None:
        return ItemMenuResult.NO_RESPONSE, None
    if key is Key.ESCAPE:
        return ItemMenuResult.CANCEL, None
    selection = letter_to_option(key)
    if -1 < selection < count:
        return ItemMenuResult.SELECTED, options[selection]
    return ItemMenuResult.NO_RESPONSE, None


def game_over(ctx: Console) -> GameOverResult:
    """Show the game over message; any key returns to the main menu."""
    ctx.print_color_centered(25, YELLOW, BLACK, "RIP You")
    ctx.print_color_centered(
        27, MAGENTA, BLACK, "Press any key to return to the main menu"
    )
    if ctx.key is None:
        return GameOverResult.NO_SELECTION
    return GameOverResult.QUIT_TO_MENU