"""Game flow states and the world changes tied to moving between them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from ruztoo.components import Equipped, InBackpack, Player
from ruztoo.world import World


class MainMenuSelection(Enum):
    """The entries of the main menu."""

    NEW_GAME = "NewGame"
    LOAD_GAME = "LoadGame"
    QUIT = "Quit"


class RunState(Enum):
    """States of the game loop that carry no extra data."""

    AWAITING_INPUT = "AwaitingInput"
    PRE_RUN = "PreRun"
    PLAYER_TURN = "PlayerTurn"
    MONSTER_TURN = "MonsterTurn"
    SHOW_INVENTORY = "ShowInventory"
    SHOW_DROP_ITEM = "ShowDropItem"
    SAVE_GAME = "SaveGame"
    NEXT_LEVEL = "NextLevel"
    SHOW_REMOVE_ITEM = "ShowRemoveItem"
    GAME_OVER = "GameOver"
    SHOW_MAP_VISUALIZATION = "ShowMapVisualization"


@dataclass(frozen=True)
class ShowTargeting:
    """The player is choosing a target for a ranged item."""

    range: int
    item: int


@dataclass(frozen=True)
class MainMenu:
    """The main menu is shown with one entry highlighted."""

    menu_selection: MainMenuSelection


@dataclass(frozen=True)
class MagicMapReveal:
    """The map is being revealed one row per frame."""

    row: int


State = Union[RunState, ShowTargeting, MainMenu, MagicMapReveal]


def entities_to_remove_on_level_change(world: World) -> list[int]:
    """Return every entity that does not travel with the player to the next level.

    The player, and items carried or equipped by the player, are kept.
    """
    player_entity = world.player_entity
    players = world.storage(Player)
    backpack = world.storage(InBackpack)
    equipped = world.storage(Equipped)

    def keeps(entity: int) -> bool:
        if entity in players:
            return True
        carried = backpack.get(entity)
        if carried is not None and carried.owner == player_entity:
            return True
        worn = equipped.get(entity)
        return worn is not None and worn.owner == player_entity

    return [entity for entity in world.entities() if not keeps(entity)]


def reveal_map_row(world: World, row: int) -> State:
    """Reveal one row of the map and return the state that follows."""
    game_map = world.map
    if not 0 <= row < game_map.height:
        raise IndexError(f"row {row} is outside the map")
    for column in game_map.revealed_tiles:
        column[row] = True
    if row == game_map.height - 1:
        return RunState.MONSTER_TURN
    return MagicMapReveal(row + 1)