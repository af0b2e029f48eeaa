import pytest

from ruztoo.components import (
    EquipmentSlot,
    Equipped,
    InBackpack,
    Item,
    Monster,
    Name,
    Player,
)
from ruztoo.map import Map
from ruztoo.runstate import (
    MagicMapReveal,
    MainMenu,
    MainMenuSelection,
    RunState,
    ShowTargeting,
    entities_to_remove_on_level_change,
    reveal_map_row,
)
from ruztoo.world import World


@pytest.fixture
def world():
    w = World()
    w.player_entity = w.create_entity(Player(), Name("Player"))
    return w


def test_player_is_kept(world):
    assert entities_to_remove_on_level_change(world) == []


def test_monsters_and_floor_items_are_removed(world):
    monster = world.create_entity(Monster(), Name("Orc"))
    item = world.create_entity(Item(), Name("Potion"))
    assert entities_to_remove_on_level_change(world) == [monster, item]


def test_player_inventory_and_equipment_kept(world):
    carried = world.create_entity(Item(), InBackpack(world.player_entity))
    worn = world.create_entity(Item(), Equipped(world.player_entity, EquipmentSlot.MELEE))
    removed = entities_to_remove_on_level_change(world)
    assert carried not in removed
    assert worn not in removed


def test_items_owned_by_others_removed(world):
    monster = world.create_entity(Monster())
    carried = world.create_entity(Item(), InBackpack(monster))
    worn = world.create_entity(Item(), Equipped(monster, EquipmentSlot.HEAD))
    assert entities_to_remove_on_level_change(world) == [monster, carried, worn]


def test_reveal_first_row_advances(world):
    world.map = Map(1, 5, 4)
    result = reveal_map_row(world, 0)
    assert result == MagicMapReveal(1)
    assert all(world.map.revealed_tiles[x][0] for x in range(5))
    assert not any(world.map.revealed_tiles[x][y] for x in range(5) for y in range(1, 4))


def test_reveal_last_row_ends_in_monster_turn(world):
    world.map = Map(1, 5, 4)
    assert reveal_map_row(world, 3) is RunState.MONSTER_TURN
    assert all(world.map.revealed_tiles[x][3] for x in range(5))


def test_reveal_whole_map_by_stepping(world):
    world.map = Map(1, 3, 6)
    state = MagicMapReveal(0)
    steps = 0
    while isinstance(state, MagicMapReveal):
        state = reveal_map_row(world, state.row)
        steps += 1
    assert steps == world.map.height
    assert state is RunState.MONSTER_TURN
    assert all(all(column) for column in world.map.revealed_tiles)


@pytest.mark.parametrize("row", [-1, 4])
def test_reveal_out_of_range_row(world, row):
    world.map = Map(1, 5, 4)
    with pytest.raises(IndexError):
        reveal_map_row(world, row)


def test_data_states_compare_by_value():
    assert MainMenu(MainMenuSelection.LOAD_GAME) == MainMenu(MainMenuSelection.LOAD_GAME)
    assert MainMenu(MainMenuSelection.NEW_GAME) != MainMenu(MainMenuSelection.QUIT)
    assert ShowTargeting(range=6, item=3).range == 6
    assert {MagicMapReveal(2), MagicMapReveal(2)} == {MagicMapReveal(2)}


def test_states_are_immutable():
    state = ShowTargeting(range=6, item=3)
    with pytest.raises(AttributeError):
        state.range = 7
    assert state.range == 6
    assert state == ShowTargeting(range=6, item=3)