import pytest

from ruztoo.tiletype import TileType, tile_cost, tile_opaque, tile_walkable


def test_only_wall_and_deep_water_are_not_walkable():
    blocked = {t for t in TileType if not tile_walkable(t)}
    assert blocked == {TileType.WALL, TileType.DEEP_WATER}


def test_only_wall_is_opaque():
    assert [t for t in TileType if tile_opaque(t)] == [TileType.WALL]


def test_floor_cost_is_unit():
    assert tile_cost(TileType.FLOOR) == 1.0


def test_cost_ordering():
    assert tile_cost(TileType.ROAD) < tile_cost(TileType.FLOOR)
    assert tile_cost(TileType.FLOOR) < tile_cost(TileType.GRASS)
    assert tile_cost(TileType.GRASS) < tile_cost(TileType.SHALLOW_WATER)


@pytest.mark.parametrize(
    "tile",
    [TileType.WALL, TileType.DOWN_STAIRS, TileType.DEEP_WATER, TileType.WOOD_FLOOR,
     TileType.BRIDGE, TileType.GRAVEL],
)
def test_other_tiles_cost_same_as_floor(tile):
    assert tile_cost(tile) == tile_cost(TileType.FLOOR)


def test_str_is_value_name():
    assert str(TileType.SHALLOW_WATER) == "ShallowWater"
    assert TileType("DownStairs") is TileType.DOWN_STAIRS