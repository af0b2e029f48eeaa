"""Tile kinds and their movement and visibility properties."""

from __future__ import annotations

from enum import Enum


class TileType(Enum):
    """The kinds of tile a map cell can hold."""

    WALL = "Wall"
    FLOOR = "Floor"
    DOWN_STAIRS = "DownStairs"
    ROAD = "Road"
    GRASS = "Grass"
    SHALLOW_WATER = "ShallowWater"
    DEEP_WATER = "DeepWater"
    WOOD_FLOOR = "WoodFloor"
    BRIDGE = "Bridge"
    GRAVEL = "Gravel"

    def __str__(self) -> str:
        return self.value


_WALKABLE = frozenset(
    {
        TileType.FLOOR,
        TileType.DOWN_STAIRS,
        TileType.ROAD,
        TileType.GRASS,
        TileType.SHALLOW_WATER,
        TileType.WOOD_FLOOR,
        TileType.BRIDGE,
        TileType.GRAVEL,
    }
)

_COSTS = {
    TileType.ROAD: 0.8,
    TileType.GRASS: 1.1,
    TileType.SHALLOW_WATER: 1.2,
}


def tile_walkable(tt: TileType) -> bool:
    """Return True if creatures can stand on the tile."""
    return tt in _WALKABLE


def tile_opaque(tt: TileType) -> bool:
    """Return True if the tile blocks line of sight."""
    return tt is TileType.WALL


def tile_cost(tt: TileType) -> float:
    """Return the path cost of leaving a tile of this kind."""
    return _COSTS.get(tt, 1.0)