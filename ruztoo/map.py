"""The dungeon map: tiles, visibility, blocking and path finding hooks."""

from __future__ import annotations

import math
from typing import Any

from ruztoo.components import Point
from ruztoo.tiletype import TileType, tile_cost, tile_opaque, tile_walkable

_DIAGONAL_FACTOR = 1.45


def _grid(width: int, height: int, value: Any) -> list[list[Any]]:
    return [[value] * height for _ in range(width)]


class Map:
    """A level grid indexed as ``tiles[x][y]``."""

    def __init__(self, depth: int, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.depth = depth
        self.tiles: list[list[TileType]] = _grid(width, height, TileType.WALL)
        self.revealed_tiles: list[list[bool]] = _grid(width, height, False)
        self.visible_tiles: list[list[bool]] = _grid(width, height, False)
        self.blocked: list[list[bool]] = _grid(width, height, False)
        self.bloodstains: set[tuple[int, int]] = set()
        self.view_blocked: set[tuple[int, int]] = set()
        self.tile_content: list[list[list[int]]] = [
            [[] for _ in range(height)] for _ in range(width)
        ]

    def dimensions(self) -> Point:
        return Point(self.width, self.height)

    def xy_idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def _idx_xy(self, idx: int) -> tuple[int, int]:
        return idx % self.width, idx // self.width

    def get_tile_at_pos(self, x: int, y: int) -> TileType:
        return self.tiles[x][y]

    def populate_blocked(self) -> None:
        """Mark every non-walkable tile as blocked."""
        self.blocked = [[not tile_walkable(tile) for tile in column] for column in self.tiles]

    def clear_content_index(self) -> None:
        for column in self.tile_content:
            for content in column:
                content.clear()

    def is_tile_in_bounds(self, x: int, y: int) -> bool:
        return 0 < x < self.width and 0 < y < self.height

    def _is_exit_valid(self, x: int, y: int) -> bool:
        return self.is_tile_in_bounds(x, y) and not self.blocked[x][y]

    def is_opaque(self, idx: int) -> bool:
        x, y = self._idx_xy(idx)
        return tile_opaque(self.tiles[x][y]) or (x, y) in self.view_blocked

    def get_available_exits(self, idx: int) -> list[tuple[int, float]]:
        """Return ``(index, cost)`` pairs for every step that can be taken from ``idx``."""
        x, y = self._idx_xy(idx)
        w = self.width
        cost = tile_cost(self.tiles[x][y])
        steps = (
            (-1, 0, -1, cost),
            (1, 0, 1, cost),
            (0, -1, -w, cost),
            (0, 1, w, cost),
            (-1, -1, -w - 1, cost * _DIAGONAL_FACTOR),
            (1, -1, -w + 1, cost * _DIAGONAL_FACTOR),
            (-1, 1, w - 1, cost * _DIAGONAL_FACTOR),
            (1, 1, w + 1, cost * _DIAGONAL_FACTOR),
        )
        return [
            (idx + offset, step_cost)
            for dx, dy, offset, step_cost in steps
            if self._is_exit_valid(x + dx, y + dy)
        ]

    def get_pathing_distance(self, idx1: int, idx2: int) -> float:
        x1, y1 = self._idx_xy(idx1)
        x2, y2 = self._idx_xy(idx2)
        return math.hypot(x2 - x1, y2 - y1)

    def get_total_floor_tiles(self) -> int:
        return sum(tile is TileType.FLOOR for column in self.tiles for tile in column)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-compatible snapshot; the content index is not saved."""
        return {
            "tiles": [[tile.value for tile in column] for column in self.tiles],
            "width": self.width,
            "height": self.height,
            "revealed_tiles": [list(column) for column in self.revealed_tiles],
            "visible_tiles": [list(column) for column in self.visible_tiles],
            "blocked": [list(column) for column in self.blocked],
            "depth": self.depth,
            "bloodstains": [list(p) for p in sorted(self.bloodstains)],
            "view_blocked": [list(p) for p in sorted(self.view_blocked)],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Map:
        """Rebuild a map from :meth:`to_dict` output with an empty content index."""
        game_map = cls(data["depth"], data["width"], data["height"])
        game_map.tiles = [[TileType(v) for v in column] for column in data["tiles"]]
        game_map.revealed_tiles = [list(column) for column in data["revealed_tiles"]]
        game_map.visible_tiles = [list(column) for column in data["visible_tiles"]]
        game_map.blocked = [list(column) for column in data["blocked"]]
        game_map.bloodstains = {(x, y) for x, y in data["bloodstains"]}
        game_map.view_blocked = {(x, y) for x, y in data["view_blocked"]}
        return game_map