"""Bystanders wander at random and sometimes speak to the player."""

from __future__ import annotations

from ruztoo.components import Bystander, EntityMoved, Name, Position, Quips, Viewshed
from ruztoo.gamesystem import roll_dice
from ruztoo.runstate import RunState
from ruztoo.world import World

_STEPS = {1: (-1, 0), 2: (1, 0), 3: (0, -1), 4: (0, 1)}


class BystanderAI:
    """Moves bystanders and lets them call out their quips."""

    def run(self, world: World) -> None:
        if world.runstate is not RunState.MONSTER_TURN:
            return
        game_map = world.map
        rng = world.rng
        for entity, viewshed, _bystander, pos in world.join(Viewshed, Bystander, Position):
            quips = world.get(entity, Quips)
            if (
                quips is not None
                and quips.available
                and world.player_pos in viewshed.visible_tiles
                and roll_dice(rng, 1, 6) == 1
            ):
                name = world.storage(Name)[entity].name
                if len(quips.available) == 1:
                    index = 0
                else:
                    index = roll_dice(rng, 1, len(quips.available)) - 1
                world.log.log(f'{name} says "{quips.available[index]}"')
                del quips.available[index]

            dx, dy = _STEPS.get(roll_dice(rng, 1, 5), (0, 0))
            x, y = pos.x + dx, pos.y + dy
            if (
                0 < x < game_map.width - 1
                and 0 < y < game_map.height - 1
                and not game_map.blocked[x][y]
            ):
                game_map.blocked[pos.x][pos.y] = False
                pos.x, pos.y = x, y
                world.insert(entity, EntityMoved())
                game_map.blocked[x][y] = True
                viewshed.dirty = True