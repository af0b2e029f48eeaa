"""Applying queued damage and clearing away the dead."""

from __future__ import annotations

from ruztoo.colors import RGB
from ruztoo.components import (
    BlocksTile,
    Monster,
    Name,
    Player,
    Pools,
    Position,
    Renderable,
    SufferDamage,
)
from ruztoo.runstate import RunState
from ruztoo.terminal import to_cp437
from ruztoo.world import World

_CORPSE_COLOUR = RGB.from_f32(0.75, 0.0, 0.0)


class DamageSystem:
    """Subtracts queued damage from hit points and stains the floor with blood."""

    def run(self, world: World) -> None:
        for entity, pools, damage in world.join(Pools, SufferDamage):
            pools.hit_points.current -= sum(damage.amount)
            pos = world.get(entity, Position)
            if pos is not None:
                world.map.bloodstains.add((pos.x, pos.y))
        world.clear(SufferDamage)


def delete_the_dead(world: World) -> bool:
    """Turn slain creatures into corpses; end the game if the player died.

    Returns True when at least one creature other than the player died.
    """
    dead: list[int] = []
    for entity, pools in list(world.join(Pools)):
        if pools.hit_points.current >= 1:
            continue
        if world.get(entity, Player) is not None:
            world.runstate = RunState.GAME_OVER
            continue
        name = world.get(entity, Name)
        if name is not None:
            world.log.log(f"{name.name} is dead")
            name.name = f"Remains of {name.name}"
        dead.append(entity)
        renderable = world.get(entity, Renderable)
        if renderable is not None:
            renderable.glyph = to_cp437("%")
            renderable.fg = _CORPSE_COLOUR

    for victim in dead:
        world.remove(victim, Monster)
        world.remove(victim, BlocksTile)
        world.remove(victim, Pools)
    return bool(dead)