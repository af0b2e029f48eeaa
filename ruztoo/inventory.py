"""Systems that pick up, use, drop and unequip items."""

from __future__ import annotations

from dataclasses import dataclass

from ruztoo.colors import BLACK, GREEN, MAGENTA, ORANGE, RED, RGB
from ruztoo.components import (
    AreaOfEffect,
    Artefact,
    Confusion,
    Consumable,
    Equippable,
    Equipped,
    EquipmentSlot,
    HungerClock,
    InBackpack,
    InflictsDamage,
    MagicMapper,
    Name,
    Point,
    Pools,
    Position,
    ProvidesFood,
    ProvidesHealing,
    SufferDamage,
    WantsToDropItem,
    WantsToPickUpItem,
    WantsToUnequipItem,
    WantsToUseItem,
)
from ruztoo.hunger import calculate_new_hunger_state
from ruztoo.map import Map
from ruztoo.runstate import MagicMapReveal
from ruztoo.terminal import to_cp437
from ruztoo.world import World

_PARTICLE_LIFETIME_MS = 200.0


@dataclass(frozen=True)
class ParticleRequest:
    """A short-lived visual effect waiting to be spawned."""

    x: int
    y: int
    fg: RGB
    bg: RGB
    glyph: int
    lifetime_ms: float


def _request_particle(world: World, x: int, y: int, fg: RGB, ch: str) -> None:
    world.particles.append(
        ParticleRequest(x, y, fg, BLACK, to_cp437(ch), _PARTICLE_LIFETIME_MS)
    )


def _line(start: Point, end: Point) -> list[Point]:
    """Return the Bresenham line from ``start`` to ``end``, both included."""
    x0, y0, x1, y1 = start.x, start.y, end.x, end.y
    dx, dy = abs(x1 - x0), -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    points = []
    while True:
        points.append(Point(x0, y0))
        if x0 == x1 and y0 == y1:
            return points
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def _perimeter(origin: Point, radius: int) -> list[Point]:
    left, right = origin.x - radius, origin.x + radius
    top, bottom = origin.y - radius, origin.y + radius
    points = [Point(x, y) for x in range(left, right + 1) for y in (top, bottom)]
    points.extend(Point(x, y) for y in range(top + 1, bottom) for x in (left, right))
    return points


def field_of_view(origin: Point, radius: int, game_map: Map) -> list[Point]:
    """Return the tiles visible from ``origin`` within ``radius``, sorted.

    Opaque tiles are visible themselves but hide what lies behind them.
    """
    radius_sq = radius * radius
    visible: set[Point] = set()
    for end in _perimeter(origin, radius):
        for point in _line(origin, end):
            if not (0 <= point.x < game_map.width and 0 <= point.y < game_map.height):
                break
            dist_sq = (point.x - origin.x) ** 2 + (point.y - origin.y) ** 2
            if dist_sq > radius_sq:
                break
            visible.add(point)
            if game_map.is_opaque(game_map.xy_idx(point.x, point.y)):
                break
    return sorted(visible, key=lambda p: (p.y, p.x))


class ItemCollectionSystem:
    """Moves items that someone wants to pick up into their backpack."""

    def run(self, world: World) -> None:
        names = world.storage(Name)
        for _entity, pickup in list(world.join(WantsToPickUpItem)):
            world.remove(pickup.item, Position)
            world.insert(pickup.item, InBackpack(pickup.collected_by))
            if pickup.collected_by == world.player_entity:
                world.log.log(f"You picked up the {names[pickup.item].name}")
        world.clear(WantsToPickUpItem)


class ItemUseSystem:
    """Applies the effects of items being used, equipped or eaten."""

    def run(self, world: World) -> None:
        names = world.storage(Name)
        player = world.player_entity
        for entity, use_item in list(world.join(WantsToUseItem)):
            item = use_item.item
            is_player = entity == player
            targets = self._targets(world, use_item)

            equippable = world.get(item, Equippable)
            if equippable is not None:
                self._equip(world, item, equippable.slot, targets[0])

            food = world.get(item, ProvidesFood)
            if food is not None:
                clock = world.get(targets[0], HungerClock)
                if clock is not None:
                    clock.state, clock.hunger_points = calculate_new_hunger_state(
                        clock.hunger_points, clock.state, food.points
                    )
                    world.log.log(f"You eat the {names[item].name}. It fills you up.")

            healer = world.get(item, ProvidesHealing)
            if healer is not None:
                for target in targets:
                    pools = world.get(target, Pools)
                    if pools is None:
                        continue
                    hp = pools.hit_points
                    hp.current = min(hp.max, hp.current + healer.heal_amount)
                    if is_player:
                        world.log.log(
                            f"You drink the {names[item].name}, "
                            f"and it heals {healer.heal_amount}hp"
                        )
                    pos = world.get(target, Position)
                    if pos is not None:
                        _request_particle(world, pos.x, pos.y, GREEN, "❤")

            artefact = world.get(item, Artefact)
            if artefact is not None and is_player:
                world.log.log(
                    f"This artefact is named {artefact.name}, "
                    f"and it is worth {artefact.value} gold"
                )

            damage = world.get(item, InflictsDamage)
            if damage is not None:
                suffering = world.storage(SufferDamage)
                for mob in targets:
                    SufferDamage.new_damage(suffering, mob, damage.damage)
                    if is_player:
                        world.log.log(
                            f"You use {names[item].name} on {names[mob].name}, "
                            f"inflicting {damage.damage} damage"
                        )
                        pos = world.get(mob, Position)
                        if pos is not None:
                            _request_particle(world, pos.x, pos.y, RED, "!")

            add_confusion: list[tuple[int, int]] = []
            confusion = world.get(item, Confusion)
            if confusion is not None:
                for mob in targets:
                    add_confusion.append((mob, confusion.turns))
                    if is_player:
                        world.log.log(
                            f"You use {names[item].name} on {names[mob].name}, "
                            "confusing them"
                        )
                        pos = world.get(mob, Position)
                        if pos is not None:
                            _request_particle(world, pos.x, pos.y, MAGENTA, "?")

            if world.get(item, MagicMapper) is not None:
                world.log.log("You use the scroll, which reveals the map to you")
                world.runstate = MagicMapReveal(0)

            for mob, turns in add_confusion:
                world.insert(mob, Confusion(turns))

            if world.get(item, Consumable) is not None and world.is_alive(item):
                world.delete_entity(item)
        world.clear(WantsToUseItem)

    @staticmethod
    def _targets(world: World, use_item: WantsToUseItem) -> list[int]:
        target = use_item.target
        if target is None:
            return [world.player_entity]
        game_map = world.map
        area = world.get(use_item.item, AreaOfEffect)
        if area is None:
            return list(game_map.tile_content[target.x][target.y])
        targets: list[int] = []
        blast = [
            p
            for p in field_of_view(target, area.radius, game_map)
            if game_map.is_tile_in_bounds(p.x, p.y)
        ]
        for tile in blast:
            targets.extend(game_map.tile_content[tile.x][tile.y])
            _request_particle(world, tile.x, tile.y, ORANGE, "!")
        return targets

    @staticmethod
    def _equip(world: World, item: int, slot: EquipmentSlot, target: int) -> None:
        to_unequip = [
            (other, name)
            for other, worn, name in world.join(Equipped, Name)
            if worn.owner == target and worn.slot == slot
        ]
        for other, name in to_unequip:
            world.log.log(f"You unequip {name.name}")
            world.remove(other, Equipped)
            world.insert(other, InBackpack(target))
        world.insert(item, Equipped(target, slot))
        world.remove(item, InBackpack)
        if target == world.player_entity:
            world.log.log(f"You equip {world.storage(Name)[item].name}")


class ItemDropSystem:
    """Places dropped items at the dropper's feet."""

    def run(self, world: World) -> None:
        names = world.storage(Name)
        for entity, to_drop in list(world.join(WantsToDropItem)):
            dropper = world.get(entity, Position)
            if dropper is None:
                raise LookupError(f"entity {entity} has no position to drop items at")
            world.insert(to_drop.item, Position(dropper.x, dropper.y))
            world.remove(to_drop.item, InBackpack)
            if entity == world.player_entity:
                world.log.log(f"You drop the {names[to_drop.item].name}")
        world.clear(WantsToDropItem)


class ItemUnequippingSystem:
    """Returns unequipped items to their owner's backpack."""

    def run(self, world: World) -> None:
        for entity, to_unequip in list(world.join(WantsToUnequipItem)):
            world.remove(to_unequip.item, Equipped)
            world.insert(to_unequip.item, InBackpack(entity))
        world.clear(WantsToUnequipItem)