import math

import pytest

from ruztoo.colors import ORANGE
from ruztoo.components import (
    AreaOfEffect,
    Artefact,
    Confusion,
    Consumable,
    Equippable,
    Equipped,
    EquipmentSlot,
    HungerClock,
    HungerState,
    InBackpack,
    InflictsDamage,
    MagicMapper,
    Name,
    Player,
    Point,
    Pool,
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
from ruztoo.inventory import (
    ItemCollectionSystem,
    ItemDropSystem,
    ItemUnequippingSystem,
    ItemUseSystem,
    ParticleRequest,
    field_of_view,
)
from ruztoo.map import Map
from ruztoo.runstate import MagicMapReveal
from ruztoo.terminal import to_cp437
from ruztoo.tiletype import TileType
from ruztoo.world import World


def open_map(width=20, height=20):
    game_map = Map(1, width, height)
    for x in range(1, width - 1):
        for y in range(1, height - 1):
            game_map.tiles[x][y] = TileType.FLOOR
    return game_map


def make_world():
    world = World()
    world.map = open_map()
    player = world.create_entity(
        Player(),
        Position(3, 4),
        Name("Player"),
        Pools(Pool(10, 5), Pool(4, 4), 0, 1),
    )
    world.player_entity = player
    return world, player


def test_pickup_moves_item_into_backpack():
    world, player = make_world()
    item = world.create_entity(Position(3, 4), Name("Potion"))
    world.create_entity(WantsToPickUpItem(player, item))
    ItemCollectionSystem().run(world)
    assert world.get(item, InBackpack) == InBackpack(player)
    assert world.get(item, Position) is None
    assert world.log.entries[-1] == "You picked up the Potion"
    assert world.storage(WantsToPickUpItem) == {}


def test_drop_places_item_at_dropper():
    world, player = make_world()
    item = world.create_entity(InBackpack(player), Name("Dagger"))
    world.insert(player, WantsToDropItem(item))
    ItemDropSystem().run(world)
    assert world.get(item, Position) == Position(3, 4)
    assert world.get(item, InBackpack) is None
    assert world.log.entries[-1] == "You drop the Dagger"
    assert world.storage(WantsToDropItem) == {}


def test_drop_without_position_raises():
    world, player = make_world()
    world.remove(player, Position)
    item = world.create_entity(InBackpack(player), Name("Dagger"))
    world.insert(player, WantsToDropItem(item))
    with pytest.raises(LookupError):
        ItemDropSystem().run(world)


def test_unequip_returns_item_to_backpack():
    world, player = make_world()
    item = world.create_entity(Equipped(player, EquipmentSlot.HEAD), Name("Helm"))
    world.insert(player, WantsToUnequipItem(item))
    ItemUnequippingSystem().run(world)
    assert world.get(item, Equipped) is None
    assert world.get(item, InBackpack) == InBackpack(player)
    assert world.storage(WantsToUnequipItem) == {}


def test_healing_potion_heals_to_max_and_is_consumed():
    world, player = make_world()
    item = world.create_entity(
        InBackpack(player), Name("Health Potion"), ProvidesHealing(8), Consumable()
    )
    world.insert(player, WantsToUseItem(item))
    ItemUseSystem().run(world)
    pools = world.get(player, Pools)
    assert pools.hit_points.current == pools.hit_points.max
    assert not world.is_alive(item)
    assert world.log.entries[-1] == "You drink the Health Potion, and it heals 8hp"
    assert world.particles[-1].glyph == to_cp437("❤")
    assert world.storage(WantsToUseItem) == {}


def test_targeted_damage_hits_mobs_on_tile():
    world, player = make_world()
    mob = world.create_entity(Name("Orc"), Position(5, 5))
    world.map.tile_content[5][5].append(mob)
    item = world.create_entity(Name("Missile"), InflictsDamage(8))
    world.insert(player, WantsToUseItem(item, Point(5, 5)))
    ItemUseSystem().run(world)
    assert world.get(mob, SufferDamage) == SufferDamage([8])
    assert world.log.entries[-1] == "You use Missile on Orc, inflicting 8 damage"
    assert world.is_alive(item)


def test_area_of_effect_hits_every_mob_in_blast():
    world, player = make_world()
    near = world.create_entity(Name("Rat"))
    beside = world.create_entity(Name("Bat"))
    world.map.tile_content[5][5].append(near)
    world.map.tile_content[6][5].append(beside)
    item = world.create_entity(Name("Fireball"), InflictsDamage(20), AreaOfEffect(1))
    world.insert(player, WantsToUseItem(item, Point(5, 5)))
    ItemUseSystem().run(world)
    assert world.get(near, SufferDamage) == SufferDamage([20])
    assert world.get(beside, SufferDamage) == SufferDamage([20])
    blast = field_of_view(Point(5, 5), 1, world.map)
    assert {(p.x, p.y) for p in world.particles} == {(p.x, p.y) for p in blast}
    assert all(p.fg == ORANGE for p in world.particles)


def test_confusion_is_applied_to_target():
    world, player = make_world()
    mob = world.create_entity(Name("Goblin"))
    world.map.tile_content[7][7].append(mob)
    item = world.create_entity(Name("Confusion Scroll"), Confusion(4), Consumable())
    world.insert(player, WantsToUseItem(item, Point(7, 7)))
    ItemUseSystem().run(world)
    assert world.get(mob, Confusion) == Confusion(4)
    assert world.log.entries[-1] == "You use Confusion Scroll on Goblin, confusing them"
    assert not world.is_alive(item)


def test_equipping_replaces_item_in_same_slot():
    world, player = make_world()
    old = world.create_entity(Name("Dagger"), Equipped(player, EquipmentSlot.MELEE))
    new = world.create_entity(
        Name("Longsword"), InBackpack(player), Equippable(EquipmentSlot.MELEE)
    )
    world.insert(player, WantsToUseItem(new))
    ItemUseSystem().run(world)
    assert world.get(new, Equipped) == Equipped(player, EquipmentSlot.MELEE)
    assert world.get(new, InBackpack) is None
    assert world.get(old, Equipped) is None
    assert world.get(old, InBackpack) == InBackpack(player)
    assert world.log.entries[-2:] == ["You unequip Dagger", "You equip Longsword"]


def test_food_updates_hunger_clock():
    world, player = make_world()
    world.insert(player, HungerClock(HungerState.HUNGRY, 50))
    item = world.create_entity(Name("Ration"), ProvidesFood(200), Consumable())
    world.insert(player, WantsToUseItem(item))
    ItemUseSystem().run(world)
    clock = world.get(player, HungerClock)
    assert (clock.state, clock.hunger_points) == calculate_new_hunger_state(
        50, HungerState.HUNGRY, 200
    )
    assert world.log.entries[-1] == "You eat the Ration. It fills you up."


def test_magic_mapper_starts_reveal():
    world, player = make_world()
    item = world.create_entity(Name("Mapping Scroll"), MagicMapper(), Consumable())
    world.insert(player, WantsToUseItem(item))
    ItemUseSystem().run(world)
    assert world.runstate == MagicMapReveal(0)
    assert world.log.entries[-1] == "You use the scroll, which reveals the map to you"


def test_artefact_reports_value():
    world, player = make_world()
    item = world.create_entity(Name("Idol"), Artefact("Golden Idol", 50))
    world.insert(player, WantsToUseItem(item))
    ItemUseSystem().run(world)
    assert world.log.entries[-1] == "This artefact is named Golden Idol, and it is worth 50 gold"


def test_field_of_view_respects_radius():
    game_map = open_map()
    origin = Point(10, 10)
    seen = field_of_view(origin, 5, game_map)
    assert origin in seen
    assert Point(15, 10) in seen
    assert Point(16, 10) not in seen
    assert all(math.hypot(p.x - 10, p.y - 10) <= 5 for p in seen)


def test_field_of_view_blocked_by_wall():
    game_map = open_map()
    for y in range(game_map.height):
        game_map.tiles[12][y] = TileType.WALL
    seen = field_of_view(Point(10, 10), 5, game_map)
    assert Point(12, 10) in seen
    assert Point(14, 10) not in seen


def test_field_of_view_from_inside_wall_sees_only_origin():
    game_map = Map(1, 10, 10)
    assert field_of_view(Point(5, 5), 3, game_map) == [Point(5, 5)]


def test_particle_request_is_immutable():
    request = ParticleRequest(1, 2, ORANGE, ORANGE, 33, 200.0)
    with pytest.raises(AttributeError):
        request.x = 5
    assert request.lifetime_ms == 200.0