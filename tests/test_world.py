import pytest

from ruztoo.components import Hidden, Name, Position, SufferDamage
from ruztoo.world import GameLog, World


def test_game_log_appends_in_order():
    log = GameLog()
    log.log("first")
    log.log("second")
    assert log.entries == ["first", "second"]


def test_create_entity_with_components():
    world = World()
    entity = world.create_entity(Position(1, 2), Name("Rat"))
    assert world.get(entity, Position) == Position(1, 2)
    assert world.get(entity, Name).name == "Rat"
    assert world.get(entity, Hidden) is None


def test_entity_ids_are_unique():
    world = World()
    ids = [world.create_entity() for _ in range(5)]
    assert len(set(ids)) == 5
    assert world.entities() == sorted(ids)


def test_join_only_yields_full_matches():
    world = World()
    a = world.create_entity(Position(1, 1), Name("a"))
    world.create_entity(Position(2, 2))
    c = world.create_entity(Name("c"), Position(3, 3))
    rows = list(world.join(Position, Name))
    assert [row[0] for row in rows] == [a, c]
    assert rows[1][1] == Position(3, 3)
    assert rows[1][2].name == "c"


def test_join_without_types_lists_entities():
    world = World()
    a = world.create_entity()
    b = world.create_entity()
    assert list(world.join()) == [(a,), (b,)]


def test_delete_entity_removes_components():
    world = World()
    entity = world.create_entity(Position(0, 0))
    world.delete_entity(entity)
    assert not world.is_alive(entity)
    assert entity not in world.storage(Position)
    with pytest.raises(KeyError):
        world.delete_entity(entity)


def test_insert_on_dead_entity_raises():
    world = World()
    entity = world.create_entity()
    world.delete_entity(entity)
    with pytest.raises(KeyError):
        world.insert(entity, Name("ghost"))


def test_remove_returns_component():
    world = World()
    entity = world.create_entity(Hidden())
    assert world.remove(entity, Hidden) == Hidden()
    assert world.get(entity, Hidden) is None
    assert world.remove(entity, Hidden) is None


def test_storage_is_live_and_clearable():
    world = World()
    entity = world.create_entity()
    SufferDamage.new_damage(world.storage(SufferDamage), entity, 4)
    assert world.get(entity, SufferDamage).amount == [4]
    world.clear(SufferDamage)
    assert world.storage(SufferDamage) == {}


def test_default_resources():
    world = World()
    assert world.log.entries == []
    assert world.map.dimensions().x == world.map.width
    assert world.player_entity is None