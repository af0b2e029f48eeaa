"""Component types attached to game entities."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass, field
from enum import Enum

from ruztoo.colors import RGB


@dataclass(frozen=True)
class Point:
    """An immutable map coordinate."""

    x: int
    y: int


@dataclass
class Position:
    x: int
    y: int


@dataclass
class Renderable:
    glyph: int
    fg: RGB
    bg: RGB
    render_order: int


@dataclass
class Monster:
    pass


@dataclass
class Bystander:
    pass


@dataclass
class Vendor:
    pass


@dataclass
class Name:
    name: str


@dataclass
class Viewshed:
    range: int
    dirty: bool = True
    visible_tiles: list[Point] = field(default_factory=list)


@dataclass
class Player:
    pass


@dataclass
class BlocksTile:
    pass


@dataclass
class WantsToMelee:
    target: int


@dataclass
class SufferDamage:
    amount: list[int] = field(default_factory=list)

    @staticmethod
    def new_damage(store: MutableMapping[int, SufferDamage], victim: int, amount: int) -> None:
        """Queue ``amount`` of damage for ``victim`` in ``store``."""
        suffering = store.get(victim)
        if suffering is None:
            store[victim] = SufferDamage([amount])
        else:
            suffering.amount.append(amount)


@dataclass
class Item:
    pass


@dataclass
class ProvidesHealing:
    heal_amount: int


@dataclass
class InBackpack:
    owner: int


@dataclass
class WantsToPickUpItem:
    collected_by: int
    item: int


@dataclass
class WantsToUseItem:
    item: int
    target: Point | None = None


@dataclass
class WantsToDropItem:
    item: int


@dataclass
class Consumable:
    pass


@dataclass
class Examinable:
    pass


@dataclass
class Artefact:
    name: str
    value: int


@dataclass
class Ranged:
    range: int


@dataclass
class InflictsDamage:
    damage: int


@dataclass
class AreaOfEffect:
    radius: int


@dataclass
class Confusion:
    turns: int


class EquipmentSlot(Enum):
    MELEE = "Melee"
    SHIELD = "Shield"
    HEAD = "Head"
    TORSO = "Torso"
    LEGS = "Legs"
    FEET = "Feet"
    HANDS = "Hands"


@dataclass
class Equippable:
    slot: EquipmentSlot


@dataclass
class Equipped:
    owner: int
    slot: EquipmentSlot


class WeaponAttribute(Enum):
    MIGHT = "Might"
    QUICKNESS = "Quickness"


@dataclass
class MeleeWeapon:
    attribute: WeaponAttribute
    damage_n_dice: int
    damage_die_type: int
    damage_bonus: int
    hit_bonus: int


@dataclass
class Wearable:
    armor_class: float


@dataclass
class NaturalAttack:
    name: str
    damage_n_dice: int
    damage_die_type: int
    damage_bonus: int
    hit_bonus: int


@dataclass
class NaturalAttackDefense:
    armor_class: int | None = None
    attacks: list[NaturalAttack] = field(default_factory=list)


@dataclass
class WantsToUnequipItem:
    item: int


@dataclass
class ParticleLifetime:
    lifetime_ms: float


class HungerState(Enum):
    WELL_FED = "WellFed"
    NORMAL = "Normal"
    HUNGRY = "Hungry"
    STARVING = "Starving"


@dataclass
class HungerClock:
    state: HungerState
    hunger_points: int


@dataclass
class ProvidesFood:
    points: int


@dataclass
class MagicMapper:
    pass


@dataclass
class Hidden:
    pass


@dataclass
class EntryTrigger:
    pass


@dataclass
class EntityMoved:
    pass


@dataclass
class SingleActivation:
    pass


@dataclass
class BlocksVisibility:
    pass


@dataclass
class Door:
    open: bool


@dataclass
class Quips:
    available: list[str] = field(default_factory=list)


@dataclass
class Attribute:
    base: int
    modifiers: int
    bonus: int


@dataclass
class Attributes:
    might: Attribute
    fitness: Attribute
    quickness: Attribute
    intelligence: Attribute


class Skill(Enum):
    MELEE = "Melee"
    DEFENSE = "Defense"
    MAGIC = "Magic"


@dataclass
class Skills:
    skills: dict[Skill, int] = field(default_factory=dict)


@dataclass
class Pool:
    max: int
    current: int


@dataclass
class Pools:
    hit_points: Pool
    mana: Pool
    xp: int
    level: int