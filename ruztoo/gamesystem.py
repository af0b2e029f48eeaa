"""Character statistics formulas and dice rolling."""

from __future__ import annotations

import random

from ruztoo.components import Skill, Skills


def attr_bonus(value: int) -> int:
    """Return the bonus for an attribute value, rounding towards zero."""
    diff = value - 10
    return diff // 2 if diff >= 0 else -((-diff) // 2)


def player_hp_per_level(fitness: int) -> int:
    return 10 + attr_bonus(fitness)


def player_hp_at_level(fitness: int, level: int) -> int:
    return player_hp_per_level(fitness) * level


def npc_hp(fitness: int, level: int) -> int:
    """Return an NPC's hit points: one plus at least one per level."""
    return 1 + sum(max(1, 8 + attr_bonus(fitness)) for _ in range(level))


def mana_per_level(intelligence: int) -> int:
    return max(1, 4 + attr_bonus(intelligence))


def mana_at_level(intelligence: int, level: int) -> int:
    return mana_per_level(intelligence) * level


def skill_bonus(skill: Skill, skills: Skills) -> int:
    """Return the skill's level, or -4 when it is untrained."""
    return skills.skills.get(skill, -4)


def roll_dice(rng: random.Random, n_dice: int, die_type: int) -> int:
    """Roll ``n_dice`` dice with ``die_type`` faces and return the total."""
    if n_dice > 0 and die_type < 1:
        raise ValueError("die_type must be at least 1")
    return sum(rng.randint(1, die_type) for _ in range(n_dice))