"""Hunger clocks: food intake and the slow slide into starvation."""

from __future__ import annotations

from ruztoo.components import HungerClock, HungerState, SufferDamage
from ruztoo.runstate import RunState
from ruztoo.world import World

_POINTS_PER_STATE = 200
_WELL_FED_CAP = 20

_NEXT_BETTER = {
    HungerState.NORMAL: HungerState.WELL_FED,
    HungerState.HUNGRY: HungerState.NORMAL,
    HungerState.STARVING: HungerState.HUNGRY,
}

_NEXT_WORSE = {
    HungerState.WELL_FED: (HungerState.NORMAL, "You are no longer well fed"),
    HungerState.NORMAL: (HungerState.HUNGRY, "You are getting hungry"),
    HungerState.HUNGRY: (HungerState.STARVING, "You are starving"),
}

_STARVATION_MESSAGE = "You are dying of starvation. You take 1 hp of damage"


def calculate_new_hunger_state(
    current_points: int, current_state: HungerState, food_points: int
) -> tuple[HungerState, int]:
    """Return the hunger state and points after eating ``food_points`` of food."""
    combined = current_points + food_points
    if current_state is HungerState.WELL_FED:
        return HungerState.WELL_FED, min(combined, _WELL_FED_CAP)
    if combined > _POINTS_PER_STATE:
        return _NEXT_BETTER[current_state], combined - _POINTS_PER_STATE
    return current_state, combined


class HungerSystem:
    """Ticks hunger clocks: the player's on its turn, everyone else's on theirs."""

    def run(self, world: World) -> None:
        player = world.player_entity
        damage = world.storage(SufferDamage)
        for entity, clock in world.join(HungerClock):
            is_player = entity == player
            proceed = (world.runstate is RunState.PLAYER_TURN and is_player) or (
                world.runstate is RunState.MONSTER_TURN and not is_player
            )
            if not proceed:
                continue

            clock.hunger_points -= 1
            if clock.hunger_points >= 1:
                continue

            clock.hunger_points = _POINTS_PER_STATE
            if clock.state is HungerState.STARVING:
                if is_player:
                    world.log.log(_STARVATION_MESSAGE)
                SufferDamage.new_damage(damage, entity, 1)
            else:
                clock.state, message = _NEXT_WORSE[clock.state]
                if is_player:
                    world.log.log(message)