"""Round-robin recipe distribution across meal slots."""

from collections.abc import Mapping, Sequence
from uuid import UUID

from meal_rota.domain.schedule import PlannedRecipeAssignment
from meal_rota.domain.trips import MealSlotRecord


def balance_recipes(
    slots: Sequence[MealSlotRecord],
    recipe_ids: Sequence[UUID],
    existing: Mapping[UUID, set[UUID]],
    recipes_per_meal: int,
) -> list[PlannedRecipeAssignment]:
    """Top up each slot to ``recipes_per_meal`` recipes.

    Recipes are taken in order from a running cursor shared by all slots, so
    consecutive slots get different recipes. A recipe already attached to a
    slot is skipped; slots that already have enough recipes are left alone.
    """
    if recipes_per_meal < 1 or not recipe_ids:
        return []

    planned: list[PlannedRecipeAssignment] = []
    cursor = 0
    for slot in sorted(slots, key=lambda item: item.sort_key):
        assigned = set(existing.get(slot.id, set()))
        needed = recipes_per_meal - len(assigned)
        attempts = 0
        while needed > 0 and attempts < len(recipe_ids):
            recipe_id = recipe_ids[cursor % len(recipe_ids)]
            cursor += 1
            attempts += 1
            if recipe_id in assigned:
                continue
            assigned.add(recipe_id)
            planned.append(
                PlannedRecipeAssignment(meal_slot_id=slot.id, recipe_id=recipe_id)
            )
            needed -= 1
    return planned
