"""Supabase committer that replaces a trip schedule atomically."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from meal_rota.domain.schedule import PlannedAssignment, PlannedRecipeAssignment
from meal_rota.services.schedule import ScheduleCommitter

REPLACE_FUNCTION = "replace_trip_schedule"


@dataclass
class SupabaseScheduleCommitter(ScheduleCommitter):
    """Commit plans through the ``replace_trip_schedule`` database function.

    The function runs inside a single Postgres transaction, so readers never
    observe a partially replaced schedule.
    """

    client: Client

    def replace_schedule(
        self,
        trip_id: UUID,
        slot_ids: list[UUID],
        assignments: list[PlannedAssignment],
        recipe_assignments: list[PlannedRecipeAssignment],
    ) -> None:
        """Delete the slots' assignments and insert the new plan."""
        response = self.client.rpc(
            REPLACE_FUNCTION,
            {
                "p_trip_id": str(trip_id),
                "p_slot_ids": [str(slot_id) for slot_id in slot_ids],
                "p_assignments": [
                    {
                        "meal_slot_id": str(item.meal_slot_id),
                        "participant_id": str(item.participant_id),
                        "role": item.role.value,
                    }
                    for item in assignments
                ],
                "p_recipe_assignments": [
                    {
                        "meal_slot_id": str(item.meal_slot_id),
                        "recipe_id": str(item.recipe_id),
                    }
                    for item in recipe_assignments
                ],
            },
        ).execute()
        if response.data is None:
            raise RuntimeError("Failed to replace trip schedule")
