"""Supabase repository for the trip scheduling snapshot."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from meal_rota.domain.schedule import PlannedRecipeAssignment
from meal_rota.domain.trips import (
    MealSlotRecord,
    MealType,
    ParticipantRecord,
    RecipeRecord,
    TripRecord,
)
from meal_rota.services.schedule import TripRepository


@dataclass
class SupabaseTripRepository(TripRepository):
    """Supabase implementation for reading trips, participants and slots."""

    client: Client

    def get_trip(self, trip_id: UUID) -> TripRecord | None:
        """Return a trip by id."""
        response = (
            self.client.table("trips")
            .select("id, name, start_date, end_date")
            .eq("id", str(trip_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return TripRecord(
            id=UUID(row["id"]),
            name=str(row.get("name") or ""),
            start_date=_parse_day(row["start_date"]),
            end_date=_parse_day(row["end_date"]),
        )

    def list_participants(self, trip_id: UUID) -> list[ParticipantRecord]:
        """Return participants with availability days and past assignments."""
        response = (
            self.client.table("participants")
            .select(
                "id, name, cooking_preference, availabilities(date), "
                "assignments(meal_slots(date))"
            )
            .eq("trip_id", str(trip_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_participant(row) for row in response.data or []]

    def list_meal_slots(self, trip_id: UUID) -> list[MealSlotRecord]:
        """Return the trip's meal slots by date."""
        response = (
            self.client.table("meal_slots")
            .select("id, date, meal_type")
            .eq("trip_id", str(trip_id))
            .order("date", desc=False)
            .execute()
        )
        return [
            MealSlotRecord(
                id=UUID(row["id"]),
                date=_parse_day(row["date"]),
                meal_type=MealType(row["meal_type"]),
            )
            for row in response.data or []
        ]

    def list_recipes(self, trip_id: UUID) -> list[RecipeRecord]:
        """Return trip recipes, oldest first."""
        response = (
            self.client.table("recipes")
            .select("id, title")
            .eq("trip_id", str(trip_id))
            .order("created_at", desc=False)
            .execute()
        )
        return [
            RecipeRecord(id=UUID(row["id"]), title=str(row.get("title") or ""))
            for row in response.data or []
        ]

    def list_recipe_assignments(
        self, slot_ids: list[UUID]
    ) -> list[PlannedRecipeAssignment]:
        """Return recipes already attached to the slots."""
        if not slot_ids:
            return []
        response = (
            self.client.table("recipe_assignments")
            .select("meal_slot_id, recipe_id")
            .in_("meal_slot_id", [str(slot_id) for slot_id in slot_ids])
            .execute()
        )
        return [
            PlannedRecipeAssignment(
                meal_slot_id=UUID(row["meal_slot_id"]),
                recipe_id=UUID(row["recipe_id"]),
            )
            for row in response.data or []
        ]


def _parse_participant(row: dict[str, object]) -> ParticipantRecord:
    availabilities = row.get("availabilities") or []
    assignments = row.get("assignments") or []
    assignment_times = []
    for assignment in assignments:
        slot = assignment.get("meal_slots") or {}
        if slot.get("date"):
            assignment_times.append(datetime.fromisoformat(slot["date"]))
    return ParticipantRecord(
        id=UUID(row["id"]),
        name=str(row.get("name") or ""),
        cooking_preference=int(row.get("cooking_preference") or 0),
        availability_dates=frozenset(
            _parse_day(entry["date"]) for entry in availabilities if entry.get("date")
        ),
        assignment_times=tuple(assignment_times),
    )


def _parse_day(value: str) -> date:
    return datetime.fromisoformat(value).date()
