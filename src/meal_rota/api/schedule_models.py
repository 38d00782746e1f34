"""Pydantic models for schedule generation requests."""

from datetime import date
from uuid import UUID

from pydantic import BaseModel, Field

from meal_rota.domain.schedule import ScheduleOptions


class GenerateScheduleRequest(BaseModel):
    """Request body for regenerating a trip schedule."""

    trip_id: UUID
    max_cooks_per_meal: int | None = Field(default=None, ge=1, le=6)
    max_helpers_per_meal: int | None = Field(default=None, ge=0, le=6)
    auto_assign_recipes: bool = False
    recipes_per_meal: int | None = Field(default=None, ge=1, le=5)
    prioritize_equal_participation: bool | None = None

    def to_options(self, defaults: ScheduleOptions) -> ScheduleOptions:
        """Merge the request with configured defaults."""
        return ScheduleOptions(
            max_cooks_per_meal=(
                defaults.max_cooks_per_meal
                if self.max_cooks_per_meal is None
                else self.max_cooks_per_meal
            ),
            max_helpers_per_meal=(
                defaults.max_helpers_per_meal
                if self.max_helpers_per_meal is None
                else self.max_helpers_per_meal
            ),
            auto_assign_recipes=self.auto_assign_recipes,
            recipes_per_meal=(
                defaults.recipes_per_meal
                if self.recipes_per_meal is None
                else self.recipes_per_meal
            ),
            prioritize_equal_participation=(
                defaults.prioritize_equal_participation
                if self.prioritize_equal_participation is None
                else self.prioritize_equal_participation
            ),
        )


class ParticipantSummaryModel(BaseModel):
    """Per-participant outcome of a run."""

    participant_id: UUID
    participant_name: str
    target_assignments: int
    final_assignments: int
    presence_ratio: float


class ScheduleWarningModel(BaseModel):
    """A slot that was left without a team."""

    meal_slot_id: UUID
    date: date
    meal_type: str
    reason: str


class GenerateScheduleResponse(BaseModel):
    """Response body for a schedule generation run."""

    ok: bool = True
    assigned_participants: int
    added_recipe_assignments: int
    summary: list[ParticipantSummaryModel]
    warnings: list[ScheduleWarningModel]
