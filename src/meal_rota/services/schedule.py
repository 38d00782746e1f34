"""Schedule generation service for a trip.

A run reads the trip snapshot, plans every meal slot and hands the plan to
the committer, which replaces the previous assignments atomically. The
service holds no locks: callers must serialize regeneration requests for
the same trip, otherwise two overlapping runs may both commit.
"""

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Protocol
from uuid import UUID

from meal_rota.domain.schedule import (
    ParticipantSummary,
    PlannedAssignment,
    PlannedRecipeAssignment,
    ScheduleOptions,
    ScheduleWarning,
)
from meal_rota.domain.trips import (
    MealSlotRecord,
    ParticipantRecord,
    RecipeRecord,
    TripRecord,
)
from meal_rota.services.candidates import (
    DEFAULT_CANDIDATE_LIMIT,
    DEFAULT_EXHAUSTIVE_POOL_LIMIT,
    TeamCandidateGenerator,
)
from meal_rota.services.planner import (
    AssignmentPlanner,
    LoggingPlanReporter,
    PlanReporter,
)
from meal_rota.services.profiler import profile_participants
from meal_rota.services.recipes import balance_recipes
from meal_rota.services.scoring import TeamScorer

_logger = logging.getLogger(__name__)


class ScheduleError(Exception):
    """Base error for schedule generation."""


class TripNotFoundError(ScheduleError):
    """Raised when the requested trip does not exist."""

    def __init__(self, trip_id: UUID) -> None:
        super().__init__(f"Trip not found: {trip_id}")
        self.trip_id = trip_id


class TripRepository(Protocol):
    """Read access to the trip snapshot used for scheduling."""

    def get_trip(self, trip_id: UUID) -> TripRecord | None:
        """Return the trip, if present."""

    def list_participants(self, trip_id: UUID) -> list[ParticipantRecord]:
        """Return participants with availability and assignment history."""

    def list_meal_slots(self, trip_id: UUID) -> list[MealSlotRecord]:
        """Return every meal slot of the trip."""

    def list_recipes(self, trip_id: UUID) -> list[RecipeRecord]:
        """Return trip recipes ordered by creation time."""

    def list_recipe_assignments(
        self, slot_ids: list[UUID]
    ) -> list[PlannedRecipeAssignment]:
        """Return recipes already attached to the given slots."""


class ScheduleCommitter(Protocol):
    """Write access that replaces a trip's schedule in one transaction."""

    def replace_schedule(
        self,
        trip_id: UUID,
        slot_ids: list[UUID],
        assignments: list[PlannedAssignment],
        recipe_assignments: list[PlannedRecipeAssignment],
    ) -> None:
        """Delete assignments of ``slot_ids`` and insert the new plan."""


@dataclass
class ScheduleResult:
    """Outcome of a schedule generation run."""

    assignments: list[PlannedAssignment]
    recipe_assignments: list[PlannedRecipeAssignment]
    summary: list[ParticipantSummary]
    warnings: list[ScheduleWarning]

    @property
    def assigned_participants(self) -> int:
        """Number of participant assignments in the plan."""
        return len(self.assignments)

    @property
    def added_recipe_assignments(self) -> int:
        """Number of recipe assignments added by the run."""
        return len(self.recipe_assignments)


@dataclass
class ScheduleService:
    """Application service that regenerates a trip's cooking schedule."""

    trip_repository: TripRepository
    committer: ScheduleCommitter
    reporter: PlanReporter = field(default_factory=LoggingPlanReporter)
    candidate_limit: int = DEFAULT_CANDIDATE_LIMIT
    exhaustive_pool_limit: int = DEFAULT_EXHAUSTIVE_POOL_LIMIT

    def generate(self, trip_id: UUID, options: ScheduleOptions) -> ScheduleResult:
        """Plan the whole trip from scratch and commit the result."""
        trip = self.trip_repository.get_trip(trip_id)
        if trip is None:
            raise TripNotFoundError(trip_id)

        participants = self.trip_repository.list_participants(trip_id)
        slots = sorted(
            self.trip_repository.list_meal_slots(trip_id),
            key=lambda slot: slot.sort_key,
        )
        metrics = profile_participants(
            participants,
            total_trip_days=trip.total_days,
            total_meals=len(slots),
        )
        planner = AssignmentPlanner(
            generator=TeamCandidateGenerator(
                scorer=TeamScorer(
                    prioritize_equality=options.prioritize_equal_participation
                ),
                limit=self.candidate_limit,
                exhaustive_pool_limit=self.exhaustive_pool_limit,
            ),
            reporter=self.reporter,
        )
        plan = planner.plan(
            slots,
            metrics,
            max_cooks=options.max_cooks_per_meal,
            max_helpers=options.max_helpers_per_meal,
        )

        recipe_assignments = self._balance_recipes(trip_id, slots, options)
        slot_ids = [slot.id for slot in slots]
        self.committer.replace_schedule(
            trip_id, slot_ids, plan.assignments, recipe_assignments
        )
        _logger.info(
            "Schedule generated: trip=%s slots=%s assignments=%s recipes=%s "
            "skipped=%s",
            trip_id,
            len(slots),
            len(plan.assignments),
            len(recipe_assignments),
            len(plan.warnings),
        )
        return ScheduleResult(
            assignments=plan.assignments,
            recipe_assignments=recipe_assignments,
            summary=plan.summary,
            warnings=plan.warnings,
        )

    def _balance_recipes(
        self,
        trip_id: UUID,
        slots: list[MealSlotRecord],
        options: ScheduleOptions,
    ) -> list[PlannedRecipeAssignment]:
        if not options.auto_assign_recipes or options.recipes_per_meal < 1:
            return []
        recipes = self.trip_repository.list_recipes(trip_id)
        if not recipes:
            return []
        existing: dict[UUID, set[UUID]] = defaultdict(set)
        for row in self.trip_repository.list_recipe_assignments(
            [slot.id for slot in slots]
        ):
            existing[row.meal_slot_id].add(row.recipe_id)
        return balance_recipes(
            slots,
            [recipe.id for recipe in recipes],
            existing,
            options.recipes_per_meal,
        )
