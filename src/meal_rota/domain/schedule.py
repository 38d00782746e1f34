"""Domain models for schedule generation."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from meal_rota.domain.trips import MealType, Role


@dataclass(frozen=True)
class ScheduleOptions:
    """Knobs controlling a schedule generation run."""

    max_cooks_per_meal: int = 2
    max_helpers_per_meal: int = 0
    auto_assign_recipes: bool = False
    recipes_per_meal: int = 1
    prioritize_equal_participation: bool = False


@dataclass
class ParticipantMetrics:
    """Working equity state for one participant during a run."""

    participant_id: UUID
    name: str
    cooking_preference: int
    availability_dates: frozenset[date]
    availability_days: int
    presence_ratio: float
    fair_share: int
    current_assignments: int
    assignment_deficit: int
    max_assignments: int
    last_assigned_date: date | None
    skill_weight: float

    def is_available_on(self, day: date) -> bool:
        """Return True when the participant is present on the given day."""
        return day in self.availability_dates

    @property
    def at_capacity(self) -> bool:
        """True once the participant has reached the hard assignment cap."""
        return self.current_assignments >= self.max_assignments

    def record_assignment(self, day: date) -> None:
        """Update working state after being committed to a slot."""
        self.current_assignments += 1
        self.assignment_deficit -= 1
        self.last_assigned_date = day


@dataclass(frozen=True)
class TeamCandidate:
    """A scored team proposal for one meal slot."""

    members: tuple[ParticipantMetrics, ...]
    roles: tuple[Role, ...]
    score: float
    disqualified: bool = False


@dataclass(frozen=True)
class PlannedAssignment:
    """A participant assigned to a meal slot with a role."""

    meal_slot_id: UUID
    participant_id: UUID
    role: Role


@dataclass(frozen=True)
class PlannedRecipeAssignment:
    """A recipe attached to a meal slot."""

    meal_slot_id: UUID
    recipe_id: UUID


@dataclass(frozen=True)
class ParticipantSummary:
    """Target versus final assignment counts for one participant."""

    participant_id: UUID
    participant_name: str
    target_assignments: int
    final_assignments: int
    presence_ratio: float


@dataclass(frozen=True)
class ScheduleWarning:
    """A meal slot left without a team."""

    meal_slot_id: UUID
    date: date
    meal_type: MealType
    reason: str
