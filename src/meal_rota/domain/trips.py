"""Domain models for trips, participants and meal slots."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from uuid import UUID


class MealType(Enum):
    """Meal categories of a trip day, in chronological order."""

    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"

    @property
    def rank(self) -> int:
        """Position of the meal within its day."""
        return _MEAL_RANKS[self]


_MEAL_RANKS = {MealType.BREAKFAST: 0, MealType.LUNCH: 1, MealType.DINNER: 2}


class Role(Enum):
    """Duty a participant takes on for a meal slot."""

    COOK = "COOK"
    HELPER = "HELPER"


@dataclass(frozen=True)
class TripRecord:
    """Represents a trip stored in the database."""

    id: UUID
    name: str
    start_date: date
    end_date: date

    @property
    def total_days(self) -> int:
        """Inclusive number of calendar days covered by the trip."""
        return (self.end_date - self.start_date).days + 1


@dataclass(frozen=True)
class ParticipantRecord:
    """A trip participant with availability and assignment history."""

    id: UUID
    name: str
    cooking_preference: int = 0
    availability_dates: frozenset[date] = frozenset()
    assignment_times: tuple[datetime, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MealSlotRecord:
    """A single meal of the trip that needs a team."""

    id: UUID
    date: date
    meal_type: MealType

    @property
    def sort_key(self) -> tuple[date, int]:
        """Chronological ordering key: date, then meal rank."""
        return (self.date, self.meal_type.rank)


@dataclass(frozen=True)
class RecipeRecord:
    """A recipe available to the trip."""

    id: UUID
    title: str
