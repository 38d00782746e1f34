"""Greedy per-slot assignment planning."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from meal_rota.domain.schedule import (
    ParticipantMetrics,
    ParticipantSummary,
    PlannedAssignment,
    ScheduleWarning,
    TeamCandidate,
)
from meal_rota.domain.trips import MealSlotRecord
from meal_rota.services.candidates import TeamCandidateGenerator

_logger = logging.getLogger(__name__)

NO_AVAILABLE_PARTICIPANTS = "no participants available"
NO_VALID_TEAM = "every candidate team exceeds an assignment cap"


class PlanReporter(Protocol):
    """Observer notified about each slot decision."""

    def slot_committed(self, slot: MealSlotRecord, team: TeamCandidate) -> None:
        """Called after a team is committed to a slot."""

    def slot_skipped(self, slot: MealSlotRecord, reason: str) -> None:
        """Called when a slot is left without a team."""


class LoggingPlanReporter(PlanReporter):
    """Reporter that writes slot decisions to the application log."""

    def slot_committed(self, slot: MealSlotRecord, team: TeamCandidate) -> None:
        _logger.info(
            "Slot assigned: slot=%s date=%s meal=%s team=%s score=%.2f",
            slot.id,
            slot.date.isoformat(),
            slot.meal_type.value,
            ", ".join(member.name for member in team.members),
            team.score,
        )

    def slot_skipped(self, slot: MealSlotRecord, reason: str) -> None:
        _logger.warning(
            "Slot skipped: slot=%s date=%s meal=%s reason=%s",
            slot.id,
            slot.date.isoformat(),
            slot.meal_type.value,
            reason,
        )


@dataclass
class PlanResult:
    """Outcome of planning every slot of a trip."""

    assignments: list[PlannedAssignment]
    summary: list[ParticipantSummary]
    warnings: list[ScheduleWarning]


@dataclass
class AssignmentPlanner:
    """Assign the best available team to each slot in chronological order.

    Each commit updates the working metrics, so later slots see the new
    assignment counts and rest spacing. The result is a greedy heuristic,
    not a globally optimal assignment.
    """

    generator: TeamCandidateGenerator = field(default_factory=TeamCandidateGenerator)
    reporter: PlanReporter = field(default_factory=LoggingPlanReporter)

    def plan(
        self,
        slots: Sequence[MealSlotRecord],
        metrics: Sequence[ParticipantMetrics],
        max_cooks: int,
        max_helpers: int,
    ) -> PlanResult:
        """Plan all slots, mutating ``metrics`` as teams are committed."""
        assignments: list[PlannedAssignment] = []
        warnings: list[ScheduleWarning] = []

        for slot in sorted(slots, key=lambda item: item.sort_key):
            available = [
                member for member in metrics if member.is_available_on(slot.date)
            ]
            if not available:
                warnings.append(self._skip(slot, NO_AVAILABLE_PARTICIPANTS))
                continue

            candidates = self.generator.generate(
                available, slot.date, max_cooks, max_helpers
            )
            team = next(
                (candidate for candidate in candidates if not candidate.disqualified),
                None,
            )
            if team is None:
                warnings.append(self._skip(slot, NO_VALID_TEAM))
                continue

            for member, role in zip(team.members, team.roles, strict=True):
                assignments.append(
                    PlannedAssignment(
                        meal_slot_id=slot.id,
                        participant_id=member.participant_id,
                        role=role,
                    )
                )
                member.record_assignment(slot.date)
            self.reporter.slot_committed(slot, team)

        return PlanResult(
            assignments=assignments,
            summary=summarize(metrics),
            warnings=warnings,
        )

    def _skip(self, slot: MealSlotRecord, reason: str) -> ScheduleWarning:
        self.reporter.slot_skipped(slot, reason)
        return ScheduleWarning(
            meal_slot_id=slot.id,
            date=slot.date,
            meal_type=slot.meal_type,
            reason=reason,
        )


def summarize(metrics: Sequence[ParticipantMetrics]) -> list[ParticipantSummary]:
    """Return target versus final counts for each participant."""
    return [
        ParticipantSummary(
            participant_id=member.participant_id,
            participant_name=member.name,
            target_assignments=member.fair_share,
            final_assignments=member.current_assignments,
            presence_ratio=member.presence_ratio,
        )
        for member in metrics
    ]
