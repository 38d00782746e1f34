"""Participant equity profiling."""

import math
from collections.abc import Sequence

from meal_rota.domain.schedule import ParticipantMetrics
from meal_rota.domain.trips import ParticipantRecord

CAP_BUFFER = 2
MONOPOLY_SHARE = 0.6

_SKILL_WEIGHTS = {-2: 0.3, -1: 0.6, 0: 1.0, 1: 1.5, 2: 2.0}


def skill_weight_for(preference: int) -> float:
    """Map a cooking preference in [-2, 2] to a relative skill weight."""
    return _SKILL_WEIGHTS[_clamp_preference(preference)]


def profile_participants(
    participants: Sequence[ParticipantRecord],
    total_trip_days: int,
    total_meals: int,
) -> list[ParticipantMetrics]:
    """Build the working equity metrics for every participant of a trip.

    The fair share of a participant is the number of meals proportional to
    the share of trip days they are present for. The hard cap bounds how far
    a greedy run may push someone past that share:

        min(fair_share + 2, ceil(meals / participants) + 2, 60% of meals)

    The 60% ceiling only applies when the trip has more than one participant.
    """
    participant_count = len(participants)
    per_capita_cap = (
        math.ceil(total_meals / participant_count) + CAP_BUFFER
        if participant_count
        else 0
    )
    monopoly_cap = max(1, math.floor(total_meals * MONOPOLY_SHARE))

    metrics: list[ParticipantMetrics] = []
    for participant in participants:
        availability_days = len(participant.availability_dates)
        presence_ratio = (
            availability_days / total_trip_days
            if availability_days and total_trip_days > 0
            else 0.0
        )
        fair_share = _round_half_up(total_meals * presence_ratio)
        if availability_days > 0:
            fair_share = max(1, fair_share)
        current = len(participant.assignment_times)

        caps = [fair_share + CAP_BUFFER, per_capita_cap]
        if participant_count > 1:
            caps.append(monopoly_cap)

        last_assigned = (
            max(moment.date() for moment in participant.assignment_times)
            if participant.assignment_times
            else None
        )
        preference = _clamp_preference(participant.cooking_preference)
        metrics.append(
            ParticipantMetrics(
                participant_id=participant.id,
                name=participant.name,
                cooking_preference=preference,
                availability_dates=frozenset(participant.availability_dates),
                availability_days=availability_days,
                presence_ratio=presence_ratio,
                fair_share=fair_share,
                current_assignments=current,
                assignment_deficit=fair_share - current,
                max_assignments=min(caps),
                last_assigned_date=last_assigned,
                skill_weight=skill_weight_for(preference),
            )
        )
    return metrics


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _clamp_preference(preference: int) -> int:
    return max(-2, min(2, preference))
