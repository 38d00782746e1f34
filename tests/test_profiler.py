"""Tests for participant profiling."""

from datetime import UTC, datetime

import pytest

from meal_rota.services.profiler import profile_participants, skill_weight_for
from tests.conftest import make_participant, trip_days


def test_profile_computes_fair_share_and_caps() -> None:
    days = trip_days(4)
    participants = [
        make_participant("Ana", days=days),
        make_participant("Ben", days=days[:1]),
        make_participant("Cleo"),
    ]

    ana, ben, cleo = profile_participants(
        participants, total_trip_days=4, total_meals=8
    )

    assert ana.presence_ratio == 1.0
    assert ana.fair_share == 8
    assert ana.assignment_deficit == 8
    assert ana.max_assignments == 4
    assert ben.presence_ratio == 0.25
    assert ben.fair_share == 2
    assert ben.max_assignments == 4
    assert cleo.availability_days == 0
    assert cleo.presence_ratio == 0.0
    assert cleo.fair_share == 0
    assert cleo.max_assignments == 2


def test_present_participant_always_has_a_target() -> None:
    participants = [make_participant("Dora", days=trip_days(1))]

    (dora,) = profile_participants(participants, total_trip_days=10, total_meals=3)

    assert dora.fair_share == 1


def test_fair_share_rounds_half_up() -> None:
    participants = [
        make_participant("Eli", days=trip_days(1)),
        make_participant("Fay", days=trip_days(4)),
    ]

    eli, _ = profile_participants(participants, total_trip_days=4, total_meals=10)

    assert eli.fair_share == 3


def test_single_participant_cap_covers_every_meal() -> None:
    participants = [make_participant("Solo", days=trip_days(3))]

    (solo,) = profile_participants(participants, total_trip_days=3, total_meals=9)

    assert solo.max_assignments >= 9


def test_history_sets_counts_and_last_assigned_date() -> None:
    days = trip_days(5)
    history = [
        datetime(2025, 6, 2, 18, 30, tzinfo=UTC),
        datetime(2025, 6, 4, 8, 0, tzinfo=UTC),
    ]
    participants = [
        make_participant("Gus", days=days, history=history),
        make_participant("Hal", days=days),
    ]

    gus, hal = profile_participants(participants, total_trip_days=5, total_meals=10)

    assert gus.current_assignments == 2
    assert gus.assignment_deficit == gus.fair_share - 2
    assert gus.last_assigned_date == days[3]
    assert hal.last_assigned_date is None


@pytest.mark.parametrize(
    ("preference", "weight"),
    [(-2, 0.3), (-1, 0.6), (0, 1.0), (1, 1.5), (2, 2.0), (5, 2.0)],
)
def test_skill_weight_mapping(preference: int, weight: float) -> None:
    assert skill_weight_for(preference) == weight


def test_profile_without_participants_is_empty() -> None:
    assert profile_participants([], total_trip_days=3, total_meals=9) == []
