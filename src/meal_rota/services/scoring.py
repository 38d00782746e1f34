"""Team scoring for meal slot candidates."""

import statistics
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date

from meal_rota.domain.schedule import ParticipantMetrics

DISQUALIFIED_SCORE = -1000.0
NEVER_ASSIGNED_DAYS = 999


@dataclass(frozen=True)
class ScoreWeights:
    """Relative weights of the three scoring factors."""

    skill: float
    equity: float
    temporal: float


DEFAULT_WEIGHTS = ScoreWeights(skill=0.40, equity=0.35, temporal=0.25)
EQUALITY_WEIGHTS = ScoreWeights(skill=0.20, equity=0.60, temporal=0.20)


@dataclass(frozen=True)
class TeamScorer:
    """Score candidate teams by skill mix, equity and rest spacing."""

    prioritize_equality: bool = False

    @property
    def weights(self) -> ScoreWeights:
        """Factor weights for the configured fairness mode."""
        return EQUALITY_WEIGHTS if self.prioritize_equality else DEFAULT_WEIGHTS

    def is_disqualified(self, members: Sequence[ParticipantMetrics]) -> bool:
        """Return True when any member already reached the assignment cap."""
        return any(member.at_capacity for member in members)

    def score(self, members: Sequence[ParticipantMetrics], slot_date: date) -> float:
        """Return the weighted score of a team for a slot on ``slot_date``."""
        if self.is_disqualified(members):
            return DISQUALIFIED_SCORE
        weights = self.weights
        return (
            skill_score(members) * weights.skill
            + equity_score(members, self.prioritize_equality) * weights.equity
            + temporal_score(members, slot_date) * weights.temporal
        )


def skill_score(members: Sequence[ParticipantMetrics]) -> float:
    """Reward teams pairing enthusiastic cooks with reluctant ones."""
    prefs = [member.cooking_preference for member in members]
    has_enthusiast = any(pref >= 1 for pref in prefs)
    has_reluctant = any(pref <= -1 for pref in prefs)

    raw = 0.0
    if has_enthusiast and has_reluctant:
        raw += 100
    elif has_enthusiast:
        raw += 70
    elif all(pref < 0 for pref in prefs):
        raw -= 50
    return raw + min(30.0, statistics.pvariance(prefs) * 10)


def equity_score(
    members: Sequence[ParticipantMetrics], prioritize_equality: bool
) -> float:
    """Favor members behind their fair share and penalize those near the cap."""
    deficit_rate = 60 if prioritize_equality else 35
    over_rate = 120 if prioritize_equality else 80
    raw = 0.0
    for member in members:
        raw += max(0, member.assignment_deficit) * deficit_rate
        raw -= max(0, -member.assignment_deficit) * over_rate
        remaining = member.max_assignments - member.current_assignments
        if remaining <= 1:
            raw -= 50
        elif remaining <= 2:  # noqa: PLR2004
            raw -= 25
    return raw


def temporal_score(members: Sequence[ParticipantMetrics], slot_date: date) -> float:
    """Penalize back-to-back duties and reward rested members."""
    return sum(
        _spacing_points(days_since_last_assignment(member, slot_date))
        for member in members
    )


def days_since_last_assignment(member: ParticipantMetrics, slot_date: date) -> int:
    """Whole days between the member's last duty and the slot."""
    if member.last_assigned_date is None:
        return NEVER_ASSIGNED_DAYS
    return abs((slot_date - member.last_assigned_date).days)


def _spacing_points(days: int) -> float:
    if days == 0:
        return -100
    if days == 1:
        return -80
    if days == 2:  # noqa: PLR2004
        return -30
    if days <= 5:  # noqa: PLR2004
        return 20
    return min(40, days * 3)
