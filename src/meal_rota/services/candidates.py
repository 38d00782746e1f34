"""Team candidate generation for a single meal slot."""

import heapq
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from datetime import date
from itertools import combinations

from meal_rota.domain.schedule import ParticipantMetrics, TeamCandidate
from meal_rota.domain.trips import Role
from meal_rota.services.scoring import TeamScorer

DEFAULT_CANDIDATE_LIMIT = 50
DEFAULT_EXHAUSTIVE_POOL_LIMIT = 12


@dataclass
class TeamCandidateGenerator:
    """Enumerate and rank feasible teams for a meal slot.

    Pools of up to ``exhaustive_pool_limit`` participants are enumerated in
    full, so the best scoring team is always found. Larger pools are first
    shortlisted to the members with the best solo scores; this keeps the
    search polynomial at the price of possibly missing the global best team.
    Only the top ``limit`` candidates are kept while enumerating.
    """

    scorer: TeamScorer = field(default_factory=TeamScorer)
    limit: int = DEFAULT_CANDIDATE_LIMIT
    exhaustive_pool_limit: int = DEFAULT_EXHAUSTIVE_POOL_LIMIT

    def generate(
        self,
        available: Sequence[ParticipantMetrics],
        slot_date: date,
        max_cooks: int,
        max_helpers: int,
    ) -> list[TeamCandidate]:
        """Return the best scored teams, best first."""
        total_slots = max_cooks + max_helpers
        if not available or total_slots <= 0:
            return []
        pool = self._shortlist(available, slot_date)
        max_size = min(total_slots, len(pool))
        teams = self._iter_teams(pool, slot_date, max_cooks, max_size)
        return heapq.nlargest(self.limit, teams, key=_rank_key)

    def _iter_teams(
        self,
        pool: Sequence[ParticipantMetrics],
        slot_date: date,
        max_cooks: int,
        max_size: int,
    ) -> Iterator[TeamCandidate]:
        for size in range(1, max_size + 1):
            cooks = min(max_cooks, size)
            roles = (Role.COOK,) * cooks + (Role.HELPER,) * (size - cooks)
            for members in combinations(pool, size):
                yield TeamCandidate(
                    members=members,
                    roles=roles,
                    score=self.scorer.score(members, slot_date),
                    disqualified=self.scorer.is_disqualified(members),
                )

    def _shortlist(
        self, available: Sequence[ParticipantMetrics], slot_date: date
    ) -> list[ParticipantMetrics]:
        if len(available) <= self.exhaustive_pool_limit:
            return list(available)
        solos = self._iter_teams(available, slot_date, max_cooks=1, max_size=1)
        best = heapq.nlargest(self.exhaustive_pool_limit, solos, key=_rank_key)
        chosen = {id(candidate.members[0]) for candidate in best}
        return [member for member in available if id(member) in chosen]


def _rank_key(candidate: TeamCandidate) -> tuple[bool, float]:
    return (not candidate.disqualified, candidate.score)
