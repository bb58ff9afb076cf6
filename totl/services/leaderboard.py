import logging
from typing import Dict, Hashable, Iterable, List, Optional

from .season import SeasonData

logger = logging.getLogger(__name__)

UP = "up"
DOWN = "down"
SAME = "same"
NEW = "new"


class LeaderboardEntry:
    """A row of the global leaderboard."""

    def __init__(self, user_id: Hashable, name: str, ocp: int, rank: int, delta: str, this_gw: int):
        self.user_id = user_id
        self.name = name
        self.ocp = ocp
        self.rank = rank
        self.delta = delta
        self.this_gw = this_gw

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "name": self.name,
            "ocp": self.ocp,
            "rank": self.rank,
            "delta": self.delta,
            "this_gw": self.this_gw,
        }

    def __repr__(self):
        return f"#{self.rank} {self.name}: {self.ocp} OCP ({self.delta})"


def rank_by_ocp(totals: Dict[Hashable, int], names: Dict[Hashable, str]) -> Dict[Hashable, int]:
    """1-based positions by OCP descending, name ascending."""
    ordered = sorted(
        totals,
        key=lambda user_id: (-totals[user_id], names.get(user_id, ""), str(user_id)),
    )
    return {user_id: i + 1 for i, user_id in enumerate(ordered)}


def rank_delta(curr_rank: int, prev_rank: Optional[int]) -> str:
    if prev_rank is None:
        return NEW
    if curr_rank < prev_rank:
        return UP
    if curr_rank > prev_rank:
        return DOWN
    return SAME


def compute_global_leaderboard(users: Iterable, season: SeasonData) -> List[LeaderboardEntry]:
    """
    Rank every user who has played a resolved gameweek by season OCP.

    The delta compares against the ranking without the latest gameweek.
    When the latest gameweek is the first one with results there is nothing
    to compare against and every delta is "same".

    Args:
        users: Objects with ``user_id`` and ``name``
        season: Pre-fetched fixtures, results and picks

    Returns:
        LeaderboardEntry list in rank order
    """
    names = {u.user_id: u.name for u in users}
    entries = season.participant_scores(names)
    if not entries:
        return []

    latest = max(entries)
    current: Dict[Hashable, int] = {}
    previous: Dict[Hashable, int] = {}
    for gw, scores in entries.items():
        for user_id, entry in scores.items():
            current[user_id] = current.get(user_id, 0) + entry.score
            if gw < latest:
                previous[user_id] = previous.get(user_id, 0) + entry.score

    first_results_gw = len(entries) == 1
    curr_ranks = rank_by_ocp(current, names)
    prev_ranks = rank_by_ocp(previous, names)
    this_gw = entries[latest]

    leaderboard = []
    for user_id, rank in sorted(curr_ranks.items(), key=lambda item: item[1]):
        delta = SAME if first_results_gw else rank_delta(rank, prev_ranks.get(user_id))
        entry = this_gw.get(user_id)
        leaderboard.append(
            LeaderboardEntry(
                user_id=user_id,
                name=names[user_id],
                ocp=current[user_id],
                rank=rank,
                delta=delta,
                this_gw=entry.score if entry else 0,
            )
        )

    logger.debug("Global leaderboard through GW%s: %d players", latest, len(leaderboard))
    return leaderboard
