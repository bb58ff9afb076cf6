"""
Gameweek scoring.

One point per correct pick on a decided fixture, plus a unicorn for the sole
correct user on a fixture nobody else called.
"""

import logging
from typing import Dict, Hashable, Iterable, List

from .correctness import evaluate_fixture
from .outcome import resolve_outcomes

logger = logging.getLogger(__name__)


class UserGwScore:
    """A user's score for a single gameweek."""

    def __init__(self, user_id: Hashable, gw: int, score: int = 0, unicorns: int = 0):
        self.user_id = user_id
        self.gw = gw
        self.score = score
        self.unicorns = unicorns

    def to_dict(self) -> dict:
        return {
            "user_id": self.user_id,
            "gw": self.gw,
            "score": self.score,
            "unicorns": self.unicorns,
        }

    def __eq__(self, other):
        if not isinstance(other, UserGwScore):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f"{self.user_id} GW{self.gw}: {self.score} ({self.unicorns} unicorns)"


def group_picks_by_fixture(
    gw: int,
    fixtures: Iterable,
    picks: Iterable,
    population=None,
) -> Dict[int, List]:
    """
    Bucket a gameweek's picks by fixture_index.

    Picks for other gameweeks, for users outside ``population`` or for
    fixtures that do not exist are dropped.
    """
    by_fixture: Dict[int, List] = {
        f.fixture_index: [] for f in fixtures if f.gw == gw
    }

    for pick in picks:
        if pick.gw != gw:
            continue
        if population is not None and pick.user_id not in population:
            continue
        bucket = by_fixture.get(pick.fixture_index)
        if bucket is None:
            logger.debug(
                "Ignoring orphan pick: user %s gw %s fixture %s",
                pick.user_id, gw, pick.fixture_index,
            )
            continue
        bucket.append(pick)

    return by_fixture


def resolved_fixture_indexes(gw: int, fixtures: Iterable, results: Iterable) -> List[int]:
    """Fixture indexes of the gameweek that have a decided outcome."""
    outcomes = resolve_outcomes(r for r in results if r.gw == gw).get(gw, {})
    return sorted(f.fixture_index for f in fixtures if f.gw == gw and f.fixture_index in outcomes)


def score_gameweek(
    gw: int,
    population: Iterable[Hashable],
    fixtures: Iterable,
    results: Iterable,
    picks: Iterable,
) -> Dict[Hashable, UserGwScore]:
    """
    Score every member of ``population`` for one gameweek.

    Members without picks still get a zero row. Undecided fixtures are
    skipped entirely.

    Args:
        gw: Gameweek number
        population: User ids to score
        fixtures: Fixture rows (other gameweeks are ignored)
        results: Result rows (other gameweeks are ignored)
        picks: Pick rows (other gameweeks and non-members are ignored)

    Returns:
        Mapping of user id to UserGwScore
    """
    if gw < 1:
        raise ValueError(f"Gameweek must be positive, got {gw}")

    members = list(dict.fromkeys(population))
    scores = {user_id: UserGwScore(user_id, gw) for user_id in members}

    fixtures = list(fixtures)
    outcomes = resolve_outcomes(r for r in results if r.gw == gw).get(gw, {})
    by_fixture = group_picks_by_fixture(gw, fixtures, picks, population=set(members))

    for fixture_index in sorted(by_fixture):
        outcome = outcomes.get(fixture_index)
        if outcome is None:
            logger.debug("GW%s fixture %s undecided, skipping", gw, fixture_index)
            continue

        verdict = evaluate_fixture(outcome, by_fixture[fixture_index])
        for user_id in verdict.correct_users:
            scores[user_id].score += 1
        if verdict.is_unicorn:
            scores[verdict.unicorn_user].unicorns += 1

    return scores
