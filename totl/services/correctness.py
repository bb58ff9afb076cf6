import logging
from dataclasses import dataclass
from typing import FrozenSet, Hashable, Iterable, Optional

from .outcome import OUTCOMES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FixtureVerdict:
    """Who called a decided fixture correctly."""
    outcome: str
    correct_users: FrozenSet[Hashable]

    @property
    def is_unicorn(self) -> bool:
        return len(self.correct_users) == 1

    @property
    def unicorn_user(self) -> Optional[Hashable]:
        if not self.is_unicorn:
            return None
        return next(iter(self.correct_users))


def evaluate_fixture(outcome: str, picks: Iterable) -> FixtureVerdict:
    """
    Compare every pick for one fixture against its outcome.

    Callers skip undecided fixtures, so ``outcome`` is always H/D/A here.
    When a user has more than one pick the last one wins.
    """
    latest = {}
    for pick in picks:
        if pick.pick not in OUTCOMES:
            logger.debug("Ignoring invalid pick %r from user %s", pick.pick, pick.user_id)
            continue
        if pick.user_id in latest:
            logger.debug("Duplicate pick for user %s, keeping the last one", pick.user_id)
        latest[pick.user_id] = pick.pick

    correct = frozenset(user_id for user_id, choice in latest.items() if choice == outcome)
    return FixtureVerdict(outcome=outcome, correct_users=correct)
