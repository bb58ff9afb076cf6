"""
Outcome resolution for published results.

Newer result rows carry an explicit ``outcome`` ("H", "D" or "A"); legacy rows
only carry goal counts. Every place that reads a result goes through
``resolve_outcome`` so both shapes look the same downstream.
"""

from numbers import Number
from typing import Dict, Iterable, Optional

HOME = "H"
DRAW = "D"
AWAY = "A"
OUTCOMES = (HOME, DRAW, AWAY)


def _is_goal_count(value) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


def resolve_outcome(result) -> Optional[str]:
    """
    Derive H/D/A for a result row.

    Returns None when the fixture is still undecided.
    """
    if result is None:
        return None

    outcome = getattr(result, "outcome", None)
    if outcome in OUTCOMES:
        return outcome

    home_goals = getattr(result, "home_goals", None)
    away_goals = getattr(result, "away_goals", None)
    if not (_is_goal_count(home_goals) and _is_goal_count(away_goals)):
        return None

    if home_goals > away_goals:
        return HOME
    if home_goals < away_goals:
        return AWAY
    return DRAW


def resolve_outcomes(results: Iterable) -> Dict[int, Dict[int, str]]:
    """Map gw -> fixture_index -> outcome, skipping undecided rows."""
    outcomes: Dict[int, Dict[int, str]] = {}
    for result in results:
        outcome = resolve_outcome(result)
        if outcome is None:
            continue
        outcomes.setdefault(result.gw, {})[result.fixture_index] = outcome
    return outcomes
