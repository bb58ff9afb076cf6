"""
Mini-league standings.

Each gameweek is a match between all league members: the outright top
scorer wins (3 pts), a shared top spot is a draw (1 pt each), everyone else
loses. Ties on score are split by unicorns first.
"""

import logging
from typing import Dict, Hashable, Iterable, List, Optional

from ..config import UNICORN_MIN_PLAYERS
from .scoring import UserGwScore
from .season import SeasonData

logger = logging.getLogger(__name__)

WIN = "W"
DRAW = "D"
LOSS = "L"

WIN_POINTS = 3
DRAW_POINTS = 1


class StandingsRow:
    """Represents a member's season line in a mini-league."""

    def __init__(self, user_id: Hashable, name: str):
        self.user_id = user_id
        self.name = name
        self.points = 0
        self.ocp = 0
        self.unicorns = 0
        self.wins = 0
        self.draws = 0
        self.form: List[str] = []  # oldest -> newest

    @property
    def played(self) -> int:
        return len(self.form)

    @property
    def losses(self) -> int:
        return self.played - self.wins - self.draws

    def recent_form(self, n: int = 5) -> List[str]:
        """Last ``n`` results, oldest first."""
        return self.form[-n:] if n > 0 else []

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "user_id": self.user_id,
            "name": self.name,
            "points": self.points,
            "ocp": self.ocp,
            "unicorns": self.unicorns,
            "wins": self.wins,
            "draws": self.draws,
            "losses": self.losses,
            "form": list(self.form),
        }

    def __repr__(self):
        return f"{self.name}: {self.points}pts (OCP: {self.ocp}, unicorns: {self.unicorns})"


def _gw_sort_key(entry: UserGwScore):
    return (-entry.score, -entry.unicorns)


def award_gameweek(scores: Iterable[UserGwScore]) -> Dict[Hashable, str]:
    """
    Decide W/D/L for every scored user in one gameweek.

    The best (score, unicorns) pair wins outright when one user holds it;
    when several share it they all draw. Everyone else loses.
    """
    rows = sorted(scores, key=_gw_sort_key)
    if not rows:
        return {}

    top = (rows[0].score, rows[0].unicorns)
    co_top = [r for r in rows if (r.score, r.unicorns) == top]

    top_result = WIN if len(co_top) == 1 else DRAW
    top_ids = {r.user_id for r in co_top}
    return {r.user_id: (top_result if r.user_id in top_ids else LOSS) for r in rows}


def _apply_unicorn_floor(
    scores: Dict[Hashable, UserGwScore],
    member_count: int,
    unicorn_min_players: int,
) -> Dict[Hashable, UserGwScore]:
    if member_count >= unicorn_min_players:
        return scores
    for entry in scores.values():
        entry.unicorns = 0
    return scores


def league_gameweeks(season: SeasonData, start_gw: Optional[int] = None) -> List[int]:
    """Resolved gameweeks that count for a league starting at ``start_gw``."""
    resolved = season.resolved_gameweeks()
    if start_gw is None:
        return resolved
    return [gw for gw in resolved if gw >= start_gw]


def compute_league_standings(
    members: Iterable,
    season: SeasonData,
    start_gw: Optional[int] = None,
    unicorn_min_players: int = UNICORN_MIN_PLAYERS,
) -> List[StandingsRow]:
    """
    Build the season table for a mini-league.

    Uses current membership for every gameweek. A league with no counted
    gameweeks still gets a zeroed row per member.

    Args:
        members: Objects with ``user_id`` and ``name``
        season: Pre-fetched fixtures, results and picks
        start_gw: First gameweek counted for this league (None = all)
        unicorn_min_players: Unicorns only count with at least this many members

    Returns:
        StandingsRow list sorted by points, unicorns, OCP, then name
    """
    rows: Dict[Hashable, StandingsRow] = {}
    for member in members:
        rows[member.user_id] = StandingsRow(member.user_id, member.name)

    if not rows:
        return []

    member_ids = list(rows)
    for gw in league_gameweeks(season, start_gw):
        scores = _apply_unicorn_floor(
            season.score(gw, member_ids), len(member_ids), unicorn_min_players
        )

        for user_id, entry in scores.items():
            rows[user_id].ocp += entry.score
            rows[user_id].unicorns += entry.unicorns

        for user_id, result in award_gameweek(scores.values()).items():
            row = rows[user_id]
            row.form.append(result)
            if result == WIN:
                row.points += WIN_POINTS
                row.wins += 1
            elif result == DRAW:
                row.points += DRAW_POINTS
                row.draws += 1

    standings = sorted(
        rows.values(),
        key=lambda r: (-r.points, -r.unicorns, -r.ocp, r.name, str(r.user_id)),
    )
    logger.debug("Computed standings for %d members", len(standings))
    return standings


class GameweekTable:
    """One league gameweek, ranked, with its winner or draw."""

    def __init__(self, gw: int, rows: List[dict], resolved: bool):
        self.gw = gw
        self.rows = rows
        self.resolved = resolved

    @property
    def is_draw(self) -> bool:
        return self.resolved and len(self.rows) > 1 and (
            (self.rows[0]["score"], self.rows[0]["unicorns"])
            == (self.rows[1]["score"], self.rows[1]["unicorns"])
        )

    @property
    def winner(self) -> Optional[Hashable]:
        if not self.resolved or not self.rows or self.is_draw:
            return None
        return self.rows[0]["user_id"]

    def to_dict(self) -> dict:
        return {
            "gw": self.gw,
            "resolved": self.resolved,
            "winner": self.winner,
            "is_draw": self.is_draw,
            "rows": self.rows,
        }


def compute_gameweek_table(
    members: Iterable,
    gw: int,
    season: SeasonData,
    unicorn_min_players: int = UNICORN_MIN_PLAYERS,
) -> GameweekTable:
    """Rank a league's members on a single gameweek."""
    names = {m.user_id: m.name for m in members}
    scores = _apply_unicorn_floor(
        season.score(gw, list(names)), len(names), unicorn_min_players
    )

    rows = [
        {
            "user_id": user_id,
            "name": names[user_id],
            "score": entry.score,
            "unicorns": entry.unicorns,
        }
        for user_id, entry in scores.items()
    ]
    rows.sort(key=lambda r: (-r["score"], -r["unicorns"], r["name"], str(r["user_id"])))

    return GameweekTable(gw, rows, resolved=gw in season.resolved_gameweeks())
