"""
In-memory bundle of already-fetched rows for a whole season.

The aggregators work off a SeasonData instance so they never touch the
database; ``totl.services.feeds.load_season`` builds one from a session.
"""

from typing import Dict, Hashable, Iterable, List, NamedTuple, Optional, Set

from .scoring import UserGwScore, group_picks_by_fixture, resolved_fixture_indexes, score_gameweek


class Member(NamedTuple):
    user_id: Hashable
    name: str


class GameweekRows:
    """Fixtures, results and picks for one gameweek."""

    def __init__(self, gw: int):
        self.gw = gw
        self.fixtures: List = []
        self.results: List = []
        self.picks: List = []


class SeasonData:
    def __init__(self, fixtures: Iterable = (), results: Iterable = (), picks: Iterable = ()):
        self._gameweeks: Dict[int, GameweekRows] = {}
        for fixture in fixtures:
            self._rows(fixture.gw).fixtures.append(fixture)
        for result in results:
            self._rows(result.gw).results.append(result)
        for pick in picks:
            self._rows(pick.gw).picks.append(pick)

    def _rows(self, gw: int) -> GameweekRows:
        if gw not in self._gameweeks:
            self._gameweeks[gw] = GameweekRows(gw)
        return self._gameweeks[gw]

    def gameweek(self, gw: int) -> GameweekRows:
        """Rows for ``gw``; an empty bundle when nothing was loaded for it."""
        return self._gameweeks.get(gw) or GameweekRows(gw)

    def resolved_gameweeks(self) -> List[int]:
        """Gameweeks, ascending, with at least one decided fixture."""
        resolved = []
        for gw in sorted(self._gameweeks):
            rows = self._gameweeks[gw]
            if resolved_fixture_indexes(gw, rows.fixtures, rows.results):
                resolved.append(gw)
        return resolved

    def latest_gw(self) -> Optional[int]:
        """Most recent gameweek with a decided fixture."""
        resolved = self.resolved_gameweeks()
        return resolved[-1] if resolved else None

    def participants(self, gw: int) -> Set[Hashable]:
        """Users with at least one pick on an existing fixture of ``gw``."""
        rows = self.gameweek(gw)
        by_fixture = group_picks_by_fixture(gw, rows.fixtures, rows.picks)
        return {pick.user_id for picks in by_fixture.values() for pick in picks}

    def score(self, gw: int, population: Iterable[Hashable]) -> Dict[Hashable, UserGwScore]:
        rows = self.gameweek(gw)
        return score_gameweek(gw, population, rows.fixtures, rows.results, rows.picks)

    def participant_scores(self, population: Iterable[Hashable]) -> Dict[int, Dict[Hashable, UserGwScore]]:
        """
        Per-gameweek score entries for every resolved gameweek.

        Only users who played a gameweek get an entry for it, which is what
        the leaderboard and form tables count as "having a score".
        """
        members = set(population)
        entries: Dict[int, Dict[Hashable, UserGwScore]] = {}
        for gw in self.resolved_gameweeks():
            played = self.participants(gw) & members
            entries[gw] = self.score(gw, played)
        return entries
