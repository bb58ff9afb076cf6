"""
Rolling form tables over the last N gameweeks.

Only players who have a score in every gameweek of the window qualify;
there is no partial-window credit.
"""

import logging
from typing import Hashable, Iterable, List, Optional

from ..config import FORM_WINDOWS
from .season import SeasonData

logger = logging.getLogger(__name__)


class FormEntry:
    def __init__(self, user_id: Hashable, name: str, form_points: int):
        self.user_id = user_id
        self.name = name
        self.form_points = form_points

    def to_dict(self) -> dict:
        return {"user_id": self.user_id, "name": self.name, "form_points": self.form_points}

    def __repr__(self):
        return f"{self.name}: {self.form_points}"


def form_window(window: int, latest_gw: int) -> range:
    """Inclusive gameweek range [latest - window + 1, latest]."""
    return range(latest_gw - window + 1, latest_gw + 1)


def window_ready(window: int, latest_gw: Optional[int]) -> bool:
    return latest_gw is not None and latest_gw >= window


def compute_form_table(
    window: int,
    users: Iterable,
    season: SeasonData,
    latest_gw: Optional[int] = None,
) -> List[FormEntry]:
    """
    Sum each qualifying user's scores over the last ``window`` gameweeks.

    Args:
        window: Window size, one of FORM_WINDOWS
        users: Objects with ``user_id`` and ``name``
        season: Pre-fetched fixtures, results and picks
        latest_gw: Last gameweek of the window (default: latest with results)

    Returns:
        FormEntry list sorted by points descending, name ascending; empty
        while fewer than ``window`` gameweeks have been played
    """
    if window not in FORM_WINDOWS:
        raise ValueError(f"Form window must be one of {FORM_WINDOWS}, got {window}")

    if latest_gw is None:
        latest_gw = season.latest_gw()
    if not window_ready(window, latest_gw):
        return []

    names = {u.user_id: u.name for u in users}
    entries = season.participant_scores(names)

    totals = {user_id: 0 for user_id in names}
    for gw in form_window(window, latest_gw):
        scores = entries.get(gw, {})
        # Drop anyone without a score entry for this gameweek
        totals = {
            user_id: points + scores[user_id].score
            for user_id, points in totals.items()
            if user_id in scores
        }

    table = [FormEntry(user_id, names[user_id], points) for user_id, points in totals.items()]
    table.sort(key=lambda e: (-e.form_points, e.name, str(e.user_id)))
    logger.debug("Form-%d table through GW%s: %d qualifiers", window, latest_gw, len(table))
    return table
