from typing import List, Optional
from pydantic import BaseModel


class StandingsRowResponse(BaseModel):
    """Schema for a mini-league table row."""
    user_id: int
    name: str
    points: int
    ocp: int
    unicorns: int
    wins: int
    draws: int
    losses: int
    form: List[str]


class LeagueStandingsResponse(BaseModel):
    league_id: int
    name: str
    start_gw: Optional[int] = None
    unicorns_counted: bool
    rows: List[StandingsRowResponse]


class GameweekRowResponse(BaseModel):
    user_id: int
    name: str
    score: int
    unicorns: int


class GameweekTableResponse(BaseModel):
    league_id: int
    gw: int
    resolved: bool
    winner: Optional[int] = None
    is_draw: bool
    all_submitted: bool
    rows: List[GameweekRowResponse]


class LeaderboardRowResponse(BaseModel):
    user_id: int
    name: str
    ocp: int
    rank: int
    delta: str
    this_gw: int


class LeaderboardResponse(BaseModel):
    latest_gw: Optional[int] = None
    rows: List[LeaderboardRowResponse]


class FormRowResponse(BaseModel):
    user_id: int
    name: str
    form_points: int


class FormTableResponse(BaseModel):
    """Schema for a form table; ready is False until the window is full."""
    window: int
    latest_gw: Optional[int] = None
    ready: bool
    rows: List[FormRowResponse]
