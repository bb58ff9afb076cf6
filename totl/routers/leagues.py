from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session

from ..config import UNICORN_MIN_PLAYERS
from ..database import get_session
from ..logging_config import get_logger
from ..services.feeds import get_league, get_league_members, get_submissions, load_season
from ..services.standings import compute_gameweek_table, compute_league_standings
from ..services.submissions import all_members_submitted
from .schemas import GameweekTableResponse, LeagueStandingsResponse

router = APIRouter(prefix="/api/leagues")
logger = get_logger(__name__)


def _get_league_or_404(db: Session, league_id: int):
    league = get_league(db, league_id)
    if not league:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="League not found"
        )
    return league


@router.get("/{league_id}/standings", response_model=LeagueStandingsResponse)
async def league_standings(
    league_id: int,
    db: Session = Depends(get_session)
):
    """Season mini-league table."""
    league = _get_league_or_404(db, league_id)
    members = get_league_members(db, league_id)
    season = load_season(db, user_ids=[m.user_id for m in members])

    rows = compute_league_standings(members, season, start_gw=league.start_gw)
    logger.info("Standings for league %s: %d members", league_id, len(rows))

    return {
        "league_id": league.id,
        "name": league.name,
        "start_gw": league.start_gw,
        "unicorns_counted": len(members) >= UNICORN_MIN_PLAYERS,
        "rows": [row.to_dict() for row in rows],
    }


@router.get("/{league_id}/gameweeks/{gw}", response_model=GameweekTableResponse)
async def league_gameweek(
    league_id: int,
    gw: int,
    db: Session = Depends(get_session)
):
    """Single gameweek results for a league."""
    league = _get_league_or_404(db, league_id)
    if gw < 1:
        raise HTTPException(
            status_code=422,
            detail="Gameweek must be positive"
        )

    members = get_league_members(db, league_id)
    member_ids = [m.user_id for m in members]
    season = load_season(db, user_ids=member_ids)
    table = compute_gameweek_table(members, gw, season)

    return {
        "league_id": league.id,
        **table.to_dict(),
        "all_submitted": all_members_submitted(member_ids, get_submissions(db, gw, member_ids), gw),
    }
