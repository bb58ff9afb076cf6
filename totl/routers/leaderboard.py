from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from ..config import FORM_WINDOWS
from ..database import get_session
from ..logging_config import get_logger
from ..services.feeds import get_all_users, load_season
from ..services.form import compute_form_table, window_ready
from ..services.leaderboard import compute_global_leaderboard
from .schemas import FormTableResponse, LeaderboardResponse

router = APIRouter(prefix="/api/leaderboard")
logger = get_logger(__name__)


@router.get("", response_model=LeaderboardResponse)
async def global_leaderboard(db: Session = Depends(get_session)):
    """Season OCP leaderboard with rank movement."""
    season = load_season(db)
    rows = compute_global_leaderboard(get_all_users(db), season)
    logger.info("Global leaderboard: %d players", len(rows))

    return {
        "latest_gw": season.latest_gw(),
        "rows": [row.to_dict() for row in rows],
    }


@router.get("/form/{window}", response_model=FormTableResponse)
async def form_table(window: int, db: Session = Depends(get_session)):
    """Last-N-gameweeks form table."""
    if window not in FORM_WINDOWS:
        raise HTTPException(
            status_code=422,
            detail=f"Form window must be one of {list(FORM_WINDOWS)}"
        )

    season = load_season(db)
    latest_gw = season.latest_gw()
    rows = compute_form_table(window, get_all_users(db), season, latest_gw=latest_gw)

    return {
        "window": window,
        "latest_gw": latest_gw,
        "ready": window_ready(window, latest_gw),
        "rows": [row.to_dict() for row in rows],
    }
