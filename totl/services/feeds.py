"""
Read-only data feeds backing the scoring engine.

Everything here is a plain filtered query; the aggregators receive the rows
already fetched.
"""

from typing import Iterable, List, Optional
from sqlmodel import Session, select, func

from ..models import Fixture, GwResult, GwSubmission, League, LeagueMember, Pick, User
from .season import Member, SeasonData


def get_fixtures(db: Session, gw: Optional[int] = None) -> List[Fixture]:
    statement = select(Fixture).order_by(Fixture.gw, Fixture.fixture_index)
    if gw is not None:
        statement = statement.where(Fixture.gw == gw)
    return db.exec(statement).all()


def get_results(db: Session, gw: Optional[int] = None) -> List[GwResult]:
    statement = select(GwResult).order_by(GwResult.gw, GwResult.fixture_index)
    if gw is not None:
        statement = statement.where(GwResult.gw == gw)
    return db.exec(statement).all()


def get_latest_results_gw(db: Session) -> Optional[int]:
    """Highest gameweek with any result row."""
    return db.exec(select(func.max(GwResult.gw))).first()


def get_picks(db: Session, gw: int, user_ids: Optional[Iterable[int]] = None) -> List[Pick]:
    return get_picks_for_gameweeks(db, [gw], user_ids)


def get_picks_for_gameweeks(
    db: Session,
    gws: Optional[Iterable[int]] = None,
    user_ids: Optional[Iterable[int]] = None,
) -> List[Pick]:
    statement = select(Pick).order_by(Pick.gw, Pick.fixture_index, Pick.id)
    if gws is not None:
        statement = statement.where(Pick.gw.in_(list(gws)))
    if user_ids is not None:
        statement = statement.where(Pick.user_id.in_(list(user_ids)))
    return db.exec(statement).all()


def get_submissions(db: Session, gw: int, user_ids: Optional[Iterable[int]] = None) -> List[GwSubmission]:
    statement = select(GwSubmission).where(GwSubmission.gw == gw)
    if user_ids is not None:
        statement = statement.where(GwSubmission.user_id.in_(list(user_ids)))
    return db.exec(statement).all()


def get_league(db: Session, league_id: int) -> Optional[League]:
    return db.exec(select(League).where(League.id == league_id)).first()


def get_league_members(db: Session, league_id: int) -> List[Member]:
    statement = (
        select(User.id, User.name)
        .join(LeagueMember, LeagueMember.user_id == User.id)
        .where(LeagueMember.league_id == league_id)
        .order_by(User.name)
    )
    return [Member(user_id, name) for user_id, name in db.exec(statement).all()]


def get_all_users(db: Session) -> List[Member]:
    statement = select(User.id, User.name).order_by(User.name)
    return [Member(user_id, name) for user_id, name in db.exec(statement).all()]


def load_season(db: Session, user_ids: Optional[Iterable[int]] = None) -> SeasonData:
    """
    Fetch every gameweek with results into a SeasonData bundle.

    Args:
        db: Database session
        user_ids: Restrict picks to these users (None = everyone)
    """
    results = get_results(db)
    gws = sorted({r.gw for r in results})
    if not gws:
        return SeasonData()

    fixtures = db.exec(
        select(Fixture).where(Fixture.gw.in_(gws)).order_by(Fixture.gw, Fixture.fixture_index)
    ).all()
    picks = get_picks_for_gameweeks(db, gws, user_ids)
    return SeasonData(fixtures, results, picks)
