from totl.models import Fixture, GwResult, GwSubmission, League, LeagueMember, Pick, User
from totl.services.feeds import (
    get_all_users,
    get_fixtures,
    get_latest_results_gw,
    get_league_members,
    get_picks,
    get_results,
    get_submissions,
    load_season,
)
from totl.services.season import Member
from totl.services.submissions import all_members_submitted


def _seed(session):
    zed = User(name="Zed")
    amy = User(name="Amy")
    session.add_all([zed, amy])
    session.commit()

    for gw in (1, 2):
        for idx in (1, 0):
            session.add(Fixture(gw=gw, fixture_index=idx))
    session.add(GwResult(gw=1, fixture_index=0, outcome="H"))
    session.add(GwResult(gw=2, fixture_index=0))
    session.add(Pick(user_id=zed.id, gw=1, fixture_index=0, pick="H"))
    session.add(Pick(user_id=amy.id, gw=1, fixture_index=0, pick="A"))
    session.add(Pick(user_id=amy.id, gw=2, fixture_index=1, pick="D"))
    session.commit()
    return zed.id, amy.id


def test_get_fixtures_ordered_by_index(session):
    _seed(session)

    fixtures = get_fixtures(session, 1)

    assert [f.fixture_index for f in fixtures] == [0, 1]
    assert {f.gw for f in fixtures} == {1}
    assert len(get_fixtures(session)) == 4


def test_results_and_latest_gameweek(session):
    assert get_latest_results_gw(session) is None

    _seed(session)

    assert get_latest_results_gw(session) == 2
    assert len(get_results(session)) == 2
    assert [r.outcome for r in get_results(session, 1)] == ["H"]


def test_get_picks_filters_by_user(session):
    zed_id, amy_id = _seed(session)

    assert len(get_picks(session, 1)) == 2
    assert [p.user_id for p in get_picks(session, 1, [amy_id])] == [amy_id]
    assert get_picks(session, 2, [zed_id]) == []


def test_members_and_users_sorted_by_name(session):
    zed_id, amy_id = _seed(session)
    league = League(name="Two", code="TWO001")
    session.add(league)
    session.commit()
    session.add_all([
        LeagueMember(league_id=league.id, user_id=zed_id),
        LeagueMember(league_id=league.id, user_id=amy_id),
    ])
    session.commit()

    assert get_league_members(session, league.id) == [Member(amy_id, "Amy"), Member(zed_id, "Zed")]
    assert [m.name for m in get_all_users(session)] == ["Amy", "Zed"]
    assert get_league_members(session, 999) == []


def test_load_season(session):
    zed_id, amy_id = _seed(session)

    season = load_season(session)

    # GW2 has a result row, but it is undecided
    assert season.resolved_gameweeks() == [1]
    assert season.participants(1) == {zed_id, amy_id}
    assert season.participants(2) == {amy_id}
    assert season.score(1, [zed_id, amy_id])[zed_id].unicorns == 1

    only_amy = load_season(session, user_ids=[amy_id])
    assert only_amy.participants(1) == {amy_id}


def test_submissions(session):
    zed_id, amy_id = _seed(session)
    session.add(GwSubmission(user_id=zed_id, gw=1))
    session.commit()

    submissions = get_submissions(session, 1)

    assert all_members_submitted([zed_id], submissions, 1) is True
    assert all_members_submitted([zed_id, amy_id], submissions, 1) is False
    assert all_members_submitted([], submissions, 1) is False
    assert get_submissions(session, 1, [amy_id]) == []
