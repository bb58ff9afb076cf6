import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from main import app
from totl.database import get_session
from totl.models import Fixture, GwResult, Pick
from totl.services.season import SeasonData

# Create in-memory database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)


@pytest.fixture(name="session")
def session_fixture():
    SQLModel.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="client")
def client_fixture(session: Session):
    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


def build_rows(gameweeks):
    """
    Turn a compact description into fixture, result and pick rows.

    ``gameweeks`` maps gw -> (outcomes, picks) where ``outcomes`` lists one
    outcome per fixture (None = undecided) and ``picks`` maps user id to a
    string with one character per fixture ("-" = no pick).
    """
    fixtures, results, picks = [], [], []
    for gw, (outcomes, user_picks) in gameweeks.items():
        for idx, outcome in enumerate(outcomes):
            fixtures.append(Fixture(gw=gw, fixture_index=idx))
            if outcome is not None:
                results.append(GwResult(gw=gw, fixture_index=idx, outcome=outcome))
        for user_id, choices in user_picks.items():
            for idx, choice in enumerate(choices):
                if choice != "-":
                    picks.append(Pick(user_id=user_id, gw=gw, fixture_index=idx, pick=choice))
    return fixtures, results, picks


@pytest.fixture(name="build_season")
def build_season_fixture():
    def _build(gameweeks):
        return SeasonData(*build_rows(gameweeks))
    return _build


@pytest.fixture(name="make_rows")
def make_rows_fixture():
    return build_rows
