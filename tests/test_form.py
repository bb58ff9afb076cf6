import pytest

from totl.services.form import compute_form_table, form_window
from totl.services.season import Member

USERS = [Member(1, "Alice"), Member(2, "Bob"), Member(3, "Cara")]


def _season(build_season, gws, picks_for):
    return build_season({gw: (["H"], picks_for(gw)) for gw in gws})


def test_form_window_range():
    assert list(form_window(5, 9)) == [5, 6, 7, 8, 9]


def test_window_not_full_yet(build_season):
    season = _season(build_season, range(1, 5), lambda gw: {1: "H", 2: "H"})

    assert season.latest_gw() == 4
    assert compute_form_table(5, USERS, season) == []


def test_only_full_participation_qualifies(build_season):
    def picks(gw):
        rows = {1: "H"}
        if gw != 3:
            rows[2] = "H"  # Bob misses GW3
        if gw != 1:
            rows[3] = "A" if gw == 4 else "H"  # Cara misses GW1, outside the window
        return rows

    season = _season(build_season, range(1, 7), picks)

    table = compute_form_table(5, USERS, season)

    assert [e.to_dict() for e in table] == [
        {"user_id": 1, "name": "Alice", "form_points": 5},
        {"user_id": 3, "name": "Cara", "form_points": 4},
    ]


def test_ties_are_ordered_by_name(build_season):
    season = _season(build_season, range(1, 6), lambda gw: {3: "H", 2: "H", 1: "A"})

    table = compute_form_table(5, USERS, season)

    assert [(e.name, e.form_points) for e in table] == [("Bob", 5), ("Cara", 5), ("Alice", 0)]


def test_gameweek_without_results_inside_window(build_season):
    season = build_season({
        gw: ([None] if gw == 3 else ["H"], {1: "H"}) for gw in range(1, 6)
    })

    assert compute_form_table(5, USERS, season) == []


def test_explicit_latest_gameweek(build_season):
    season = _season(build_season, range(1, 8), lambda gw: {1: "H", 2: "H" if gw <= 5 else "A"})

    table = compute_form_table(5, USERS, season, latest_gw=5)

    assert [(e.name, e.form_points) for e in table] == [("Alice", 5), ("Bob", 5)]


def test_ten_week_qualifiers_also_qualify_for_five(build_season):
    def picks(gw):
        rows = {1: "H", 2: "A" if gw % 3 else "H"}
        if gw != 2:
            rows[3] = "H"
        return rows

    season = _season(build_season, range(1, 11), picks)

    ten = {e.user_id for e in compute_form_table(10, USERS, season)}
    five = {e.user_id for e in compute_form_table(5, USERS, season)}

    assert ten == {1, 2}
    assert five == {1, 2, 3}
    assert ten <= five


def test_invalid_window():
    with pytest.raises(ValueError):
        compute_form_table(7, USERS, None)
