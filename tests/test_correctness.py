from totl.models import Pick
from totl.services.correctness import evaluate_fixture


def _picks(choices):
    return [
        Pick(user_id=user_id, gw=1, fixture_index=0, pick=choice)
        for user_id, choice in choices.items()
    ]


def test_two_correct_is_not_a_unicorn():
    verdict = evaluate_fixture("H", _picks({1: "H", 2: "H", 3: "A"}))

    assert verdict.correct_users == {1, 2}
    assert verdict.is_unicorn is False
    assert verdict.unicorn_user is None


def test_single_correct_is_a_unicorn():
    verdict = evaluate_fixture("H", _picks({1: "H", 2: "D", 3: "A"}))

    assert verdict.correct_users == {1}
    assert verdict.is_unicorn is True
    assert verdict.unicorn_user == 1


def test_nobody_correct():
    verdict = evaluate_fixture("D", _picks({1: "H", 2: "A"}))

    assert verdict.correct_users == frozenset()
    assert verdict.is_unicorn is False


def test_no_picks():
    verdict = evaluate_fixture("A", [])
    assert verdict.correct_users == frozenset()
    assert verdict.is_unicorn is False


def test_duplicate_picks_last_one_wins():
    picks = [
        Pick(user_id=1, gw=1, fixture_index=0, pick="H"),
        Pick(user_id=1, gw=1, fixture_index=0, pick="A"),
        Pick(user_id=2, gw=1, fixture_index=0, pick="H"),
    ]
    verdict = evaluate_fixture("H", picks)

    assert verdict.correct_users == {2}
    assert verdict.unicorn_user == 2


def test_unicorn_means_exactly_one_correct_user():
    for choices in ({1: "H"}, {1: "H", 2: "H"}, {1: "A", 2: "D"}, {1: "H", 2: "H", 3: "H"}):
        verdict = evaluate_fixture("H", _picks(choices))
        assert verdict.is_unicorn == (len(verdict.correct_users) == 1)


def test_invalid_pick_values_are_ignored():
    picks = [
        Pick(user_id=1, gw=1, fixture_index=0, pick="H"),
        Pick(user_id=2, gw=1, fixture_index=0, pick="x"),
    ]
    verdict = evaluate_fixture("H", picks)

    assert verdict.correct_users == {1}
