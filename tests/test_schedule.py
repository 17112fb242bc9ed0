from itertools import chain
from math import comb

import pytest

from examplekit.schedule import round_robin


def test_each_team_plays_once_per_week_with_bye():
    teams = list(range(1, 14))
    plan = round_robin(13, teams)
    assert len(plan) == 13
    for week in plan:
        assert len(week) == 7
        assert sorted(chain.from_iterable(week)) == list(range(1, 15))


def test_every_pair_meets_exactly_once():
    teams = list(range(1, 7))
    plan = round_robin(len(teams) - 1, teams)
    pairs = [frozenset(p) for week in plan for p in week]
    assert len(pairs) == comb(len(teams), 2)
    assert len(set(pairs)) == len(pairs)


def test_first_week_layout():
    plan = round_robin(1, [1, 2, 3, 4])
    assert plan == [[(1, 2), (3, 4)]]


def test_input_list_is_not_extended():
    teams = [1, 2, 3]
    round_robin(2, teams)
    assert teams == [1, 2, 3]


def test_zero_weeks_gives_empty_plan():
    assert round_robin(0, [1, 2]) == []


def test_no_teams_is_an_error():
    with pytest.raises(ValueError):
        round_robin(3, [])