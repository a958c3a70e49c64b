import sys
import os

import pytest

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))
import seatalloc.util
import seatalloc.evaluate.core


def test_count_by_index():
    assert seatalloc.util.count_by_index([2, 0, 2, 2], 4) == [1, 0, 3, 0]
    assert seatalloc.util.count_by_index([], 2) == [0, 0]


@pytest.mark.parametrize('nb_seats', [-1, 1.5, '3', None, True])
def test_check_seat_count_invalid(nb_seats):
    with pytest.raises(seatalloc.evaluate.core.InvalidInput):
        seatalloc.util.check_seat_count(nb_seats)


@pytest.mark.parametrize('parties', [[10, -1], [10.0], [None], [3, False]])
def test_check_votes_invalid(parties):
    with pytest.raises(seatalloc.evaluate.core.InvalidInput):
        seatalloc.util.check_votes(parties)


def test_check_valid():
    seatalloc.util.check_seat_count(0)
    seatalloc.util.check_votes([])
    seatalloc.util.check_votes([0, 12, 100000000000000000000])


@pytest.mark.parametrize('helper', [
    seatalloc.util.check_seat_count,
    seatalloc.util.check_votes,
    seatalloc.util.count_by_index,
])
def test_helpers_documented(helper):
    assert helper.__doc__
