'''Various utility functions for other modules of seatalloc.

There should normally be no need to use these functions directly.
'''

import numbers
from typing import Iterable, List, Sequence

import seatalloc.evaluate.core


def check_seat_count(nb_seats: int) -> None:
    '''Raise InvalidInput unless the seat count is a nonnegative integer.'''
    if not _is_integer(nb_seats):
        raise seatalloc.evaluate.core.InvalidInput(
            f'seat count must be an integer, got {nb_seats!r}'
        )
    if nb_seats < 0:
        raise seatalloc.evaluate.core.InvalidInput(
            f'seat count must be nonnegative, got {nb_seats}'
        )


def check_votes(parties: Sequence[int]) -> None:
    '''Raise InvalidInput unless all vote counts are nonnegative integers.'''
    for i, n_votes in enumerate(parties):
        if not _is_integer(n_votes):
            raise seatalloc.evaluate.core.InvalidInput(
                f'vote count of party {i} must be an integer, got {n_votes!r}'
            )
        if n_votes < 0:
            raise seatalloc.evaluate.core.InvalidInput(
                f'vote count of party {i} must be nonnegative, got {n_votes}'
            )


def count_by_index(indices: Iterable[int], n: int) -> List[int]:
    '''Count occurrences of each of the indices 0 to n-1.'''
    counts = [0] * n
    for i in indices:
        counts[i] += 1
    return counts


def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)
