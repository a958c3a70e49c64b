'''Divisor sequences used in highest-averages seat allocation.

This provides the divisors for the
:class:`seatalloc.evaluate.proportional.HighestAverages` evaluator.

A divisor is a function of the method and of the rank (the zero-based index
into the divisor sequence). The vote count of each party is divided by the
divisor of every rank and the largest quotients win the seats.

All supported methods are members of the :class:`Method` enumeration and are
assembled in the `DIVISORS` dictionary keyed by their name. `get()` retrieves
from this dictionary by string key; `construct()` also accepts
:class:`Method` members and passes them through.

Divisors are always exact rationals (:class:`fractions.Fraction`) so that
quotients computed from them compare exactly.
'''

import enum
import itertools
from fractions import Fraction
from typing import Iterator, Union

import seatalloc.component.core


class Method(enum.Enum):
    '''Highest-averages methods with a known divisor sequence.'''

    D_HONDT = 'd_hondt'
    '''D'Hondt divisor, the most commonly used divisor.

    Forms a simple sequence 1, 2, 3...
    In the United States, this is known as the Jefferson divisor that was used
    for congressional apportionment 1792-1842.

    Known to slightly favor larger parties.
    '''

    SAINTE_LAGUE = 'sainte_lague'
    '''Sainte-Laguë (Webster, Schepers) divisor, a commonly used divisor.

    Forms a sequence 1, 3, 5...

    Known to favor mid-sized parties.
    '''

    IMPERIALI = 'imperiali'
    '''Imperiali divisor. Not to be confused with the Imperiali quota.

    Forms a sequence 1, 1.5, 2...

    Known to favor large parties greatly.
    '''

    HUNTINGTON_HILL = 'huntington_hill'
    '''Huntington-Hill divisor, in the legacy form -(i+1)(i+2).

    Forms a sequence -2, -6, -12... This is not the divisor used for
    United States congressional apportionment, which is `sqrt(n*(n+1))`.
    The legacy values are kept for compatibility; since they are negative,
    the sequence cannot be used for seat allocation.
    '''

    DANISH = 'danish'
    '''Danish divisor.

    Forms a sequence 1, 4, 7...

    Extremely favors smaller parties.
    '''


DIVISORS = {method.value: method for method in Method}


get, construct = seatalloc.component.core.register_functions(
    DIVISORS, 'divisor method', Method
)


def divisor(method: Union[str, Method], rank: int) -> Fraction:
    '''Return the divisor of the given method at the given rank.

    :param method: The method, or its name from `DIVISORS`.
    :param rank: Zero-based index into the divisor sequence.
    '''
    method = construct(method)
    if rank < 0:
        raise ValueError(f'divisor rank must be nonnegative, got {rank}')
    if method is Method.D_HONDT:
        return Fraction(rank + 1)
    elif method is Method.SAINTE_LAGUE:
        return Fraction(2 * rank + 1)
    elif method is Method.IMPERIALI:
        return Fraction(rank + 2, 2)
    elif method is Method.HUNTINGTON_HILL:
        return -Fraction((rank + 1) * (rank + 2))
    elif method is Method.DANISH:
        return Fraction(3 * rank + 1)
    raise KeyError(f'unknown divisor method: {method}')


def divisors(method: Union[str, Method]) -> Iterator[Fraction]:
    '''Produce the infinite sequence of divisors, starting at rank zero.

    Every call gives a fresh sequence.
    '''
    method = construct(method)
    for rank in itertools.count():
        yield divisor(method, rank)


def is_increasing(method: Union[str, Method]) -> bool:
    '''Whether the divisors of the method are positive and increasing.

    Only such divisors give decreasing quotients with rising rank, which the
    highest-averages allocation needs to terminate.
    '''
    return construct(method) is not Method.HUNTINGTON_HILL
