'''Highest-averages (divisor) seat allocation.

The vote count of each party is divided by the divisors of increasing rank
and the seats go to the largest of these quotients. The quotients are
:class:`fractions.Fraction` objects, so the ranking is exact and
reproducible.

Quotient ties are broken in favor of the party listed first (lower index);
among the entries of a single party, the lower rank comes first.
'''

import logging
from fractions import Fraction
from typing import Any, Dict, List, NamedTuple, Sequence, Union

import seatalloc.util
import seatalloc.component.divisor
import seatalloc.evaluate.core
from seatalloc.component.divisor import Method
from seatalloc.persist import simple_serialization

logger = logging.getLogger(__name__)


class CandidateEntry(NamedTuple):
    '''A quotient competing for a seat.'''

    party: int
    rank: int
    quotient: Fraction


def _ranking_key(entry: CandidateEntry):
    return (-entry.quotient, entry.party, entry.rank)


@simple_serialization
class HighestAverages(seatalloc.evaluate.core.SeatAllocator):
    '''Distribute seats proportionally by ordering divided vote counts.

    Divides the vote count for each party by an increasing sequence of divisors
    (usually small integers), sorts these quotients and awards a seat for each
    of the first nb_seats quotients.

    This includes some popular proportional party-list systems like D'Hondt or
    Sainte-Laguë/Webster. The result is usually quite close to proportionality
    and avoids the Alabama paradox of largest remainder systems. However, it
    usually favors either large or smaller parties, depending on the choice
    of the divisor method.

    :param method: The divisor method, as a
        :class:`seatalloc.component.divisor.Method` member or its name from
        :data:`seatalloc.component.divisor.DIVISORS`.
    '''
    def __init__(self, method: Union[str, Method] = 'd_hondt'):
        self.method = seatalloc.component.divisor.construct(method)

    def __repr__(self):
        return f'{self.__class__.__name__}({self.method.value!r})'

    def ranked_entries(self,
                       nb_seats: int,
                       parties: Sequence[int],
                       ) -> List[CandidateEntry]:
        '''Return the quotients that win seats, in the order of seat award.

        Parties with no votes never enter the ranking, so fewer than
        *nb_seats* entries are returned if nobody has any votes.

        :param nb_seats: Number of seats to allocate.
        :param parties: Number of votes per party.
        '''
        seatalloc.util.check_seat_count(nb_seats)
        seatalloc.util.check_votes(parties)
        if nb_seats > 0 and not parties:
            raise seatalloc.evaluate.core.InvalidInput(
                f'cannot allocate {nb_seats} seats to no parties'
            )
        voted = [(i, n_votes) for i, n_votes in enumerate(parties) if n_votes]
        if nb_seats == 0 or not voted:
            return []
        entries = []
        divisors = seatalloc.component.divisor.divisors(self.method)
        for rank, divisor in enumerate(divisors):
            if divisor <= 0:
                raise seatalloc.evaluate.core.VotingSystemError(
                    f'{self.method.value} divisor at rank {rank} is not '
                    f'positive: {divisor}'
                )
            for party, n_votes in voted:
                entries.append(
                    CandidateEntry(party, rank, Fraction(n_votes) / divisor)
                )
            logger.debug('added rank %d with divisor %s, %d entries',
                         rank, divisor, len(entries))
            if len(entries) < nb_seats:
                continue
            entries.sort(key=_ranking_key)
            if not any(entry.rank == rank for entry in entries[:nb_seats]):
                logger.info('%d seats allocated by %s within %d ranks',
                            nb_seats, self.method.value, rank + 1)
                break
        return entries[:nb_seats]

    def allocate_seats(self,
                       nb_seats: int,
                       parties: Sequence[int],
                       ) -> List[int]:
        '''Distribute seats proportionally by highest averages.

        :param nb_seats: Number of seats to allocate.
        :param parties: Number of votes per party.
        :returns: Number of seats per party, in the order of *parties*.
            Sums to *nb_seats* unless no party has any votes, in which case
            all parties get zero seats.
        '''
        return seatalloc.util.count_by_index(
            (entry.party for entry in self.ranked_entries(nb_seats, parties)),
            len(parties)
        )

    def evaluate(self,
                 votes: Dict[Any, int],
                 n_seats: int,
                 ) -> Dict[Any, int]:
        '''Distribute seats among parties given as dictionary keys.

        The arguments come in the order used by the dict-based evaluators
        (votes first), unlike :meth:`allocate_seats`.

        :param votes: Number of votes per party.
        :param n_seats: Number of seats to allocate.
        :returns: Number of seats per party. Parties with no seats do not
            appear in the result.
        '''
        parties = list(votes.keys())
        seats = self.allocate_seats(n_seats, [votes[p] for p in parties])
        return {
            party: n_party_seats
            for party, n_party_seats in zip(parties, seats)
            if n_party_seats > 0
        }


def allocate_seats(method: Union[str, Method],
                   nb_seats: int,
                   parties: Sequence[int],
                   ) -> List[int]:
    '''Calculate the number of seats per party by a highest-averages method.

    A shortcut for ``HighestAverages(method).allocate_seats(...)``.
    '''
    return HighestAverages(method).allocate_seats(nb_seats, parties)
