'''General seat allocator machinery.'''

import abc
from typing import List, Sequence


class VotingSystemError(Exception):
    '''A voting system with a valid setup ended up in an unresolvable state.'''
    pass


class InvalidInput(VotingSystemError, ValueError):
    '''The seat count or the votes given to an allocator are not valid.

    This is the case for negative seat counts, negative or non-integer vote
    counts, and seats requested from an empty list of parties.
    '''
    pass


class SeatAllocator(metaclass=abc.ABCMeta):
    '''Allocate seats to parties identified by their position.

    A root abstract base class for the allocators.
    '''
    @abc.abstractmethod
    def allocate_seats(self,
                       nb_seats: int,
                       parties: Sequence[int],
                       ) -> List[int]:
        '''Calculate the number of seats per party.

        :param nb_seats: Number of seats to allocate.
        :param parties: Number of votes per party.
        :returns: Number of seats per party, in the order of *parties*.
        '''
        raise NotImplementedError
