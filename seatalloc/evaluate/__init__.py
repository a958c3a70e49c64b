'''Evaluate the results of the elections.

Allocators take the number of seats to fill and the vote counts of the
parties and return the number of seats for every party. The parties are
identified by their position in the vote list; the result lists the seats in
the same order.

None of the allocators resolve quotient ties by lot; they are broken in
favor of the party listed first.
'''
