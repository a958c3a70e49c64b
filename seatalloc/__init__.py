"""Seatalloc - legislative seat allocation by highest averages.

Seatalloc computes how many seats each party receives given the total number
of seats and the vote counts of the parties, using the highest-averages
(divisor) method. The pieces are:

-   The divisor sequences of the supported methods (D'Hondt, Sainte-Laguë,
    Imperiali, Huntington-Hill, Danish), in the :mod:`component.divisor`
    module.
-   The allocator itself, :class:`evaluate.proportional.HighestAverages`,
    with the :func:`evaluate.proportional.allocate_seats` shortcut.
-   Serialization of allocator setups to JSON-ready dictionaries in the
    :mod:`persist` module.
"""
